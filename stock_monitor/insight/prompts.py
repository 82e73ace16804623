"""Prompt construction for LLM stock analysis.

Only a bounded sample of each variation's history is sent: the first and
last few readings plus the total record count.
"""

from __future__ import annotations

import json
from datetime import datetime

from stock_monitor.common.models import Variation

from .models import HistoryPoint, VariationSample

INSIGHT_PROMPT_TEMPLATE = """\
**Análise de Desempenho de SKU para Gerente de Estoque**
**Produto:** {sku_name}
**Dados:** A seguir estão amostras do histórico de estoque para cada variação deste produto. Os dados mostram o estoque no início e no fim do período analisado.
```json
{data_sample}
```
**Sua Tarefa:**
Você é um especialista em análise de varejo. Com base nos dados, forneça uma análise concisa em português do Brasil (usando markdown) incluindo:
1.  **Resumo Geral:** Qual a tendência geral de vendas do produto (a julgar pela queda de estoque)?
2.  **Análise Comparativa:** Qual variação teve a maior queda de estoque (mais vendida)? Existe alguma variação com desempenho muito diferente das outras?
3.  **Insights Estratégicos:** Aponte destaques (ex: "A variação X é a campeã de vendas") e sugira uma ação clara e objetiva (ex: "Priorizar reabastecimento da variação Y" ou "Considerar uma promoção para a variação Z que está parada").
4.  **Conclusão:** Um resumo final sobre a saúde do SKU.
"""


def format_date_br(value: datetime) -> str:
    """Format a date the way pt-BR locales display it (dd/mm/yyyy)."""
    return value.strftime("%d/%m/%Y")


def sample_variation(variation: Variation, head: int = 3, tail: int = 3) -> VariationSample:
    """Take the first ``head`` and last ``tail`` readings of a variation.

    Short histories are not deduplicated: with fewer than ``head + tail``
    readings some points appear twice.
    """
    history = variation.history
    picked = history[:head] + (history[-tail:] if tail > 0 else [])
    return VariationSample(
        name=variation.name,
        history_sample=[
            HistoryPoint(timestamp=format_date_br(h.timestamp), stock=h.stock)
            for h in picked
        ],
        record_count=len(history),
    )


def build_data_sample(
    variations: list[Variation],
    head: int = 3,
    tail: int = 3,
) -> list[dict]:
    """Sample every variation and return prompt-ready dictionaries."""
    return [sample_variation(v, head, tail).to_dict() for v in variations]


def build_insight_prompt(
    sku_name: str,
    variations: list[Variation],
    head: int = 3,
    tail: int = 3,
) -> str:
    """Build the analysis prompt for a product.

    Args:
        sku_name: Product name shown to the LLM.
        variations: Aggregated variations (in-window history).
        head: Readings taken from the start of each history.
        tail: Readings taken from the end of each history.

    Returns:
        Formatted prompt string.
    """
    data_sample = json.dumps(
        build_data_sample(variations, head, tail),
        ensure_ascii=False,
        indent=2,
    )
    return INSIGHT_PROMPT_TEMPLATE.format(sku_name=sku_name, data_sample=data_sample)
