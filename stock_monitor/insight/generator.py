"""Insight Generator — LLM-written stock analysis for a single SKU.

The generator samples the product's aggregated history, embeds it in the
Portuguese analysis prompt, and returns the model's markdown answer. It never
raises for provider problems: any failure is logged and replaced by a static
message the dashboard can show as-is.

Usage:
    generator = InsightGenerator()
    text = generator.generate(sku.name, sku.variations)
"""

from __future__ import annotations

from stock_monitor.common.config import (
    Settings,
    get_anthropic_api_key,
    get_openai_api_key,
    settings as default_settings,
)
from stock_monitor.common.logging import get_logger
from stock_monitor.common.models import Variation

from .models import InsightConfig, LLMProvider
from .prompts import build_insight_prompt

logger = get_logger("insight")

INSIGHT_FAILURE_MESSAGE = (
    "Falha ao gerar a análise de IA. "
    "Verifique sua chave de API e a configuração no painel."
)


class InsightGenerator:
    """Generates a natural-language stock analysis through an LLM provider."""

    def __init__(
        self,
        config: InsightConfig | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or default_settings
        self.config = config or self._config_from_settings(self.settings)

    @staticmethod
    def _config_from_settings(settings: Settings) -> InsightConfig:
        return InsightConfig(
            provider=LLMProvider(settings.llm.provider),
            temperature=settings.llm.temperature,
            max_tokens=settings.llm.max_tokens,
        )

    def generate(self, sku_name: str, variations: list[Variation]) -> str:
        """Return a markdown analysis of the product's stock trend.

        Args:
            sku_name: Product name.
            variations: Aggregated variations with their in-window history.

        Returns:
            LLM response text, or ``INSIGHT_FAILURE_MESSAGE`` on any error.
        """
        prompt = build_insight_prompt(
            sku_name,
            variations,
            head=self.config.sample_head,
            tail=self.config.sample_tail,
        )
        try:
            text = self._call_llm(prompt)
        except Exception as e:
            logger.error("Error generating stock insight for %s: %s", sku_name, e)
            return INSIGHT_FAILURE_MESSAGE

        logger.info("Insight generated for %s (%d chars)", sku_name, len(text))
        return text

    # --- LLM Integration ---

    def _call_llm(self, prompt: str) -> str:
        """Call the configured LLM provider and return the response text."""
        if self.config.provider == LLMProvider.OPENAI:
            return self._call_openai(prompt)
        else:
            return self._call_anthropic(prompt)

    def _call_openai(self, prompt: str) -> str:
        """Call OpenAI GPT API."""
        import openai

        api_key = get_openai_api_key()
        client = openai.OpenAI(api_key=api_key)

        model = self.config.model or self.settings.llm.openai_model

        response = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )

        return response.choices[0].message.content or ""

    def _call_anthropic(self, prompt: str) -> str:
        """Call Anthropic Claude API."""
        import anthropic

        api_key = get_anthropic_api_key()
        client = anthropic.Anthropic(api_key=api_key)

        model = self.config.model or self.settings.llm.anthropic_model

        response = client.messages.create(
            model=model,
            max_tokens=self.config.max_tokens,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.config.temperature,
        )

        return response.content[0].text
