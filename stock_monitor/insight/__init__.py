# Insight — GPT/Claude stock analysis with bounded history sampling
"""
Insight module for generating Brazilian Portuguese stock analyses.

The generator sends a small sample of each variation's history to an LLM
(GPT-4o or Claude) and returns markdown prose, or a fixed error message.
"""

from .generator import INSIGHT_FAILURE_MESSAGE, InsightGenerator
from .models import InsightConfig, LLMProvider
from .prompts import INSIGHT_PROMPT_TEMPLATE, build_data_sample, build_insight_prompt

__all__ = [
    "InsightGenerator",
    "INSIGHT_FAILURE_MESSAGE",
    "InsightConfig",
    "LLMProvider",
    "INSIGHT_PROMPT_TEMPLATE",
    "build_data_sample",
    "build_insight_prompt",
]
