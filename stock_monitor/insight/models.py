"""Data models for the insight module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LLMProvider(str, Enum):
    """Supported LLM providers."""
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


@dataclass
class InsightConfig:
    """Configuration for the insight generator."""
    provider: LLMProvider = LLMProvider.OPENAI
    model: str = ""  # Empty = use default from settings
    temperature: float = 0.7
    max_tokens: int = 2048
    sample_head: int = 3
    sample_tail: int = 3


@dataclass
class HistoryPoint:
    """A single sampled stock reading as shown to the LLM."""
    timestamp: str  # dd/mm/yyyy
    stock: int

    def to_dict(self) -> dict:
        return {"timestamp": self.timestamp, "stock": self.stock}


@dataclass
class VariationSample:
    """Bounded sample of one variation's history."""
    name: str
    history_sample: list[HistoryPoint] = field(default_factory=list)
    record_count: int = 0

    def to_dict(self) -> dict:
        """Serialize with the keys used in the prompt."""
        return {
            "name": self.name,
            "historySample": [p.to_dict() for p in self.history_sample],
            "recordCount": self.record_count,
        }
