"""Creative feedback data models."""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from datetime import datetime
from enum import Enum
from typing import Any


def get_local_now() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


class AssetType(Enum):
    """Kinds of creative asset that can be analyzed."""
    COPY = "copy"
    IMAGE_PROMPT = "image_prompt"
    VALUE_PROP = "value_prop"
    LANDING_PAGE = "landing_page"

    @property
    def label(self) -> str:
        return _ASSET_LABELS[self]


_ASSET_LABELS = {
    AssetType.COPY: "Ad Copy / Email",
    AssetType.IMAGE_PROMPT: "Image Generation Prompt",
    AssetType.VALUE_PROP: "Value Proposition",
    AssetType.LANDING_PAGE: "Landing Page Section",
}


class ScoreBand(Enum):
    """Display band for an effectiveness score."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def score_band(score: int) -> ScoreBand:
    """Band a score for display. Any integer is accepted."""
    if score >= 80:
        return ScoreBand.HIGH
    if score >= 60:
        return ScoreBand.MEDIUM
    return ScoreBand.LOW


def clamp_score(score: int) -> int:
    """Clamp a score into 1..100 for display."""
    return max(1, min(100, score))


@dataclass
class Feedback:
    """Critique and rewrite of a creative asset."""
    score: int
    strengths: list[str] = dataclass_field(default_factory=list)
    weaknesses: list[str] = dataclass_field(default_factory=list)
    suggestions: list[str] = dataclass_field(default_factory=list)
    revised_content: str | None = None
    timestamp: datetime = dataclass_field(default_factory=get_local_now)

    @property
    def band(self) -> ScoreBand:
        return score_band(self.score)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "score": self.score,
            "displayScore": clamp_score(self.score),
            "band": self.band.value,
            "strengths": self.strengths,
            "weaknesses": self.weaknesses,
            "suggestions": self.suggestions,
            "revisedContent": self.revised_content,
            "timestamp": self.timestamp.isoformat(),
        }
