"""Lead data model for the static pipeline board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LeadStatus(Enum):
    """Board columns, in display order."""
    NEW = "new"
    CONTACTED = "contacted"
    QUALIFIED = "qualified"
    CLOSED = "closed"


class SentimentBand(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def sentiment_band(sentiment: int) -> SentimentBand:
    """Pick the indicator color band for a 0-100 sentiment score."""
    if sentiment > 70:
        return SentimentBand.HIGH
    if sentiment > 40:
        return SentimentBand.MEDIUM
    return SentimentBand.LOW


@dataclass
class Lead:
    """A prospect on the pipeline board."""
    id: str
    name: str
    company: str
    status: LeadStatus
    vertical: str
    sentiment: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "company": self.company,
            "status": self.status.value,
            "vertical": self.vertical,
            "sentiment": self.sentiment,
            "sentimentBand": sentiment_band(self.sentiment).value,
        }
