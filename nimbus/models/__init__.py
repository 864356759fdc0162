"""Data models - Pure data structures with no business logic."""

from .profile import LIST_FIELDS, Profile, new_profile_id
from .feedback import AssetType, Feedback, ScoreBand, clamp_score, get_local_now, score_band
from .lead import Lead, LeadStatus, SentimentBand, sentiment_band

__all__ = [
    "LIST_FIELDS",
    "Profile",
    "new_profile_id",
    "AssetType",
    "Feedback",
    "ScoreBand",
    "clamp_score",
    "get_local_now",
    "score_band",
    "Lead",
    "LeadStatus",
    "SentimentBand",
    "sentiment_band",
]
