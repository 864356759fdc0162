"""Nimbus Flux marketing-operations dashboard package."""

from .models import AssetType, Feedback, Lead, Profile
from .services import (
    FeedbackGenerationFailed,
    ModelGateway,
    ProfileGenerationFailed,
)
from .flows import CreativeFeedbackFlow, ProfileGeneratorFlow, Shell, ViewState

__all__ = [
    "AssetType",
    "Feedback",
    "Lead",
    "Profile",
    "ModelGateway",
    "ProfileGenerationFailed",
    "FeedbackGenerationFailed",
    "CreativeFeedbackFlow",
    "ProfileGeneratorFlow",
    "Shell",
    "ViewState",
]
