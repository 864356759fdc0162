"""Screen-level state machines and the shell that routes between them."""

from .base import FlowBusyError, FlowStatus, ViewState
from .profile_generator import ProfileGeneratorFlow
from .creative_feedback import CreativeFeedbackFlow
from .shell import Shell

__all__ = [
    "FlowBusyError",
    "FlowStatus",
    "ViewState",
    "ProfileGeneratorFlow",
    "CreativeFeedbackFlow",
    "Shell",
]
