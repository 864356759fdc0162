"""Shell - View selector and the shared selected-profile slot.

The shell is the context object handed to the flows. Only the profile
generator publishes into the selection slot; the creative flow reads it when
its view is entered.
"""

from __future__ import annotations

from typing import Any

from nimbus.flows.base import ViewState
from nimbus.flows.creative_feedback import CreativeFeedbackFlow
from nimbus.flows.profile_generator import ProfileGeneratorFlow
from nimbus.models import Profile
from nimbus.services.gateway import ModelGateway


class Shell:
    """One user's dashboard session."""

    def __init__(self, gateway: ModelGateway | None = None):
        gateway = gateway or ModelGateway()
        self.view = ViewState.DASHBOARD
        self.selected_profile: Profile | None = None
        self.generator = ProfileGeneratorFlow(gateway, self)
        self.creative = CreativeFeedbackFlow(gateway)

    def publish(self, profile: Profile) -> None:
        self.selected_profile = profile

    def navigate(self, view: ViewState | str) -> ViewState:
        """Switch screens. Raises ValueError for unknown view names."""
        self.view = ViewState(view)
        if self.view is ViewState.CREATIVE_LOOP:
            self.creative.enter(self.selected_profile)
        return self.view

    def to_dict(self) -> dict[str, Any]:
        return {
            "view": self.view.value,
            "views": [v.value for v in ViewState],
            "selectedProfile": self.selected_profile.to_dict() if self.selected_profile else None,
            "pipelineContext": self.selected_profile.role if self.selected_profile else "GLOBAL_NULL",
        }
