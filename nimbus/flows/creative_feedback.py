"""Creative Feedback Flow - Iterative content -> feedback -> revision loop.

The flow keeps its own working copy of the target profile. Edits to that copy
(field updates and list add/remove/reorder) never touch the profile held in
the shell's selection slot.
"""

from __future__ import annotations

import logging
from typing import Any

from nimbus.flows import list_editor
from nimbus.flows.base import FlowBusyError, FlowStatus
from nimbus.models import AssetType, Feedback, Profile
from nimbus.services.gateway import GatewayError, ModelGateway

logger = logging.getLogger(__name__)


class CreativeFeedbackFlow:
    """State machine behind the creative loop screen."""

    def __init__(self, gateway: ModelGateway):
        self.gateway = gateway
        self.content = ""
        self.asset_type = AssetType.COPY
        self.working_profile = Profile.empty()
        self.status = FlowStatus.IDLE
        self.feedback: Feedback | None = None
        self.notice: str | None = None

    def enter(self, selected: Profile | None) -> None:
        """Seed the working profile from the published selection.

        Every entry re-copies the selection, discarding local edits from a
        previous visit. Without a selection the working profile is kept.
        """
        if selected is None:
            return
        self.working_profile = selected.copy()

    def set_content(self, content: str) -> None:
        self.content = content

    def set_asset_type(self, asset_type: AssetType | str) -> None:
        """Raises ValueError for unknown asset types."""
        self.asset_type = AssetType(asset_type)

    def update_profile(self, *, role: str | None = None, company_size: str | None = None) -> None:
        if role is not None:
            self.working_profile.role = role
        if company_size is not None:
            self.working_profile.company_size = company_size

    def add_item(self, field: str, value: str) -> bool:
        return list_editor.add_item(self.working_profile.list_field(field), value)

    def remove_item(self, field: str, index: int) -> str:
        return list_editor.remove_item(self.working_profile.list_field(field), index)

    def reorder_item(self, field: str, from_index: int, to_index: int) -> None:
        list_editor.reorder_item(self.working_profile.list_field(field), from_index, to_index)

    def analyze(self) -> FlowStatus:
        """Request feedback for the current content.

        Blank content is ignored. Gateway failures leave ``feedback``
        untouched and set a notice instead of raising.

        Raises:
            FlowBusyError: If a request is already pending
        """
        if self.status is FlowStatus.PENDING:
            raise FlowBusyError("Analysis already in progress")
        if not self.content.strip():
            return self.status

        self.status = FlowStatus.PENDING
        self.notice = None
        try:
            feedback = self.gateway.request_feedback(self.content, self.working_profile, self.asset_type)
        except GatewayError as e:
            logger.info("[flow] creative analysis failed: %s", e)
            self.status = FlowStatus.FAILED
            self.notice = "Analysis failed."
            return self.status

        self.feedback = feedback
        self.status = FlowStatus.DONE
        return self.status

    def apply_revision(self) -> bool:
        """Replace the content with the suggested rewrite and start a new round."""
        if self.feedback is None or not self.feedback.revised_content:
            return False
        self.content = self.feedback.revised_content
        self.feedback = None
        self.status = FlowStatus.IDLE
        return True

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "assetType": self.asset_type.value,
            "assetTypes": [{"value": t.value, "label": t.label} for t in AssetType],
            "workingProfile": self.working_profile.to_dict(),
            "status": self.status.value,
            "feedback": self.feedback.to_dict() if self.feedback else None,
            "notice": self.notice,
        }
