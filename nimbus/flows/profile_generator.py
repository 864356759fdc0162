"""Profile Generator Flow - Vertical description to Ideal Customer Profile."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from nimbus.flows.base import FlowBusyError, FlowStatus, ViewState
from nimbus.models import Profile
from nimbus.services.gateway import GatewayError, ModelGateway

if TYPE_CHECKING:
    from nimbus.flows.shell import Shell

logger = logging.getLogger(__name__)


class ProfileGeneratorFlow:
    """Generates a profile and hands it to the shell on selection."""

    def __init__(self, gateway: ModelGateway, shell: "Shell"):
        self.gateway = gateway
        self.shell = shell
        self.description = ""
        self.status = FlowStatus.IDLE
        self.result: Profile | None = None
        self.notice: str | None = None

    def submit(self, description: str | None = None) -> FlowStatus:
        """Generate a profile for the current description.

        Blank descriptions are ignored. Gateway failures leave ``result``
        untouched and set a notice instead of raising.

        Raises:
            FlowBusyError: If a request is already pending
        """
        if self.status is FlowStatus.PENDING:
            raise FlowBusyError("Profile generation already in progress")
        if description is not None:
            self.description = description
        if not self.description.strip():
            return self.status

        self.status = FlowStatus.PENDING
        self.notice = None
        try:
            profile = self.gateway.request_profile(self.description)
        except GatewayError as e:
            logger.info("[flow] profile generation failed: %s", e)
            self.status = FlowStatus.FAILED
            self.notice = "Failed to generate ICP. Please try again."
            return self.status

        self.result = profile
        self.status = FlowStatus.DONE
        return self.status

    def select(self) -> Profile | None:
        """Publish the generated profile and open the creative loop."""
        if self.result is None:
            return None
        self.shell.publish(self.result)
        self.shell.navigate(ViewState.CREATIVE_LOOP)
        return self.result

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "status": self.status.value,
            "result": self.result.to_dict() if self.result else None,
            "notice": self.notice,
        }
