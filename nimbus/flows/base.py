"""Shared flow state."""

from __future__ import annotations

from enum import Enum


class FlowStatus(Enum):
    """Request lifecycle of a flow."""
    IDLE = "idle"
    PENDING = "pending"
    DONE = "done"
    FAILED = "failed"


class ViewState(Enum):
    """Screens reachable from the sidebar."""
    DASHBOARD = "DASHBOARD"
    ICP_GEN = "ICP_GEN"
    CREATIVE_LOOP = "CREATIVE_LOOP"
    CRM = "CRM"


class FlowBusyError(Exception):
    """Raised when a flow is submitted while its request is still pending."""
    pass
