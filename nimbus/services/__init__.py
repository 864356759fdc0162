"""Service layer - Business logic modules.

Each service module has a clear interface and can be developed/tested independently.
"""

from .llm_service import LLMService, LLMServiceError
from .gateway import (
    FeedbackGenerationFailed,
    GatewayError,
    ModelGateway,
    ProfileGenerationFailed,
)
from .dashboard_service import DashboardService
from .crm_service import CRMService

__all__ = [
    "LLMService",
    "LLMServiceError",
    "ModelGateway",
    "GatewayError",
    "ProfileGenerationFailed",
    "FeedbackGenerationFailed",
    "DashboardService",
    "CRMService",
]
