"""Test configuration and shared fixtures."""

import json

import pytest

from nimbus.flows import Shell
from nimbus.models import Profile
from nimbus.services.gateway import ModelGateway
from nimbus.services.llm_service import LLMService


# ============================================================================
# Mock Services
# ============================================================================

class MockLLMService:
    """Mock LLM service for tests.

    Set ``response`` to control the returned text and ``should_fail`` to make
    every call raise. Each call is recorded in ``calls``.
    """

    def __init__(self):
        self.response = '{}'
        self.should_fail = False
        self.calls = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last_prompt(self) -> str:
        return self.calls[-1]["prompt"]

    def call(self, prompt, *, json_mode=False, system_instruction=None, response_schema=None):
        self.calls.append({
            "prompt": prompt,
            "json_mode": json_mode,
            "system_instruction": system_instruction,
            "response_schema": response_schema,
        })
        if self.should_fail:
            raise Exception("Mock LLM failure")
        return self.response


PROFILE_PAYLOAD = {
    "role": "Compliance Officer",
    "companySize": "SMB",
    "painPoints": ["manual review"],
    "goals": ["faster approvals"],
    "buyingTriggers": [],
    "preferredChannels": [],
    "techStack": [],
}

FEEDBACK_PAYLOAD = {
    "score": 45,
    "strengths": [],
    "weaknesses": ["no pain-point reference"],
    "suggestions": ["mention approval delays"],
    "revisedContent": "Cut approval delays with our tool",
}


# ============================================================================
# Profile Fixtures
# ============================================================================

@pytest.fixture
def sample_profile() -> Profile:
    """A fully populated profile."""
    return Profile(
        id="icp-1",
        role="Head of Design Operations",
        company_size="Series B",
        pain_points=["slow approvals", "version sprawl"],
        goals=["ship faster", "reduce rework"],
        buying_triggers=["new funding round"],
        preferred_channels=["LinkedIn", "Email"],
        tech_stack=["Figma", "Notion"],
    )


@pytest.fixture
def minimal_profile() -> Profile:
    """A profile with only the id set."""
    return Profile(id="icp-min")


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def mock_llm() -> MockLLMService:
    return MockLLMService()


@pytest.fixture
def mock_llm_with_profile_response(mock_llm: MockLLMService) -> MockLLMService:
    """Mock LLM returning profile JSON."""
    mock_llm.response = json.dumps(PROFILE_PAYLOAD)
    return mock_llm


@pytest.fixture
def mock_llm_with_feedback_response(mock_llm: MockLLMService) -> MockLLMService:
    """Mock LLM returning feedback JSON."""
    mock_llm.response = json.dumps(FEEDBACK_PAYLOAD)
    return mock_llm


@pytest.fixture
def gateway(mock_llm: MockLLMService) -> ModelGateway:
    return ModelGateway(llm_service=mock_llm)


@pytest.fixture
def shell(gateway: ModelGateway) -> Shell:
    return Shell(gateway)


@pytest.fixture
def client(mock_llm: MockLLMService):
    """Flask test client wired to the mock LLM."""
    from app import app, workspaces

    LLMService.set_instance(mock_llm)
    app.config["TESTING"] = True
    workspaces.clear()
    with app.test_client() as test_client:
        yield test_client
    workspaces.clear()
    LLMService.reset()
