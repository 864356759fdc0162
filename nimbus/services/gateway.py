"""Model Gateway - The only component that talks to the generation service.

This module handles:
- Prompt and response-schema construction for profile and feedback requests
- Validation of the returned JSON before it becomes a typed record
- Collapsing every failure into one generic error per operation

Interface Contract:
- request_profile(vertical_description) -> Profile
- request_feedback(content, profile, asset_type) -> Feedback
- request_profile raises ProfileGenerationFailed on any failure
- request_feedback raises FeedbackGenerationFailed on any failure
- One LLM call per request: no retry, no caching
"""

from __future__ import annotations

import json
import logging
from typing import Any

from nimbus.models import LIST_FIELDS, AssetType, Feedback, Profile, get_local_now, new_profile_id

logger = logging.getLogger(__name__)


PROFILE_SYSTEM_INSTRUCTION = "You are an expert Go-To-Market strategist for AI products."
FEEDBACK_SYSTEM_INSTRUCTION = "You are a world-class Creative Director and Copywriter."

GENERIC_AUDIENCE = "Target Audience: General Tech B2B Audience."

_STRING_LIST = {"type": "ARRAY", "items": {"type": "STRING"}}

PROFILE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "role": {"type": "STRING", "description": "Job title of the ideal customer"},
        "companySize": {"type": "STRING", "description": "Size of the company (e.g., SMB, Enterprise)"},
        "painPoints": {**_STRING_LIST, "description": "Top 3-5 pain points"},
        "goals": {**_STRING_LIST, "description": "Top 3-5 professional goals"},
        "buyingTriggers": {**_STRING_LIST, "description": "Events that trigger a purchase"},
        "preferredChannels": {**_STRING_LIST, "description": "Marketing channels (LinkedIn, Email, etc.)"},
        "techStack": {**_STRING_LIST, "description": "Current tools they likely use"},
    },
    "required": ["role", "companySize", "painPoints", "goals"],
}

FEEDBACK_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "score": {"type": "INTEGER", "description": "A score from 1-100 on effectiveness"},
        "strengths": dict(_STRING_LIST),
        "weaknesses": dict(_STRING_LIST),
        "suggestions": {**_STRING_LIST, "description": "Actionable steps to improve"},
        "revisedContent": {"type": "STRING", "description": "An AI-generated improved version of the content"},
    },
    "required": ["score", "strengths", "weaknesses", "suggestions", "revisedContent"],
}

# (label, wire key) pairs for the audience block
_PROFILE_LABELS = [
    ("Pain Points", "painPoints"),
    ("Professional Goals", "goals"),
    ("Buying Triggers", "buyingTriggers"),
    ("Preferred Channels", "preferredChannels"),
    ("Tech Stack", "techStack"),
]


class GatewayError(Exception):
    """Base class for gateway failures."""
    pass


class ProfileGenerationFailed(GatewayError):
    """Raised when a profile cannot be generated, whatever the cause."""
    pass


class FeedbackGenerationFailed(GatewayError):
    """Raised when feedback cannot be generated, whatever the cause."""
    pass


class ModelGateway:
    """Schema-constrained request/response exchange with the LLM."""

    def __init__(self, llm_service=None):
        """Initialize with optional LLM service dependency.

        Args:
            llm_service: LLM service for generation. If None, uses default.
        """
        self._llm = llm_service

    @property
    def llm(self):
        """Lazy load LLM service."""
        if self._llm is None:
            from nimbus.services.llm_service import LLMService
            self._llm = LLMService.get_instance()
        return self._llm

    def request_profile(self, vertical_description: str) -> Profile:
        """Synthesize an Ideal Customer Profile for a product vertical.

        Args:
            vertical_description: Free-text description of the product.
                Callers filter empty input; it is not rejected here.

        Returns:
            Profile: Validated profile with a freshly generated id

        Raises:
            ProfileGenerationFailed: On network, parsing or validation failure
        """
        prompt = self.build_profile_prompt(vertical_description)

        try:
            response = self.llm.call(
                prompt,
                json_mode=True,
                system_instruction=PROFILE_SYSTEM_INSTRUCTION,
                response_schema=PROFILE_SCHEMA,
            )
            return self._parse_profile_response(response)
        except Exception as e:
            logger.warning("[gateway] profile generation failed: %s", e)
            raise ProfileGenerationFailed("Failed to generate ICP.") from e

    def request_feedback(
        self,
        content: str,
        profile: Profile | None,
        asset_type: AssetType = AssetType.COPY,
    ) -> Feedback:
        """Critique a creative asset against a target profile.

        Args:
            content: The creative content to analyze
            profile: Target audience; None falls back to a generic B2B audience
            asset_type: Kind of asset being analyzed

        Returns:
            Feedback: Validated feedback stamped with the receipt time

        Raises:
            FeedbackGenerationFailed: On network, parsing or validation failure
        """
        prompt = self.build_feedback_prompt(content, profile, asset_type)

        try:
            response = self.llm.call(
                prompt,
                json_mode=True,
                system_instruction=FEEDBACK_SYSTEM_INSTRUCTION,
                response_schema=FEEDBACK_SCHEMA,
            )
            return self._parse_feedback_response(response)
        except Exception as e:
            logger.warning("[gateway] feedback generation failed: %s", e)
            raise FeedbackGenerationFailed("Failed to generate feedback.") from e

    def build_profile_prompt(self, vertical_description: str) -> str:
        """Build prompt for profile generation."""
        return (
            "Generate a detailed Ideal Customer Profile (ICP) for a Native AI Vertical "
            f'product described as: "{vertical_description}". '
            "Focus on B2B buyers suitable for high-velocity sales or PLG."
        )

    def build_feedback_prompt(
        self,
        content: str,
        profile: Profile | None,
        asset_type: AssetType,
    ) -> str:
        """Build prompt for creative feedback."""
        audience = self.format_audience(profile)

        return f'''Analyze this creative asset ({asset_type.value}) based on the specific target audience profile below.

{audience}

Creative Content:
"{content}"

Provide a critique and a rewritten version that is more persuasive and specifically addresses the pain points and goals listed.'''

    def format_audience(self, profile: Profile | None) -> str:
        """Serialize a profile into the labelled audience block."""
        if profile is None:
            return GENERIC_AUDIENCE

        lines = [
            "Target Audience Profile:",
            f"- Role: {profile.role}",
            f"- Company Size: {profile.company_size}",
        ]
        for label, key in _PROFILE_LABELS:
            lines.append(f"- {label}: {', '.join(profile.list_field(key))}")
        return "\n".join(lines)

    def _parse_profile_response(self, response: str) -> Profile:
        """Parse and validate LLM response into Profile."""
        data = _load_json_object(response)

        role = data.get("role")
        if not isinstance(role, str) or not role.strip():
            raise ValueError("'role' must be a non-empty string")
        company_size = data.get("companySize")
        if not isinstance(company_size, str):
            raise ValueError("'companySize' must be a string")
        for key in ("painPoints", "goals"):
            if key not in data:
                raise ValueError(f"missing required field '{key}'")

        # The schema never carries an id; any the model invents is ignored
        return Profile(
            id=new_profile_id(),
            role=role,
            company_size=company_size,
            **{attr: _string_list(data, key) for key, attr in LIST_FIELDS.items()},
        )

    def _parse_feedback_response(self, response: str) -> Feedback:
        """Parse and validate LLM response into Feedback."""
        data = _load_json_object(response)

        score = data.get("score")
        if isinstance(score, bool) or not isinstance(score, int):
            raise ValueError("'score' must be an integer")
        for key in ("strengths", "weaknesses", "suggestions"):
            if key not in data:
                raise ValueError(f"missing required field '{key}'")

        revised = data.get("revisedContent")
        if revised is not None and not isinstance(revised, str):
            raise ValueError("'revisedContent' must be a string")

        return Feedback(
            score=score,
            strengths=_string_list(data, "strengths"),
            weaknesses=_string_list(data, "weaknesses"),
            suggestions=_string_list(data, "suggestions"),
            revised_content=revised or None,
            timestamp=get_local_now(),
        )


def _load_json_object(response: str | None) -> dict[str, Any]:
    """Decode a JSON object, tolerating a markdown code fence."""
    text = (response or "").strip()
    if not text:
        raise ValueError("empty response")

    if text.startswith("```"):
        text = text.strip("`").strip()
        if text.startswith("json"):
            text = text[len("json"):]
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON response: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("response is not a JSON object")
    return data


def _string_list(data: dict[str, Any], key: str) -> list[str]:
    """Read an optional array-of-strings field; absent means empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"'{key}' must be an array of strings")
    return list(value)
