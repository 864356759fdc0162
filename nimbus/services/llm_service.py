"""LLM Service - Abstraction layer for AI model calls.

This module provides a unified interface for calling different LLM providers
(Gemini, OpenAI) with consistent error handling and response formatting.

Interface Contract:
- call(prompt, *, json_mode, system_instruction, response_schema) -> str
- response_schema uses the Gemini schema dialect (upper-case type names);
  providers translate it as needed
- All methods raise LLMServiceError on failure
- Callers should not depend on specific LLM provider details
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any

import google.generativeai as genai
from openai import OpenAI

from config import DEFAULT_MODEL, LLM_PROVIDER, OPENAI_MODEL


class LLMServiceError(Exception):
    """Raised when LLM call fails."""
    pass


class BaseLLMService(ABC):
    """Abstract base class for LLM services."""

    @abstractmethod
    def call(
        self,
        prompt: str,
        *,
        json_mode: bool = False,
        system_instruction: str | None = None,
        response_schema: dict[str, Any] | None = None,
    ) -> str:
        """Call the LLM with a prompt.

        Args:
            prompt: The prompt to send to the LLM
            json_mode: If True, expect JSON response
            system_instruction: Optional role-priming instruction
            response_schema: Optional structural constraint for the JSON
                response. Implies json_mode.

        Returns:
            str: The LLM response text

        Raises:
            LLMServiceError: If the call fails
        """
        pass


class GeminiService(BaseLLMService):
    """Google Gemini LLM service implementation."""

    def __init__(self, model: str = DEFAULT_MODEL):
        self.model = model
        self._configured = False

    def _configure(self) -> None:
        """Configure Gemini API (lazy initialization)."""
        if self._configured:
            return
        api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY")
        if not api_key:
            raise LLMServiceError("GEMINI_API_KEY or GOOGLE_API_KEY environment variable not set")
        genai.configure(api_key=api_key)
        self._configured = True

    def call(
        self,
        prompt: str,
        *,
        json_mode: bool = False,
        system_instruction: str | None = None,
        response_schema: dict[str, Any] | None = None,
    ) -> str:
        """Call Gemini model."""
        self._configure()
        try:
            gen_config = None
            if json_mode or response_schema:
                gen_config = genai.GenerationConfig(
                    response_mime_type="application/json",
                    response_schema=response_schema,
                )
            model = genai.GenerativeModel(self.model, system_instruction=system_instruction)
            response = model.generate_content(prompt, generation_config=gen_config)
            return response.text
        except Exception as e:
            raise LLMServiceError(f"Gemini call failed: {e}") from e


def to_json_schema(schema: dict[str, Any]) -> dict[str, Any]:
    """Translate a Gemini-style schema into standard JSON Schema."""
    result: dict[str, Any] = {}
    for key, value in schema.items():
        if key == "type":
            result[key] = value.lower()
        elif key == "properties":
            result[key] = {name: to_json_schema(prop) for name, prop in value.items()}
        elif key == "items":
            result[key] = to_json_schema(value)
        else:
            result[key] = value
    return result


class OpenAIService(BaseLLMService):
    """OpenAI LLM service implementation."""

    def __init__(self, model: str = OPENAI_MODEL):
        self.model = model
        self._client: OpenAI | None = None

    def _get_client(self) -> OpenAI:
        """Get or create OpenAI client (lazy initialization)."""
        if self._client is None:
            api_key = os.environ.get("OPENAI_API_KEY")
            if not api_key:
                raise LLMServiceError("OPENAI_API_KEY environment variable not set")
            self._client = OpenAI(api_key=api_key)
        return self._client

    def call(
        self,
        prompt: str,
        *,
        json_mode: bool = False,
        system_instruction: str | None = None,
        response_schema: dict[str, Any] | None = None,
    ) -> str:
        """Call OpenAI model."""
        try:
            client = self._get_client()
            if response_schema:
                response_format = {
                    "type": "json_schema",
                    "json_schema": {"name": "response", "schema": to_json_schema(response_schema)},
                }
            elif json_mode:
                response_format = {"type": "json_object"}
            else:
                response_format = None

            messages = []
            if system_instruction:
                messages.append({"role": "system", "content": system_instruction})
            messages.append({"role": "user", "content": prompt})

            kwargs: dict[str, Any] = {"model": self.model, "messages": messages}
            if response_format:
                kwargs["response_format"] = response_format
            response = client.chat.completions.create(**kwargs)
            return response.choices[0].message.content or ""
        except LLMServiceError:
            raise
        except Exception as e:
            raise LLMServiceError(f"OpenAI call failed: {e}") from e


# Default service instance (can be swapped for testing)
class LLMService:
    """Facade for LLM services with provider switching."""

    _instance: BaseLLMService | None = None

    @classmethod
    def get_instance(cls) -> BaseLLMService:
        """Get the configured LLM service instance."""
        if cls._instance is None:
            if LLM_PROVIDER == "openai":
                cls._instance = OpenAIService()
            else:
                cls._instance = GeminiService()
        return cls._instance

    @classmethod
    def set_instance(cls, service: BaseLLMService) -> None:
        """Set a custom LLM service (useful for testing)."""
        cls._instance = service

    @classmethod
    def reset(cls) -> None:
        """Reset to default service."""
        cls._instance = None
