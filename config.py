"""Global configuration values."""

import os

from dotenv import load_dotenv

load_dotenv()

# LLM provider used by the model gateway: "gemini" or "openai"
LLM_PROVIDER = os.environ.get("LLM_PROVIDER", "gemini").lower()

# Default Gemini model (can be overridden via env)
DEFAULT_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")

# Model used when LLM_PROVIDER=openai
OPENAI_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o")

# Flask session signing key
SECRET_KEY = os.environ.get("SECRET_KEY", "nimbus-flux-dev-key")

PORT = int(os.environ.get("PORT", 5000))
