"""Settings Manager - Handles API key, model and logging configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from it_term_translator.services.errors import MissingApiKeyError

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    """
    Manages settings read from a .env file in the project root.

    Values already present in the process environment take precedence.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        self._project_root = project_root
        load_dotenv(dotenv_path=self._env_path)

    @property
    def _env_path(self) -> Path:
        return self._project_root / ".env"

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment (GEMINI_API_KEY, then API_KEY)."""
        for name in ("GEMINI_API_KEY", "API_KEY"):
            key = os.getenv(name)
            if key and key.strip():
                return key.strip()
        return None

    def require_gemini_api_key(self) -> str:
        """
        Get the Gemini API key or fail.

        Raises:
            MissingApiKeyError: if no key is configured.
        """
        key = self.get_gemini_api_key()
        if key is None:
            raise MissingApiKeyError(
                f"GEMINI_API_KEY environment variable not set. Add it to {self._env_path}"
            )
        return key

    def get_model_name(self) -> str:
        """Gemini model used for both text and image requests."""
        model = os.getenv("GEMINI_MODEL", "").strip()
        return model or DEFAULT_MODEL

    def get_log_level(self) -> str:
        level = os.getenv("LOG_LEVEL", "").strip().upper()
        return level or DEFAULT_LOG_LEVEL
