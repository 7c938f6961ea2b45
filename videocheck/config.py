"""Configuration management"""

import logging
import os
from enum import Enum

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class TranscriptProviderName(str, Enum):
    """Supported transcript providers"""

    YOUTUBE_TRANSCRIPT = "youtube-transcript"
    CAPTIONS_GRABBER = "captionsgrabber"


DEFAULT_PROVIDER = TranscriptProviderName.YOUTUBE_TRANSCRIPT


class Config:
    """Application configuration

    Built once at process start and handed to the app, the CLI and the
    pipeline. Nothing below reads the environment after construction.
    """

    def __init__(self, load_env_file: bool = True):
        # Load environment variables from .env file
        if load_env_file:
            load_dotenv()

        # API Configuration
        self.openai_api_key = os.getenv("OPENAI_API_KEY", "")
        if not self.openai_api_key:
            raise ValueError(
                "OPENAI_API_KEY not found in environment variables. "
                "Please set it in your .env file or environment."
            )
        self.openai_model = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

        # Transcript Configuration
        self.transcript_provider = self._parse_provider(
            os.getenv("TRANSCRIPT_PROVIDER", DEFAULT_PROVIDER.value)
        )
        self.max_transcript_length = self._parse_int(
            "MAX_TRANSCRIPT_LENGTH", os.getenv("MAX_TRANSCRIPT_LENGTH", "10000")
        )
        self.youtube_transcript_base_url = os.getenv(
            "YOUTUBE_TRANSCRIPT_BASE_URL", "https://youtubetranscript.com"
        ).rstrip("/")
        self.captions_grabber_base_url = os.getenv(
            "CAPTIONS_GRABBER_BASE_URL", "https://www.captionsgrabber.com"
        ).rstrip("/")

        # Outbound call deadline, applies to providers and the classifier
        self.timeout_seconds = self._parse_int(
            "TIMEOUT_SECONDS", os.getenv("TIMEOUT_SECONDS", "30")
        )

        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    def _parse_provider(self, value: str) -> TranscriptProviderName:
        """Parse the provider selector, falling back to youtube-transcript"""
        try:
            return TranscriptProviderName(value.strip().lower())
        except ValueError:
            logger.warning(
                f"Unknown TRANSCRIPT_PROVIDER '{value}', "
                f"using '{DEFAULT_PROVIDER.value}'"
            )
            return DEFAULT_PROVIDER

    def _parse_int(self, name: str, value: str) -> int:
        """Parse an integer setting"""
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(f"{name} must be an integer, got '{value}'")

    def validate(self) -> None:
        """Validate configuration"""
        if not self.openai_api_key:
            raise ValueError("OpenAI API key is required")

        if self.max_transcript_length < 1:
            raise ValueError("MAX_TRANSCRIPT_LENGTH must be at least 1")

        if self.timeout_seconds < 1:
            raise ValueError("TIMEOUT_SECONDS must be at least 1")
