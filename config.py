"""
Configuration for the Headline Case formatter.
"""

import os
from dotenv import load_dotenv
from typing import Dict, Any, Optional

from headline_case import HeadlineConfigError

# Load environment variables (optional - only if .env file exists)
load_dotenv()


def _optional_int(name: str, value: Optional[str]) -> Optional[int]:
    if value is None or not str(value).strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise HeadlineConfigError(f"{name} must be an integer, got {value!r}") from None


class Config:
    """Application configuration."""

    # Logging Configuration
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Headline Vocabulary - None means the packaged headline_vocabulary.yaml
    HEADLINE_VOCABULARY_FILE = os.environ.get('HEADLINE_VOCABULARY_FILE') or None

    # Rule Thresholds - raw value, parsed by get_headline_config(); None keeps the vocabulary file's value
    HEADLINE_MIN_CAPITALIZE_LENGTH = os.environ.get('HEADLINE_MIN_CAPITALIZE_LENGTH')

    @classmethod
    def get_headline_config(cls) -> Dict[str, Any]:
        """
        Get headline formatter configuration.

        Raises:
            HeadlineConfigError: If HEADLINE_MIN_CAPITALIZE_LENGTH is not an integer
        """
        return {
            'vocabulary_file': cls.HEADLINE_VOCABULARY_FILE,
            'min_capitalize_length': _optional_int(
                'HEADLINE_MIN_CAPITALIZE_LENGTH', cls.HEADLINE_MIN_CAPITALIZE_LENGTH
            ),
        }


# For testing only
class TestingConfig(Config):
    """Testing configuration."""
    LOG_LEVEL = 'DEBUG'
    HEADLINE_VOCABULARY_FILE = None
    HEADLINE_MIN_CAPITALIZE_LENGTH = None
