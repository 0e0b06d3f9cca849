"""
Headline Vocabulary Service

Loads the headline exception word lists from a YAML file, caches them, and
builds validated HeadlineConfig objects. Keys missing from the file fall back
to the built-in defaults.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

import yaml

from ..headline_config import (
    ALWAYS_CAPITALIZE,
    ALWAYS_LOWERCASE,
    CAPITALIZE_POS,
    MIN_CAPITALIZE_LENGTH,
    HeadlineConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_VOCABULARY_FILE = Path(__file__).parent.parent / "config" / "headline_vocabulary.yaml"


class HeadlineVocabularyService:
    """
    Service for the headline exception vocabularies.

    Features:
    - Lazy loading with caching
    - Per-key fallback to built-in defaults
    - Runtime reload
    """

    def __init__(self, vocabulary_file: Optional[Union[str, Path]] = None):
        if vocabulary_file is None:
            vocabulary_file = DEFAULT_VOCABULARY_FILE

        self.vocabulary_file = Path(vocabulary_file)
        self._cache: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self) -> Dict[str, Any]:
        """Load and cache the YAML vocabulary file."""
        if self._cache is not None:
            return self._cache

        if not self.vocabulary_file.exists():
            logger.warning(f"Vocabulary file {self.vocabulary_file} not found. Using built-in vocabulary.")
            self._cache = {}
            return self._cache

        try:
            with open(self.vocabulary_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (yaml.YAMLError, OSError) as e:
            logger.error(f"Error loading vocabulary file {self.vocabulary_file}: {e}")
            data = {}

        if not isinstance(data, dict):
            logger.error(f"Vocabulary file {self.vocabulary_file} is not a mapping. Using built-in vocabulary.")
            data = {}
        else:
            logger.info(f"Loaded headline vocabulary: {self.vocabulary_file.name}")

        self._cache = data
        return data

    def reload_vocabulary(self) -> None:
        """Drop the cached file so the next access reads it again."""
        self._cache = None
        self._load_yaml_file()

    def _get(self, key: str, default: Any) -> Any:
        # A key left empty in YAML loads as None
        value = self._load_yaml_file().get(key)
        return default if value is None else value

    # === SPECIFIC VOCABULARY ACCESSORS ===

    def get_always_capitalize(self) -> Sequence[str]:
        """Get words that are always capitalized."""
        return self._get('always_capitalize', ALWAYS_CAPITALIZE)

    def get_always_lowercase(self) -> Sequence[str]:
        """Get words that are always lowercased."""
        return self._get('always_lowercase', ALWAYS_LOWERCASE)

    def get_min_capitalize_length(self) -> int:
        return self._get('min_capitalize_length', MIN_CAPITALIZE_LENGTH)

    def get_capitalize_pos(self) -> Sequence[str]:
        return self._get('capitalize_pos', CAPITALIZE_POS)

    def build_config(self, min_capitalize_length: Optional[int] = None) -> HeadlineConfig:
        """
        Build a HeadlineConfig from the loaded vocabulary.

        Args:
            min_capitalize_length: Overrides the file's threshold when given

        Raises:
            HeadlineConfigError: If the vocabulary is inconsistent
        """
        if min_capitalize_length is None:
            min_capitalize_length = self.get_min_capitalize_length()

        return HeadlineConfig(
            always_capitalize=self.get_always_capitalize(),
            always_lowercase=self.get_always_lowercase(),
            min_capitalize_length=min_capitalize_length,
            capitalize_pos=self.get_capitalize_pos(),
        )


# === GLOBAL SERVICE INSTANCE ===

_headline_vocabulary: Optional[HeadlineVocabularyService] = None


def get_headline_vocabulary() -> HeadlineVocabularyService:
    """Get the service for the packaged headline vocabulary."""
    global _headline_vocabulary
    if _headline_vocabulary is None:
        _headline_vocabulary = HeadlineVocabularyService()
    return _headline_vocabulary


def get_vocabulary_service(vocabulary_file: Optional[Union[str, Path]] = None) -> HeadlineVocabularyService:
    """Get the shared packaged-vocabulary service, or a new one for a custom file."""
    if vocabulary_file is None:
        return get_headline_vocabulary()
    return HeadlineVocabularyService(vocabulary_file)
