from .vocabulary_service import (
    DEFAULT_VOCABULARY_FILE,
    HeadlineVocabularyService,
    get_headline_vocabulary,
    get_vocabulary_service,
)

__all__ = [
    'DEFAULT_VOCABULARY_FILE',
    'HeadlineVocabularyService',
    'get_headline_vocabulary',
    'get_vocabulary_service',
]
