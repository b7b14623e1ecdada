"""Constants for icubreak - sentinel values, rule-status ranges and defaults."""

from enum import IntEnum

# Value indicating all text boundaries have been returned.
DONE = -1

# Default configuration
# Structure: {"locale": "en_US", "validate_boundaries": True}
DEFAULT_CONFIG = {
    # Locale identifier, either "en-US" or "en_US" form
    "locale": "en_US",
    # Check that every boundary pass starts at 0, is strictly increasing
    # and ends at len(text)
    "validate_boundaries": True,
}


class WordBreak(IntEnum):
    """Rule-status ranges for word boundaries."""

    # Words that do not fit into any other category: spaces, most punctuation
    NONE = 0
    NONE_LIMIT = 100
    NUMBER = 100
    NUMBER_LIMIT = 200
    LETTER = 200
    LETTER_LIMIT = 300
    KANA = 300
    KANA_LIMIT = 400
    IDEO = 400
    IDEO_LIMIT = 500


class LineBreakTag(IntEnum):
    """Rule-status ranges for line boundaries."""

    SOFT = 0
    SOFT_LIMIT = 100
    HARD = 100
    HARD_LIMIT = 200


class SentenceBreakTag(IntEnum):
    """Rule-status ranges for sentence boundaries."""

    TERM = 0
    TERM_LIMIT = 100
    SEP = 100
    SEP_LIMIT = 200
