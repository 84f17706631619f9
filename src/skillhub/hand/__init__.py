"""Hand translation and HAND.toml serialization."""

from skillhub.hand.translator import (
    HandConfig,
    TranslateOptions,
    extract_user_template,
    sanitize_name,
    translate_to_hand,
)
from skillhub.hand.toml_writer import serialize_hand_toml

__all__ = [
    "HandConfig",
    "TranslateOptions",
    "extract_user_template",
    "sanitize_name",
    "translate_to_hand",
    "serialize_hand_toml",
]
