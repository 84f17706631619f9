"""
skillhub - Parse, score and translate SKILL.md documents.

Turns a SKILL.md document (YAML frontmatter plus free-form instructions) into
a validated record, scores its quality, and translates it into a HAND.toml
configuration for an external execution runtime.
"""

__version__ = "0.1.0"

# Core components
from skillhub.core.skill import ParsedSkill, ParseError, ParseResult
from skillhub.core.parser import parse_skill_md, load_skill_file
from skillhub.core.semver import validate_semver, compare_semver, InvalidVersionError

# Registries
from skillhub.taxonomy import (
    CATEGORIES,
    CATEGORY_SLUGS,
    PLATFORMS,
    Platform,
    ParseErrorKind,
    CheckSeverity,
    ValidationCheck,
    ValidationReport,
)

# Scoring
from skillhub.scoring.quality import QualityScorer, ScoreBreakdown, compute_detailed_score, compute_quality_score
from skillhub.scoring.validation import validate_skill

# Hand translation
from skillhub.hand.translator import HandConfig, TranslateOptions, translate_to_hand, sanitize_name
from skillhub.hand.toml_writer import serialize_hand_toml

# Configuration
from skillhub.config import Settings, ScoringConfig, get_settings

__all__ = [
    # Version
    "__version__",

    # Core
    "ParsedSkill",
    "ParseError",
    "ParseResult",
    "parse_skill_md",
    "load_skill_file",
    "validate_semver",
    "compare_semver",
    "InvalidVersionError",

    # Registries
    "CATEGORIES",
    "CATEGORY_SLUGS",
    "PLATFORMS",
    "Platform",
    "ParseErrorKind",
    "CheckSeverity",
    "ValidationCheck",
    "ValidationReport",

    # Scoring
    "QualityScorer",
    "ScoreBreakdown",
    "compute_detailed_score",
    "compute_quality_score",
    "validate_skill",

    # Hand
    "HandConfig",
    "TranslateOptions",
    "translate_to_hand",
    "sanitize_name",
    "serialize_hand_toml",

    # Config
    "Settings",
    "ScoringConfig",
    "get_settings",
]
