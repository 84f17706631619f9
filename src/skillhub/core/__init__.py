"""
Core module exports.
"""

from skillhub.core.skill import (
    ParsedSkill,
    ParseError,
    ParseResult,
    SkillFrontmatter,
    slugify,
)
from skillhub.core.parser import SkillFileError, load_skill_file, parse_skill_md
from skillhub.core.semver import InvalidVersionError, compare_semver, sort_versions, validate_semver

__all__ = [
    "ParsedSkill",
    "ParseError",
    "ParseResult",
    "SkillFrontmatter",
    "slugify",
    "SkillFileError",
    "load_skill_file",
    "parse_skill_md",
    "InvalidVersionError",
    "compare_semver",
    "sort_versions",
    "validate_semver",
]
