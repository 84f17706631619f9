"""
SKILL.md parser: frontmatter extraction and schema validation.

A SKILL.md document is a YAML frontmatter header delimited by ``---`` lines,
followed by free-form instructions. Parsing is a pure function of the input
text and the canonical category/platform registries.
"""

import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import yaml
from loguru import logger
from pydantic import ValidationError

from skillhub.core.skill import ParsedSkill, ParseError, ParseResult, SkillFrontmatter
from skillhub.taxonomy import CATEGORY_SLUGS, PLATFORMS, ParseErrorKind


FRONTMATTER_PATTERN = re.compile(r"---\r?\n(.*?)\r?\n---(?:\r?\n(.*))?", re.DOTALL)
PLATFORM_SEPARATORS = re.compile(r"[\s-]")


class SkillFileError(OSError):
    """Raised when a SKILL.md file cannot be read."""


def parse_skill_md(
    content: str,
    *,
    category_slugs: Iterable[str] = CATEGORY_SLUGS,
    platforms: Iterable[str] = PLATFORMS,
) -> ParseResult:
    """
    Parse a SKILL.md document into a validated skill.

    Structural problems (empty content, missing or undecodable frontmatter)
    stop parsing with a single error. Once a header mapping exists, every
    field-level problem is collected and returned together.

    Args:
        content: Raw document text
        category_slugs: Canonical category slugs
        platforms: Canonical platform tokens

    Returns:
        ParseResult with the skill on success, otherwise all errors found
    """
    trimmed = content.strip()
    if not trimmed:
        return ParseResult.fail([
            ParseError("content", "File is empty", ParseErrorKind.CONTENT_EMPTY),
        ])

    match = FRONTMATTER_PATTERN.fullmatch(trimmed)
    if not match:
        return ParseResult.fail([
            ParseError(
                "frontmatter",
                "No YAML frontmatter found. Expected --- delimiters.",
                ParseErrorKind.FRONTMATTER_MISSING,
            ),
        ])

    header, body = match.group(1), match.group(2) or ""

    # Out-of-range timestamps raise ValueError from the constructor
    try:
        decoded = yaml.safe_load(header)
    except (yaml.YAMLError, ValueError, TypeError) as e:
        return ParseResult.fail([
            ParseError("frontmatter", f"Invalid YAML: {e}", ParseErrorKind.FRONTMATTER_INVALID),
        ])

    if not isinstance(decoded, dict):
        return ParseResult.fail([
            ParseError(
                "frontmatter",
                "Frontmatter must be a YAML object",
                ParseErrorKind.FRONTMATTER_NOT_OBJECT,
            ),
        ])

    frontmatter, errors = _validate_schema(decoded)

    category, category_errors = _validate_category(decoded.get("category"), tuple(category_slugs))
    errors.extend(category_errors)

    normalized_platforms, platform_errors = _validate_platforms(decoded.get("platforms"), tuple(platforms))
    errors.extend(platform_errors)

    instructions = resolve_instructions(decoded.get("instructions"), body)
    if not instructions:
        errors.append(ParseError(
            "instructions",
            "No instructions found in frontmatter or body",
            ParseErrorKind.INSTRUCTIONS_EMPTY,
        ))

    if errors or frontmatter is None:
        logger.debug(f"SKILL.md rejected with {len(errors)} error(s)")
        return ParseResult.fail(errors)

    return ParseResult.ok(ParsedSkill(
        name=frontmatter.name,
        description=frontmatter.description,
        version=frontmatter.version,
        category=category,
        platforms=normalized_platforms,
        instructions=instructions,
        raw=content,
    ))


def load_skill_file(path: Union[str, Path], **kwargs: Any) -> ParseResult:
    """Read a SKILL.md file from disk and parse it."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SkillFileError(f"Could not read file: {path}") from e
    return parse_skill_md(content, **kwargs)


def normalize_platform(token: str) -> str:
    """Uppercase a platform token and turn spaces/hyphens into underscores."""
    return PLATFORM_SEPARATORS.sub("_", token.upper())


def resolve_instructions(header_value: Any, body: str) -> str:
    """Prefer a non-empty ``instructions`` header key, else the trimmed body."""
    if isinstance(header_value, str) and header_value.strip():
        return header_value
    return body.strip()


def _validate_schema(decoded: Dict[Any, Any]) -> Tuple[Optional[SkillFrontmatter], List[ParseError]]:
    """Validate the header against ``SkillFrontmatter``, one error per field."""
    try:
        return SkillFrontmatter.model_validate(decoded), []
    except ValidationError as e:
        errors: List[ParseError] = []
        seen = set()
        for issue in e.errors():
            loc = issue.get("loc") or ()
            field_name = str(loc[0]) if loc else "unknown"
            if field_name in seen:
                continue
            seen.add(field_name)
            if issue.get("type") == "missing":
                message = f"{field_name} is required"
            else:
                message = f"Invalid {field_name}: {issue.get('msg')}"
            errors.append(ParseError(field_name, message, ParseErrorKind.SCHEMA_FIELD))
        return None, errors


def _validate_category(value: Any, valid: Tuple[str, ...]) -> Tuple[Optional[str], List[ParseError]]:
    # Non-string values are reported by the schema step
    if not isinstance(value, str) or not value:
        return None, []
    category = value.lower()
    if category not in valid:
        return category, [ParseError(
            "category",
            f'Unknown category "{category}". Valid: {", ".join(valid)}',
            ParseErrorKind.CATEGORY_UNKNOWN,
        )]
    return category, []


def _validate_platforms(value: Any, valid: Tuple[str, ...]) -> Tuple[List[str], List[ParseError]]:
    if not isinstance(value, list):
        return [], []

    normalized: List[str] = []
    errors: List[ParseError] = []
    for token in value:
        if not isinstance(token, str):
            continue
        platform = normalize_platform(token)
        normalized.append(platform)
        if platform not in valid:
            errors.append(ParseError(
                "platforms",
                f'Unknown platform "{platform}". Valid: {", ".join(valid)}',
                ParseErrorKind.PLATFORM_UNKNOWN,
            ))
    return normalized, errors
