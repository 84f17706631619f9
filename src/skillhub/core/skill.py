"""
Core skill data model for skillhub.

This module defines the validated record produced by parsing a SKILL.md
document, the schema its frontmatter header is checked against, and the
result/error structures returned by the parser.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, List

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
import xxhash

from skillhub.taxonomy import ParseErrorKind


class SkillFrontmatter(BaseModel):
    """
    Schema for the decoded frontmatter header.

    The YAML decoder hands back an untyped mapping; this model enumerates the
    recognized keys and their coercions. Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    version: str = Field(min_length=1)
    category: Optional[str] = None
    platforms: List[str] = Field(default_factory=list)
    instructions: Optional[str] = None

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, value: Any) -> Any:
        """Accept numeric versions (``version: 1``) and render them as text."""
        if isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("platforms", mode="before")
    @classmethod
    def default_platforms(cls, value: Any) -> Any:
        return [] if value is None else value


class ParsedSkill(BaseModel):
    """
    A validated SKILL.md document.

    Category is lowercased (or None), platforms are normalized canonical
    tokens, and ``raw`` keeps the original source text untouched.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    version: str
    category: Optional[str] = None
    platforms: List[str] = Field(default_factory=list)
    instructions: str
    raw: str = ""

    @computed_field
    @property
    def content_hash(self) -> str:
        """Hash of the raw source, identifying identical documents."""
        return xxhash.xxh64(self.raw.encode()).hexdigest()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "version": self.version,
            "category": self.category,
            "platforms": list(self.platforms),
            "instructions": self.instructions,
            "content_hash": self.content_hash,
        }


@dataclass
class ParseError:
    """A single problem found in a SKILL.md document."""

    field: str
    message: str
    kind: ParseErrorKind = ParseErrorKind.SCHEMA_FIELD

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "message": self.message, "kind": self.kind.value}


@dataclass
class ParseResult:
    """Outcome of parsing: a skill on success, otherwise every error found."""

    success: bool
    skill: Optional[ParsedSkill] = None
    errors: List[ParseError] = field(default_factory=list)

    @property
    def structural(self) -> bool:
        """True when the document shape itself is broken."""
        return any(e.kind.is_structural for e in self.errors)

    @classmethod
    def ok(cls, skill: ParsedSkill) -> "ParseResult":
        return cls(success=True, skill=skill, errors=[])

    @classmethod
    def fail(cls, errors: List[ParseError]) -> "ParseResult":
        return cls(success=False, skill=None, errors=list(errors))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "skill": self.skill.to_dict() if self.skill else None,
            "errors": [e.to_dict() for e in self.errors],
        }


def slugify(text: str, max_length: int = 100) -> str:
    """URL slug for a skill name: lowercase alphanumerics joined by hyphens."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug[:max_length]
