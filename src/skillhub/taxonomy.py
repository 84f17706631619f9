"""
Canonical registries and classification enums for skillhub.

This module defines the category and platform registries that SKILL.md
documents are validated against, the error taxonomy used by the parser,
and the check/report structures produced by the validation pipeline.
"""

from enum import Enum
from typing import List, Dict, Any
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Category:
    """A canonical skill category."""

    name: str
    slug: str
    description: str
    sort_order: int


CATEGORIES = (
    Category("Build", "build", "Project scaffolding and full build pipelines", 0),
    Category("Test", "test", "Unit tests, E2E tests, integration tests", 1),
    Category("QA", "qa", "Quality assurance, manual test plans, bug detection", 2),
    Category("Review", "review", "Code review, architecture review, design review", 3),
    Category("Deploy", "deploy", "Infrastructure, CI/CD, cloud deployment", 4),
    Category("Docs", "docs", "README generation, API docs, changelogs", 5),
    Category("Security", "security", "Audits, vulnerability checks, compliance", 6),
    Category("UX", "ux", "Accessibility, usability, design systems", 7),
    Category("Analysis", "analysis", "Domain analysis, competitive analysis, metrics", 8),
    Category("Productivity", "productivity", "Workflow automation, task management", 9),
    Category("Integration", "integration", "Third-party service connectors", 10),
    Category("Combo", "combo", "Multi-skill chains and compositions", 11),
    Category("Meta", "meta", "Skills about skills: recall, evolve, promote", 12),
)

CATEGORY_SLUGS = tuple(c.slug for c in CATEGORIES)


class Platform(str, Enum):
    """Agent platforms a skill can declare support for."""

    CLAUDE_CODE = "CLAUDE_CODE"
    CURSOR = "CURSOR"
    CODEX_CLI = "CODEX_CLI"
    OTHER = "OTHER"


PLATFORMS = tuple(p.value for p in Platform)

PLATFORM_LABELS: Dict[str, str] = {
    Platform.CLAUDE_CODE.value: "Claude Code",
    Platform.CURSOR.value: "Cursor",
    Platform.CODEX_CLI.value: "Codex CLI",
    Platform.OTHER.value: "Other",
}


class ParseErrorKind(str, Enum):
    """
    Kinds of errors reported while parsing a SKILL.md document.

    The first four are structural: the document shape is broken and parsing
    stops with a single error. The rest are accumulated together.
    """

    CONTENT_EMPTY = "content_empty"
    FRONTMATTER_MISSING = "frontmatter_missing"
    FRONTMATTER_INVALID = "frontmatter_invalid"
    FRONTMATTER_NOT_OBJECT = "frontmatter_not_object"

    SCHEMA_FIELD = "schema_field"
    CATEGORY_UNKNOWN = "category_unknown"
    PLATFORM_UNKNOWN = "platform_unknown"
    INSTRUCTIONS_EMPTY = "instructions_empty"

    @property
    def is_structural(self) -> bool:
        return self in _STRUCTURAL_KINDS


_STRUCTURAL_KINDS = frozenset({
    ParseErrorKind.CONTENT_EMPTY,
    ParseErrorKind.FRONTMATTER_MISSING,
    ParseErrorKind.FRONTMATTER_INVALID,
    ParseErrorKind.FRONTMATTER_NOT_OBJECT,
})


class CheckSeverity(str, Enum):
    """Severity of a failed validation check."""

    ERROR = "error"       # Blocks publishing
    WARNING = "warning"   # Should be fixed
    INFO = "info"         # Suggestion only


@dataclass
class ValidationCheck:
    """Outcome of a single validation check."""

    id: str
    label: str
    passed: bool
    severity: CheckSeverity
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "passed": self.passed,
            "severity": self.severity.value,
            "message": self.message,
        }


@dataclass
class ValidationReport:
    """
    Complete validation report for a skill, grouping checks by concern.
    """

    slug: str
    quality_score: int
    publishable: bool
    schema: List[ValidationCheck] = field(default_factory=list)
    content: List[ValidationCheck] = field(default_factory=list)
    structure: List[ValidationCheck] = field(default_factory=list)
    security: List[ValidationCheck] = field(default_factory=list)

    @property
    def all_checks(self) -> List[ValidationCheck]:
        return [*self.schema, *self.content, *self.structure, *self.security]

    def get_summary(self) -> Dict[str, int]:
        """Count failed errors, failed warnings and passed checks."""
        checks = self.all_checks
        return {
            "errors": sum(1 for c in checks if not c.passed and c.severity == CheckSeverity.ERROR),
            "warnings": sum(1 for c in checks if not c.passed and c.severity == CheckSeverity.WARNING),
            "passed": sum(1 for c in checks if c.passed),
            "total": len(checks),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "slug": self.slug,
            "quality_score": self.quality_score,
            "publishable": self.publishable,
            "checks": {
                "schema": [c.to_dict() for c in self.schema],
                "content": [c.to_dict() for c in self.content],
                "structure": [c.to_dict() for c in self.structure],
                "security": [c.to_dict() for c in self.security],
            },
            "summary": self.get_summary(),
        }
