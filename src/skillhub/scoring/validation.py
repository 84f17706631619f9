"""
Skill validation pipeline.

Runs schema, content, structure and security checks over a skill and
combines them with the quality score into a publishability report.
"""

from typing import Any, Iterable, List, Optional

from loguru import logger

from skillhub.config import ScoringConfig, get_settings
from skillhub.core.semver import validate_semver
from skillhub.scoring import signals
from skillhub.scoring.quality import QualityScorer, read_field
from skillhub.scoring.security import run_security_checks
from skillhub.taxonomy import CATEGORY_SLUGS, CheckSeverity, ValidationCheck, ValidationReport


def check(check_id: str, label: str, passed: bool, severity: CheckSeverity, message: str) -> ValidationCheck:
    return ValidationCheck(id=check_id, label=label, passed=passed, severity=severity, message=message)


class SkillValidator:
    """
    Builds a ValidationReport for a skill.

    A skill is publishable when no error-severity check fails and its quality
    score reaches ``min_publish_score``.
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        category_slugs: Iterable[str] = CATEGORY_SLUGS,
    ):
        self.config = config or get_settings().scoring
        self.category_slugs = frozenset(category_slugs)
        self.scorer = QualityScorer(self.config, self.category_slugs)

    def validate(self, skill: Any, slug: str = "") -> ValidationReport:
        breakdown = self.scorer.score(skill)
        instructions = read_field(skill, "instructions")

        report = ValidationReport(
            slug=slug,
            quality_score=breakdown.total,
            publishable=False,
            schema=self.run_schema_checks(skill),
            content=self.run_content_checks(instructions),
            structure=self.run_structure_checks(instructions),
            security=run_security_checks(instructions),
        )
        summary = report.get_summary()
        report.publishable = summary["errors"] == 0 and breakdown.total >= self.config.min_publish_score

        logger.debug(
            f"Validated {slug or 'skill'}: score={breakdown.total}, "
            f"errors={summary['errors']}, warnings={summary['warnings']}"
        )
        return report

    def run_schema_checks(self, skill: Any) -> List[ValidationCheck]:
        min_desc = self.config.min_description_chars
        name = read_field(skill, "name")
        description = read_field(skill, "description")
        version = read_field(skill, "version")
        category = read_field(skill, "category", "category_slug")
        instructions = read_field(skill, "instructions")
        semver_ok = validate_semver(version)
        category_ok = category in self.category_slugs

        return [
            check(
                "schema.name", "Skill name", bool(name), CheckSeverity.ERROR,
                "Name is present" if name else "Name is required",
            ),
            check(
                "schema.description", "Description present", bool(description), CheckSeverity.ERROR,
                "Description is present" if description else "Description is required",
            ),
            check(
                "schema.description_length", "Description length",
                len(description) >= min_desc, CheckSeverity.WARNING,
                f"Description is {len(description)} chars"
                if len(description) >= min_desc
                else f"Description is {len(description)} chars (recommend >={min_desc})",
            ),
            check(
                "schema.version", "Valid semver", semver_ok, CheckSeverity.WARNING,
                f"Version {version} is valid semver" if semver_ok else f'"{version}" is not valid semver',
            ),
            check(
                "schema.category", "Valid category", category_ok, CheckSeverity.WARNING,
                f'Category "{category}" is valid' if category_ok
                else f'Category "{category}" is not a recognized category',
            ),
            check(
                "schema.instructions", "Instructions present", bool(instructions), CheckSeverity.ERROR,
                "Instructions are present" if instructions else "Instructions are required",
            ),
        ]

    def run_content_checks(self, inst: str) -> List[ValidationCheck]:
        min_chars = self.config.min_instruction_chars
        return [
            check(
                "content.min_length", "Instruction length", len(inst) >= min_chars, CheckSeverity.WARNING,
                f"Instructions are {len(inst)} chars"
                if len(inst) >= min_chars
                else f"Instructions are {len(inst)} chars (recommend >={min_chars})",
            ),
            check(
                "content.structured", "Structured steps", signals.has_structured_phases(inst),
                CheckSeverity.WARNING,
                "Instructions should use headings, numbered lists, or phase/step markers",
            ),
            check(
                "content.io_spec", "Input/output spec", signals.has_io_spec(inst), CheckSeverity.WARNING,
                "Instructions should specify expected inputs and outputs",
            ),
            check(
                "content.error_handling", "Error handling", signals.has_error_handling(inst), CheckSeverity.INFO,
                "Consider adding error handling instructions",
            ),
            check(
                "content.examples", "Examples present", signals.has_examples(inst), CheckSeverity.WARNING,
                "Including examples helps users understand expected behavior",
            ),
            check(
                "content.guardrails", "Guardrails defined", signals.has_guardrails(inst), CheckSeverity.INFO,
                "Consider adding guardrails and constraints",
            ),
        ]

    def run_structure_checks(self, inst: str) -> List[ValidationCheck]:
        checks = []

        has_todo = signals.has_todo_markers(inst)
        checks.append(check(
            "structure.no_todos", "No TODO markers", not has_todo, CheckSeverity.ERROR,
            "Instructions contain TODO/FIXME markers, resolve before publishing"
            if has_todo else "No TODO markers found",
        ))

        languages = signals.opening_fence_languages(inst)
        unlabeled = sum(1 for lang in languages if not lang)
        if not languages:
            fence_message = "No code blocks found"
        elif unlabeled == 0:
            fence_message = f"All {len(languages)} code blocks have language hints"
        else:
            fence_message = f"{unlabeled}/{len(languages)} code blocks missing language hints"
        checks.append(check(
            "structure.code_block_langs", "Code block languages", unlabeled == 0, CheckSeverity.INFO,
            fence_message,
        ))

        gap = signals.has_heading_gap(inst)
        checks.append(check(
            "structure.heading_hierarchy", "Heading hierarchy", not gap, CheckSeverity.INFO,
            "Heading levels skip (e.g. h1 to h3), use consecutive levels for clarity"
            if gap else "Heading hierarchy is consistent",
        ))

        min_chars = self.config.min_nontrivial_chars
        nontrivial = len(inst) >= min_chars
        checks.append(check(
            "structure.not_trivial", "Non-trivial instructions", nontrivial, CheckSeverity.ERROR,
            "Instructions have substantive content"
            if nontrivial else f"Instructions are too short to be useful (under {min_chars} chars)",
        ))

        return checks


def validate_skill(skill: Any, slug: str = "", config: Optional[ScoringConfig] = None) -> ValidationReport:
    """Validate a skill and return the full report."""
    return SkillValidator(config).validate(skill, slug)
