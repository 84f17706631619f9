"""
Quality Scoring Module - Heuristic 0-100 score for a skill.

The score is the sum of two independently capped dimensions:

    Total = min(Schema (0-25) + Instructions (0-75), 100)

Every check only adds points. Missing signals lower the score, nothing
raises, and the scorer is cheap enough to run inline on every publish.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from skillhub.config import ScoringConfig, get_settings
from skillhub.core.semver import validate_semver
from skillhub.scoring import signals
from skillhub.taxonomy import CATEGORY_SLUGS


@dataclass
class ScoreBreakdown:
    schema: int
    instructions: int
    total: int
    details: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema": self.schema,
            "instructions": self.instructions,
            "total": self.total,
            "details": list(self.details),
            "signals_version": signals.SIGNALS_VERSION,
        }


def read_field(skill: Any, *names: str) -> str:
    """Read the first present attribute (or mapping key) as a string."""
    for name in names:
        if isinstance(skill, dict):
            value = skill.get(name)
        else:
            value = getattr(skill, name, None)
        if value is not None:
            return value if isinstance(value, str) else str(value)
    return ""


class QualityScorer:
    """
    Scores a parsed skill on schema completeness and instruction structure.

    Accepts anything shaped like a ParsedSkill (attributes or mapping keys
    ``name``, ``description``, ``version``, ``instructions``, ``category``)
    and does not re-validate it.
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        category_slugs: Iterable[str] = CATEGORY_SLUGS,
    ):
        self.config = config or get_settings().scoring
        self.category_slugs = frozenset(category_slugs)

    def score(self, skill: Any) -> ScoreBreakdown:
        """Compute the detailed score breakdown for a skill."""
        details: List[str] = []

        schema = self._score_schema(skill, details)
        instructions = self._score_instructions(read_field(skill, "instructions"), details)

        schema = min(schema, self.config.schema_max)
        instructions = min(instructions, self.config.instruction_max)
        total = min(schema + instructions, self.config.max_score)

        logger.debug(f"Quality score {total} (schema={schema}, instructions={instructions})")
        return ScoreBreakdown(schema=schema, instructions=instructions, total=total, details=details)

    def _score_schema(self, skill: Any, details: List[str]) -> int:
        cfg = self.config
        name = read_field(skill, "name")
        description = read_field(skill, "description")
        version = read_field(skill, "version")
        instructions = read_field(skill, "instructions")
        category = read_field(skill, "category", "category_slug")
        points = 0

        if name and description and instructions and version:
            points += cfg.schema_fields_present
            details.append(f"+{cfg.schema_fields_present} all required fields present")

        if len(description) >= cfg.min_description_chars:
            points += cfg.schema_description_length
            details.append(
                f"+{cfg.schema_description_length} description >= {cfg.min_description_chars} chars"
            )

        if validate_semver(version):
            points += cfg.schema_semver
            details.append(f"+{cfg.schema_semver} valid semver")

        if category in self.category_slugs:
            points += cfg.schema_valid_category
            details.append(f"+{cfg.schema_valid_category} valid category")

        return points

    def _score_instructions(self, inst: str, details: List[str]) -> int:
        cfg = self.config
        points = 0

        if len(inst) >= cfg.min_instruction_chars:
            points += cfg.instruction_min_length
            details.append(f"+{cfg.instruction_min_length} instructions >= {cfg.min_instruction_chars} chars")

        if len(inst) >= cfg.long_instruction_chars:
            points += cfg.instruction_long_bonus
            details.append(f"+{cfg.instruction_long_bonus} instructions >= {cfg.long_instruction_chars} chars")

        checks = [
            (signals.has_structured_phases, cfg.instruction_structured_phases, "structured phases/steps detected"),
            (signals.has_io_spec, cfg.instruction_io_spec, "input/output specification"),
            (signals.has_error_handling, cfg.instruction_error_handling, "error handling instructions"),
            (signals.has_guardrails, cfg.instruction_guardrails, "guardrails/strict rules"),
            (signals.has_examples, cfg.instruction_examples, "examples present"),
            (signals.has_output_format, cfg.instruction_output_format, "output format specification"),
        ]
        for detect, value, reason in checks:
            if detect(inst):
                points += value
                details.append(f"+{value} {reason}")

        return points


def compute_detailed_score(skill: Any, config: Optional[ScoringConfig] = None) -> ScoreBreakdown:
    """Score a skill and return the full breakdown."""
    return QualityScorer(config).score(skill)


def compute_quality_score(skill: Any, config: Optional[ScoringConfig] = None) -> int:
    """Score a skill and return only the 0-100 total."""
    return compute_detailed_score(skill, config).total
