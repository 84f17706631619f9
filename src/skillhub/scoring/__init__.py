"""Quality scoring and validation for parsed skills."""

from skillhub.scoring.quality import QualityScorer, ScoreBreakdown, compute_detailed_score, compute_quality_score
from skillhub.scoring.security import run_security_checks
from skillhub.scoring.validation import SkillValidator, validate_skill

__all__ = [
    "QualityScorer",
    "ScoreBreakdown",
    "compute_detailed_score",
    "compute_quality_score",
    "run_security_checks",
    "SkillValidator",
    "validate_skill",
]
