"""
Translate a parsed skill into a hand configuration.

A hand is the execution runtime's unit of capability: a system prompt, a
user template, model settings and limits, plus provenance metadata.
"""

import re
from typing import Any, List, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from skillhub.config import HandDefaults
from skillhub.core.skill import ParsedSkill


MAX_HAND_NAME_LENGTH = 64
DEFAULT_USER_TEMPLATE = "{{input}}"

_DEFAULTS = HandDefaults()

# Capture runs until a blank line or a line starting with a capital or '#'
_TEMPLATE_END = r"(?:\n\n|\n(?=(?-i:[A-Z#])))"
USER_TEMPLATE_PATTERNS = [
    re.compile(
        r"(?:^|\n)[^\S\n]*(?:input|user provides?|expects?|takes?)\s*:\s*(.+?)" + _TEMPLATE_END,
        re.IGNORECASE | re.DOTALL,
    ),
    re.compile(
        r"(?:^|\n)>\s*(?:input|user)\s*:\s*(.+?)" + _TEMPLATE_END,
        re.IGNORECASE | re.DOTALL,
    ),
]


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())


class HandSection(_Section):
    name: str
    description: str
    version: str


class InstructionsSection(_Section):
    system_prompt: str
    user_template: str


class ModelSection(_Section):
    provider: str
    model_id: str
    max_tokens: int
    temperature: float


class LimitsSection(_Section):
    timeout_seconds: int
    max_retries: int


class MetadataSection(_Section):
    source: str
    source_url: str
    platforms: List[str] = Field(default_factory=list)
    category: str


class HandConfig(_Section):
    """Hand configuration with its five fixed sections."""

    hand: HandSection
    instructions: InstructionsSection
    model: ModelSection
    limits: LimitsSection
    metadata: MetadataSection


class TranslateOptions(BaseModel):
    """
    Overrides for translation. Accepts snake_case or camelCase keys
    (``model_provider`` / ``modelProvider``); unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    model_provider: str = Field(
        default=_DEFAULTS.model_provider,
        validation_alias=AliasChoices("model_provider", "modelProvider"),
    )
    model_id: str = Field(
        default=_DEFAULTS.model_id,
        validation_alias=AliasChoices("model_id", "modelId"),
    )
    max_tokens: int = Field(
        default=_DEFAULTS.max_tokens,
        validation_alias=AliasChoices("max_tokens", "maxTokens"),
    )
    temperature: float = Field(
        default=_DEFAULTS.temperature,
        validation_alias=AliasChoices("temperature"),
    )
    timeout_seconds: int = Field(
        default=_DEFAULTS.timeout_seconds,
        validation_alias=AliasChoices("timeout_seconds", "timeoutSeconds"),
    )
    source_url: str = Field(
        default="",
        validation_alias=AliasChoices("source_url", "sourceUrl"),
    )

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "TranslateOptions":
        """Build options from a mapping, treating None values as missing."""
        provided = {k: v for k, v in (options or {}).items() if v is not None}
        return cls.model_validate(provided)


def sanitize_name(name: str) -> str:
    """
    Turn a display name into a hand name: lowercase letters, digits and
    single hyphens, at most 64 characters. Idempotent.
    """
    result = name.lower()
    result = re.sub(r"[^a-z0-9\s-]", "", result)
    result = re.sub(r"\s+", "-", result)
    result = re.sub(r"-+", "-", result)
    result = result.strip("-")
    return result[:MAX_HAND_NAME_LENGTH].strip("-")


def extract_user_template(instructions: str) -> str:
    """
    Pull an input description out of the instructions.

    Looks for an ``Input:`` / ``User provides:`` / ``Expects:`` / ``Takes:``
    line, then a ``> input:`` / ``> user:`` blockquote. The first pattern
    that matches wins. Falls back to ``{{input}}``.
    """
    for pattern in USER_TEMPLATE_PATTERNS:
        match = pattern.search(instructions)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return DEFAULT_USER_TEMPLATE


def translate_to_hand(
    skill: ParsedSkill,
    options: Union[TranslateOptions, Mapping[str, Any], None] = None,
    defaults: Optional[HandDefaults] = None,
) -> HandConfig:
    """
    Translate a parsed skill into a HandConfig.

    Args:
        skill: Validated skill
        options: Overrides for model settings, timeout and source URL
        defaults: Fixed values (retries, source, fallback category)

    Returns:
        HandConfig ready for serialization
    """
    if not isinstance(options, TranslateOptions):
        options = TranslateOptions.from_mapping(options)
    defaults = defaults or _DEFAULTS

    return HandConfig(
        hand=HandSection(
            name=sanitize_name(skill.name),
            description=skill.description,
            version=skill.version,
        ),
        instructions=InstructionsSection(
            system_prompt=skill.instructions,
            user_template=extract_user_template(skill.instructions),
        ),
        model=ModelSection(
            provider=options.model_provider,
            model_id=options.model_id,
            max_tokens=options.max_tokens,
            temperature=options.temperature,
        ),
        limits=LimitsSection(
            timeout_seconds=options.timeout_seconds,
            max_retries=defaults.max_retries,
        ),
        metadata=MetadataSection(
            source=defaults.source,
            source_url=options.source_url,
            platforms=list(skill.platforms),
            category=skill.category or defaults.default_category,
        ),
    )
