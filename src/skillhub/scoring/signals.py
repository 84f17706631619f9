"""
Text signals detected in skill instructions.

Each heuristic is a named predicate over a compiled pattern so it can be
tested on its own. The patterns decide quality scores for published content:
changing one changes the score of everything scored before.
"""

import re
from typing import List


SIGNALS_VERSION = "1"

# Structure
PHASE_MARKER_PATTERN = re.compile(r"(?:phase|step|stage)\s*\d", re.IGNORECASE)
HEADING_LINE_PATTERN = re.compile(r"^[^\S\n]*#{1,3}\s", re.MULTILINE)
NUMBERED_LINE_PATTERN = re.compile(r"^[^\S\n]*\d+\.\s", re.MULTILINE)

# Content
IO_SPEC_PATTERN = re.compile(r"input|output|returns?|produces?", re.IGNORECASE)
ERROR_HANDLING_PATTERN = re.compile(r"error|fail|exception|catch|handle|fallback|retry", re.IGNORECASE)
GUARDRAIL_PATTERN = re.compile(
    r"strict|rule|must not|never|always|important|critical|do not",
    re.IGNORECASE,
)
EXAMPLE_PATTERN = re.compile(r"example|e\.g\.|for instance|such as|```", re.IGNORECASE)
OUTPUT_FORMAT_PATTERN = re.compile(
    r"output format|output structure|response format|produce|generate",
    re.IGNORECASE,
)

# Hygiene
TODO_MARKER_PATTERN = re.compile(r"\b(?:TODO|FIXME|HACK|XXX|PLACEHOLDER)\b")
CODE_FENCE_PATTERN = re.compile(r"^[^\S\n]*```(\w*)", re.MULTILINE)
MARKDOWN_HEADING_PATTERN = re.compile(r"^(#{1,6})\s", re.MULTILINE)


def has_phase_markers(text: str) -> bool:
    """'Phase 1', 'step 2', 'Stage3'."""
    return PHASE_MARKER_PATTERN.search(text) is not None


def has_heading_lines(text: str) -> bool:
    return HEADING_LINE_PATTERN.search(text) is not None


def has_numbered_lines(text: str) -> bool:
    return NUMBERED_LINE_PATTERN.search(text) is not None


def has_structured_phases(text: str) -> bool:
    """Phase/step markers, markdown headings, or a numbered list."""
    return has_phase_markers(text) or has_heading_lines(text) or has_numbered_lines(text)


def has_io_spec(text: str) -> bool:
    return IO_SPEC_PATTERN.search(text) is not None


def has_error_handling(text: str) -> bool:
    return ERROR_HANDLING_PATTERN.search(text) is not None


def has_guardrails(text: str) -> bool:
    return GUARDRAIL_PATTERN.search(text) is not None


def has_examples(text: str) -> bool:
    return EXAMPLE_PATTERN.search(text) is not None


def has_output_format(text: str) -> bool:
    return OUTPUT_FORMAT_PATTERN.search(text) is not None


def has_todo_markers(text: str) -> bool:
    return TODO_MARKER_PATTERN.search(text) is not None


def opening_fence_languages(text: str) -> List[str]:
    """
    Language hints of opening code fences.

    Fences are assumed to pair up, so every other fence (0, 2, 4, ...) opens a
    block. An unlabeled opening fence yields an empty string.
    """
    fences = [m.group(1) for m in CODE_FENCE_PATTERN.finditer(text)]
    return fences[::2]


def heading_levels(text: str) -> List[int]:
    """Levels of markdown headings in document order."""
    return [len(m.group(1)) for m in MARKDOWN_HEADING_PATTERN.finditer(text)]


def has_heading_gap(text: str) -> bool:
    """True when a heading skips a level going deeper (h1 followed by h3)."""
    levels = heading_levels(text)
    return any(curr > prev + 1 for prev, curr in zip(levels, levels[1:]))
