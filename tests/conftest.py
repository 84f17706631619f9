"""
pytest configuration and fixtures.
"""

from pathlib import Path

import pytest

from skillhub.core.skill import ParsedSkill


VALID_SKILL_MD = """---
name: Test Skill
description: A test skill
version: 1.0.0
category: build
platforms:
  - CLAUDE_CODE
---
These are the instructions."""


CODE_REVIEWER_INSTRUCTIONS = """You are an autonomous code reviewer.

## Phase 1: Analysis
Input: The user provides a git diff or file path.
Output: A structured review with line-by-line comments.

## Phase 2: Suggestions
Error handling: If the diff is empty, report "no changes found".
IMPORTANT: Never modify code directly, only suggest changes.

Example:
```
// Line 42: Consider using const instead of let
```

Output format: Markdown with headings per file."""


@pytest.fixture
def valid_skill_md():
    """A minimal valid SKILL.md document."""
    return VALID_SKILL_MD


@pytest.fixture
def code_reviewer():
    """A parsed code review skill."""
    return ParsedSkill(
        name="Code Reviewer",
        description="Reviews code for bugs and style issues",
        version="1.2.0",
        category="build",
        platforms=["CLAUDE_CODE", "CURSOR"],
        instructions=CODE_REVIEWER_INSTRUCTIONS,
        raw="",
    )


@pytest.fixture
def skill_file(tmp_path):
    """A valid SKILL.md written to disk."""
    path = tmp_path / "SKILL.md"
    path.write_text(VALID_SKILL_MD, encoding="utf-8")
    return path


@pytest.fixture
def examples_dir():
    """Directory holding the bundled sample skills."""
    return Path(__file__).parent.parent / "examples"
