"""
Tests for hand translation.
"""

import pytest
from pydantic import ValidationError

from skillhub.config import HandDefaults
from skillhub.hand.translator import (
    DEFAULT_USER_TEMPLATE,
    TranslateOptions,
    extract_user_template,
    sanitize_name,
    translate_to_hand,
)


class TestTranslateToHand:
    """Tests for translate_to_hand."""

    def test_translates_skill(self, code_reviewer):
        config = translate_to_hand(code_reviewer)

        assert config.hand.name == "code-reviewer"
        assert config.hand.description == "Reviews code for bugs and style issues"
        assert config.hand.version == "1.2.0"

    def test_default_model_config(self, code_reviewer):
        config = translate_to_hand(code_reviewer)

        assert config.model.provider == "anthropic"
        assert config.model.model_id == "claude-sonnet-4-5-20250514"
        assert config.model.max_tokens == 4096
        assert config.model.temperature == 0.3
        assert config.limits.timeout_seconds == 120
        assert config.limits.max_retries == 2

    def test_instructions_become_system_prompt(self, code_reviewer):
        config = translate_to_hand(code_reviewer)

        assert config.instructions.system_prompt == code_reviewer.instructions

    def test_extracts_user_template(self, code_reviewer):
        config = translate_to_hand(code_reviewer)

        assert config.instructions.user_template == "The user provides a git diff or file path."

    def test_custom_options_camel_case(self, code_reviewer):
        config = translate_to_hand(code_reviewer, {
            "modelProvider": "openai",
            "modelId": "gpt-4",
            "maxTokens": 8192,
            "temperature": 0.7,
            "timeoutSeconds": 60,
            "sourceUrl": "https://skills-hub.ai/skills/code-reviewer",
        })

        assert config.model.provider == "openai"
        assert config.model.model_id == "gpt-4"
        assert config.model.max_tokens == 8192
        assert config.model.temperature == 0.7
        assert config.limits.timeout_seconds == 60
        assert config.metadata.source_url == "https://skills-hub.ai/skills/code-reviewer"

    def test_custom_options_snake_case(self, code_reviewer):
        config = translate_to_hand(code_reviewer, TranslateOptions(model_provider="openai", max_tokens=1000))

        assert config.model.provider == "openai"
        assert config.model.max_tokens == 1000
        assert config.model.model_id == "claude-sonnet-4-5-20250514"

    def test_partial_options_keep_defaults(self, code_reviewer):
        config = translate_to_hand(code_reviewer, {"temperature": 0.9})

        assert config.model.temperature == 0.9
        assert config.model.provider == "anthropic"
        assert config.limits.timeout_seconds == 120

    def test_unknown_and_none_options_ignored(self, code_reviewer):
        config = translate_to_hand(code_reviewer, {"retries": 9, "modelId": None})

        assert config.model.model_id == "claude-sonnet-4-5-20250514"
        assert config.limits.max_retries == 2

    def test_metadata(self, code_reviewer):
        config = translate_to_hand(code_reviewer)

        assert config.metadata.source == "skills-hub.ai"
        assert config.metadata.source_url == ""
        assert config.metadata.platforms == ["CLAUDE_CODE", "CURSOR"]
        assert config.metadata.category == "build"

    def test_missing_category_defaults_to_general(self, code_reviewer):
        skill = code_reviewer.model_copy(update={"category": None})

        assert translate_to_hand(skill).metadata.category == "general"

    def test_custom_defaults(self, code_reviewer):
        defaults = HandDefaults(max_retries=5, source="example.org")
        config = translate_to_hand(code_reviewer, defaults=defaults)

        assert config.limits.max_retries == 5
        assert config.metadata.source == "example.org"

    def test_sanitizes_name(self, code_reviewer):
        skill = code_reviewer.model_copy(update={"name": "My Awesome Skill! (v2) @#$"})
        config = translate_to_hand(skill)

        assert config.hand.name == "my-awesome-skill-v2"

    def test_truncates_long_names(self, code_reviewer):
        skill = code_reviewer.model_copy(update={"name": "a" * 100})

        assert len(translate_to_hand(skill).hand.name) == 64

    def test_config_is_immutable(self, code_reviewer):
        config = translate_to_hand(code_reviewer)

        with pytest.raises(ValidationError):
            config.hand.name = "other"

    def test_deterministic(self, code_reviewer):
        assert translate_to_hand(code_reviewer) == translate_to_hand(code_reviewer)


class TestSanitizeName:
    """Tests for hand name sanitization."""

    @pytest.mark.parametrize("name,expected", [
        ("Code Reviewer", "code-reviewer"),
        ("My Awesome Skill! (v2) @#$", "my-awesome-skill-v2"),
        ("---Hello---World---", "hello-world"),
        ("  spaced\tout  name ", "spaced-out-name"),
        ("Ünïcödé Skill", "ncd-skill"),
        ("@#$", ""),
        ("", ""),
    ])
    def test_sanitize(self, name, expected):
        assert sanitize_name(name) == expected

    def test_no_trailing_hyphen_after_truncation(self):
        result = sanitize_name("a" * 63 + " b")

        assert result == "a" * 63
        assert not result.endswith("-")

    @pytest.mark.parametrize("name", [
        "My Awesome Skill! (v2) @#$",
        "a" * 63 + " b",
        "x-" * 40,
        "  Mixed -- Separators __ here ",
        "already-clean-name",
    ])
    def test_idempotent(self, name):
        once = sanitize_name(name)

        assert sanitize_name(once) == once


class TestExtractUserTemplate:
    """Tests for the user template heuristic."""

    def test_input_line(self):
        assert extract_user_template("Input: a url\n\nDo things.") == "a url"

    def test_case_insensitive(self):
        assert extract_user_template("INPUT: a url\n\nDone") == "a url"

    def test_user_provides_until_heading(self):
        assert extract_user_template("User provides: a file\n# Steps\n1. Go") == "a file"

    def test_expects_and_takes(self):
        assert extract_user_template("Expects: JSON\n\n") == "JSON"
        assert extract_user_template("takes: two numbers\nThen add them") == "two numbers"

    def test_lowercase_line_continues_capture(self):
        text = "Input: first line\ncontinued here\n\nNext"

        assert extract_user_template(text) == "first line\ncontinued here"

    def test_blockquote(self):
        text = "Summarize text.\n\n> input: a paragraph of text\n\nMore."

        assert extract_user_template(text) == "a paragraph of text"

    def test_first_pattern_wins(self):
        text = "> user: from quote\n\nTakes: a number\n\n"

        assert extract_user_template(text) == "a number"

    def test_must_start_a_line(self):
        assert extract_user_template("The tool expects: JSON\n\nMore") == DEFAULT_USER_TEMPLATE

    def test_unterminated_capture_falls_back(self):
        assert extract_user_template("Input: at the very end") == DEFAULT_USER_TEMPLATE

    def test_fallback(self):
        assert extract_user_template("Just do the task.") == "{{input}}"
