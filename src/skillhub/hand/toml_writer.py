"""
Render a HandConfig as HAND.toml text.
"""

from typing import List

from skillhub.hand.translator import HandConfig


MULTILINE_THRESHOLD = 200


def toml_string(value: str) -> str:
    """Quote a value as a TOML basic string."""
    # Backslashes first so the escapes added below are not doubled
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def toml_multiline_string(value: str) -> str:
    """Long or multi-line values become a ''' literal block."""
    if len(value) > MULTILINE_THRESHOLD or "\n" in value:
        escaped = value.replace("'''", "\\'''")
        return f"'''\n{escaped}\n'''"
    return toml_string(value)


def toml_array(values: List[str]) -> str:
    return "[" + ", ".join(toml_string(v) for v in values) + "]"


def serialize_hand_toml(config: HandConfig) -> str:
    """
    Serialize a HandConfig to TOML.

    Tables are emitted in a fixed order (hand, instructions, model, limits,
    metadata) separated by a blank line, and the text ends with exactly one
    newline. The config is rendered as-is, without validation.
    """
    lines: List[str] = []

    lines.append("[hand]")
    lines.append(f"name = {toml_string(config.hand.name)}")
    lines.append(f"description = {toml_string(config.hand.description)}")
    lines.append(f"version = {toml_string(config.hand.version)}")
    lines.append("")

    lines.append("[instructions]")
    lines.append(f"system_prompt = {toml_multiline_string(config.instructions.system_prompt)}")
    lines.append(f"user_template = {toml_string(config.instructions.user_template)}")
    lines.append("")

    lines.append("[model]")
    lines.append(f"provider = {toml_string(config.model.provider)}")
    lines.append(f"model_id = {toml_string(config.model.model_id)}")
    lines.append(f"max_tokens = {config.model.max_tokens}")
    lines.append(f"temperature = {config.model.temperature}")
    lines.append("")

    lines.append("[limits]")
    lines.append(f"timeout_seconds = {config.limits.timeout_seconds}")
    lines.append(f"max_retries = {config.limits.max_retries}")
    lines.append("")

    lines.append("[metadata]")
    lines.append(f"source = {toml_string(config.metadata.source)}")
    lines.append(f"source_url = {toml_string(config.metadata.source_url)}")
    lines.append(f"platforms = {toml_array(config.metadata.platforms)}")
    lines.append(f"category = {toml_string(config.metadata.category)}")

    return "\n".join(lines) + "\n"
