"""YAML front-matter parsing.

A content file opens with a ``---`` line, carries a YAML mapping, and
closes it with a second ``---`` line. Everything after is the Markdown
body, which this package never renders.
"""

from __future__ import annotations

from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.constructor import RoundTripConstructor

_FRONTMATTER_DELIMITER = "---"


class _TextTimestampConstructor(RoundTripConstructor):
    """Round-trip constructor that leaves YAML timestamps as their source text."""

    def construct_timestamp_text(self, node: Any) -> str:
        return str(self.construct_scalar(node))


_TextTimestampConstructor.add_constructor(
    "tag:yaml.org,2002:timestamp",
    _TextTimestampConstructor.construct_timestamp_text,
)


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML parser.

    ruamel.yaml's YAML object is stateful, so every parse gets its own.
    Unquoted dates such as ``createdAt: 2024-01-03T05:00:00Z`` load as
    the exact text written.
    """
    y = YAML()
    y.Constructor = _TextTimestampConstructor
    y.preserve_quotes = True
    return y


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Parse YAML front-matter and body from markdown content.

    Handles both ``\\n`` and ``\\r\\n`` line endings.

    Returns:
        A ``(frontmatter, body)`` tuple. If no delimited block is found,
        returns ``({}, content)``.

    Raises:
        ruamel.yaml.YAMLError: The delimited block is not valid YAML.
        ValueError: The block is valid YAML but not a mapping.
    """
    normalized = content.replace("\r\n", "\n")
    if normalized.startswith("\ufeff"):
        normalized = normalized[1:]
    lines = normalized.split("\n")
    if not lines or lines[0].strip() != _FRONTMATTER_DELIMITER:
        return {}, content

    end_idx: int | None = None
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == _FRONTMATTER_DELIMITER:
            end_idx = i
            break

    if end_idx is None:
        return {}, content

    yaml_block = "\n".join(lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :])
    if body.startswith("\n"):
        body = body[1:]

    data = _new_yaml().load(yaml_block)
    if data is None:
        return {}, body
    if not isinstance(data, dict):
        msg = f"front-matter must be a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return dict(data), body
