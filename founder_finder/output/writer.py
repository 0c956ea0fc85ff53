"""JSON output for the company to founders mapping."""

from __future__ import annotations

import json
from pathlib import Path


def render_founders_json(founders: dict[str, list[str]], indent: int = 2) -> str:
    """Render the mapping as pretty-printed JSON, keeping insertion order."""
    return json.dumps(founders, indent=indent, ensure_ascii=False) + "\n"


def write_founders_json(
    founders: dict[str, list[str]],
    output_path: Path,
    indent: int = 2,
) -> Path:
    """Write the company to founders mapping to a JSON file.

    Parent directories are created as needed.

    Args:
        founders: Company name to founder names, in input order
        output_path: Destination file
        indent: JSON indentation level

    Returns:
        The path that was written

    Raises:
        OSError: If the file cannot be written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_founders_json(founders, indent), encoding="utf-8")
    return output_path
