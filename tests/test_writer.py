"""Tests for JSON output of the founders mapping."""

import json

from founder_finder.output.writer import render_founders_json, write_founders_json


def test_render_is_pretty_printed_and_keeps_unicode():
    text = render_founders_json({"Société Générale": ["Jean-Luc Picard"], "Acme": []})

    assert text == (
        "{\n"
        '  "Société Générale": [\n'
        '    "Jean-Luc Picard"\n'
        "  ],\n"
        '  "Acme": []\n'
        "}\n"
    )


def test_write_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "dir" / "founders.json"

    written = write_founders_json({"B": ["Jane Doe"], "A": []}, path, indent=4)

    assert written == path
    data = json.loads(path.read_text(encoding="utf-8"))
    assert list(data) == ["B", "A"]
    assert data["B"] == ["Jane Doe"]
