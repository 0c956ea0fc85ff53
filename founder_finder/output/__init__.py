"""Output serialization helpers."""

from .writer import render_founders_json, write_founders_json

__all__ = ["render_founders_json", "write_founders_json"]
