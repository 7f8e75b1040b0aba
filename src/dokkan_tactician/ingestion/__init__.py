"""Ingestion of untrusted model output.

Submodules:
    json_extraction: Isolate the JSON array inside free-form responses
    sanitizer: Tolerant decoding of raw objects into Character records
"""

from __future__ import annotations

from dokkan_tactician.ingestion.json_extraction import (
    EMPTY_ARRAY,
    extract_json_array,
    parse_json_array,
    strip_trailing_commas,
)
from dokkan_tactician.ingestion.sanitizer import (
    DEFAULT_FIELD_PRECEDENCE,
    FIELD_PRECEDENCE_V1,
    CharacterSanitizer,
    FieldPrecedenceTable,
    FieldRule,
    parse_positive_int,
    sanitize_character,
)


__all__ = [
    # JSON extraction
    "EMPTY_ARRAY",
    "extract_json_array",
    "parse_json_array",
    "strip_trailing_commas",
    # Sanitizer
    "CharacterSanitizer",
    "FieldPrecedenceTable",
    "FieldRule",
    "FIELD_PRECEDENCE_V1",
    "DEFAULT_FIELD_PRECEDENCE",
    "parse_positive_int",
    "sanitize_character",
]
