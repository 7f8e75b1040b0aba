"""JSON array extraction from free-form model output.

Grounded responses arrive as prose that may wrap the payload in a markdown
fence and sprinkle citation markers such as ``[1]`` around it. This module
isolates the character array without ever raising: when nothing usable is
found the result is the literal ``[]``.

Example:
    >>> extract_json_array('Sources [1]. ```json\\n[{"name": "Goku"},]\\n```')
    '[{"name": "Goku"}]'
"""

from __future__ import annotations

import json
import re
from typing import Any

from dokkan_tactician.core.exceptions import AIResponseError
from dokkan_tactician.core.logging import get_logger


logger = get_logger(__name__)

EMPTY_ARRAY = "[]"

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)

# An array whose first element is an object; "[1]" citations never match.
_OBJECT_ARRAY_START = re.compile(r"\[\s*\{")

def strip_trailing_commas(text: str) -> str:
    """Remove commas that directly precede a closing bracket or brace.

    Quoted spans are copied untouched, so a string value such as
    ``"a, ]"`` survives.
    """
    out: list[str] = []
    in_string = False
    escape_next = False
    i = 0
    length = len(text)

    while i < length:
        char = text[i]
        if in_string:
            out.append(char)
            if escape_next:
                escape_next = False
            elif char == "\\":
                escape_next = True
            elif char == '"':
                in_string = False
            i += 1
            continue

        if char == '"':
            in_string = True
        elif char == ",":
            j = i + 1
            while j < length and text[j].isspace():
                j += 1
            if j < length and text[j] in "]}":
                # Drop the comma and the whitespace before the closer.
                i = j
                continue
        out.append(char)
        i += 1

    return "".join(out)


def _unfence(text: str) -> str:
    match = _FENCED_BLOCK.search(text)
    if match:
        return match.group(1)
    return text


def _slice_candidate(text: str) -> str | None:
    anchor = _OBJECT_ARRAY_START.search(text)
    end = text.rfind("]")
    if anchor and end > anchor.start():
        return text[anchor.start():end + 1]

    # No object-array anchor: accept the outermost brackets only if they
    # appear to hold objects.
    start = text.find("[")
    if start != -1 and end > start:
        interior = text[start + 1:end]
        if "{" in interior and "}" in interior:
            return text[start:end + 1]

    obj_start = text.find("{")
    obj_end = text.rfind("}")
    if obj_start != -1 and obj_end > obj_start:
        return f"[{text[obj_start:obj_end + 1]}]"

    return None


def extract_json_array(text: str | None) -> str:
    """Isolate the JSON array substring inside an LLM response.

    Attempts, first success wins:

    1. Narrow the search to the first fenced code block, if any.
    2. Anchor on the first ``[`` followed (ignoring whitespace) by ``{``
       and slice to the last ``]``.
    3. Otherwise take the outermost ``[...]`` when its interior holds
       braces, or wrap a single bare ``{...}`` object in brackets.
    4. Otherwise return ``[]``.

    Trailing commas before ``]`` or ``}`` are removed from the result.

    Args:
        text: Raw response text.

    Returns:
        A string that is, on a best-effort basis, a JSON array.
    """
    if not text:
        return EMPTY_ARRAY

    candidate = _slice_candidate(_unfence(text))
    if candidate is None:
        logger.debug("No JSON array found in response", response_length=len(text))
        return EMPTY_ARRAY

    return strip_trailing_commas(candidate)


def parse_json_array(text: str | None) -> list[Any]:
    """Extract and decode the JSON array inside ``text``.

    Raises:
        AIResponseError: If the extracted text is not valid JSON or does
            not decode to a list.
    """
    extracted = extract_json_array(text)
    try:
        data = json.loads(extracted)
    except json.JSONDecodeError as exc:
        raise AIResponseError(
            f"Failed to parse JSON array from model response: {exc}",
            details={"response_preview": extracted[:200]},
        ) from exc

    if not isinstance(data, list):
        raise AIResponseError(
            "Model response did not contain a JSON array",
            details={"decoded_type": type(data).__name__},
        )
    return data


__all__ = [
    "EMPTY_ARRAY",
    "extract_json_array",
    "parse_json_array",
    "strip_trailing_commas",
]
