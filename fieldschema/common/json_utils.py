"""JSON parsing utilities for fieldschema.

Provides consistent JSON decoding with error handling for LLM responses.
"""

from __future__ import annotations

import json
import re
from typing import Any

from .exceptions import ValidationError

__all__ = ["extract_json_from_response", "load_json_document"]


def extract_json_from_response(content: str) -> str:
    """
    Extract JSON from LLM response, handling common wrapping patterns.

    Handles:
    - Markdown code blocks (```json ... ``` or ``` ... ```)
    - Leading/trailing whitespace
    - Prose around a single JSON object
    - Raw JSON (passed through as-is)

    Args:
        content: Raw LLM response that may contain JSON

    Returns:
        Extracted JSON string ready for parsing
    """
    content = content.strip()

    # Handle markdown code blocks: ```json ... ``` or ``` ... ```
    code_block_pattern = r"```(?:json)?\s*([\s\S]*?)```"
    match = re.search(code_block_pattern, content)
    if match:
        return match.group(1).strip()

    if content.startswith(("{", "[")):
        return content

    # Try to find JSON object within the response
    json_obj_pattern = r"(\{[\s\S]*\})"
    match = re.search(json_obj_pattern, content)
    if match:
        return match.group(1)

    return content


def load_json_document(content: str) -> Any:
    """
    Decode a JSON document returned by a model.

    Args:
        content: Raw response text, possibly wrapped in Markdown

    Returns:
        Decoded JSON value

    Raises:
        ValidationError: If the text is empty or not valid JSON

    Examples:
        >>> load_json_document('```json\\n{"name": "Ada"}\\n```')
        {'name': 'Ada'}
    """
    if not content or not content.strip():
        raise ValidationError("LLM returned empty content")

    extracted = extract_json_from_response(content)
    if not extracted:
        raise ValidationError("No JSON found in LLM response")

    try:
        return json.loads(extracted)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"JSON parsing error: {e.msg}",
            context={"line": e.lineno, "column": e.colno},
        ) from e
