"""Shared building blocks for the profile schemas.

Externally sourced data (LLM output, client payloads) is loose: fields may be
missing, ``null``, or carry placeholder strings. The annotated types below
normalize that at the model boundary so consumers never null-check.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

# Placeholders the upstream extractor uses to mean "field absent"
SENTINEL_VALUES: frozenset[str] = frozenset({"not extracted", "not found"})


def is_sentinel(value: Any) -> bool:
    return isinstance(value, str) and value.strip().lower() in SENTINEL_VALUES


def unique(items) -> list[str]:
    """Deduplicate while keeping first-occurrence order."""
    seen: set[str] = set()
    result: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        return value  # let pydantic reject it
    value = value.strip()
    if not value or is_sentinel(value):
        return None
    return value


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _text_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return value
    items = []
    for item in value:
        item = _optional_text(item)
        if isinstance(item, str):
            items.append(item)
    return items


def _unique_text_list(value: Any) -> list[str]:
    items = _text_list(value)
    return unique(items) if isinstance(items, list) else items


def empty_object(value: Any) -> Any:
    """``null`` nested objects fall back to their defaults."""
    return {} if value is None else value


OptionalText = Annotated[str | None, BeforeValidator(_optional_text)]
Text = Annotated[str, BeforeValidator(_text)]
TextList = Annotated[list[str], BeforeValidator(_text_list)]
UniqueTextList = Annotated[list[str], BeforeValidator(_unique_text_list)]


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
