"""Narrative context: the variables served to scenes through placeholders.

Values are a closed set mirroring the scalar and table types of a context
file: strings, numbers, booleans and nested objects. Arrays, dates and any
other value are rejected when the context is built, never coerced.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# str | float | bool | dict[str, Data]
Data = str | float | bool | dict[str, Any]


def _normalize(value: Any, key_path: str) -> Data:
    """Validate one context value, turning integers into floats."""
    if isinstance(value, bool) or isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError as exc:
            raise ValueError(f"Number at '{key_path}' is out of range") from exc
    if isinstance(value, Mapping):
        normalized: dict[str, Data] = {}
        for key, nested in value.items():
            if not isinstance(key, str):
                raise ValueError(f"Context key {key!r} under '{key_path}' is not a string")
            normalized[key] = _normalize(nested, f"{key_path}.{key}")
        return normalized
    raise ValueError(
        f"Unsupported context value at '{key_path}': {type(value).__name__} "
        "(only strings, numbers, booleans and tables are allowed)"
    )


class Context(BaseModel):
    """Read-only variable store used to resolve placeholders."""

    model_config = ConfigDict(frozen=True)

    variables: dict[str, Any] = Field(default_factory=dict)

    @field_validator("variables", mode="before")
    @classmethod
    def _validate_variables(cls, value: Any) -> dict[str, Data]:
        if not isinstance(value, Mapping):
            raise ValueError("Context variables must be a mapping")
        normalized: dict[str, Data] = {}
        for key, nested in value.items():
            if not isinstance(key, str):
                raise ValueError(f"Context key {key!r} is not a string")
            normalized[key] = _normalize(nested, key)
        return normalized

    def get(self, path: Sequence[str]) -> Data | None:
        """Look up a dotted path component by component.

        Args:
            path: One or more identifier components, e.g. ``["names", "mc"]``.
                A dotted string is split on ``.``.

        Returns:
            The value at the path, or None when a key is absent or a
            non-object value is reached before the path ends.

        Raises:
            ValueError: If ``path`` is empty.
        """
        if isinstance(path, str):
            path = path.split(".")
        if not path:
            raise ValueError("Context path must contain at least one component")

        current: Data = self.variables
        for component in path:
            if not isinstance(current, dict) or component not in current:
                return None
            current = current[component]
        return current


def stringify(value: Data) -> str:
    """Render a context value as interpolated text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        number = float(value)
        if math.isfinite(number) and number.is_integer():
            return str(int(number))
        return repr(number)
    if isinstance(value, str):
        return value
    # Objects are not meant to be interpolated as leaf text.
    items = ", ".join(f"{key}: {stringify(value[key])}" for key in sorted(value))
    return "{" + items + "}"
