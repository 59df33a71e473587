"""Context file loader supporting TOML and YAML."""

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from makinilya.models.context import Context

logger = logging.getLogger(__name__)

# Supported file extensions mapped to format identifiers
SUPPORTED_FORMATS: dict[str, str] = {
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
}


class ContextError(ValueError):
    """Raised when a context file cannot be turned into a Context."""


def parse_context(source: str, fmt: str = "toml") -> Context:
    """Parse context variables from an in-memory document.

    Args:
        source: TOML or YAML text.
        fmt: "toml" or "yaml".

    Returns:
        A validated Context.

    Raises:
        ContextError: If the text is malformed, is not a table at the top
            level, or holds an unsupported value (array, date, null).
    """
    data: Any
    if fmt == "toml":
        try:
            data = tomllib.loads(source)
        except tomllib.TOMLDecodeError as exc:
            raise ContextError(f"Context is not valid TOML: {exc}") from exc
    elif fmt == "yaml":
        try:
            data = yaml.safe_load(source)
        except yaml.YAMLError as exc:
            raise ContextError(f"Context is not valid YAML: {exc}") from exc
        if data is None:
            data = {}
    else:
        raise ValueError(f"Unsupported context format: '{fmt}'")

    if not isinstance(data, dict):
        raise ContextError("Context must be a table of variables at the top level")

    try:
        return Context(variables=data)
    except ValidationError as exc:
        message = exc.errors()[0]["msg"].removeprefix("Value error, ")
        raise ContextError(message) from exc


def load_context(path: str | Path) -> Context:
    """Read a context file.

    Args:
        path: Path to a ``.toml``, ``.yaml`` or ``.yml`` file.

    Returns:
        A validated Context.

    Raises:
        FileNotFoundError: If path does not exist.
        ContextError: If the file format or content is not supported.
    """
    context_file = Path(path)
    if not context_file.exists():
        raise FileNotFoundError(f"Context file not found: {context_file}")

    ext = context_file.suffix.lower()
    if ext not in SUPPORTED_FORMATS:
        raise ContextError(
            f"Unsupported context format: '{ext}'. "
            f"Supported: {', '.join(SUPPORTED_FORMATS.keys())}"
        )

    context = parse_context(context_file.read_text(encoding="utf-8"), SUPPORTED_FORMATS[ext])
    logger.info("Loaded %d context variables from %s", len(context.variables), context_file)
    return context
