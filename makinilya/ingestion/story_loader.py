"""Draft directory reader: builds a story tree from scene files on disk."""

import logging
import re
from pathlib import Path

import chardet

from makinilya.models.story import Content, Part

logger = logging.getLogger(__name__)

# Extension of Makinilya text (scene) files
MAKINILYA_TEXT_EXTENSION = ".mt"
MIN_ENCODING_CONFIDENCE = 0.7

_DIGITS_RE = re.compile(r"(\d+)")


def natural_sort_key(name: str) -> tuple[list[int | str], str]:
    """Sort key placing "Scene 2" before "Scene 10"."""
    parts = _DIGITS_RE.split(name)
    return [int(p) if p.isdigit() else p.lower() for p in parts], name


class StoryLoader:
    """Reads a draft directory into a :class:`Part` tree.

    Directories become parts titled by directory name; scene files become
    content nodes titled by file stem. Entries are visited in natural sort
    order so the manuscript order is stable across platforms.

    Args:
        extension: Suffix of the files read as scenes.
    """

    def __init__(self, extension: str = MAKINILYA_TEXT_EXTENSION) -> None:
        self._extension = extension.lower()

    def load(self, directory: str | Path) -> Part:
        """Load a draft directory.

        Args:
            directory: Root of the draft.

        Returns:
            The root part, titled after the directory.

        Raises:
            FileNotFoundError: If directory does not exist.
            NotADirectoryError: If directory is a file.
        """
        path = Path(directory)
        if not path.exists():
            raise FileNotFoundError(f"Draft directory not found: {path}")
        if not path.is_dir():
            raise NotADirectoryError(f"Draft path is not a directory: {path}")

        story = self._load_part(path)
        logger.info("Loaded draft from %s", path)
        return story

    def _load_part(self, directory: Path) -> Part:
        part = Part(title=directory.resolve().name)
        entries = sorted(directory.iterdir(), key=lambda p: natural_sort_key(p.name))

        for entry in entries:
            if entry.name.startswith("."):
                continue
            if entry.is_dir():
                part.push(self._load_part(entry))
            elif entry.suffix.lower() == self._extension:
                part.push(Content(title=entry.stem, source=self._read_text(entry)))
            else:
                logger.warning("Skipping %s: not a %s scene file", entry, self._extension)

        return part

    def _read_text(self, scene_path: Path) -> str:
        """Decode a scene file, falling back to chardet when it is not UTF-8.

        Undecodable bytes are replaced rather than failing the whole draft.
        """
        raw_bytes = scene_path.read_bytes()
        try:
            return raw_bytes.decode("utf-8")
        except UnicodeDecodeError:
            pass

        detected = chardet.detect(raw_bytes)
        encoding = detected.get("encoding") or "utf-8"
        confidence = detected.get("confidence") or 0
        if confidence < MIN_ENCODING_CONFIDENCE:
            logger.warning(
                "Scene %s is not UTF-8; guessed %s with %.0f%% confidence",
                scene_path,
                encoding,
                confidence * 100,
            )

        try:
            return raw_bytes.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            logger.error(
                "Scene %s could not be decoded as %s; replacing invalid bytes",
                scene_path,
                encoding,
            )
            return raw_bytes.decode("utf-8", errors="replace")


def load_story(directory: str | Path) -> Part:
    """Load a draft directory with the default scene extension."""
    return StoryLoader().load(directory)
