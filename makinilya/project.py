"""Project-level operations: build, check and scaffold a manuscript project."""

import logging
from pathlib import Path

from pydantic import BaseModel

from makinilya.config import AppConfig, load_config
from makinilya.ingestion.context_loader import load_context
from makinilya.ingestion.story_loader import StoryLoader
from makinilya.interpolation.interpolator import StoryInterpolator
from makinilya.manuscript.builder import ManuscriptBuilder, ManuscriptLayout
from makinilya.models.story import Part

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"

EXAMPLE_SCENE = "Hi, my name is {{ names.mc }}.\n"

EXAMPLE_CONTEXT = """[names]
mc = "Core"
"""

EXAMPLE_CONFIG = """project:
  base_directory: "."
  draft_directory: "draft"
  context_path: "Context.toml"
  output_path: "out/manuscript.docx"

story:
  title: "Untitled"
  pen_name: "Unknown Author"

author:
  name: "Unknown Author"
  email_address: "author@example.com"
"""


class ProjectPaths(BaseModel):
    """Absolute locations of a project's inputs and output."""

    draft_directory: Path
    context_path: Path
    output_path: Path

    @classmethod
    def resolve(cls, root: str | Path, config: AppConfig) -> "ProjectPaths":
        base = Path(root) / config.project.base_directory
        return cls(
            draft_directory=base / config.project.draft_directory,
            context_path=base / config.project.context_path,
            output_path=base / config.project.output_path,
        )


def _load_draft(paths: ProjectPaths) -> Part:
    paths.draft_directory.mkdir(parents=True, exist_ok=True)
    return StoryLoader().load(paths.draft_directory)


def build_project(path: str | Path = ".") -> Path:
    """Interpolate a project's draft and write its manuscript.

    Args:
        path: Project root holding ``config.yaml``.

    Returns:
        Path of the written manuscript.

    Raises:
        TextParseError: If a scene holds a malformed placeholder.
        ContextError: If the context file is invalid.
        FileNotFoundError: If the context file is missing.
    """
    config = load_config(Path(path) / CONFIG_FILENAME)
    paths = ProjectPaths.resolve(path, config)

    story = _load_draft(paths)
    context = load_context(paths.context_path)

    interpolated = StoryInterpolator().interpolate(story, context)
    builder = ManuscriptBuilder(ManuscriptLayout.from_config(config))
    return builder.save(interpolated, paths.output_path)


def check_project(path: str | Path = ".") -> list[str]:
    """List every placeholder referenced by a project's draft.

    The context is not read; resolving the listed paths is left to the user.

    Raises:
        TextParseError: If a scene holds a malformed placeholder.
    """
    config = load_config(Path(path) / CONFIG_FILENAME)
    paths = ProjectPaths.resolve(path, config)

    identifiers = StoryInterpolator().check(_load_draft(paths))
    logger.info("Found %d placeholder references", len(identifiers))
    return identifiers


def new_project(path: str | Path) -> Path:
    """Scaffold a project with one example chapter, context and config.

    Raises:
        FileExistsError: If any scaffold file already exists.
    """
    root = Path(path)
    files = {
        root / "draft" / "Chapter 1" / "Scene 1.mt": EXAMPLE_SCENE,
        root / "Context.toml": EXAMPLE_CONTEXT,
        root / CONFIG_FILENAME: EXAMPLE_CONFIG,
    }

    existing = [str(file) for file in files if file.exists()]
    if existing:
        raise FileExistsError(f"Refusing to overwrite: {', '.join(existing)}")

    for file, content in files.items():
        file.parent.mkdir(parents=True, exist_ok=True)
        file.write_text(content, encoding="utf-8")

    logger.info("Created new project at %s", root)
    return root
