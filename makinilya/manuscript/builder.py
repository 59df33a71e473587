"""Standard manuscript format writer.

Lays an interpolated story out as a ``.docx``: a title page carrying the
author's and agent's contact details and the word count, then one section
per part holding scenes, double spaced in 12 pt Times New Roman.
"""

import logging
from pathlib import Path

from docx import Document
from docx.document import Document as DocxDocument
from docx.enum.table import WD_CELL_VERTICAL_ALIGNMENT, WD_ROW_HEIGHT_RULE
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt
from docx.table import _Cell
from pydantic import BaseModel

from makinilya.config import AppConfig, ContactInformation
from makinilya.models.story import Content, Part, Story, word_count

logger = logging.getLogger(__name__)

FONT_NAME = "Times New Roman"
FONT_SIZE_PT = 12
PAGE_WIDTH_IN = 8.5
PAGE_HEIGHT_IN = 11.0
MARGIN_IN = 1.0
FIRST_LINE_INDENT_IN = 0.5
SCENE_BREAK = "#"


class ManuscriptLayout(BaseModel):
    """Title page information."""

    title: str = "Untitled"
    pen_name: str = "Unknown Author"
    author: ContactInformation | None = None
    agent: ContactInformation | None = None

    @classmethod
    def from_config(cls, config: AppConfig) -> "ManuscriptLayout":
        return cls(
            title=config.story.title,
            pen_name=config.story.pen_name,
            author=config.author,
            agent=config.agent,
        )


class ManuscriptBuilder:
    """Builds a manuscript document from an interpolated story.

    Args:
        layout: Title page details. Defaults to an untitled manuscript.
    """

    def __init__(self, layout: ManuscriptLayout | None = None) -> None:
        self.layout = layout or ManuscriptLayout()

    def build(self, story: Story) -> DocxDocument:
        """Lay out the title page followed by every part of ``story``."""
        doc = self._new_document()
        self._add_title_page(doc, word_count(story))
        if isinstance(story, Part):
            self._add_part(doc, story)
        else:
            self._add_scenes(doc, story.title, [story])
        return doc

    def save(self, story: Story, output_path: str | Path) -> Path:
        """Build the manuscript and write it to ``output_path``.

        Parent directories are created as needed.
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.build(story).save(str(path))
        logger.info("Manuscript written to %s", path)
        return path

    def _new_document(self) -> DocxDocument:
        doc = Document()

        section = doc.sections[0]
        section.page_width = Inches(PAGE_WIDTH_IN)
        section.page_height = Inches(PAGE_HEIGHT_IN)
        section.top_margin = Inches(MARGIN_IN)
        section.bottom_margin = Inches(MARGIN_IN)
        section.left_margin = Inches(MARGIN_IN)
        section.right_margin = Inches(MARGIN_IN)

        normal = doc.styles["Normal"]
        normal.font.name = FONT_NAME
        normal.font.size = Pt(FONT_SIZE_PT)

        return doc

    def _add_title_page(self, doc: DocxDocument, words: int) -> None:
        """Add the three-row title page table: contact, title block, agent."""
        table = doc.add_table(rows=3, cols=1)
        row_height = Inches((PAGE_HEIGHT_IN - 2 * MARGIN_IN) / 3)
        for row in table.rows:
            row.height = row_height
            row.height_rule = WD_ROW_HEIGHT_RULE.EXACTLY

        author_lines = self.layout.author.lines() if self.layout.author else []
        agent_lines = self.layout.agent.lines() if self.layout.agent else []
        middle_lines = [self.layout.title, self.layout.pen_name, f"{words:,} words"]

        top, middle, bottom = (row.cells[0] for row in table.rows)
        self._fill_cell(top, author_lines, WD_ALIGN_PARAGRAPH.LEFT, 1.0)
        top.vertical_alignment = WD_CELL_VERTICAL_ALIGNMENT.TOP
        self._fill_cell(middle, middle_lines, WD_ALIGN_PARAGRAPH.CENTER, 2.0)
        middle.vertical_alignment = WD_CELL_VERTICAL_ALIGNMENT.CENTER
        self._fill_cell(bottom, agent_lines, WD_ALIGN_PARAGRAPH.RIGHT, 1.0)
        bottom.vertical_alignment = WD_CELL_VERTICAL_ALIGNMENT.BOTTOM

    def _fill_cell(
        self, cell: _Cell, lines: list[str], alignment: WD_ALIGN_PARAGRAPH, spacing: float
    ) -> None:
        for index, line in enumerate(lines):
            paragraph = cell.paragraphs[0] if index == 0 else cell.add_paragraph()
            paragraph.add_run(line)
            paragraph.alignment = alignment
            paragraph.paragraph_format.line_spacing = spacing
            paragraph.paragraph_format.space_after = Pt(0)

    def _add_part(self, doc: DocxDocument, part: Part) -> None:
        """Add a part's own scenes, then its nested parts, in order."""
        contents = part.contents()
        if contents:
            self._add_scenes(doc, part.title, contents)
        for child in part.parts():
            self._add_part(doc, child)

    def _add_scenes(self, doc: DocxDocument, heading: str, contents: list[Content]) -> None:
        doc.add_page_break()

        title = doc.add_paragraph(heading)
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER
        title.paragraph_format.space_before = Inches(3)
        title.paragraph_format.space_after = Pt(24)
        title.paragraph_format.line_spacing = 2.0

        for index, content in enumerate(contents):
            if index > 0:
                separator = doc.add_paragraph(SCENE_BREAK)
                separator.alignment = WD_ALIGN_PARAGRAPH.CENTER
                separator.paragraph_format.line_spacing = 2.0

            for line in content.source.rstrip().splitlines():
                paragraph = doc.add_paragraph(line)
                paragraph.paragraph_format.first_line_indent = Inches(FIRST_LINE_INDENT_IN)
                paragraph.paragraph_format.line_spacing = 2.0
                paragraph.paragraph_format.space_after = Pt(0)
