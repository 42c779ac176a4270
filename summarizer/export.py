"""
export.py - Summary download rendering

Renders summary text as summary.txt or as a paginated summary.pdf. Both
renderers are pure functions of the summary text.
"""

import logging
from functools import lru_cache
from typing import List

import pymupdf

from .models import ExportedFile

_LOG = logging.getLogger("export")

TEXT_FILENAME = "summary.txt"
PDF_FILENAME = "summary.pdf"

BOLD_PREFIXES = (
    "**Extractive Summary:**",
    "**Abstractive Summary:**",
    "**Main Points:**",
    "**•",
)

MM = 72 / 25.4
MARGIN = 15 * MM
LINE_HEIGHT = 7 * MM
BLANK_LINE_HEIGHT = 5 * MM
FONT_SIZE = 11
# Noto Sans from pymupdf-fonts; base-14 Helvetica has no glyphs beyond Latin-1
REGULAR_FONT = "notos"
BOLD_FONT = "notosbo"
TEXT_COLOR = (40 / 255, 40 / 255, 40 / 255)


def is_bold_line(line: str) -> bool:
    """Whether *line* is a section heading or a main-point bullet."""
    return line.strip().startswith(BOLD_PREFIXES)


@lru_cache(maxsize=None)
def load_font(fontname: str) -> pymupdf.Font:
    """Load a bundled font once per process."""
    return pymupdf.Font(fontname)


def split_text_to_size(text: str, font: pymupdf.Font, fontsize: float, max_width: float) -> List[str]:
    """Greedy word wrap measured with the metrics of *font*."""

    def width(s: str) -> float:
        return font.text_length(s, fontsize=fontsize)

    lines: List[str] = []
    current = ""
    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if width(candidate) <= max_width:
            current = candidate
            continue
        if current:
            lines.append(current)
        # A single word wider than the line is broken by characters
        while width(word) > max_width and len(word) > 1:
            cut = len(word) - 1
            while cut > 1 and width(word[:cut]) > max_width:
                cut -= 1
            lines.append(word[:cut])
            word = word[cut:]
        current = word
    lines.append(current)
    return lines


def export_as_text(summary: str) -> ExportedFile:
    """Render the summary as a UTF-8 text file."""
    if not summary:
        raise ValueError("Nothing to export: the summary is empty")
    return ExportedFile(
        filename=TEXT_FILENAME,
        mimetype="text/plain; charset=utf-8",
        content=summary.encode("utf-8"),
    )


def export_as_document(summary: str) -> ExportedFile:
    """Render the summary as an A4 PDF document."""
    if not summary:
        raise ValueError("Nothing to export: the summary is empty")

    page_width, page_height = pymupdf.paper_size("a4")
    max_width = page_width - MARGIN * 2
    doc = pymupdf.open()
    try:
        cursor_y = MARGIN

        def next_page():
            new_page = doc.new_page(width=page_width, height=page_height)
            for fontname in (REGULAR_FONT, BOLD_FONT):
                new_page.insert_font(fontname=fontname, fontbuffer=load_font(fontname).buffer)
            return new_page

        page = next_page()
        for line in summary.split("\n"):
            if not line.strip():
                cursor_y += BLANK_LINE_HEIGHT
                continue

            bold = is_bold_line(line)
            text = line.replace("**", "") if bold else line
            fontname = BOLD_FONT if bold else REGULAR_FONT
            pieces = split_text_to_size(text, load_font(fontname), FONT_SIZE, max_width)

            # Each wrapped piece gets its own page-break check
            for piece in pieces:
                if cursor_y + LINE_HEIGHT > page_height - MARGIN:
                    page = next_page()
                    cursor_y = MARGIN
                page.insert_text(
                    (MARGIN, cursor_y + FONT_SIZE),
                    piece,
                    fontname=fontname,
                    fontsize=FONT_SIZE,
                    color=TEXT_COLOR,
                )
                cursor_y += LINE_HEIGHT

        page_count = doc.page_count
        content = doc.tobytes()
    finally:
        doc.close()

    _LOG.debug("Rendered summary PDF: %d page(s), %d bytes", page_count, len(content))
    return ExportedFile(filename=PDF_FILENAME, mimetype="application/pdf", content=content)
