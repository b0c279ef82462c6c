"""
Preview renderer for the markdown the composer produces.

This is not a markdown parser. It understands exactly the line shapes the
composer emits:

• ``# ``, ``## ``, ``### `` headings
• ``- `` list items with inline ``[text](url)`` links
• lines of ``![alt](url)`` badge images (any other text on them is dropped)
• plain paragraphs and blank lines

`classify` turns the text into blocks; `render` pairs each block with the
colours of the selected theme. Both are pure.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Tuple, Union

from readme_studio.themes import Palette, get_palette

PLACEHOLDER_TEXT = "Start filling in your details to see the preview..."

_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")

_HEADINGS = (("# ", 1), ("## ", 2), ("### ", 3))


# ───────────────────────────────────────── blocks ──
@dataclass(frozen=True)
class TextSegment:
    text: str


@dataclass(frozen=True)
class LinkSegment:
    text: str
    url: str


Segment = Union[TextSegment, LinkSegment]


@dataclass(frozen=True)
class Image:
    alt: str
    url: str


@dataclass(frozen=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True)
class ListItem:
    segments: Tuple[Segment, ...]


@dataclass(frozen=True)
class ImageRow:
    images: Tuple[Image, ...]


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class Placeholder:
    text: str = PLACEHOLDER_TEXT


Block = Union[Heading, ListItem, ImageRow, Paragraph, Blank, Placeholder]


@dataclass(frozen=True)
class StyledBlock:
    block: Block
    palette: Palette


# ───────────────────────────────────────── classification ──
def _link_segments(content: str) -> Tuple[Segment, ...]:
    parts: List[Segment] = []
    last = 0
    for m in _LINK_RE.finditer(content):
        if m.start() > last:
            parts.append(TextSegment(content[last:m.start()]))
        parts.append(LinkSegment(m.group(1), m.group(2)))
        last = m.end()
    if last < len(content):
        parts.append(TextSegment(content[last:]))
    return tuple(parts) or (TextSegment(content),)


def _is_image_line(line: str) -> bool:
    start = line.find("![")
    return start != -1 and line.find("](", start + 2) != -1


def classify_line(line: str) -> Block:
    for prefix, level in _HEADINGS:
        if line.startswith(prefix):
            return Heading(level, line[len(prefix):])
    if line.startswith("- "):
        return ListItem(_link_segments(line[2:]))
    if _is_image_line(line):
        images = tuple(Image(m.group(1), m.group(2)) for m in _IMAGE_RE.finditer(line))
        if images:
            return ImageRow(images)
        # unbalanced brackets: show the line as it is
        return Paragraph(line)
    if line.strip():
        return Paragraph(line)
    return Blank()


def classify(markdown: str) -> List[Block]:
    if not markdown:
        return [Placeholder()]
    return [classify_line(line) for line in markdown.split("\n")]


# ───────────────────────────────────────── styling ──
def render(markdown: str, theme: str | None = None) -> List[StyledBlock]:
    """Blocks for *markdown*, each carrying the palette of *theme*."""
    palette = get_palette(theme)
    return [StyledBlock(block, palette) for block in classify(markdown)]
