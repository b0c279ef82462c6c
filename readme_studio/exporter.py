"""
Output artifacts: the README.md download and a standalone HTML preview.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List
from urllib.parse import urlsplit

from jinja2 import Environment, FileSystemLoader

from readme_studio.renderer import (
    Blank,
    Heading,
    ImageRow,
    LinkSegment,
    ListItem,
    Paragraph,
    Placeholder,
    StyledBlock,
    render,
)
from readme_studio.themes import get_palette

README_FILENAME = "README.md"
README_MIME = "text/markdown"

_CSS_PATH = Path(__file__).parent / "static" / "preview.css"
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True)


def readme_bytes(markdown: str) -> bytes:
    return markdown.encode("utf-8")


def _is_safe_href(url: str) -> bool:
    """Web links and in-page anchors only; other schemes stay plain text."""
    try:
        return urlsplit(url).scheme.lower() in ("", "http", "https")
    except ValueError:
        return False


def _block_context(styled: StyledBlock) -> Dict[str, Any]:
    block = styled.block
    if isinstance(block, Heading):
        return {"kind": "heading", "level": block.level, "text": block.text}
    if isinstance(block, ListItem):
        return {
            "kind": "item",
            "segments": [
                {
                    "link": isinstance(s, LinkSegment) and _is_safe_href(s.url),
                    "text": s.text,
                    "url": getattr(s, "url", ""),
                }
                for s in block.segments
            ],
        }
    if isinstance(block, ImageRow):
        return {"kind": "images", "images": [{"alt": i.alt, "url": i.url} for i in block.images]}
    if isinstance(block, Paragraph):
        return {"kind": "paragraph", "text": block.text}
    if isinstance(block, Placeholder):
        return {"kind": "placeholder", "text": block.text}
    if isinstance(block, Blank):
        return {"kind": "blank"}
    raise TypeError(f"Unknown block: {block!r}")


def blocks_to_html(blocks: List[StyledBlock], theme: str | None = None, inline: bool = True) -> str:
    """Render styled blocks → HTML.  If inline=True, embed CSS in a <style> tag."""
    css_inline = _CSS_PATH.read_text(encoding="utf-8") if inline else ""
    palette = blocks[0].palette if blocks else get_palette(theme)
    return env.get_template("preview.html").render(
        blocks=[_block_context(b) for b in blocks],
        palette=palette,
        inline_css=css_inline,
    )


def preview_html(markdown: str, theme: str | None = None, inline: bool = True) -> str:
    return blocks_to_html(render(markdown, theme), theme, inline=inline)
