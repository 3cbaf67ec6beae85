from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Sequence

from . import html_format
from .model import InlineStyleRange, StyleRun

logger = logging.getLogger(__name__)

_NUMERIC = re.compile(r"^\d+$")


@dataclass
class StyleIndex:
    """Per-character value arrays, one per recognized style attribute."""

    length: int
    values: dict[str, list[Any]] = field(default_factory=dict)

    def value_at(self, style: str, offset: int) -> Any:
        return self.values[style][offset]

    def styles_at(self, offset: int) -> dict[str, Any]:
        styles: dict[str, Any] = {}
        for style in html_format.PROPERTY_STYLES + html_format.TOGGLE_STYLES:
            value = self.values[style][offset]
            if value:
                styles[style] = value
        return styles

    def same_as_previous(self, styles: Iterable[str], offset: int) -> bool:
        if offset <= 0 or offset >= self.length:
            return False
        return all(self.values[s][offset] == self.values[s][offset - 1] for s in styles)


def build_style_index(text: str, ranges: Sequence[InlineStyleRange] | None) -> StyleIndex:
    length = len(text)
    index = StyleIndex(
        length=length,
        values={style: [None] * length for style in html_format.PROPERTY_STYLES + html_format.TOGGLE_STYLES},
    )
    for style_range in ranges or []:
        style, value = _decode_style(style_range.style)
        if style is None:
            logger.debug("Ignoring unknown inline style %r", style_range.style)
            continue
        start = max(0, style_range.offset)
        end = min(length, style_range.offset + style_range.length)
        column = index.values[style]
        for offset in range(start, end):
            column[offset] = value
    return index


def _decode_style(tag: str) -> tuple[str | None, Any]:
    for style, prefix in html_format.PROPERTY_PREFIXES.items():
        if tag.startswith(prefix):
            return style, tag[len(prefix):]
    if tag in html_format.TOGGLE_TAGS:
        return tag, True
    return None, None


def style_runs(index: StyleIndex, styles: Sequence[str], start: int, end: int) -> List[StyleRun]:
    """Group offsets in [start, end) into maximal runs sharing ``styles`` values."""
    runs: List[StyleRun] = []
    start = max(start, 0)
    end = min(end, index.length)
    current: StyleRun | None = None
    for offset in range(start, end):
        if current is not None and offset != start and index.same_as_previous(styles, offset):
            current.end = offset + 1
        else:
            current = StyleRun(start=offset, end=offset + 1, styles=index.styles_at(offset))
            runs.append(current)
    return runs


def escape_text(text: str) -> str:
    return "".join(html_format.CHARACTER_REPLACEMENTS.get(ch, ch) for ch in text)


def apply_toggle_markup(styles: dict[str, Any], content: str) -> str:
    # Innermost tag first, so the first toggle in precedence order ends up outermost.
    for style in reversed(html_format.TOGGLE_STYLES):
        if styles.get(style):
            tag = html_format.TOGGLE_TAGS[style]
            content = f"<{tag}>{content}</{tag}>"
    return content


def apply_property_markup(styles: dict[str, Any], content: str) -> str:
    declarations = []
    for style in html_format.PROPERTY_STYLES:
        value = styles.get(style)
        if not value:
            continue
        if style == "FONTSIZE" and _NUMERIC.match(str(value)):
            value = f"{value}px"
        declarations.append(f"{html_format.PROPERTY_CSS[style]}: {value};")
    if not declarations:
        return content
    return f'<span style="{"".join(declarations)}">{content}</span>'


def render_styled_text(text: str, index: StyleIndex, start: int, end: int) -> str:
    """Markup for text[start:end] with property spans around toggle tags."""
    parts = []
    for property_run in style_runs(index, html_format.PROPERTY_STYLES, start, end):
        inner = "".join(
            apply_toggle_markup(run.styles, escape_text(text[run.start:run.end]))
            for run in style_runs(index, html_format.TOGGLE_STYLES, property_run.start, property_run.end)
        )
        parts.append(apply_property_markup(property_run.styles, inner))
    return "".join(parts)
