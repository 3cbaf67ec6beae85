from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from . import html_format
from .entities import EntityTransform, lookup_entity, render_entity
from .inline_styles import StyleIndex, build_style_index, render_styled_text
from .model import ATOMIC, ENTITY, HASHTAG, Block, Document, Entity, HashtagConfig, Section
from .raw_parser import document_from_raw
from .sections import get_sections

logger = logging.getLogger(__name__)


@dataclass
class RenderOptions:
    entity_map: Mapping[str, Entity]
    hashtag_config: HashtagConfig | None = None
    directional: bool = False
    entity_transform: EntityTransform | None = None


def render(
    document: Document | None,
    hashtag_config: HashtagConfig | None = None,
    directional: bool = False,
    entity_transform: EntityTransform | None = None,
) -> str:
    """Render a document to an HTML fragment, one line per block or list."""
    if document is None or not document.blocks:
        return ""
    options = RenderOptions(
        entity_map=document.entity_map or {},
        hashtag_config=hashtag_config,
        directional=directional,
        entity_transform=entity_transform,
    )

    html: List[str] = []
    list_blocks: List[Block] = []
    for block in document.blocks:
        if block.is_list_item:
            list_blocks.append(block)
            continue
        if list_blocks:
            html.append(render_list(list_blocks, options))
            list_blocks = []
        html.append(render_block(block, options))
    if list_blocks:
        html.append(render_list(list_blocks, options))
    return "".join(html)


def render_raw(
    raw: Mapping[str, Any] | None,
    hashtag_config: HashtagConfig | Mapping[str, Any] | None = None,
    directional: bool = False,
    entity_transform: EntityTransform | None = None,
) -> str:
    """Render a raw ``{"blocks": [...], "entityMap": {...}}`` mapping."""
    if isinstance(hashtag_config, Mapping):
        hashtag_config = HashtagConfig(
            trigger=hashtag_config.get("trigger") or "#",
            separator=hashtag_config.get("separator") or " ",
        )
    return render(document_from_raw(raw), hashtag_config, directional, entity_transform)


def get_block_tag(block_type: str) -> str | None:
    return html_format.BLOCK_TAGS.get(block_type) if block_type else None


def get_block_style(data: Mapping[str, Any] | None) -> str:
    return "".join(f"{key}:{value};" for key, value in (data or {}).items() if value)


def _block_attributes(block: Block, options: RenderOptions) -> str:
    parts = []
    style = get_block_style(block.data)
    if style:
        parts.append(f' style="{style}"')
    if options.directional:
        parts.append(html_format.DIR_ATTRIBUTE)
    return "".join(parts)


def is_atomic_entity_block(block: Block) -> bool:
    return bool(block.entity_ranges) and (not block.text.strip() or block.type == ATOMIC)


def render_block(block: Block, options: RenderOptions) -> str:
    html: List[str] = []
    if is_atomic_entity_block(block):
        logger.debug("Rendering block %s as atomic entity", block.key or block.type)
        entity = lookup_entity(options.entity_map, block.entity_ranges[0].key)
        html.append(render_entity(entity, None, options.entity_transform))
    else:
        tag = get_block_tag(block.type)
        if tag:
            html.append(f"<{tag}{_block_attributes(block, options)}>")
            html.append(render_block_inner(block, options))
            html.append(f"</{tag}>")
        else:
            logger.debug("Unknown block type %r rendered without markup", block.type)
    html.append(html_format.LINE_SEPARATOR)
    return "".join(html)


def render_list(blocks: List[Block], options: RenderOptions) -> str:
    """Rebuild nested lists from a flat run of list items.

    Items deeper than the last emitted sibling are buffered and rendered as
    one nested list, recursively, once the next sibling arrives or the run ends.
    """
    if not blocks:
        return ""
    html: List[str] = []
    nested: List[Block] = []
    previous: Optional[Block] = None
    for block in blocks:
        if previous is None:
            html.append(f"<{get_block_tag(block.type)}>\n")
        elif previous.type != block.type:
            if nested:
                html.append(render_list(nested, options))
                nested = []
            html.append(f"</{get_block_tag(previous.type)}>\n")
            html.append(f"<{get_block_tag(block.type)}>\n")
        elif previous.depth == block.depth:
            if nested:
                html.append(render_list(nested, options))
                nested = []
        else:
            nested.append(block)
            continue
        html.append(f"<li{_block_attributes(block, options)}>")
        html.append(render_block_inner(block, options))
        html.append("</li>\n")
        previous = block
    if nested:
        html.append(render_list(nested, options))
    html.append(f"</{get_block_tag(previous.type)}>\n")
    return "".join(html)


def render_block_inner(block: Block, options: RenderOptions) -> str:
    """Inline markup of a block, with outer spaces kept visible."""
    sections = get_sections(block, options.hashtag_config)
    index = build_style_index(block.text, block.inline_style_ranges)
    markup = []
    for position, section in enumerate(sections):
        text = _render_section(block, index, section, options)
        if position == 0:
            text = replace_leading_spaces(text)
        if position == len(sections) - 1:
            text = replace_trailing_spaces(text)
        markup.append(text)
    return "".join(markup)


def _render_section(block: Block, index: StyleIndex, section: Section, options: RenderOptions) -> str:
    text = render_styled_text(block.text, index, section.start, section.end)
    if section.kind == ENTITY:
        if section.entity_key is not None:
            entity = lookup_entity(options.entity_map, section.entity_key)
            text = render_entity(entity, text, options.entity_transform)
    elif section.kind == HASHTAG:
        text = f'<a href="{text}" class="{html_format.HASHTAG_CLASS}">{text}</a>'
    return text


def replace_leading_spaces(markup: str) -> str:
    stripped = markup.lstrip(" ")
    return html_format.NBSP * (len(markup) - len(stripped)) + stripped


def replace_trailing_spaces(markup: str) -> str:
    stripped = markup.rstrip(" ")
    return stripped + html_format.NBSP * (len(markup) - len(stripped))

