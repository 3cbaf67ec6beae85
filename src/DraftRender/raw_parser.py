from __future__ import annotations

from typing import Any, List, Mapping

import yaml

from .model import UNSTYLED, Block, Document, Entity, EntityRange, InlineStyleRange


def parse_raw_document(text: str) -> Document:
    """Parse raw editor content (JSON or YAML) into a Document."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("Raw document root must be a mapping with 'blocks' and 'entityMap'.")
    return document_from_raw(data)


def document_from_raw(data: Mapping[str, Any] | None) -> Document:
    if not data:
        return Document()
    if not isinstance(data, Mapping):
        raise ValueError("Raw document root must be a mapping with 'blocks' and 'entityMap'.")

    raw_blocks = data.get("blocks") or []
    if not isinstance(raw_blocks, list):
        raise ValueError("Raw document 'blocks' must be a list.")
    blocks = [_parse_block(entry) for entry in raw_blocks if isinstance(entry, Mapping)]

    entity_map = {}
    for key, value in (data.get("entityMap") or {}).items():
        if isinstance(value, Mapping):
            entity_map[str(key)] = _parse_entity(value)
    return Document(blocks=blocks, entity_map=entity_map)


def _parse_block(entry: Mapping[str, Any]) -> Block:
    return Block(
        key=entry.get("key"),
        text=str(entry.get("text") or ""),
        type=entry.get("type") or UNSTYLED,
        depth=int(entry.get("depth") or 0),
        data=dict(entry.get("data") or {}),
        inline_style_ranges=_parse_style_ranges(entry.get("inlineStyleRanges")),
        entity_ranges=_parse_entity_ranges(entry.get("entityRanges")),
    )


def _parse_style_ranges(value) -> List[InlineStyleRange]:
    ranges: List[InlineStyleRange] = []
    for item in value or []:
        if not isinstance(item, Mapping) or not item.get("style"):
            continue
        ranges.append(
            InlineStyleRange(
                offset=int(item.get("offset") or 0),
                length=int(item.get("length") or 0),
                style=str(item["style"]),
            )
        )
    return ranges


def _parse_entity_ranges(value) -> List[EntityRange]:
    ranges: List[EntityRange] = []
    for item in value or []:
        if not isinstance(item, Mapping):
            continue
        ranges.append(
            EntityRange(
                offset=int(item.get("offset") or 0),
                length=int(item.get("length") or 0),
                key=str(item["key"]) if item.get("key") is not None else None,
            )
        )
    return ranges


def _parse_entity(value: Mapping[str, Any]) -> Entity:
    return Entity(
        type=str(value.get("type") or ""),
        data=dict(value.get("data") or {}),
        mutability=value.get("mutability"),
    )
