from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

UNSTYLED = "unstyled"
UNORDERED_LIST_ITEM = "unordered-list-item"
ORDERED_LIST_ITEM = "ordered-list-item"
ATOMIC = "atomic"

LIST_ITEM_TYPES = (UNORDERED_LIST_ITEM, ORDERED_LIST_ITEM)

PLAIN = "PLAIN"
ENTITY = "ENTITY"
HASHTAG = "HASHTAG"


@dataclass
class InlineStyleRange:
    offset: int
    length: int
    style: str


@dataclass
class EntityRange:
    offset: int
    length: int
    key: Optional[str]


@dataclass
class Entity:
    type: str
    data: dict[str, Any] = field(default_factory=dict)
    mutability: str | None = None


@dataclass
class Block:
    """One structural unit of a document: paragraph, heading, list item, ..."""

    text: str = ""
    type: str = UNSTYLED
    depth: int = 0
    data: dict[str, Any] = field(default_factory=dict)
    inline_style_ranges: List[InlineStyleRange] = field(default_factory=list)
    entity_ranges: List[EntityRange] = field(default_factory=list)
    key: str | None = None

    @property
    def is_list_item(self) -> bool:
        return self.type in LIST_ITEM_TYPES


@dataclass
class Document:
    blocks: List[Block] = field(default_factory=list)
    entity_map: Dict[str, Entity] = field(default_factory=dict)


@dataclass
class HashtagConfig:
    trigger: str = "#"
    separator: str = " "


@dataclass
class Section:
    """Contiguous slice of a block's text with one classification."""

    start: int
    end: int
    kind: str = PLAIN
    entity_key: Optional[str] = None


@dataclass
class StyleRun:
    start: int
    end: int
    styles: dict[str, Any] = field(default_factory=dict)
