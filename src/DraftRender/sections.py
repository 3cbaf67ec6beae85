from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .model import ENTITY, HASHTAG, PLAIN, Block, HashtagConfig, Section


@dataclass
class _TaggedRange:
    offset: int
    length: int
    kind: str
    key: Optional[str] = None


def find_hashtag_ranges(text: str, config: HashtagConfig | None) -> List[_TaggedRange]:
    """Locate ``trigger``-prefixed tokens that start the text or follow a separator."""
    if config is None:
        return []
    trigger = config.trigger or "#"
    separator = config.separator or " "
    marker = separator + trigger

    ranges: List[_TaggedRange] = []
    if text.startswith(trigger):
        start = 0
    else:
        start = _next_trigger(text, marker, separator, 0)
    while start >= 0:
        token_start = start + len(trigger)
        end = text.find(separator, token_start)
        if end < 0:
            end = len(text)
        if end > token_start:
            ranges.append(_TaggedRange(offset=start, length=end - start, kind=HASHTAG))
        start = _next_trigger(text, marker, separator, max(end, token_start))
    return ranges


def _next_trigger(text: str, marker: str, separator: str, position: int) -> int:
    found = text.find(marker, position)
    return found + len(separator) if found >= 0 else -1


def get_sections(block: Block, hashtag_config: HashtagConfig | None = None) -> List[Section]:
    """Partition block text into plain, entity and hashtag sections.

    Entity ranges are listed before hashtag ranges and the sort is stable,
    so an entity wins the tie when both start at the same offset. Overlaps
    are not reconciled.
    """
    tagged = [
        _TaggedRange(offset=r.offset, length=r.length, kind=ENTITY, key=r.key)
        for r in block.entity_ranges
    ]
    tagged.extend(find_hashtag_ranges(block.text, hashtag_config))
    tagged.sort(key=lambda r: r.offset)

    sections: List[Section] = []
    last_offset = 0
    for r in tagged:
        if r.offset > last_offset:
            sections.append(Section(start=last_offset, end=r.offset))
        sections.append(Section(start=r.offset, end=r.offset + r.length, kind=r.kind, entity_key=r.key))
        last_offset = r.offset + r.length
    if last_offset < len(block.text):
        sections.append(Section(start=last_offset, end=len(block.text), kind=PLAIN))
    return sections
