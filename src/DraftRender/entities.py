from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from . import html_format
from .model import Entity

logger = logging.getLogger(__name__)

EntityTransform = Callable[[Entity, Optional[str]], Optional[str]]


def _field(data: Mapping[str, Any] | None, name: str, default: str = "") -> str:
    value = (data or {}).get(name)
    if value is None or value == "":
        return default
    return str(value)


def _media_style(data: Mapping[str, Any]) -> str:
    alignment = _field(data, "alignment", html_format.DEFAULT_ALIGNMENT)
    return f"float:{alignment};height: {_field(data, 'height')};width: {_field(data, 'width')}"


def _render_mention(entity: Entity, text: str) -> str:
    data = entity.data
    return (
        f'<a href="{_field(data, "url")}" class="{html_format.MENTION_CLASS}" '
        f'data-mention data-value="{_field(data, "value")}">{text}</a>'
    )


def _render_link(entity: Entity, text: str) -> str:
    data = entity.data
    target = _field(data, "targetOption", html_format.DEFAULT_LINK_TARGET)
    return f'<a href="{_field(data, "url")}" target="{target}">{text}</a>'


def _render_image(entity: Entity, text: str) -> str:
    data = entity.data
    return f'<img src="{_field(data, "src")}" alt="{_field(data, "alt")}" style="{_media_style(data)}"/>'


def _render_video(entity: Entity, text: str) -> str:
    data = entity.data
    return (
        f'<video controls src="{_field(data, "src")}" alt="{_field(data, "alt")}" '
        f'style="{_media_style(data)}"></video>'
    )


def _render_embedded_link(entity: Entity, text: str) -> str:
    data = entity.data
    return (
        f'<iframe width="{_field(data, "width")}" height="{_field(data, "height")}" '
        f'src="{_field(data, "src")}" frameBorder="0"></iframe>'
    )


def _render_cta_box(entity: Entity, text: str) -> str:
    data = entity.data
    return f"""
    <div id="ctabox-root" style="{html_format.CTA_BOX_STYLE}">
      <h3 style="{html_format.CTA_TITLE_STYLE}">{_field(data, "ctaTitle")}</h3>
      <p style="{html_format.CTA_TEXT_STYLE}">{_field(data, "ctaText")}</p>
      <a href="{_field(data, "url")}" target="{html_format.CTA_TARGET}" style="{html_format.CTA_BUTTON_STYLE}">{_field(data, "ctaButtonText")}</a>
    </div>"""


def _render_cta_image(entity: Entity, text: str) -> str:
    data = entity.data
    return f"""
      <a id="ctaimage-root" href="{_field(data, "linkUrl")}" target="{html_format.CTA_TARGET}" style="{html_format.CTA_IMAGE_STYLE}">
        <img src="{_field(data, "src")}" alt="{_field(data, "alt")}" style="{_media_style(data)}"/>
      </a>"""


ENTITY_RENDERERS: Dict[str, Callable[[Entity, str], str]] = {
    "MENTION": _render_mention,
    "LINK": _render_link,
    "IMAGE": _render_image,
    "VIDEO": _render_video,
    "EMBEDDED_LINK": _render_embedded_link,
    "CTA_BOX": _render_cta_box,
    "CTA_IMAGE": _render_cta_image,
}


def lookup_entity(entity_map: Mapping[str, Entity], key: Any) -> Entity:
    try:
        return entity_map[str(key)]
    except KeyError:
        raise KeyError(f"Entity {key!r} is not present in the entity map") from None


def render_entity(
    entity: Entity,
    text: Optional[str],
    entity_transform: EntityTransform | None = None,
) -> str:
    """Markup for an entity wrapping already rendered ``text``.

    A truthy result from ``entity_transform`` replaces the built-in markup.
    ``text`` is None for atomic blocks.
    """
    if entity_transform is not None:
        html = entity_transform(entity, text)
        if html:
            return html
    renderer = ENTITY_RENDERERS.get(entity.type)
    if renderer is None:
        logger.debug("No markup for entity type %r, passing text through", entity.type)
        return text or ""
    return renderer(entity, text or "")
