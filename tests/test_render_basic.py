import pytest

from DraftRender.model import Block, Document, Entity, EntityRange, HashtagConfig, InlineStyleRange
from DraftRender.renderer_html import render, render_raw


def _doc(*blocks, entities=None):
    return Document(blocks=list(blocks), entity_map=entities or {})


def test_empty_document_renders_nothing():
    assert render(None) == ""
    assert render(Document()) == ""
    assert render_raw(None) == ""
    assert render_raw({"blocks": []}) == ""


def test_block_tags_and_line_separator():
    doc = _doc(
        Block(text="Title", type="header-one"),
        Block(text="Body"),
        Block(text="Quote", type="blockquote"),
        Block(text="x = 1", type="code"),
        Block(text="Small", type="header-six"),
    )
    assert render(doc) == (
        "<h1>Title</h1>\n"
        "<p>Body</p>\n"
        "<blockquote>Quote</blockquote>\n"
        "<pre>x = 1</pre>\n"
        "<h6>Small</h6>\n"
    )


def test_unknown_block_type_renders_only_separator():
    assert render(_doc(Block(text="lost", type="section-break"))) == "\n"


def test_block_style_and_direction():
    block = Block(text="Centered", type="header-two", data={"text-align": "center", "color": "", "margin": "0"})
    assert render(_doc(block), directional=True) == '<h2 style="text-align:center;margin:0;" dir = "auto">Centered</h2>\n'


def test_link_entity():
    block = Block(text="go", entity_ranges=[EntityRange(offset=0, length=2, key="0")])
    entities = {"0": Entity(type="LINK", data={"url": "http://x.com"})}
    assert render(_doc(block, entities=entities)) == '<p><a href="http://x.com" target="_self">go</a></p>\n'


def test_hashtag_link():
    html = render(_doc(Block(text="hello #world test")), hashtag_config=HashtagConfig())
    assert html == '<p>hello <a href="#world" class="wysiwyg-hashtag">#world</a> test</p>\n'


def test_hashtags_disabled_without_config():
    assert render(_doc(Block(text="hello #world"))) == "<p>hello #world</p>\n"


def test_adjacent_toggle_runs():
    block = Block(
        text="ab",
        inline_style_ranges=[
            InlineStyleRange(offset=0, length=1, style="BOLD"),
            InlineStyleRange(offset=1, length=1, style="ITALIC"),
        ],
    )
    assert render(_doc(block)) == "<p><strong>a</strong><em>b</em></p>\n"


def test_styles_inside_entity_markup():
    block = Block(
        text="see docs",
        inline_style_ranges=[InlineStyleRange(offset=4, length=4, style="BOLD")],
        entity_ranges=[EntityRange(offset=4, length=4, key="1")],
    )
    entities = {"1": Entity(type="LINK", data={"url": "/docs", "targetOption": "_blank"})}
    assert render(_doc(block, entities=entities)) == '<p>see <a href="/docs" target="_blank"><strong>docs</strong></a></p>\n'


def test_outer_spaces_become_nbsp():
    assert render(_doc(Block(text="  hi  "))) == "<p>&nbsp;&nbsp;hi&nbsp;&nbsp;</p>\n"


def test_inner_spaces_untouched_across_sections():
    block = Block(text=" a #b ", entity_ranges=[])
    html = render(_doc(block), hashtag_config=HashtagConfig())
    assert html == '<p>&nbsp;a <a href="#b" class="wysiwyg-hashtag">#b</a>&nbsp;</p>\n'


def test_leading_space_inside_tag_is_left_alone():
    block = Block(text=" hi", inline_style_ranges=[InlineStyleRange(offset=0, length=1, style="BOLD")])
    assert render(_doc(block)) == "<p><strong> </strong>hi</p>\n"


def test_special_characters_escaped():
    assert render(_doc(Block(text="a<b> & c\nd"))) == "<p>a&lt;b&gt; &amp; c<br>d</p>\n"


def test_empty_paragraph():
    assert render(_doc(Block(text=""))) == "<p></p>\n"


def test_atomic_image_block():
    block = Block(text=" ", type="atomic", entity_ranges=[EntityRange(offset=0, length=1, key="0")])
    entities = {"0": Entity(type="IMAGE", data={"src": "pic.png", "alt": "Pic", "height": "auto", "width": "100%"})}
    assert render(_doc(block, entities=entities)) == (
        '<img src="pic.png" alt="Pic" style="float:none;height: auto;width: 100%"/>\n'
    )


def test_empty_text_block_with_entity_is_atomic():
    block = Block(text="", type="unstyled", entity_ranges=[EntityRange(offset=0, length=0, key="0")])
    entities = {"0": Entity(type="EMBEDDED_LINK", data={"src": "https://v.example/1", "width": 300, "height": 200})}
    assert render(_doc(block, entities=entities)) == (
        '<iframe width="300" height="200" src="https://v.example/1" frameBorder="0"></iframe>\n'
    )


def test_entity_ranges_outside_text_render_existing_characters():
    entities = {"0": Entity(type="LINK", data={"url": "/u"})}
    before_start = Block(
        text="abc",
        inline_style_ranges=[InlineStyleRange(offset=2, length=1, style="color-red")],
        entity_ranges=[EntityRange(offset=-1, length=2, key="0")],
    )
    assert render(_doc(before_start, entities=entities)) == (
        '<p><a href="/u" target="_self">a</a>b<span style="color: red;">c</span></p>\n'
    )
    wholly_covering = Block(text="a", entity_ranges=[EntityRange(offset=-2, length=3, key="0")])
    assert render(_doc(wholly_covering, entities=entities)) == '<p><a href="/u" target="_self">a</a></p>\n'
    past_end = Block(text="ab", entity_ranges=[EntityRange(offset=1, length=5, key="0")])
    assert render(_doc(past_end, entities=entities)) == '<p>a<a href="/u" target="_self">b</a></p>\n'


def test_missing_entity_key_raises():
    block = Block(text="go", entity_ranges=[EntityRange(offset=0, length=2, key="9")])
    with pytest.raises(KeyError):
        render(_doc(block))


def test_entity_transform_overrides_builtin_markup():
    block = Block(
        text="go now",
        entity_ranges=[EntityRange(offset=0, length=2, key="0"), EntityRange(offset=3, length=3, key="1")],
    )
    entities = {
        "0": Entity(type="LINK", data={"url": "/a"}),
        "1": Entity(type="LINK", data={"url": "/b"}),
    }
    calls = []

    def transform(entity, text):
        calls.append(text)
        if entity.data["url"] == "/a":
            return f"<button>{text}</button>"
        return None

    html = render(_doc(block, entities=entities), entity_transform=transform)
    assert html == '<p><button>go</button> <a href="/b" target="_self">now</a></p>\n'
    assert calls == ["go", "now"]


def test_render_raw_normalizes_entity_keys_and_config():
    raw = {
        "blocks": [{"text": "go #x", "type": "unstyled", "entityRanges": [{"offset": 0, "length": 2, "key": 0}]}],
        "entityMap": {"0": {"type": "LINK", "data": {"url": "/u"}}},
    }
    html = render_raw(raw, hashtag_config={"trigger": "#"})
    assert html == '<p><a href="/u" target="_self">go</a> <a href="#x" class="wysiwyg-hashtag">#x</a></p>\n'


def test_rendering_is_repeatable():
    doc = _doc(
        Block(text="one", type="unordered-list-item"),
        Block(text="two", type="unordered-list-item", depth=1),
        Block(text="  tail #tag", inline_style_ranges=[InlineStyleRange(offset=2, length=4, style="color-red")]),
    )
    first = render(doc, hashtag_config=HashtagConfig(), directional=True)
    assert render(doc, hashtag_config=HashtagConfig(), directional=True) == first
