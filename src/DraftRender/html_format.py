from __future__ import annotations

BLOCK_TAGS = {
    "unstyled": "p",
    "header-one": "h1",
    "header-two": "h2",
    "header-three": "h3",
    "header-four": "h4",
    "header-five": "h5",
    "header-six": "h6",
    "unordered-list-item": "ul",
    "ordered-list-item": "ol",
    "blockquote": "blockquote",
    "code": "pre",
}

# Outermost first.
TOGGLE_STYLES = ("BOLD", "ITALIC", "UNDERLINE", "STRIKETHROUGH", "CODE", "SUPERSCRIPT", "SUBSCRIPT")

TOGGLE_TAGS = {
    "BOLD": "strong",
    "ITALIC": "em",
    "UNDERLINE": "ins",
    "STRIKETHROUGH": "del",
    "CODE": "code",
    "SUPERSCRIPT": "sup",
    "SUBSCRIPT": "sub",
}

# Style-tag prefix for each property attribute, in wrapper order.
PROPERTY_PREFIXES = {
    "COLOR": "color-",
    "BGCOLOR": "bgcolor-",
    "FONTSIZE": "fontsize-",
    "FONTFAMILY": "fontfamily-",
}

PROPERTY_CSS = {
    "COLOR": "color",
    "BGCOLOR": "background-color",
    "FONTSIZE": "font-size",
    "FONTFAMILY": "font-family",
}

PROPERTY_STYLES = tuple(PROPERTY_PREFIXES)

CHARACTER_REPLACEMENTS = {
    "\n": "<br>",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}

NBSP = "&nbsp;"
DIR_ATTRIBUTE = ' dir = "auto"'
LINE_SEPARATOR = "\n"

MENTION_CLASS = "wysiwyg-mention"
HASHTAG_CLASS = "wysiwyg-hashtag"
DEFAULT_LINK_TARGET = "_self"
DEFAULT_ALIGNMENT = "none"
CTA_TARGET = "cta"

CTA_BOX_STYLE = "position: relative; background-color: white; padding: 1px 16px 16px 16px; margin: 0 auto;"
CTA_TITLE_STYLE = (
    "overflow: hidden; display: -webkit-box; line-clamp: 2; box-orient: vertical; "
    "-webkit-line-clamp: 2; -webkit-box-orient: vertical; letter-spacing: -0.015em; "
    "font-size: 21px; margin-top: 20px; margin-bottom: 10px; font-family: inherit; "
    "font-weight: 400; line-height: 1.5384616; color: inherit;"
)
CTA_TEXT_STYLE = (
    "overflow: hidden; display: -webkit-box; line-clamp: 4; box-orient: vertical; "
    "-webkit-line-clamp: 4; -webkit-box-orient: vertical; margin: 0 0 10px;"
)
CTA_BUTTON_BACKGROUND = "data:image/jpeg;base64,/9j/4QAYRXhpZgAASUkqAAgAAAAAAAAAAAAAAP/sABFEdWNreQABAAQAAABRAAD/4QMraHR0cDovL25zLmFkb2JlLmNvbS94YXAvMS4wLwA8P3hwYWNrZXQgYmVnaW49Iu+7vyIgaWQ9Ilc1TTBNcENlaGlIenJlU3pOVGN6a2M5ZCI/PiA8eDp4bXBtZXRhIHhtbG5zOng9ImFkb2JlOm5zOm1ldGEvIiB4OnhtcHRrPSJBZG9iZSBYTVAgQ29yZSA1LjMtYzAxMSA2Ni4xNDU2NjEsIDIwMTIvMDIvMDYtMTQ6NTY6MjcgICAgICAgICI+IDxyZGY6UkRGIHhtbG5zOnJkZj0iaHR0cDovL3d3dy53My5vcmcvMTk5OS8wMi8yMi1yZGYtc3ludGF4LW5zIyI+IDxyZGY6RGVzY3JpcHRpb24gcmRmOmFib3V0PSIiIHhtbG5zOnhtcE1NPSJodHRwOi8vbnMuYWRvYmUuY29tL3hhcC8xLjAvbW0vIiB4bWxuczpzdFJlZj0iaHR0cDovL25zLmFkb2JlLmNvbS94YXAvMS4wL3NUeXBlL1Jlc291cmNlUmVmIyIgeG1sbnM6eG1wPSJodHRwOi8vbnMuYWRvYmUuY29tL3hhcC8xLjAvIiB4bXBNTTpEb2N1bWVudElEPSJ4bXAuZGlkOkFERjQ4MDg2M0Y5RjExRTI4RUE2RDk1NUQ4OEZCQ0RGIiB4bXBNTTpJbnN0YW5jZUlEPSJ4bXAuaWlkOkFERjQ4MDg1M0Y5RjExRTI4RUE2RDk1NUQ4OEZCQ0RGIiB4bXA6Q3JlYXRvclRvb2w9IkFkb2JlIFBob3Rvc2hvcCBDUzYgKFdpbmRvd3MpIj4gPHhtcE1NOkRlcml2ZWRGcm9tIHN0UmVmOmluc3RhbmNlSUQ9InhtcC5paWQ6QkFBNDg0QjgzRjk5MTFFMkExOUVGOUNCNjVGQTQ3RUEiIHN0UmVmOmRvY3VtZW50SUQ9InhtcC5kaWQ6QkFBNDg0QjkzRjk5MTFFMkExOUVGOUNCNjVGQTQ3RUEiLz4gPC9yZGY6RGVzY3JpcHRpb24+IDwvcmRmOlJERj4gPC94OnhtcG1ldGE+IDw/eHBhY2tldCBlbmQ9InIiPz7/7gAOQWRvYmUAZMAAAAAB/9sAhAACAgICAgICAgICAwICAgMEAwICAwQEBAQEBAQEBgQFBQUFBAYGBwcHBwcGCQkKCgkJDAwMDAwMDAwMDAwMDAwMAQIDAwUEBQkGBgkNCggKDQ8ODg4ODw8MDAwMDA8PDAwMDAwMDwwMDAwMDAwMDAwMDAwMDAwMDAwMDAwMDAwMDAz/wAARCABiAAQDAREAAhEBAxEB/8QAngABAQADAAAAAAAAAAAAAAAABgUDBwgBAAICAwEAAAAAAAAAAAAAAAQFAwgBAgcJEAABAQUEAwkRAQAAAAAAAAAREgABITETMmIzFAJSREFhkaEiQiNTJHGBscFygpLC0gNjc4MFBhYXRxEAAQEFBQUCDwAAAAAAAAAA8AARQXHhEgEhYdETMZGhwZJR8YECIjJCUmKCkwREVAUVFv/aAAwDAQACEQMRAD8A6a/pH5slP7N9yGpW0szPEHd5qTuXG81P6T8p9x4++2mE25qvv7H5j17d9y1rX93IOs1DtQUmsniAlC4yKi082A/qSaodAmoGddUCuViz7QeuE5QSmULjMtK7hhCfb1IVtwyBNGM1oqJfrp2g2Kon5olC4zai02Qm3ND1DoE0dzb5KcTVSe0fNA7wEoXWZ6WWEB+9QNHQJqDW9LETCtq1BxJEoXWYU2myE+9D1DoE1jouXWHS4ij0VkVD5MEn2mzXcx3GE+5astYx3GBJWMtFYebZhQkapJJiDON5hKx8B25EMHhgkmVeZuON8AFdTgilU432U6mWMJsyU9I8MEkyPLVuCqdnHW8MUqnG+y3WuGwnz8lEsuGhgkmV0sSBxaodlSo1vGkzjfZVqWbPB7UB3Sp6R4YKzlnhSXE1FKflU21kjfSrfvsFWelDk1mSJYPXaXM/zy39PG8HrtaN30Wz3jkul/C5r//Z"
CTA_BUTTON_STYLE = """
        display: -webkit-box;
        background-color: red;
        box-shadow: 0 5px 0 darkred;
        color: white;
        padding: 1em 1.5em;
        position: relative;
        text-decoration: none;
        display: block;
        margin: 20px 0 0 0;
        font-size: 18px;
        line-height: 18px;
        text-shadow: 0 1px 0 #308c05;
        text-align: center;
        text-transform: uppercase;
        font-weight: bold;
        padding: 14px 0;
        color: #fff;
        background-image: url(%s);
        background-position: 0 0;
        background-repeat: repeat-x;
        border-radius: 0;
        box-shadow: 0 7px 5px -6px #999;
        white-space: nowrap;
        overflow: hidden;
        text-overflow: ellipsis;
      """ % CTA_BUTTON_BACKGROUND
CTA_IMAGE_STYLE = "overflow: auto; display: block; text-align: center;"
