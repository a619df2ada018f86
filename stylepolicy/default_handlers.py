"""Default value validators for standard CSS properties.

A rule committed without an explicit strategy uses the handler registered
here for its property. Handlers are deliberately bounded: they accept the
well-formed keywords, lengths, colors and so on a property can take, and
refuse everything else (notably any ``url()`` that is not plain http/https).
Properties missing from the table get a handler that refuses every value.

All handlers receive a value that has already been lowercased and had its
CSS escapes decoded.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Callable, Dict, List, Optional

from .models.rule import StyleHandler

GLOBAL_KEYWORDS = frozenset({"initial", "inherit", "unset", "revert"})

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:e[-+]?\d+)?"
_LENGTH_UNITS = r"(?:px|em|rem|ex|ch|vw|vh|vmin|vmax|cm|mm|in|pt|pc|q)"

_LENGTH = rf"(?:{_NUMBER}{_LENGTH_UNITS}|[-+]?0*\.?0+)"

NUMBER_RE = re.compile(_NUMBER)
INTEGER_RE = re.compile(r"[-+]?\d+")
LENGTH_RE = re.compile(_LENGTH)
FLEX_RE = re.compile(rf"{_NUMBER}fr")
PERCENTAGE_RE = re.compile(rf"{_NUMBER}%")
TIME_RE = re.compile(rf"{_NUMBER}m?s")
HEX_COLOR_RE = re.compile(r"#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})")
FUNCTION_COLOR_RE = re.compile(
    rf"(?:rgba?|hsla?)\(\s*{_NUMBER}(?:deg|%)?(?:\s*[,/]?\s*{_NUMBER}%?){{2,3}}\s*\)"
)
URL_RE = re.compile(r"url\(\s*(['\"]?)https?://[^'\"()\s\\]+\1\s*\)")
IDENT_RE = re.compile(r"-?[_a-z][_a-z0-9-]*")
TIMING_FUNCTION_RE = re.compile(
    rf"cubic-bezier\(\s*{_NUMBER}(?:\s*,\s*{_NUMBER}){{3}}\s*\)"
    rf"|steps\(\s*\d+(?:\s*,\s*(?:start|end|jump-start|jump-end|jump-none|jump-both))?\s*\)"
)
TRANSFORM_FUNCTION_RE = re.compile(
    rf"(?:matrix|matrix3d|translate|translate3d|translatex|translatey|translatez"
    rf"|scale|scale3d|scalex|scaley|scalez|rotate|rotate3d|rotatex|rotatey|rotatez"
    rf"|skew|skewx|skewy|perspective)"
    rf"\(\s*[-+.0-9a-z%]+(?:\s*,\s*[-+.0-9a-z%]+)*\s*\)"
)
FILTER_FUNCTION_RE = re.compile(
    r"(?:blur|brightness|contrast|drop-shadow|grayscale|hue-rotate|invert|opacity|saturate|sepia)"
    r"\(\s*[-+.0-9a-z%#,\s]*\)"
)
CLIP_RECT_RE = re.compile(rf"rect\(\s*(?:{_LENGTH}|auto)(?:\s*,?\s*(?:{_LENGTH}|auto)){{3}}\s*\)")
# Nested functions such as repeat(2, minmax(...)) are not accepted
TRACK_FUNCTION_RE = re.compile(r"(?:minmax|repeat|fit-content)\(\s*[-+.0-9a-z%,\s]*\)")

NAMED_COLORS = frozenset("""
aliceblue antiquewhite aqua aquamarine azure beige bisque black blanchedalmond
blue blueviolet brown burlywood cadetblue chartreuse chocolate coral
cornflowerblue cornsilk crimson cyan darkblue darkcyan darkgoldenrod darkgray
darkgreen darkgrey darkkhaki darkmagenta darkolivegreen darkorange darkorchid
darkred darksalmon darkseagreen darkslateblue darkslategray darkslategrey
darkturquoise darkviolet deeppink deepskyblue dimgray dimgrey dodgerblue
firebrick floralwhite forestgreen fuchsia gainsboro ghostwhite gold goldenrod
gray green greenyellow grey honeydew hotpink indianred indigo ivory khaki
lavender lavenderblush lawngreen lemonchiffon lightblue lightcoral lightcyan
lightgoldenrodyellow lightgray lightgreen lightgrey lightpink lightsalmon
lightseagreen lightskyblue lightslategray lightslategrey lightsteelblue
lightyellow lime limegreen linen magenta maroon mediumaquamarine mediumblue
mediumorchid mediumpurple mediumseagreen mediumslateblue mediumspringgreen
mediumturquoise mediumvioletred midnightblue mintcream mistyrose moccasin
navajowhite navy oldlace olive olivedrab orange orangered orchid palegoldenrod
palegreen paleturquoise palevioletred papayawhip peachpuff peru pink plum
powderblue purple rebeccapurple red rosybrown royalblue saddlebrown salmon
sandybrown seagreen seashell sienna silver skyblue slateblue slategray
slategrey snow springgreen steelblue tan teal thistle tomato turquoise violet
wheat white whitesmoke yellow yellowgreen transparent currentcolor
""".split())

BORDER_STYLES = frozenset({
    "none", "hidden", "dotted", "dashed", "solid", "double", "groove", "ridge",
    "inset", "outset",
})
BORDER_WIDTH_KEYWORDS = frozenset({"thin", "medium", "thick"})
POSITION_KEYWORDS = frozenset({"left", "right", "top", "bottom", "center"})
FONT_SIZE_KEYWORDS = frozenset({
    "medium", "xx-small", "x-small", "small", "large", "x-large", "xx-large", "xxx-large",
    "smaller", "larger",
})
FONT_STRETCH_KEYWORDS = frozenset({
    "normal", "ultra-condensed", "extra-condensed", "condensed", "semi-condensed",
    "semi-expanded", "expanded", "extra-expanded", "ultra-expanded",
})
FONT_SYSTEM_KEYWORDS = frozenset({"caption", "icon", "menu", "message-box", "small-caption", "status-bar"})


def split_value(value: str, separator: str = " ") -> List[str]:
    """Split a value on `separator` outside of parentheses and quotes.

    ``split_value("1px rgb(0, 0, 0)")`` gives ``["1px", "rgb(0, 0, 0)"]``.
    Whitespace separators collapse, so empty parts are never returned.
    """
    parts: List[str] = []
    current: List[str] = []
    depth = 0
    quote = None
    for char in value:
        if quote:
            if char == quote:
                quote = None
        elif char in "'\"":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif depth == 0 and (char == separator or (separator == " " and char in "\t\n")):
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    parts.append("".join(current).strip())
    return [part for part in parts if part]


# Single-token predicates

def is_length(token: str) -> bool:
    return LENGTH_RE.fullmatch(token) is not None


def is_percentage(token: str) -> bool:
    return PERCENTAGE_RE.fullmatch(token) is not None


def is_length_or_percentage(token: str) -> bool:
    return is_length(token) or is_percentage(token)


def is_number(token: str) -> bool:
    return NUMBER_RE.fullmatch(token) is not None


def is_integer(token: str) -> bool:
    return INTEGER_RE.fullmatch(token) is not None


def is_time(token: str) -> bool:
    return TIME_RE.fullmatch(token) is not None


def is_color(token: str) -> bool:
    return (
        token in NAMED_COLORS
        or HEX_COLOR_RE.fullmatch(token) is not None
        or FUNCTION_COLOR_RE.fullmatch(token) is not None
    )


def is_url(token: str) -> bool:
    return URL_RE.fullmatch(token) is not None


def is_timing_function(token: str) -> bool:
    return token in {"ease", "ease-in", "ease-out", "ease-in-out", "linear", "step-start", "step-end"} or (
        TIMING_FUNCTION_RE.fullmatch(token) is not None
    )


def is_string(token: str) -> bool:
    """A quoted string with no other quote of its kind inside."""
    return (
        len(token) >= 2 and token[0] in "'\"" and token[-1] == token[0]
        and token[0] not in token[1:-1]
    )


def is_track_size(token: str) -> bool:
    return (
        token in {"auto", "min-content", "max-content"}
        or is_length_or_percentage(token)
        or FLEX_RE.fullmatch(token) is not None
        or TRACK_FUNCTION_RE.fullmatch(token) is not None
    )


# Handler factories

def keywords(*words: str, also: Optional[Callable[[str], bool]] = None) -> StyleHandler:
    """Accept one of `words`, a global keyword, or a token `also` accepts."""
    allowed = frozenset(words) | GLOBAL_KEYWORDS

    def handler(value: str) -> bool:
        return value in allowed or (also is not None and also(value))
    return handler


def tokens(predicate: Callable[[str], bool], min_count: int = 1, max_count: int = 1,
           words: frozenset = frozenset()) -> StyleHandler:
    """Accept between `min_count` and `max_count` space separated tokens.

    Each token must be in `words` or satisfy `predicate`. A global keyword is
    accepted only on its own.
    """
    def handler(value: str) -> bool:
        if value in GLOBAL_KEYWORDS:
            return True
        parts = split_value(value)
        if not min_count <= len(parts) <= max_count:
            return False
        return all(part in words or predicate(part) for part in parts)
    return handler


def _any_of(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda token: any(p(token) for p in predicates)


def _comma_list(item: StyleHandler) -> StyleHandler:
    def handler(value: str) -> bool:
        if value in GLOBAL_KEYWORDS:
            return True
        items = split_value(value, ",")
        return bool(items) and all(item(i) for i in items)
    return handler


def _deny(value: str) -> bool:
    return False


def _is_family_name(family: str) -> bool:
    if family[0] in "'\"":
        return is_string(family)
    return all(IDENT_RE.fullmatch(word) for word in family.split())


def _font_family(value: str) -> bool:
    if value in GLOBAL_KEYWORDS:
        return True
    families = split_value(value, ",")
    return bool(families) and all(_is_family_name(family) for family in families)


def _is_weight_number(token: str) -> bool:
    return is_integer(token) and 1 <= int(token) <= 1000


def _font_weight(value: str) -> bool:
    if value in {"normal", "bold", "bolder", "lighter"} | GLOBAL_KEYWORDS:
        return True
    return _is_weight_number(value)


_font_size = keywords(*FONT_SIZE_KEYWORDS, also=is_length_or_percentage)
_line_height = keywords("normal", also=_any_of(is_number, is_length_or_percentage))
_FONT_PREFIX_KEYWORDS = frozenset({
    "normal", "italic", "oblique", "small-caps", "bold", "bolder", "lighter",
}) | FONT_STRETCH_KEYWORDS


def _font(value: str) -> bool:
    """``[style || variant || weight || stretch]? size[/line-height]? family[, family]*``"""
    if value in GLOBAL_KEYWORDS or value in FONT_SYSTEM_KEYWORDS:
        return True
    families = split_value(value, ",")
    if not families:
        return False

    words = split_value(re.sub(r"\s*/\s*", "/", families[0]))
    index = 0
    while index < min(len(words), 4) and (words[index] in _FONT_PREFIX_KEYWORDS or _is_weight_number(words[index])):
        index += 1
    # A size and at least one family name must follow
    if index + 1 >= len(words):
        return False

    size, slash, line_height = words[index].partition("/")
    if size in GLOBAL_KEYWORDS or not _font_size(size):
        return False
    if slash and (line_height in GLOBAL_KEYWORDS or not _line_height(line_height)):
        return False

    first_family = " ".join(words[index + 1:])
    return all(_is_family_name(family) for family in [first_family] + families[1:])


def _opacity(value: str) -> bool:
    if value in GLOBAL_KEYWORDS or is_percentage(value):
        return True
    return is_number(value) and 0 <= float(value) <= 1


def _function_list(pattern: re.Pattern) -> StyleHandler:
    """Accept ``none`` or a space separated list of functions `pattern` matches."""
    def handler(value: str) -> bool:
        if value in {"none"} | GLOBAL_KEYWORDS:
            return True
        parts = split_value(value)
        return bool(parts) and all(pattern.fullmatch(part) is not None for part in parts)
    return handler


def _shadow(max_lengths: int, allow_inset: bool) -> StyleHandler:
    """Accept ``none`` or a comma list of shadows: 2 to `max_lengths` offsets and an optional color."""
    def shadow(item: str) -> bool:
        lengths = colors = insets = 0
        for part in split_value(item):
            if is_length(part):
                lengths += 1
            elif is_color(part):
                colors += 1
            elif allow_inset and part == "inset":
                insets += 1
            else:
                return False
        return 2 <= lengths <= max_lengths and colors <= 1 and insets <= 1
    return keywords("none", also=_comma_list(shadow))


def _quotes(value: str) -> bool:
    if value in {"none", "auto"} | GLOBAL_KEYWORDS:
        return True
    parts = split_value(value)
    return bool(parts) and len(parts) % 2 == 0 and all(is_string(part) for part in parts)


def _is_string_list(value: str) -> bool:
    parts = split_value(value)
    return bool(parts) and all(is_string(part) for part in parts)


_border_image_token = _any_of(
    is_number, is_percentage, is_length,
    frozenset({"none", "fill", "auto", "stretch", "repeat", "round", "space"}).__contains__,
)


def _border_image(value: str) -> bool:
    """``source || slice [/ width [/ outset]] || repeat``, checked token by token."""
    if value in GLOBAL_KEYWORDS:
        return True
    parts = split_value(value)
    if not 1 <= len(parts) <= 10:
        return False
    for part in parts:
        if is_url(part):
            continue
        if not all(_border_image_token(piece) for piece in part.split("/") if piece):
            return False
    return True


def _border_image_slice(value: str) -> bool:
    if value in GLOBAL_KEYWORDS:
        return True
    parts = split_value(value)
    offsets = [part for part in parts if part != "fill"]
    return (
        bool(parts)
        and len(parts) - len(offsets) <= 1
        and len(offsets) <= 4
        and all(is_number(part) or is_percentage(part) for part in offsets)
    )


# Grid

def _is_track_list(value: str, words: frozenset = frozenset()) -> bool:
    parts = split_value(value)
    return bool(parts) and all(part in words or is_track_size(part) for part in parts)


def _grid_template(words: frozenset = frozenset()) -> StyleHandler:
    """Accept ``none`` or ``<rows> / <columns>`` track lists."""
    def handler(value: str) -> bool:
        if value in {"none"} | GLOBAL_KEYWORDS:
            return True
        halves = split_value(value, "/")
        return len(halves) == 2 and all(_is_track_list(half, words) for half in halves)
    return handler


def _is_grid_line(value: str) -> bool:
    parts = split_value(value)
    if not 1 <= len(parts) <= 3:
        return False
    return all(is_integer(part) or IDENT_RE.fullmatch(part) is not None for part in parts)


def _grid_placement(max_lines: int) -> StyleHandler:
    """Accept up to `max_lines` grid lines separated by ``/``."""
    def handler(value: str) -> bool:
        if value in GLOBAL_KEYWORDS:
            return True
        lines = split_value(value, "/")
        return 1 <= len(lines) <= max_lines and all(_is_grid_line(line) for line in lines)
    return handler


def _text_combine_upright(value: str) -> bool:
    if value in {"none", "all"} | GLOBAL_KEYWORDS:
        return True
    parts = split_value(value)
    return parts[:1] == ["digits"] and (len(parts) == 1 or (len(parts) == 2 and parts[1] in {"2", "3", "4"}))


_length_auto = keywords("auto", also=is_length_or_percentage)
_length_none = keywords("none", also=is_length_or_percentage)
_length_normal = keywords("normal", also=is_length)
_box_sides = tokens(is_length_or_percentage, max_count=4, words=frozenset({"auto"}))
_border_width = _any_of(is_length, BORDER_WIDTH_KEYWORDS.__contains__)
_color = keywords(also=is_color)
_image = keywords("none", also=is_url)
_time_list = _comma_list(keywords(also=is_time))
_timing_list = _comma_list(keywords(also=is_timing_function))
_border_shorthand = tokens(
    _any_of(_border_width, BORDER_STYLES.__contains__, is_color), max_count=3,
)
_background_token = _any_of(
    is_color, is_url, is_length_or_percentage,
    frozenset({
        "none", "repeat", "repeat-x", "repeat-y", "no-repeat", "space", "round",
        "scroll", "fixed", "local", "left", "right", "top", "bottom", "center",
        "border-box", "padding-box", "content-box", "auto", "cover", "contain",
    }).__contains__,
)
_animation_token = _any_of(
    is_time, is_timing_function, is_number,
    frozenset({
        "infinite", "normal", "reverse", "alternate", "alternate-reverse",
        "none", "forwards", "backwards", "both", "running", "paused",
    }).__contains__,
    IDENT_RE.fullmatch,
)

_HANDLERS: Dict[str, StyleHandler] = {
    # Cascade
    "all": keywords(),

    # Alignment and flexbox
    "align-content": keywords("stretch", "center", "flex-start", "flex-end", "space-between", "space-around",
                              "space-evenly", "start", "end", "normal"),
    "align-items": keywords("stretch", "center", "flex-start", "flex-end", "baseline", "start", "end", "normal"),
    "align-self": keywords("auto", "stretch", "center", "flex-start", "flex-end", "baseline", "start", "end",
                           "normal"),
    "justify-content": keywords("flex-start", "flex-end", "center", "space-between", "space-around",
                                "space-evenly", "start", "end", "left", "right", "normal", "stretch"),
    "flex": tokens(_any_of(is_number, is_length_or_percentage), max_count=3,
                   words=frozenset({"auto", "none", "content"})),
    "flex-basis": keywords("auto", "content", also=is_length_or_percentage),
    "flex-direction": keywords("row", "row-reverse", "column", "column-reverse"),
    "flex-flow": tokens(_deny, max_count=2, words=frozenset({
        "row", "row-reverse", "column", "column-reverse", "nowrap", "wrap", "wrap-reverse"})),
    "flex-grow": keywords(also=is_number),
    "flex-shrink": keywords(also=is_number),
    "flex-wrap": keywords("nowrap", "wrap", "wrap-reverse"),
    "order": keywords(also=is_integer),
    "gap": tokens(is_length_or_percentage, max_count=2, words=frozenset({"normal"})),
    "row-gap": keywords("normal", also=is_length_or_percentage),
    "column-gap": keywords("normal", also=is_length_or_percentage),

    # Grid
    "grid": _grid_template(frozenset({"auto-flow", "dense"})),
    "grid-area": _grid_placement(4),
    "grid-auto-columns": keywords(also=_is_track_list),
    "grid-auto-flow": tokens(_deny, max_count=2, words=frozenset({"row", "column", "dense"})),
    "grid-auto-rows": keywords(also=_is_track_list),
    "grid-column": _grid_placement(2),
    "grid-column-end": _grid_placement(1),
    "grid-column-gap": keywords("normal", also=is_length_or_percentage),
    "grid-column-start": _grid_placement(1),
    "grid-gap": tokens(is_length_or_percentage, max_count=2, words=frozenset({"normal"})),
    "grid-row": _grid_placement(2),
    "grid-row-end": _grid_placement(1),
    "grid-row-gap": keywords("normal", also=is_length_or_percentage),
    "grid-row-start": _grid_placement(1),
    "grid-template": _grid_template(),
    "grid-template-areas": keywords("none", also=_is_string_list),
    "grid-template-columns": keywords("none", also=_is_track_list),
    "grid-template-rows": keywords("none", also=_is_track_list),

    # Animation and transition
    "animation": _comma_list(tokens(_animation_token, max_count=8)),
    "animation-delay": _time_list,
    "animation-direction": keywords("normal", "reverse", "alternate", "alternate-reverse"),
    "animation-duration": _time_list,
    "animation-fill-mode": keywords("none", "forwards", "backwards", "both"),
    "animation-iteration-count": keywords("infinite", also=is_number),
    "animation-name": keywords("none", also=lambda v: IDENT_RE.fullmatch(v) is not None),
    "animation-play-state": keywords("running", "paused"),
    "animation-timing-function": _timing_list,
    "transition": _comma_list(tokens(_any_of(is_time, is_timing_function, IDENT_RE.fullmatch), max_count=4)),
    "transition-delay": _time_list,
    "transition-duration": _time_list,
    "transition-property": _comma_list(keywords("none", "all", also=lambda v: IDENT_RE.fullmatch(v) is not None)),
    "transition-timing-function": _timing_list,

    # Backgrounds
    "backface-visibility": keywords("visible", "hidden"),
    "background": tokens(_background_token, max_count=10),
    "background-attachment": keywords("scroll", "fixed", "local"),
    "background-blend-mode": keywords("normal", "multiply", "screen", "overlay", "darken", "lighten",
                                      "color-dodge", "saturation", "color", "luminosity"),
    "background-clip": keywords("border-box", "padding-box", "content-box", "text"),
    "background-color": _color,
    "background-image": _image,
    "background-origin": keywords("border-box", "padding-box", "content-box"),
    "background-position": tokens(is_length_or_percentage, max_count=4, words=frozenset({
        "left", "right", "top", "bottom", "center"})),
    "background-repeat": tokens(_deny, max_count=2, words=frozenset({
        "repeat", "repeat-x", "repeat-y", "no-repeat", "space", "round"})),
    "background-size": tokens(is_length_or_percentage, max_count=2, words=frozenset({
        "auto", "cover", "contain"})),

    # Borders and outlines
    "border": _border_shorthand,
    "border-top": _border_shorthand,
    "border-right": _border_shorthand,
    "border-bottom": _border_shorthand,
    "border-left": _border_shorthand,
    "border-color": tokens(is_color, max_count=4),
    "border-top-color": _color,
    "border-right-color": _color,
    "border-bottom-color": _color,
    "border-left-color": _color,
    "border-style": tokens(BORDER_STYLES.__contains__, max_count=4),
    "border-top-style": keywords(*BORDER_STYLES),
    "border-right-style": keywords(*BORDER_STYLES),
    "border-bottom-style": keywords(*BORDER_STYLES),
    "border-left-style": keywords(*BORDER_STYLES),
    "border-width": tokens(_border_width, max_count=4),
    "border-top-width": keywords(also=_border_width),
    "border-right-width": keywords(also=_border_width),
    "border-bottom-width": keywords(also=_border_width),
    "border-left-width": keywords(also=_border_width),
    "border-radius": tokens(is_length_or_percentage, max_count=4),
    "border-top-left-radius": tokens(is_length_or_percentage, max_count=2),
    "border-top-right-radius": tokens(is_length_or_percentage, max_count=2),
    "border-bottom-left-radius": tokens(is_length_or_percentage, max_count=2),
    "border-bottom-right-radius": tokens(is_length_or_percentage, max_count=2),
    "border-collapse": keywords("separate", "collapse"),
    "border-spacing": tokens(is_length, max_count=2),
    "border-image": _border_image,
    "border-image-outset": tokens(_any_of(is_length, is_number), max_count=4),
    "border-image-repeat": tokens(_deny, max_count=2, words=frozenset({"stretch", "repeat", "round", "space"})),
    "border-image-slice": _border_image_slice,
    "border-image-source": _image,
    "border-image-width": tokens(_any_of(is_length_or_percentage, is_number), max_count=4,
                                 words=frozenset({"auto"})),
    "outline": tokens(_any_of(_border_width, BORDER_STYLES.__contains__, is_color, "auto".__eq__), max_count=3),
    "outline-color": keywords("invert", also=is_color),
    "outline-offset": keywords(also=is_length),
    "outline-style": keywords("auto", *BORDER_STYLES),
    "outline-width": keywords(also=_border_width),

    # Box model
    "box-sizing": keywords("content-box", "border-box"),
    "box-decoration-break": keywords("slice", "clone"),
    "box-shadow": _shadow(4, allow_inset=True),
    "margin": _box_sides,
    "margin-top": _length_auto,
    "margin-right": _length_auto,
    "margin-bottom": _length_auto,
    "margin-left": _length_auto,
    "padding": tokens(is_length_or_percentage, max_count=4),
    "padding-top": keywords(also=is_length_or_percentage),
    "padding-right": keywords(also=is_length_or_percentage),
    "padding-bottom": keywords(also=is_length_or_percentage),
    "padding-left": keywords(also=is_length_or_percentage),
    "width": keywords("auto", "min-content", "max-content", "fit-content", also=is_length_or_percentage),
    "height": keywords("auto", "min-content", "max-content", "fit-content", also=is_length_or_percentage),
    "min-width": _length_auto,
    "min-height": _length_auto,
    "max-width": _length_none,
    "max-height": _length_none,
    "overflow": tokens(_deny, max_count=2, words=frozenset({
        "visible", "hidden", "clip", "scroll", "auto"})),
    "overflow-x": keywords("visible", "hidden", "clip", "scroll", "auto"),
    "overflow-y": keywords("visible", "hidden", "clip", "scroll", "auto"),
    "overflow-wrap": keywords("normal", "break-word", "anywhere"),
    "word-wrap": keywords("normal", "break-word", "anywhere"),

    # Color and visibility
    "color": _color,
    "caret-color": keywords("auto", also=is_color),
    "opacity": _opacity,
    "visibility": keywords("visible", "hidden", "collapse"),
    "mix-blend-mode": keywords("normal", "multiply", "screen", "overlay", "darken", "lighten", "color-dodge",
                               "color-burn", "difference", "exclusion", "hue", "saturation", "color",
                               "luminosity"),
    "isolation": keywords("auto", "isolate"),
    "filter": _function_list(FILTER_FUNCTION_RE),
    "image-rendering": keywords("auto", "smooth", "high-quality", "crisp-edges", "pixelated"),

    # Columns
    "column-count": keywords("auto", also=is_integer),
    "column-fill": keywords("auto", "balance", "balance-all"),
    "column-rule": _border_shorthand,
    "column-rule-color": _color,
    "column-rule-style": keywords(*BORDER_STYLES),
    "column-rule-width": keywords(also=_border_width),
    "column-span": keywords("none", "all"),
    "column-width": keywords("auto", also=is_length),
    "columns": tokens(_any_of(is_length, is_integer), max_count=2, words=frozenset({"auto"})),

    # Fragmentation
    "break-after": keywords("auto", "avoid", "always", "all", "avoid-page", "page", "left", "right",
                            "recto", "verso", "avoid-column", "column", "avoid-region", "region"),
    "break-before": keywords("auto", "avoid", "always", "all", "avoid-page", "page", "left", "right",
                             "recto", "verso", "avoid-column", "column", "avoid-region", "region"),
    "break-inside": keywords("auto", "avoid", "avoid-page", "avoid-column", "avoid-region"),

    # Layout and positioning
    "clear": keywords("none", "left", "right", "both", "inline-start", "inline-end"),
    "clip": keywords("auto", also=lambda v: CLIP_RECT_RE.fullmatch(v) is not None),
    "display": keywords("inline", "block", "contents", "flex", "grid", "inline-block", "inline-flex",
                        "inline-grid", "inline-table", "list-item", "run-in", "table", "table-caption",
                        "table-column-group", "table-header-group", "table-footer-group",
                        "table-row-group", "table-cell", "table-column", "table-row", "none", "flow-root"),
    "float": keywords("none", "left", "right", "inline-start", "inline-end"),
    "position": keywords("static", "absolute", "fixed", "relative", "sticky"),
    "top": _length_auto,
    "right": _length_auto,
    "bottom": _length_auto,
    "left": _length_auto,
    "z-index": keywords("auto", also=is_integer),
    "object-fit": keywords("fill", "contain", "cover", "none", "scale-down"),
    "object-position": tokens(is_length_or_percentage, max_count=2, words=POSITION_KEYWORDS),
    "pointer-events": keywords("auto", "none"),
    "resize": keywords("none", "both", "horizontal", "vertical", "block", "inline"),
    "cursor": keywords("auto", "default", "none", "context-menu", "help", "pointer", "progress", "wait",
                       "cell", "crosshair", "text", "vertical-text", "alias", "copy", "move", "no-drop",
                       "not-allowed", "grab", "grabbing", "all-scroll", "col-resize", "row-resize",
                       "n-resize", "e-resize", "s-resize", "w-resize", "ne-resize", "nw-resize",
                       "se-resize", "sw-resize", "ew-resize", "ns-resize", "nesw-resize", "nwse-resize",
                       "zoom-in", "zoom-out"),
    "perspective": keywords("none", also=is_length),
    "perspective-origin": tokens(is_length_or_percentage, max_count=2, words=POSITION_KEYWORDS),
    "scroll-behavior": keywords("auto", "smooth"),
    "transform": _function_list(TRANSFORM_FUNCTION_RE),
    "transform-style": keywords("flat", "preserve-3d"),
    "transform-origin": tokens(is_length_or_percentage, max_count=3, words=POSITION_KEYWORDS),

    # Lists and tables
    "list-style": tokens(_any_of(is_url, frozenset({
        "none", "inside", "outside", "disc", "circle", "square", "decimal", "decimal-leading-zero",
        "lower-roman", "upper-roman", "lower-alpha", "upper-alpha", "lower-latin", "upper-latin",
        "lower-greek"}).__contains__), max_count=3),
    "list-style-image": _image,
    "list-style-position": keywords("inside", "outside"),
    "list-style-type": keywords("none", "disc", "circle", "square", "decimal", "decimal-leading-zero",
                                "lower-roman", "upper-roman", "lower-alpha", "upper-alpha", "lower-latin",
                                "upper-latin", "lower-greek", "armenian", "georgian"),
    "caption-side": keywords("top", "bottom"),
    "empty-cells": keywords("show", "hide"),
    "table-layout": keywords("auto", "fixed"),

    # Typography
    "direction": keywords("ltr", "rtl"),
    "font": _font,
    "font-family": _font_family,
    "font-kerning": keywords("auto", "normal", "none"),
    "font-language-override": keywords("normal", also=is_string),
    "font-size": _font_size,
    "font-size-adjust": keywords("none", "auto", also=is_number),
    "font-stretch": keywords(*FONT_STRETCH_KEYWORDS, also=is_percentage),
    "font-style": keywords("normal", "italic", "oblique"),
    "font-synthesis": tokens(_deny, max_count=3, words=frozenset({"none", "weight", "style", "small-caps"})),
    "font-variant": keywords("normal", "small-caps", "none"),
    "font-variant-caps": keywords("normal", "small-caps", "all-small-caps", "petite-caps",
                                  "all-petite-caps", "unicase", "titling-caps"),
    "font-variant-position": keywords("normal", "sub", "super"),
    "font-weight": _font_weight,
    "hanging-punctuation": tokens(_deny, max_count=3, words=frozenset({
        "none", "first", "force-end", "allow-end", "last"})),
    "hyphens": keywords("none", "manual", "auto"),
    "letter-spacing": _length_normal,
    "line-break": keywords("auto", "loose", "normal", "strict", "anywhere"),
    "line-height": _line_height,
    "orphans": keywords(also=is_integer),
    "widows": keywords(also=is_integer),
    "page-break-after": keywords("auto", "always", "avoid", "left", "right"),
    "page-break-before": keywords("auto", "always", "avoid", "left", "right"),
    "page-break-inside": keywords("auto", "avoid"),
    "quotes": _quotes,
    "tab-size": keywords(also=_any_of(is_integer, is_length)),
    "text-align": keywords("left", "right", "center", "justify", "start", "end", "match-parent"),
    "text-align-last": keywords("auto", "left", "right", "center", "justify", "start", "end"),
    "text-combine-upright": _text_combine_upright,
    "text-decoration": tokens(
        _any_of(is_color, frozenset({
            "none", "underline", "overline", "line-through", "blink",
            "solid", "double", "dotted", "dashed", "wavy"}).__contains__),
        max_count=4,
    ),
    "text-decoration-color": _color,
    "text-decoration-line": tokens(_deny, max_count=3, words=frozenset({
        "none", "underline", "overline", "line-through", "blink"})),
    "text-decoration-style": keywords("solid", "double", "dotted", "dashed", "wavy"),
    "text-indent": keywords(also=is_length_or_percentage),
    "text-justify": keywords("auto", "inter-word", "inter-character", "none"),
    "text-orientation": keywords("mixed", "upright", "sideways", "sideways-right", "use-glyph-orientation"),
    "text-overflow": keywords("clip", "ellipsis", also=is_string),
    "text-shadow": _shadow(3, allow_inset=False),
    "text-transform": keywords("none", "capitalize", "uppercase", "lowercase", "full-width"),
    "unicode-bidi": keywords("normal", "embed", "bidi-override", "isolate", "isolate-override", "plaintext"),
    "user-select": keywords("auto", "none", "text", "all", "contain"),
    "vertical-align": keywords("baseline", "sub", "super", "text-top", "text-bottom", "middle", "top",
                               "bottom", also=is_length_or_percentage),
    "white-space": keywords("normal", "nowrap", "pre", "pre-line", "pre-wrap", "break-spaces"),
    "word-break": keywords("normal", "break-all", "keep-all", "break-word"),
    "word-spacing": _length_normal,
    "writing-mode": keywords("horizontal-tb", "vertical-rl", "vertical-lr"),
}

DEFAULT_HANDLERS = MappingProxyType(_HANDLERS)


def get_default_handler(property_name: str) -> StyleHandler:
    """Return the default validator for `property_name`.

    Unknown properties get a handler that rejects every value.
    """
    return _HANDLERS.get(property_name.lower(), _deny)
