"""Tests for the default per-property validators.

Values are passed the way the sanitizer passes them: lowercased and with
escapes already decoded.
"""
import pytest

from stylepolicy import Policy, SanitizerConfig
from stylepolicy.default_handlers import DEFAULT_HANDLERS, get_default_handler, split_value


@pytest.mark.parametrize("prop, value", [
    ("align-content", "center"),
    ("animation", "mymove 5s infinite"),
    ("animation-delay", "2s"),
    ("animation-duration", "initial"),
    ("animation-iteration-count", "4"),
    ("animation-timing-function", "cubic-bezier(1,1,1,1)"),
    ("animation-timing-function", "steps(2, start)"),
    ("background", "lightblue url('https://img_tree.gif') no-repeat fixed center"),
    ("background-color", "transparent"),
    ("background-image", "url('http://paper.gif')"),
    ("background-image", "inherit"),
    ("background-origin", "content-box"),
    ("border", "1px solid #ccc"),
    ("border-width", "thin"),
    ("box-shadow", "inset 0 0 4px red, 1px 1px"),
    ("color", "red"),
    ("color", "rgb(2,2,2)"),
    ("color", "rgba(2,2,2,0.5)"),
    ("column-rule-color", "#f0ff"),
    ("font", 'bold 1em / 1.2 "open sans", sans-serif'),
    ("font-family", '"times new roman", times, serif'),
    ("font-size", "1.2em"),
    ("font-weight", "700"),
    ("grid-template-columns", "repeat(3, 1fr)"),
    ("line-height", "1.5"),
    ("margin", "0 auto"),
    ("opacity", "0.5"),
    ("padding", "1px 2px 3px 4px"),
    ("text-decoration", "underline dotted red"),
    ("transform", "rotate(20deg) scale(1.5)"),
    ("width", "100%"),
    ("z-index", "-1"),
])
def test_accepts(prop, value):
    assert get_default_handler(prop)(value) is True


@pytest.mark.parametrize("prop, value", [
    ("background-image", "url(javascript:alert(1))"),
    ("background-image", "url(data:image/png;base64,aaaa)"),
    ("background", "url('//evil.example/x.png')"),
    ("background-origin", "invalidvalue"),
    ("border-width", "thin thin thin thin thin"),
    ("color", "#f00ba"),
    ("color", "expression(alert(1))"),
    ("clip", "rect(1px)"),
    ("filter", "url(https://x.example/f.svg)"),
    ("font", "12px"),
    ("font-family", '"unterminated, serif'),
    ("font-weight", "1001"),
    ("opacity", "2"),
    ("position", "fixed fixed"),
    ("quotes", "'a'"),
    ("width", "10"),
    ("z-index", "1.5"),
])
def test_rejects(prop, value):
    assert get_default_handler(prop)(value) is False


def test_unknown_property_rejects_everything():
    handler = get_default_handler("nonexistentstyle")
    assert handler("") is False
    assert handler("inherit") is False


def test_lookup_ignores_case():
    assert get_default_handler("COLOR") is get_default_handler("color")


def test_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_HANDLERS["color"] = lambda v: True


def test_split_value_respects_parentheses_and_quotes():
    assert split_value("1px rgb(0, 0, 0)  solid") == ["1px", "rgb(0, 0, 0)", "solid"]
    assert split_value('"a, b", serif', ",") == ['"a, b"', "serif"]


# Styles run through a policy that allows every property with its default
# handler. Accepted styles come back unchanged apart from the final ";".
ACCEPTED_STYLES = [
    "aLiGn-cOntEnt: cEntEr;",
    "align-items: center;",
    "align-self: center;",
    "all: initial;",
    "animation: mymove 5s infinite;",
    "animation: inherit;",
    "animation-delay: 2s;",
    "animation-delay: initial;",
    "animation-direction: alternate;",
    "animation-duration: 2s;",
    "animation-duration: initial;",
    "animation-fill-mode: forwards;",
    "animation-iteration-count: 4;",
    "animation-iteration-count: inherit;",
    "animation-name: chuck;",
    "animation-name: none",
    "animation-play-state: running;",
    "animation-timing-function: cubic-bezier(1,1,1,1);",
    "animation-timing-function: steps(2, start);",
    "backface-visibility: hidden",
    "background: lightblue url('https://img_tree.gif') no-repeat fixed center",
    "background: initial",
    "background-attachment: fixed",
    "background-blend-mode: lighten",
    "background-clip: padding-box",
    "background-color: coral",
    "background-color: transparent",
    "background-image: url('http://paper.gif')",
    "background-image: inherit",
    "background-origin: content-box",
    "background-position: center",
    "background-position: 20px 20px",
    "background-repeat: repeat-y",
    "background-size: 300px 100px",
    "background-size: initial",
    "border: 4px dotted blue;",
    "border: initial;",
    "border-bottom: 4px dotted blue;",
    "border-bottom: initial",
    "border-bottom-color: blue;",
    "border-bottom-left-radius: 4px;",
    "border-bottom-left-radius: initial",
    "border-bottom-right-radius: 40px 4px;",
    "border-bottom-style: dotted;",
    "border-bottom-width: thin;",
    "border-collapse: separate;",
    "border-color: coral;",
    "border-image: url(https://border.png) 30 round;",
    "border-image: initial;",
    "border-image-outset: 10px;",
    "border-image-repeat: repeat;",
    "border-image-slice: 30%;",
    "border-image-slice: fill;",
    "border-image-source: url(https://border.png);",
    "border-image-width: 10px;",
    "border-left: 4px dotted blue;",
    "border-left-color: blue;",
    "border-left-style: dotted;",
    "border-left-width: thin;",
    "border-radius: 25px;",
    "border-radius: initial;",
    "border-right-color: blue;",
    "border-right-style: dotted;",
    "border-right-width: thin;",
    "border-spacing: 15px;",
    "border-style: dotted;",
    "border-style: initial;",
    "border-top: 4px dotted blue;",
    "border-top-color: blue;",
    "border-top-left-radius: 4px;",
    "border-top-right-radius: 40px 4px;",
    "border-top-style: dotted;",
    "border-top-width: thin;",
    "border-width: thin;",
    "border-width: initial;",
    "bottom: 10px;",
    "bottom: auto;",
    "box-decoration-break: slice;",
    "box-shadow: 10px 10px #888888;",
    "box-sizing: border-box;",
    "break-after: column;",
    "break-before: column;",
    "break-inside: avoid-column;",
    "caption-side: bottom;",
    "caret-color: red;",
    "caret-color: rgb(2,2,2);",
    "caret-color: rgba(2,2,2,0.5);",
    "caret-color: hsl(2,2%,2%);",
    "caret-color: hsla(2,2%,2%,0.5);",
    "clear: both;",
    "clip: rect(0px,60px,200px,0px);",
    "clip: auto;",
    "color: red;",
    "color: rgb(2,2,2);",
    "color: rgba(2,2,2,0.5);",
    "color: hsl(2,2%,2%);",
    "color: hsla(2,2%,2%,0.5);",
    "column-count: 3;",
    "column-count: auto;",
    "column-fill: balance;",
    "column-gap: 40px;",
    "column-gap: normal;",
    "column-rule: 4px double #ff00ff;",
    "column-rule-color: #ff00ff;",
    "column-rule-color: #f0ff;",
    "column-rule: red;",
    "column-rule-width: 4px;",
    "column-span: all;",
    "column-width: 4px;",
    "column-width: auto;",
    "columns: 4px 3",
    "columns: auto",
    "cursor: alias",
    "direction: rtl",
    "display: block",
    "empty-cells: hide",
    "filter: grayscale(100%)",
    "filter: sepia(100%)",
    "flex: 1",
    "flex: auto",
    "flex-basis: 10px",
    "flex-basis: auto",
    "flex-direction: row-reverse",
    "flex-flow: row-reverse wrap",
    "flex-flow: initial",
    "flex-grow: 1",
    "flex-grow: initial",
    "flex-shrink: 3",
    "flex-wrap: wrap",
    "float: right",
    "font: italic bold 12px/30px Georgia, serif",
    "font: icon",
    "font-family: 'Times New Roman', Times, serif",
    "font-family: comic sans ms, cursive, sans-serif;",
    "font-kerning: normal",
    "font-language-override: normal",
    "font-size: large",
    "font-size-adjust: 0.58",
    "font-size-adjust: auto",
    "font-stretch: expanded",
    "font-style: italic",
    "font-synthesis: style",
    "font-variant: small-caps",
    "font-variant-caps: small-caps",
    "font-variant-position: sub",
    "font-weight: normal",
    "grid: 150px / auto auto auto;",
    "grid: none;",
    "grid-area: 2 / 1 / span 2 / span 3;",
    "grid-auto-columns: 150px;",
    "grid-auto-columns: auto;",
    "grid-auto-flow: column;",
    "grid-auto-rows: 150px;",
    "grid-column: 1 / span 2;",
    "grid-column-end: span 2;",
    "grid-column-end: auto;",
    "grid-column-gap: 10px;",
    "grid-column-start: 1;",
    "grid-gap: 1px;",
    "grid-row: 1 / span 2;",
    "grid-row-end: span 2;",
    "grid-row-gap: 10px;",
    "grid-row-start: 1;",
    "grid-template: 150px / auto auto auto;",
    "grid-template: none",
    "grid-template-areas: none;",
    "grid-template-areas: 'Billy'",
    "grid-template-columns: auto auto auto auto auto;",
    "grid-template-rows: 150px 150px",
    "hanging-punctuation: first;",
    "height: 50px;",
    "height: auto;",
    "hyphens: manual;",
    "isolation: isolate;",
    "image-rendering: smooth;",
    "justify-content: center;",
    "left: 150px;",
    "letter-spacing: -3px;",
    "letter-spacing: normal;",
    "line-break: auto",
    "line-height: 1.6;",
    "line-height: normal;",
    "list-style: square inside url(http://sqpurple.gif);",
    "list-style: initial",
    "list-style-image: url(http://sqpurple.gif);",
    "list-style-position: inside;",
    "list-style-type: square;",
    "margin: 150px;",
    "margin: auto;",
    "margin-bottom: 150px;",
    "margin-bottom: auto;",
    "margin-left: 150px;",
    "margin-right: 150px;",
    "margin-top: 150px;",
    "max-height: 150px;",
    "max-height: initial;",
    "max-width: 150px;",
    "min-height: 150px;",
    "min-height: initial;",
    "min-width: 150px;",
    "mix-blend-mode: darken;",
    "object-fit: cover;",
    "object-position: 5px 10%;",
    "object-position: initial",
    "opacity: 0.5;",
    "opacity: initial",
    "order: 2;",
    "order: initial",
    "outline: 2px dashed blue;",
    "outline: initial",
    "outline-color: blue;",
    "outline-offset: 2px;",
    "outline-offset: initial;",
    "outline-style: dashed;",
    "outline-width: thick;",
    "overflow: scroll;",
    "overflow-x: scroll;",
    "overflow-y: scroll;",
    "overflow-wrap: anywhere;",
    "orphans: 2;",
    "padding: 55px;",
    "padding-bottom: 55px;",
    "padding-bottom: initial;",
    "padding-left: 55px;",
    "padding-right: 55px;",
    "padding-top: 55px;",
    "page-break-after: always;",
    "page-break-before: always;",
    "page-break-inside: avoid;",
    "perspective: 100px;",
    "perspective: none;",
    "perspective-origin: left;",
    "pointer-events: auto;",
    "position: absolute;",
    "quotes: '‹' '›';",
    "resize: both;",
    "right: 10px;",
    "scroll-behavior: smooth;",
    "tab-size: 16;",
    "tab-size: initial;",
    "table-layout: fixed;",
    "text-align: justify;",
    "text-align-last: justify;",
    "text-combine-upright: none;",
    "text-combine-upright: digits 2",
    "text-decoration: underline underline;",
    "text-decoration: initial",
    "text-decoration-color: red;",
    "text-decoration-line: underline underline;",
    "text-decoration-style: solid;",
    "text-indent: 30%;",
    "text-indent: initial",
    "text-orientation: mixed",
    "text-justify: inter-word;",
    "text-overflow: ellipsis;",
    "text-overflow: 'something'",
    "text-shadow: 2px 2px #ff0000;",
    "text-transform: uppercase;",
    "top: 150px;",
    "transform: scaleY(1.5);",
    "transform: perspective(20px);",
    "transform-origin: 40% 40%;",
    "transform-style: preserve-3d;",
    "transition: width 2s;",
    "transition-delay: 2s;",
    "transition-delay: initial;",
    "transition-duration: 2s;",
    "transition-duration: initial;",
    "transition-property: width;",
    "transition-property: initial;",
    "transition-timing-function: linear;",
    "unicode-bidi: bidi-override;",
    "user-select: none;",
    "vertical-align: text-bottom;",
    "visibility: visible;",
    "white-space: normal;",
    "width: 130px;",
    "width: auto;",
    "word-break: break-all;",
    "word-spacing: 30px;",
    "word-spacing: normal",
    "word-wrap: break-word;",
    "writing-mode: vertical-rl;",
    "z-index: -1;",
    "z-index: auto;",
]

REJECTED_STYLES = [
    "nonexistentStyle: something;",
    "border-image-slice: 3% 3% 3% 3% 3%;",
    "border-radius: 1px 1px 1px 1px 1px;",
    "border-style: dotted dotted dotted dotted dotted;",
    "border-width: thin thin thin thin thin;",
    "box-shadow: aa;",
    "box-shadow: 10px aa;",
    "box-shadow: 10px;",
    "box-shadow: 10px 10px aa;",
    "grid-gap: 1px 1px 1px;",
    "grid-template: a / a / a",
    "grid-template-rows: aaaa aaaaa",
    "object-position: 5px 10% 5px;",
]


@pytest.fixture(scope="module")
def allow_all_policy():
    p = Policy(config=SanitizerConfig())
    p.allow_styles(*DEFAULT_HANDLERS, "nonexistentstyle").globally()
    return p.freeze()


@pytest.mark.parametrize("style", ACCEPTED_STYLES)
def test_default_handlers_accept(allow_all_policy, style):
    assert allow_all_policy.sanitize("div", style) == style.rstrip(";")


@pytest.mark.parametrize("style", REJECTED_STYLES)
def test_default_handlers_reject(allow_all_policy, style):
    assert allow_all_policy.sanitize("div", style) == ""
