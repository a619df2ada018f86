"""Split an inline style attribute into declarations using tinycss2.

tinycss2 tokenizes the text exactly the way a browser would, which decides
where one declaration ends and the next begins. Its serializer, however,
rewrites tokens (escapes are decoded, numbers reformatted), so the raw text
of each declaration is sliced back out of the source using the line and
column of the tokens around it.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import tinycss2

from ..errors import DeclarationParseError
from ..models.declaration import Declaration

logger = logging.getLogger(__name__)

CSS_WHITESPACE = " \t\n\r\f"


class _SourceMap:
    """Translate tinycss2 (line, column) positions to offsets in the source.

    tinycss2 counts lines after folding ``\\r\\n``, ``\\r`` and ``\\f`` into
    ``\\n``. Columns within a line are unaffected, so recording where each
    line starts in the unprocessed text is enough.
    """

    def __init__(self, css: str):
        self.line_starts = [0]
        index = 0
        while index < len(css):
            char = css[index]
            if char == '\r' and css.startswith('\n', index + 1):
                index += 1
            if char in '\r\n\f':
                self.line_starts.append(index + 1)
            index += 1

    def offset(self, node) -> int:
        return self.line_starts[node.source_line - 1] + node.source_column - 1


def _is_blank(tokens: list) -> bool:
    return all(token.type in ('whitespace', 'comment') for token in tokens)


def _declaration_from_segment(css: str, source: _SourceMap, tokens: list, end: int) -> Declaration:
    parsed = tinycss2.parse_one_declaration(tokens)
    if parsed.type == 'error':
        raise DeclarationParseError(parsed.message, parsed.source_line, parsed.source_column)

    significant = [(i, t) for i, t in enumerate(tokens) if t.type not in ('whitespace', 'comment')]
    name_index, name_token = significant[0]
    colon_token = significant[1][1]

    # The name is a single ident token, so the next token marks its end
    name_end = source.offset(tokens[name_index + 1])
    property_text = css[source.offset(name_token):name_end]

    value_end = end
    if parsed.important:
        bang = [t for t in tokens if t == '!'][-1]
        value_end = min(value_end, source.offset(bang))
    value_text = css[source.offset(colon_token) + 1:value_end].strip(CSS_WHITESPACE)

    return Declaration(property=property_text, value=value_text)


def parse_declarations(style: str, end: Optional[int] = None) -> List[Declaration]:
    """Parse the contents of a ``style`` attribute into declarations.

    Declarations are returned in source order with their raw text. Empty
    segments (``;;``) are skipped. A segment that is not a ``name: value``
    declaration, such as a bare word or an at-rule, fails the whole parse.

    Args:
        style: Style attribute text
        end: Length of the caller's own text when it appended a terminator
            to `style`. No declaration text extends past this offset, even
            when an unterminated string or escape swallowed the terminator.

    Raises:
        DeclarationParseError: if any segment is not a declaration.
    """
    if end is None:
        end = len(style)
    source = _SourceMap(style)

    declarations: List[Declaration] = []
    segment: list = []
    for token in tinycss2.parse_component_value_list(style):
        if token == ';':
            if not _is_blank(segment):
                segment_end = min(source.offset(token), end)
                declarations.append(_declaration_from_segment(style, source, segment, segment_end))
            segment = []
        else:
            segment.append(token)

    if not _is_blank(segment):
        declarations.append(_declaration_from_segment(style, source, segment, end))

    logger.debug(f"[CSS PARSER] Parsed {len(declarations)} declarations from {len(style)} chars")
    return declarations
