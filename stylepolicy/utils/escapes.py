"""Decoding of CSS hex escapes in property values.

CSS lets a value spell any character as a backslash followed by one to six
hex digits and an optional space, so ``\\6a avascript:`` reads as
``javascript:`` to a browser. Values are decoded with `normalize_value()`
before any rule sees them; the decoded text is only ever used for matching.
"""
import re

from ..errors import EscapeDecodeError

CSS_UNICODE_ESCAPE = re.compile(r"\\([0-9a-fA-F]{1,6}) ?")


def _decode_escape(hex_digits: str) -> str:
    """Decode the hex digits of one escape into a character.

    Short sequences are zero padded to four digits. Longer ones may only
    shed leading zeros; a code point that still needs more than four digits
    is refused rather than truncated.
    """
    if len(hex_digits) < 4:
        hex_digits = hex_digits.rjust(4, "0")
    while len(hex_digits) > 4:
        if hex_digits[0] != "0":
            raise EscapeDecodeError(f"escape \\{hex_digits} is outside the basic multilingual plane")
        hex_digits = hex_digits[1:]

    code_point = int(hex_digits, 16)
    # Lone surrogates are not characters
    if 0xD800 <= code_point <= 0xDFFF:
        raise EscapeDecodeError(f"escape \\{hex_digits} is a surrogate code point")
    return chr(code_point)


def normalize_value(value: str) -> str:
    """Replace every CSS hex escape in `value` with the character it encodes.

    Escapes are decoded leftmost first, and the search restarts on the
    rewritten string, so an escape that decodes to a backslash can combine
    with the following text into a new escape. Every pass shortens the
    string, which bounds the loop.

    Raises:
        EscapeDecodeError: if any escape cannot be decoded.
    """
    match = CSS_UNICODE_ESCAPE.search(value)
    while match is not None:
        character = _decode_escape(match.group(1))
        value = value[:match.start()] + character + value[match.end():]
        match = CSS_UNICODE_ESCAPE.search(value)
    return value
