"""Services that evaluate styles against a policy."""

from .sanitizer import StyleSanitizer, VENDOR_PREFIXES, strip_vendor_prefix

__all__ = [
    'StyleSanitizer',
    'VENDOR_PREFIXES',
    'strip_vendor_prefix',
]
