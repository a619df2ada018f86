"""Parsing and decoding helpers used by the sanitizer."""
