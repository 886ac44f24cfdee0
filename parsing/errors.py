"""Errors raised by the parsing layer."""


class ParseFailure(Exception):
    """The input could not be interpreted as markup at all."""
