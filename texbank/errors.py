# -*- coding: utf-8 -*-
"""
Error kinds raised by the conversion modules.

Date: 2026-10-19
"""


class ConversionError(Exception):
    """Base class for conversion failures."""
    pass


class InputReadError(ConversionError):
    """The primary input file is missing or unreadable."""
    pass


class ParseError(ConversionError):
    """The primary input file is not valid JSON."""
    pass


class SchemaError(ConversionError):
    """A required top-level field is missing or has the wrong shape."""
    pass


class MalformedInputError(ConversionError):
    """A 'questions' key holds something other than a list."""

    def __init__(self, path: str, value_type: str):
        self.path = path
        self.value_type = value_type
        super().__init__(f"'questions' at {path} must be a list, got {value_type}")


class PerItemWriteError(ConversionError):
    """A single output file could not be written."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write {path}: {reason}")
