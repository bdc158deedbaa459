#!/usr/bin/env python3

"""
Custom exceptions for the GFF3 converters.

Fatal errors (UsageError, FormatError, ConfigurationError, MemoryLimitError)
propagate to the command line and abort the run. RecoverableSkip is caught
at the record boundary by the parser that raised it.
"""

class ConversionError(Exception):
    """Base exception for all converter errors."""
    pass


class UsageError(ConversionError):
    """No input was given, or the options do not fit together."""
    pass


class FormatError(ConversionError):
    """Input stream does not match the expected structure."""

    def __init__(self, message: str, filename: str = "", line_number: int = 0):
        super().__init__(message)
        self.filename = filename
        self.line_number = line_number

    def __str__(self):
        if self.filename and self.line_number:
            return f"Format error in {self.filename} at line {self.line_number}: {super().__str__()}"
        elif self.filename:
            return f"Format error in {self.filename}: {super().__str__()}"
        return super().__str__()


class RecoverableSkip(ConversionError):
    """A record was understood but cannot be converted; skip it and go on."""

    def __init__(self, message: str, filename: str = "", line_number: int = 0,
                 accession: str = ""):
        super().__init__(message)
        self.filename = filename
        self.line_number = line_number
        self.accession = accession

    def __str__(self):
        location = f"line {self.line_number} of {self.filename}"
        if self.accession:
            return f"{super().__str__()} for {self.accession} on {location}"
        return f"{super().__str__()} on {location}"


class ConfigurationError(ConversionError):
    """Error in converter configuration."""
    pass


class MemoryLimitError(ConversionError):
    """Memory usage exceeded limits."""

    def __init__(self, message: str, current_usage: float, limit: float):
        super().__init__(message)
        self.current_usage = current_usage
        self.limit = limit

    def __str__(self):
        return f"Memory error: {super().__str__()} (current: {self.current_usage:.1f}MB, limit: {self.limit:.1f}MB)"
