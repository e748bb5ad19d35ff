"""Exceptions raised by makedeck."""


class MakeDeckError(Exception):
    """Base class for every error makedeck reports to the caller."""

    exit_code = 1


class UsageError(MakeDeckError):
    """Missing command-line arguments or an unrecognised command."""

    exit_code = 2


class InputShapeError(MakeDeckError):
    """The descriptor payload is not valid JSON or does not match the expected shape."""


class WriteError(MakeDeckError):
    """The presentation could not be written to the output path."""
