# topmark:header:start
#
#   project      : CFormat
#   file         : errors.py
#   file_relpath : src/cformat/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while parsing templates and rendering arguments.

The taxonomy is flat: every error derives from `FormatError` and carries an
`ErrorKind` tag, so callers may either catch a specific class or branch on
``exc.kind``.

Usage:
    ```python
    from cformat import render
    from cformat.core.errors import ErrorKind, FormatError

    try:
        render("%d %d", [1])
    except FormatError as exc:
        assert exc.kind is ErrorKind.NOT_ENOUGH_ARGS
    ```
"""

from __future__ import annotations

from typing import ClassVar

from cformat.core.enum_mixins import KeyedStrEnum


class ErrorKind(KeyedStrEnum):
    """Category of a formatting failure."""

    PARSE_ERROR = ("parse_error", "Malformed format string")
    WRONG_TYPE = ("wrong_type", "Argument does not support the conversion")
    NOT_ENOUGH_ARGS = ("not_enough_args", "Too few arguments")
    TOO_MANY_ARGS = ("too_many_args", "Too many arguments")
    UNKNOWN = ("unknown", "Unexpected formatter state")


class FormatError(Exception):
    """Base class for all CFormat errors.

    Attributes:
        kind (ErrorKind): Category of the error (class-level tag).
        message (str): Human-readable description.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.UNKNOWN

    def __init__(self, message: str | None = None) -> None:
        self.message: str = message or self.kind.label
        super().__init__(self.message)


class ParseError(FormatError):
    """The template contains a malformed conversion specifier.

    Attributes:
        offset (int | None): Index of the offending ``%`` in the template.
    """

    kind = ErrorKind.PARSE_ERROR

    def __init__(self, message: str | None = None, *, offset: int | None = None) -> None:
        self.offset: int | None = offset
        if message is not None and offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)


class ArgumentError(FormatError):
    """Base class for errors tied to a position in the argument list.

    Attributes:
        index (int | None): Zero-based index of the argument involved, if known.
    """

    def __init__(self, message: str | None = None, *, index: int | None = None) -> None:
        self.index: int | None = index
        if message is not None and index is not None:
            message = f"argument {index}: {message}"
        super().__init__(message)


class WrongTypeError(ArgumentError):
    """An argument cannot be rendered with the requested conversion."""

    kind = ErrorKind.WRONG_TYPE


class NotEnoughArgsError(ArgumentError):
    """The template consumes more arguments than were supplied."""

    kind = ErrorKind.NOT_ENOUGH_ARGS


class TooManyArgsError(ArgumentError):
    """Arguments remain after every conversion has been rendered."""

    kind = ErrorKind.TOO_MANY_ARGS


class UnknownFormatError(FormatError):
    """Internal inconsistency, e.g. an unresolved width reaching a renderer."""

    kind = ErrorKind.UNKNOWN
