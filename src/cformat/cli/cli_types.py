# topmark:header:start
#
#   project      : CFormat
#   file         : cli_types.py
#   file_relpath : src/cformat/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI parameter types and enums.

`EnumChoiceParam` turns option values into `KeyedStrEnum` members, accepting
each member's key, name or aliases (so ``--rounding exact`` selects
``FloatRounding.LIBC``), and offers the keys for shell completion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar

import click

from cformat.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType

# Type variable bounded to KeyedStrEnum for the generic parameter type
E = TypeVar("E", bound=KeyedStrEnum)


class OutputFormat(KeyedStrEnum):
    """Output format of the listing commands.

    Machine formats never include ANSI color.
    """

    TEXT = ("text", "Human-friendly text", ("default",))
    JSON = ("json", "A single JSON document")


class ColorMode(KeyedStrEnum):
    """User intent for colorized terminal output."""

    AUTO = ("auto", "Color when stdout is a terminal")
    ALWAYS = ("always", "Always emit color")
    NEVER = ("never", "Never emit color")


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a `KeyedStrEnum`."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = self.enum_cls.keys()

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert ``value`` to a member of the enum (members pass through)."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self.enum_cls.parse(str(value))
        if member is not None:
            return member
        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete member keys for Click's shell completion.

        Bash: `eval "$(_CFORMAT_COMPLETE=bash_source cformat)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [RuntimeCompletionItem(key) for key in self.choices if key.startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
