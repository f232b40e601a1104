# topmark:header:start
#
#   project      : CFormat
#   file         : engine.py
#   file_relpath : src/cformat/core/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render parsed templates against an argument list.

Design:
    * A call-local `ArgumentCursor` hands out arguments in order. Each
      ``Specifier`` first takes ``*`` width, then ``*`` precision, then its
      value; ``%%`` takes nothing.
    * Argument-supplied widths and precisions are substituted into a copy of
      the parsed specifier (``dataclasses.replace``) before the value renders
      itself, so renderers only ever see literal numbers.
    * Output is assembled in a list and returned only when every element has
      rendered and every argument has been used; a failure yields no output.

Negative ``*`` values:
    * width: ``left-adjust`` policy sets the ``-`` flag and uses the absolute
      value; ``ignore`` policy applies no padding.
    * precision: treated as if no precision had been written.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from cformat.config.logging import get_logger
from cformat.config.policy import DEFAULT_POLICY, NegativeWidth
from cformat.constants import DEFAULT_PRECISION, UNBOUNDED_PRECISION
from cformat.core.errors import NotEnoughArgsError, TooManyArgsError, WrongTypeError
from cformat.core.specifier import (
    ConversionType,
    FromArgument,
    NumericLiteral,
    Specifier,
    Verbatim,
)
from cformat.values.coerce import to_argument

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cformat.config.logging import CFormatLogger
    from cformat.config.policy import FormatPolicy
    from cformat.core.specifier import ConversionSpecifier, FormatElement
    from cformat.values.base import Argument

logger: CFormatLogger = get_logger(__name__)


class ArgumentCursor:
    """Sequential, call-local access to the arguments of one render."""

    def __init__(self, arguments: Sequence[object]) -> None:
        self._arguments: Sequence[object] = arguments
        self.position: int = 0

    @property
    def remaining(self) -> int:
        """Number of arguments not yet consumed."""
        return len(self._arguments) - self.position

    def pop(self) -> tuple[int, Argument]:
        """Take the next argument, coerced to an `Argument`.

        Returns:
            tuple[int, Argument]: Its zero-based index and the argument.

        Raises:
            NotEnoughArgsError: If every argument has been consumed.
            WrongTypeError: If the value has no argument representation.
        """
        index: int = self.position
        if index >= len(self._arguments):
            raise NotEnoughArgsError(
                f"template needs more than {len(self._arguments)} argument(s)", index=index
            )
        self.position += 1
        try:
            return index, to_argument(self._arguments[index])
        except WrongTypeError as exc:
            raise WrongTypeError(exc.message, index=index) from exc

    def pop_plain_integer(self, purpose: str) -> int:
        """Take the next argument as a C ``int`` (for ``*``).

        Raises:
            WrongTypeError: If the argument has no plain integer view.
        """
        index, argument = self.pop()
        value: int | None = argument.as_plain_integer()
        if value is None:
            raise WrongTypeError(f"{purpose} from '*' must be a C int", index=index)
        logger.trace("argument %d supplies %s %d", index, purpose, value)
        return value


def resolve_specifier(
    spec: ConversionSpecifier,
    cursor: ArgumentCursor,
    policy: FormatPolicy = DEFAULT_POLICY,
) -> ConversionSpecifier:
    """Substitute ``*`` width and precision with values taken from ``cursor``.

    Args:
        spec (ConversionSpecifier): The parsed specifier.
        cursor (ArgumentCursor): Source of argument-supplied values.
        policy (FormatPolicy): Decides how a negative width is applied.

    Returns:
        ConversionSpecifier: ``spec`` itself when nothing refers to an
        argument, else a completed copy.
    """
    changes: dict[str, Any] = {}

    if isinstance(spec.width, FromArgument):
        width: int = cursor.pop_plain_integer("width")
        if width < 0 and policy.negative_width is NegativeWidth.LEFT_ADJUST:
            changes["left_adjust"] = True
            width = -width
        changes["width"] = NumericLiteral(width)

    if isinstance(spec.precision, FromArgument):
        precision: int = cursor.pop_plain_integer("precision")
        if precision < 0:
            default: int = (
                UNBOUNDED_PRECISION
                if spec.conversion_type is ConversionType.STRING
                else DEFAULT_PRECISION
            )
            changes["precision"] = NumericLiteral(default)
            changes["explicit_precision"] = False
        else:
            changes["precision"] = NumericLiteral(precision)

    return replace(spec, **changes) if changes else spec


def render_elements(
    elements: Sequence[FormatElement],
    arguments: Sequence[object],
    policy: FormatPolicy = DEFAULT_POLICY,
) -> str:
    """Render parsed ``elements`` with ``arguments``.

    Args:
        elements (Sequence[FormatElement]): Output of `cformat.core.parser.parse`.
        arguments (Sequence[object]): `Argument` instances or native values.
        policy (FormatPolicy): Rendering policy.

    Returns:
        str: The complete output.

    Raises:
        NotEnoughArgsError: If the template consumes more arguments than given.
        TooManyArgsError: If arguments remain at the end.
        WrongTypeError: If an argument does not support its conversion.
    """
    cursor = ArgumentCursor(arguments)
    out: list[str] = []

    try:
        for element in elements:
            if isinstance(element, Verbatim):
                out.append(element.text)
                continue
            out.append(_render_specifier(element, cursor, policy))

        if cursor.remaining:
            raise TooManyArgsError(
                f"{cursor.remaining} argument(s) left over", index=cursor.position
            )
    except (NotEnoughArgsError, TooManyArgsError, WrongTypeError) as exc:
        logger.debug("rendering failed: %s", exc)
        raise

    return "".join(out)


def _render_specifier(element: Specifier, cursor: ArgumentCursor, policy: FormatPolicy) -> str:
    spec: ConversionSpecifier = element.spec
    if not spec.consumes_argument:
        return "%"

    spec = resolve_specifier(spec, cursor, policy)
    index, argument = cursor.pop()
    logger.trace("argument %d (%r) as %s", index, argument, spec.conversion_type.key)
    try:
        return argument.render_as(spec, policy)
    except WrongTypeError as exc:
        if exc.index is not None:
            raise
        raise WrongTypeError(exc.message, index=index) from exc


def count_arguments(elements: Sequence[FormatElement]) -> int:
    """Return how many arguments rendering ``elements`` consumes."""
    count: int = 0
    for element in elements:
        if isinstance(element, Specifier) and element.spec.consumes_argument:
            count += 1
            count += isinstance(element.spec.width, FromArgument)
            count += isinstance(element.spec.precision, FromArgument)
    return count


@dataclass(frozen=True, slots=True)
class ParsedFormat:
    """A parsed template, reusable across renders.

    Attributes:
        template (str): The source template.
        elements (tuple[FormatElement, ...]): Its parsed elements.
    """

    template: str
    elements: tuple[FormatElement, ...]

    @property
    def argument_count(self) -> int:
        """Number of arguments (values and ``*`` parameters) a render consumes."""
        return count_arguments(self.elements)

    def render(self, arguments: Sequence[object] = (), policy: FormatPolicy = DEFAULT_POLICY) -> str:
        """Render this template; see `render_elements`."""
        return render_elements(self.elements, arguments, policy)
