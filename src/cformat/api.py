# topmark:header:start
#
#   project      : CFormat
#   file         : api.py
#   file_relpath : src/cformat/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public CFormat API (stable surface).

Functions here are thin wrappers around the parser and the engine. They accept
either `Argument` instances or native Python values (see
`cformat.values.coerce`).

Policy contract
---------------
Every rendering function takes an optional ``policy``: ``None`` for the
defaults, a frozen `FormatPolicy`, or a plain mapping shaped like the
``[format]`` TOML table:

```python
from cformat import api

api.render("[%*d]", [-5, 42], policy={"negative_width": "ignore"})
```

Arguments contract
------------------
`render` mirrors Python's ``%`` operator: a ``list`` or ``tuple`` is the
argument sequence, any other object is the single argument.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from cformat.config.logging import get_logger
from cformat.config.policy import DEFAULT_POLICY, FormatPolicy, MutableFormatPolicy
from cformat.core.engine import ParsedFormat, render_elements
from cformat.core.parser import parse as _parse

if TYPE_CHECKING:
    from cformat.config.logging import CFormatLogger
    from cformat.core.specifier import FormatElement

logger: CFormatLogger = get_logger(__name__)

PolicyLike = FormatPolicy | Mapping[str, Any] | None


def resolve_policy(policy: PolicyLike) -> FormatPolicy:
    """Normalize a policy argument to a frozen `FormatPolicy`.

    Raises:
        PolicyValueError: If a mapping holds unknown keys or values.
    """
    if policy is None:
        return DEFAULT_POLICY
    if isinstance(policy, FormatPolicy):
        return policy
    resolved: FormatPolicy = MutableFormatPolicy.from_toml_dict(policy).freeze()
    logger.debug("Resolved policy mapping %r to %s", dict(policy), resolved)
    return resolved


def parse(template: str) -> tuple[FormatElement, ...]:
    """Parse ``template`` into verbatim runs and conversion specifiers.

    Raises:
        ParseError: If the template is malformed.
    """
    return _parse(template)


def compile_format(template: str) -> ParsedFormat:
    """Parse ``template`` once for repeated rendering.

    Example:
        ```python
        >>> row = compile_format("%-8s|%6.2f")
        >>> row.argument_count
        2
        >>> row.render(["pi", 3.14159])
        'pi      |  3.14'
        ```
    """
    return ParsedFormat(template, _parse(template))


def render(template: str, arguments: object = (), *, policy: PolicyLike = None) -> str:
    """Render ``template`` with ``arguments``.

    Args:
        template (str): The printf-style template.
        arguments (object): A list or tuple of arguments, or a single argument.
        policy (PolicyLike): Rendering policy (see module docstring).

    Returns:
        str: The formatted text.

    Raises:
        FormatError: Any subclass, see `cformat.core.errors`.
    """
    values: list[object] | tuple[object, ...] = (
        arguments if isinstance(arguments, (list, tuple)) else (arguments,)
    )
    return render_elements(_parse(template), values, resolve_policy(policy))


def sprintf(template: str, *args: object, policy: PolicyLike = None) -> str:
    """Render ``template`` with positional ``args``, like C's ``sprintf``.

    Example:
        ```python
        >>> sprintf("%#06x|%+.2f|%q", 16, 3.14159, "a\\nb")
        '0x0010|+3.14|"a\\\\nb"'
        ```
    """
    return render_elements(_parse(template), args, resolve_policy(policy))


__all__: list[str] = [
    "DEFAULT_POLICY",
    "ParsedFormat",
    "PolicyLike",
    "compile_format",
    "parse",
    "render",
    "resolve_policy",
    "sprintf",
]
