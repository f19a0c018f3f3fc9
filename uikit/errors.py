"""
The MIT License (MIT)

Copyright (c) 2015-present Rapptz

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
DEALINGS IN THE SOFTWARE.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .components import Component
    from .validation import ValidationRule

__all__ = (
    'ComponentException',
    'ParseError',
    'UnknownComponentType',
    'ValidationError',
    'ComponentLimitReached',
    'DecodeDepthExceeded',
)


class ComponentException(Exception):
    """Base exception class for the library.

    Ideally speaking, this could be caught to handle any exceptions raised from this library.
    """

    pass


class ParseError(ComponentException):
    """Exception that's raised when a component payload could not be parsed.

    This is raised for malformed JSON as well as for payloads whose
    fields do not have the expected shape. A failure anywhere in a
    nested tree fails the whole decode.
    """

    pass


class UnknownComponentType(ComponentException):
    """Exception that's raised when a payload's ``type`` is not a registered component type.

    Attributes
    -----------
    type: Any
        The discriminator that was received.
    """

    def __init__(self, type: Any) -> None:
        self.type: Any = type
        super().__init__(f'unknown component type: {type!r}')


class ValidationError(ComponentException):
    """Exception that's raised or returned when a component breaks one of its invariants.

    Attributes
    -----------
    rule: :class:`ValidationRule`
        The rule that was violated.
    component: :class:`Component`
        The component that violated the rule.
    """

    def __init__(self, rule: ValidationRule, component: Component, message: Optional[str] = None) -> None:
        self.rule: ValidationRule = rule
        self.component: Component = component
        super().__init__(message or rule.description)


class ComponentLimitReached(ComponentException):
    """Exception that's raised when a component would exceed a size limit.

    Attributes
    -----------
    limit: :class:`int`
        The limit that was reached.
    """

    def __init__(self, limit: int, message: Optional[str] = None) -> None:
        self.limit: int = limit
        super().__init__(message or f'component limit of {limit} reached')


class DecodeDepthExceeded(ComponentLimitReached):
    """Exception that's raised when a payload nests deeper than the decoder allows.

    This inherits from :exc:`ComponentLimitReached`.
    """

    def __init__(self, limit: int) -> None:
        super().__init__(limit, f'component tree nests deeper than {limit} levels')
