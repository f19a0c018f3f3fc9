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

import re
from typing import TYPE_CHECKING, Any, Optional

from .utils import _get_as_snowflake

if TYPE_CHECKING:
    from typing_extensions import Self

    from .types.components import PartialEmoji as PartialEmojiPayload

__all__ = ('PartialEmoji',)


class PartialEmoji:
    """Represents a "partial" emoji attached to a component.

    This model will be given in two scenarios:

    - Custom emoji, which carry an ID and possibly the animated flag
    - Unicode emoji, which only carry a name

    .. container:: operations

        .. describe:: x == y

            Checks if two emoji are the same. Custom emoji compare
            their ID, name and animated flag.

        .. describe:: x != y

            Checks if two emoji are not the same.

        .. describe:: str(x)

            Returns the emoji rendered for the remote service.

    Attributes
    -----------
    name: Optional[:class:`str`]
        The custom emoji name, if applicable, or the unicode codepoint
        of the non-custom emoji.
    id: Optional[:class:`int`]
        The ID of the custom emoji, if applicable.
    animated: :class:`bool`
        Whether the emoji is animated or not.
    """

    __slots__ = ('name', 'id', 'animated')

    _CUSTOM_EMOJI_RE = re.compile(r'<?(?:(?P<animated>a)?:)?(?P<name>[A-Za-z0-9\_]+):(?P<id>[0-9]{13,20})>?')

    def __init__(self, *, name: Optional[str] = None, id: Optional[int] = None, animated: bool = False) -> None:
        self.name: Optional[str] = name or None
        self.id: Optional[int] = id
        self.animated: bool = animated

    @classmethod
    def from_dict(cls, data: PartialEmojiPayload) -> Self:
        return cls(
            name=data.get('name'),
            id=_get_as_snowflake(data, 'id'),
            animated=data.get('animated', False),
        )

    @classmethod
    def from_str(cls, value: str) -> Self:
        """Converts a string into a :class:`PartialEmoji`.

        The formats accepted are:

        - ``a:name:id``
        - ``<a:name:id>``
        - ``name:id``
        - ``<:name:id>``

        If the format does not match then it is assumed to be a unicode emoji.

        Parameters
        ------------
        value: :class:`str`
            The string representation of an emoji.

        Returns
        --------
        :class:`PartialEmoji`
            The partial emoji from this string.
        """
        match = cls._CUSTOM_EMOJI_RE.match(value)
        if match is not None:
            groups = match.groupdict()
            animated = bool(groups['animated'])
            emoji_id = int(groups['id'])
            name = groups['name']
            return cls(name=name, animated=animated, id=emoji_id)

        return cls(name=value, id=None, animated=False)

    def to_dict(self) -> PartialEmojiPayload:
        payload: PartialEmojiPayload = {}
        if self.name:
            payload['name'] = self.name
        if self.id:
            payload['id'] = str(self.id)
        if self.animated:
            payload['animated'] = True
        return payload

    def is_custom_emoji(self) -> bool:
        """:class:`bool`: Checks if this is a custom non-Unicode emoji."""
        return self.id is not None

    def is_unicode_emoji(self) -> bool:
        """:class:`bool`: Checks if this is a Unicode emoji."""
        return self.id is None

    def __str__(self) -> str:
        # Coerce empty names to _ so it renders in the client regardless of having no name
        name = self.name or '_'
        if self.id is None:
            return name
        if self.animated:
            return f'<a:{name}:{self.id}>'
        return f'<:{name}:{self.id}>'

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} animated={self.animated} name={self.name!r} id={self.id}>'

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PartialEmoji):
            return NotImplemented
        if self.is_unicode_emoji():
            return other.is_unicode_emoji() and self.name == other.name
        return self.id == other.id and self.name == other.name and self.animated == other.animated

    def __hash__(self) -> int:
        return hash((self.id, self.name))
