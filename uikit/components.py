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

import functools
import logging
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Dict,
    Iterable,
    Iterator,
    List,
    Literal,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from .enums import (
    ButtonSize,
    ButtonStyle,
    ChannelType,
    ComponentType,
    ModalSize,
    SelectDefaultValueType,
    TextStyle,
    try_enum,
)
from .errors import ComponentException, DecodeDepthExceeded, ParseError, UnknownComponentType
from .partial_emoji import PartialEmoji
from .utils import MISSING, _from_json, _get_as_snowflake, _to_json, get_slots

if TYPE_CHECKING:
    from .types.components import (
        Accordion as AccordionPayload,
        AccordionItem as AccordionItemPayload,
        ActionRow as ActionRowPayload,
        ButtonComponent as ButtonComponentPayload,
        Component as ComponentPayload,
        Modal as ModalPayload,
        PlaceholderComponent as PlaceholderComponentPayload,
        SelectDefaultValues as SelectDefaultValuesPayload,
        SelectMenu as SelectMenuPayload,
        SelectOption as SelectOptionPayload,
        Tab as TabPayload,
        Tabs as TabsPayload,
        TextInput as TextInputPayload,
    )


__all__ = (
    'Component',
    'ActionRow',
    'Button',
    'SelectMenu',
    'SelectOption',
    'SelectDefaultValue',
    'TextInput',
    'Modal',
    'Tab',
    'Tabs',
    'AccordionItem',
    'Accordion',
    'Section',
    'TextDisplay',
    'Thumbnail',
    'MediaGallery',
    'FileComponent',
    'Separator',
    'Container',
    'MAX_ACTION_ROW_CHILDREN',
    'component_registry',
    'create_component',
    'component_from_dict',
    'component_from_json',
    'components_from_json',
    'component_to_json',
    'components_to_json',
    'components_to_dicts',
    'walk_components',
)

_log = logging.getLogger(__name__)

MAX_ACTION_ROW_CHILDREN = 5

_SELECT_TYPES = (
    ComponentType.select,
    ComponentType.user_select,
    ComponentType.role_select,
    ComponentType.mentionable_select,
    ComponentType.channel_select,
)


def _value_of(value: Any) -> Any:
    return getattr(value, 'value', value)


def _coerce_emoji(emoji: Optional[Union[str, PartialEmoji]]) -> Optional[PartialEmoji]:
    if emoji is None or isinstance(emoji, PartialEmoji):
        return emoji
    if isinstance(emoji, str):
        return PartialEmoji.from_str(emoji)
    raise TypeError(f'expected emoji to be str or PartialEmoji not {emoji.__class__.__name__}')


def _field(data: Any, key: str, kind: type, default: Any = None) -> Any:
    # A null value counts as absent. Booleans are not accepted as integers.
    value = data.get(key)
    if value is None:
        if default is MISSING:
            raise ParseError(f'missing required field {key!r}')
        return default
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ParseError(f'expected {key!r} to be {kind.__name__}, received {value.__class__.__name__}')
    return value


def _int_list(data: Any, key: str) -> List[int]:
    values = _field(data, key, list, [])
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ParseError(f'expected {key!r} to only hold int, received {value.__class__.__name__}')
    return values


def _emoji_field(data: Any, key: str) -> Optional[PartialEmoji]:
    emoji = _field(data, key, dict)
    if not emoji:
        return None
    _field(emoji, 'name', str)
    _field(emoji, 'animated', bool)
    return PartialEmoji.from_dict(emoji)  # type: ignore


class Component:
    """Represents a UI Kit Component.

    The components supported by the library are:

    - :class:`ActionRow`
    - :class:`Button`
    - :class:`SelectMenu`
    - :class:`TextInput`
    - :class:`Modal`
    - :class:`Tabs`
    - :class:`Accordion`
    - the layout placeholders :class:`Section`, :class:`TextDisplay`,
      :class:`Thumbnail`, :class:`MediaGallery`, :class:`FileComponent`,
      :class:`Separator` and :class:`Container`

    Every decoded payload is exposed through this class, so the :attr:`type`
    should be checked before accessing any variant specific attributes.

    .. container:: operations

        .. describe:: x == y

            Checks if two components are the same kind with the same fields.
            Children are compared in order.

        .. describe:: x != y

            Checks if two components are not equal.
    """

    __slots__ = ()

    __repr_info__: ClassVar[Tuple[str, ...]]

    def __repr__(self) -> str:
        attrs = ' '.join(f'{key}={getattr(self, key)!r}' for key in self.__repr_info__)
        return f'<{self.__class__.__name__} {attrs}>'

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return all(getattr(self, slot, None) == getattr(other, slot, None) for slot in get_slots(type(self)))

    __hash__ = None  # type: ignore

    @property
    def type(self) -> ComponentType:
        """:class:`ComponentType`: The type of component."""
        raise NotImplementedError

    def to_dict(self) -> ComponentPayload:
        raise NotImplementedError

    def _update(self, data: Any, decoder: _ComponentDecoder) -> None:
        raise NotImplementedError


class ActionRow(Component):
    """Represents a UI Kit Action Row.

    This is a component that holds up to 5 children components in a row.

    This inherits from :class:`Component`.

    Attributes
    ------------
    children: List[:class:`Component`]
        The children components that this holds, in rendering order.
    id: Optional[:class:`int`]
        The numeric identifier of the component, if any.
    """

    __slots__ = ('children', 'id')

    __repr_info__: ClassVar[Tuple[str, ...]] = __slots__

    def __init__(self, *, children: Optional[Sequence[Component]] = None, id: Optional[int] = None) -> None:
        self.children: List[Component] = list(children) if children else []
        self.id: Optional[int] = id

    @property
    def type(self) -> Literal[ComponentType.action_row]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.action_row

    def _update(self, data: ActionRowPayload, decoder: _ComponentDecoder) -> None:
        self.children = decoder.decode_many(data, 'components')
        self.id = _field(data, 'id', int)

    def to_dict(self) -> ActionRowPayload:
        payload: ActionRowPayload = {
            'type': self.type.value,
            'components': [c.to_dict() for c in self.children],
        }  # type: ignore
        if self.id:
            payload['id'] = self.id
        return payload


class Button(Component):
    """Represents a button from the UI Kit.

    This inherits from :class:`Component`.

    Attributes
    -----------
    label: :class:`str`
        The label of the button. Can be empty if the button has an emoji.
    style: Optional[:class:`.ButtonStyle`]
        The style of the button. If this is not set then the button
        is sent as :attr:`ButtonStyle.primary`.
    disabled: :class:`bool`
        Whether the button is disabled or not.
    emoji: Optional[:class:`PartialEmoji`]
        The emoji of the button, if available.
    url: Optional[:class:`str`]
        The URL this button sends you to.
    custom_id: Optional[:class:`str`]
        The ID of the button that gets received during an interaction.
        If this button is for a URL, it does not have a custom ID.
    sku_id: Optional[:class:`int`]
        The SKU this button points to. Only used by premium buttons.
    id: Optional[:class:`int`]
        The numeric identifier of the component, if any.
    tooltip: Optional[:class:`str`]
        The tooltip shown when hovering the button.
    badge: Optional[:class:`int`]
        The number shown in the button's badge.
    loading: :class:`bool`
        Whether the button shows a loading indicator.
    size: Optional[:class:`ButtonSize`]
        The size of the button.
    """

    __slots__ = (
        'label',
        'style',
        'disabled',
        'emoji',
        'url',
        'custom_id',
        'sku_id',
        'id',
        'tooltip',
        'badge',
        'loading',
        'size',
    )

    __repr_info__: ClassVar[Tuple[str, ...]] = ('label', 'style', 'custom_id', 'url', 'disabled', 'emoji')

    def __init__(
        self,
        *,
        label: str = '',
        style: Optional[ButtonStyle] = None,
        disabled: bool = False,
        emoji: Optional[Union[str, PartialEmoji]] = None,
        url: Optional[str] = None,
        custom_id: Optional[str] = None,
        sku_id: Optional[int] = None,
        id: Optional[int] = None,
        tooltip: Optional[str] = None,
        badge: Optional[int] = None,
        loading: bool = False,
        size: Optional[ButtonSize] = None,
    ) -> None:
        self.label: str = label
        self.style: Optional[ButtonStyle] = style
        self.disabled: bool = disabled
        self.emoji: Optional[PartialEmoji] = _coerce_emoji(emoji)
        self.url: Optional[str] = url
        self.custom_id: Optional[str] = custom_id
        self.sku_id: Optional[int] = sku_id
        self.id: Optional[int] = id
        self.tooltip: Optional[str] = tooltip
        self.badge: Optional[int] = badge
        self.loading: bool = loading
        self.size: Optional[ButtonSize] = size

    @property
    def type(self) -> Literal[ComponentType.button]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.button

    def _update(self, data: ButtonComponentPayload, decoder: _ComponentDecoder) -> None:
        self.label = _field(data, 'label', str, '')
        style = _field(data, 'style', int)
        self.style = try_enum(ButtonStyle, style) if style else None
        self.disabled = _field(data, 'disabled', bool, False)
        self.emoji = _emoji_field(data, 'emoji')
        self.url = _field(data, 'url', str)
        self.custom_id = _field(data, 'custom_id', str)
        self.sku_id = _get_as_snowflake(data, 'sku_id')
        self.id = _field(data, 'id', int)
        self.tooltip = _field(data, 'tooltip', str)
        self.badge = _field(data, 'badge', int)
        self.loading = _field(data, 'loading', bool, False)
        size = _field(data, 'size', str)
        self.size = try_enum(ButtonSize, size) if size else None

    def to_dict(self) -> ButtonComponentPayload:
        payload: ButtonComponentPayload = {
            'type': self.type.value,
            'label': self.label,
            # An unset style is always sent as primary
            'style': int(self.style or ButtonStyle.primary),
            'disabled': self.disabled,
        }  # type: ignore
        if self.emoji is not None:
            payload['emoji'] = self.emoji.to_dict()
        if self.url:
            payload['url'] = self.url
        if self.custom_id:
            payload['custom_id'] = self.custom_id
        if self.sku_id:
            payload['sku_id'] = str(self.sku_id)
        if self.id:
            payload['id'] = self.id
        if self.tooltip:
            payload['tooltip'] = self.tooltip
        if self.badge is not None:
            payload['badge'] = self.badge
        if self.loading:
            payload['loading'] = True
        if self.size:
            payload['size'] = _value_of(self.size)
        return payload


class SelectOption:
    """Represents a select menu's option.

    Attributes
    -----------
    label: :class:`str`
        The label of the option. This is displayed to users.
    value: :class:`str`
        The value of the option. This is not displayed to users.
        If not provided when constructed then it defaults to the label.
    description: :class:`str`
        An additional description of the option, if any.
    emoji: Optional[:class:`PartialEmoji`]
        The emoji of the option, if available.
    default: :class:`bool`
        Whether this option is selected by default.
    """

    __slots__ = (
        'label',
        'value',
        'description',
        'emoji',
        'default',
    )

    def __init__(
        self,
        *,
        label: str = '',
        value: str = MISSING,
        description: str = '',
        emoji: Optional[Union[str, PartialEmoji]] = None,
        default: bool = False,
    ) -> None:
        self.label: str = label
        self.value: str = label if value is MISSING else value
        self.description: str = description
        self.emoji: Optional[PartialEmoji] = _coerce_emoji(emoji)
        self.default: bool = default

    def __repr__(self) -> str:
        return (
            f'<SelectOption label={self.label!r} value={self.value!r} description={self.description!r} '
            f'emoji={self.emoji!r} default={self.default!r}>'
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SelectOption):
            return NotImplemented
        return all(getattr(self, slot) == getattr(other, slot) for slot in self.__slots__)

    __hash__ = None  # type: ignore

    @classmethod
    def from_dict(cls, data: SelectOptionPayload) -> SelectOption:
        return cls(
            label=_field(data, 'label', str, ''),
            value=_field(data, 'value', str, ''),
            description=_field(data, 'description', str, ''),
            emoji=_emoji_field(data, 'emoji'),
            default=_field(data, 'default', bool, False),
        )

    def to_dict(self) -> SelectOptionPayload:
        payload: SelectOptionPayload = {
            'value': self.value,
            'description': self.description,
            'default': self.default,
        }
        if self.label:
            payload['label'] = self.label
        if self.emoji is not None:
            payload['emoji'] = self.emoji.to_dict()
        return payload


class SelectDefaultValue:
    """Represents a select menu's default value.

    Attributes
    -----------
    id: :class:`int`
        The id of a role, user, or channel.
    type: :class:`SelectDefaultValueType`
        The type of value that ``id`` represents.
    """

    __slots__ = ('id', 'type')

    def __init__(self, *, id: int, type: SelectDefaultValueType) -> None:
        self.id: int = id
        self.type: SelectDefaultValueType = type

    def __repr__(self) -> str:
        return f'<SelectDefaultValue id={self.id!r} type={self.type!r}>'

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SelectDefaultValue):
            return NotImplemented
        return self.id == other.id and self.type == other.type

    __hash__ = None  # type: ignore

    @classmethod
    def from_dict(cls, data: SelectDefaultValuesPayload) -> SelectDefaultValue:
        return cls(
            id=int(data['id']),
            type=try_enum(SelectDefaultValueType, _field(data, 'type', str, MISSING)),
        )

    def to_dict(self) -> SelectDefaultValuesPayload:
        return {
            'id': str(self.id),
            'type': _value_of(self.type),
        }


class SelectMenu(Component):
    """Represents a select menu from the UI Kit.

    A select menu is functionally the same as a dropdown, however
    on mobile it renders a bit differently.

    The same class models every select sub-kind. The :attr:`menu_type`
    decides which one, and is what gets reported through :attr:`type`.

    Attributes
    ------------
    menu_type: :class:`ComponentType`
        The kind of select menu. One of :attr:`ComponentType.select`,
        :attr:`ComponentType.user_select`, :attr:`ComponentType.role_select`,
        :attr:`ComponentType.mentionable_select` or :attr:`ComponentType.channel_select`.
    custom_id: Optional[:class:`str`]
        The ID of the select menu that gets received during an interaction.
    placeholder: :class:`str`
        The placeholder text that is shown if nothing is selected.
    min_values: Optional[:class:`int`]
        The minimum number of items that must be chosen for this select menu.
    max_values: :class:`int`
        The maximum number of items that must be chosen for this select menu.
    default_values: List[:class:`SelectDefaultValue`]
        The values selected by default for auto-populated select menus.
    options: List[:class:`SelectOption`]
        A list of options that can be selected in this menu.
    disabled: :class:`bool`
        Whether the select is disabled or not.
    channel_types: List[:class:`ChannelType`]
        The channel types a channel select menu is limited to.
    id: Optional[:class:`int`]
        The numeric identifier of the component, if any.
    searchable: :class:`bool`
        Whether the options can be searched.
    grouped: :class:`bool`
        Whether the options are rendered in groups.
    """

    __slots__ = (
        'menu_type',
        'custom_id',
        'placeholder',
        'min_values',
        'max_values',
        'default_values',
        'options',
        'disabled',
        'channel_types',
        'id',
        'searchable',
        'grouped',
    )

    __repr_info__: ClassVar[Tuple[str, ...]] = (
        'menu_type',
        'custom_id',
        'placeholder',
        'min_values',
        'max_values',
        'options',
        'disabled',
    )

    def __init__(
        self,
        *,
        menu_type: ComponentType = ComponentType.select,
        custom_id: Optional[str] = None,
        placeholder: str = '',
        min_values: Optional[int] = None,
        max_values: int = 1,
        default_values: Optional[Sequence[SelectDefaultValue]] = None,
        options: Optional[Sequence[SelectOption]] = None,
        disabled: bool = False,
        channel_types: Optional[Sequence[ChannelType]] = None,
        id: Optional[int] = None,
        searchable: bool = False,
        grouped: bool = False,
    ) -> None:
        if menu_type not in _SELECT_TYPES:
            raise ValueError(f'{menu_type!r} is not a select menu component type')

        self.menu_type: ComponentType = ComponentType(menu_type)
        self.custom_id: Optional[str] = custom_id
        self.placeholder: str = placeholder
        self.min_values: Optional[int] = min_values
        self.max_values: int = max_values
        self.default_values: List[SelectDefaultValue] = list(default_values) if default_values else []
        self.options: List[SelectOption] = list(options) if options else []
        self.disabled: bool = disabled
        self.channel_types: List[ChannelType] = list(channel_types) if channel_types else []
        self.id: Optional[int] = id
        self.searchable: bool = searchable
        self.grouped: bool = grouped

    @property
    def type(self) -> ComponentType:
        """:class:`ComponentType`: The type of component. This is the same as :attr:`menu_type`."""
        return self.menu_type

    def _update(self, data: SelectMenuPayload, decoder: _ComponentDecoder) -> None:
        self.custom_id = _field(data, 'custom_id', str)
        self.placeholder = _field(data, 'placeholder', str, '')
        self.min_values = _field(data, 'min_values', int)
        self.max_values = _field(data, 'max_values', int, 1)
        self.default_values = [SelectDefaultValue.from_dict(d) for d in decoder.array(data, 'default_values')]
        self.options = [SelectOption.from_dict(option) for option in decoder.array(data, 'options')]
        self.disabled = _field(data, 'disabled', bool, False)
        self.channel_types = [try_enum(ChannelType, t) for t in _int_list(data, 'channel_types')]
        self.id = _field(data, 'id', int)
        self.searchable = _field(data, 'searchable', bool, False)
        self.grouped = _field(data, 'grouped', bool, False)

    def to_dict(self) -> SelectMenuPayload:
        payload: SelectMenuPayload = {
            'type': self.menu_type.value,
            'placeholder': self.placeholder,
            'max_values': self.max_values,
            'disabled': self.disabled,
        }  # type: ignore
        if self.custom_id:
            payload['custom_id'] = self.custom_id
        if self.min_values is not None:
            payload['min_values'] = self.min_values
        if self.default_values:
            payload['default_values'] = [value.to_dict() for value in self.default_values]
        if self.options:
            payload['options'] = [option.to_dict() for option in self.options]
        if self.channel_types:
            payload['channel_types'] = [int(t) for t in self.channel_types]
        if self.id:
            payload['id'] = self.id
        if self.searchable:
            payload['searchable'] = True
        if self.grouped:
            payload['grouped'] = True
        return payload


class TextInput(Component):
    """Represents a text input from the UI Kit.

    Attributes
    ------------
    custom_id: :class:`str`
        The ID of the text input that gets received during an interaction.
    label: :class:`str`
        The label to display above the text input.
    style: :class:`TextStyle`
        The style of the text input.
    placeholder: Optional[:class:`str`]
        The placeholder text to display when the text input is empty.
    value: Optional[:class:`str`]
        The pre-filled value of the text input.
    required: :class:`bool`
        Whether the text input is required.
    min_length: Optional[:class:`int`]
        The minimum length of the text input.
    max_length: Optional[:class:`int`]
        The maximum length of the text input.
    id: Optional[:class:`int`]
        The numeric identifier of the component, if any.
    validation_pattern: Optional[:class:`str`]
        A regular expression the input has to match.
    masked: :class:`bool`
        Whether the input is masked like a password field.
    """

    __slots__ = (
        'custom_id',
        'label',
        'style',
        'placeholder',
        'value',
        'required',
        'min_length',
        'max_length',
        'id',
        'validation_pattern',
        'masked',
    )

    __repr_info__: ClassVar[Tuple[str, ...]] = (
        'style',
        'label',
        'custom_id',
        'placeholder',
        'required',
        'min_length',
        'max_length',
    )

    def __init__(
        self,
        *,
        custom_id: str = '',
        label: str = '',
        style: TextStyle = TextStyle.short,
        placeholder: Optional[str] = None,
        value: Optional[str] = None,
        required: bool = False,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        id: Optional[int] = None,
        validation_pattern: Optional[str] = None,
        masked: bool = False,
    ) -> None:
        self.custom_id: str = custom_id
        self.label: str = label
        self.style: TextStyle = style
        self.placeholder: Optional[str] = placeholder
        self.value: Optional[str] = value
        self.required: bool = required
        self.min_length: Optional[int] = min_length
        self.max_length: Optional[int] = max_length
        self.id: Optional[int] = id
        self.validation_pattern: Optional[str] = validation_pattern
        self.masked: bool = masked

    @property
    def type(self) -> Literal[ComponentType.text_input]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.text_input

    def _update(self, data: TextInputPayload, decoder: _ComponentDecoder) -> None:
        self.custom_id = _field(data, 'custom_id', str, '')
        self.label = _field(data, 'label', str, '')
        self.style = try_enum(TextStyle, _field(data, 'style', int, TextStyle.short.value))
        self.placeholder = _field(data, 'placeholder', str)
        self.value = _field(data, 'value', str)
        self.required = _field(data, 'required', bool, False)
        self.min_length = _field(data, 'min_length', int)
        self.max_length = _field(data, 'max_length', int)
        self.id = _field(data, 'id', int)
        self.validation_pattern = _field(data, 'validation_pattern', str)
        self.masked = _field(data, 'masked', bool, False)

    def to_dict(self) -> TextInputPayload:
        payload: TextInputPayload = {
            'type': self.type.value,
            'custom_id': self.custom_id,
            'label': self.label,
            'style': int(self.style),
            'required': self.required,
        }  # type: ignore
        if self.placeholder:
            payload['placeholder'] = self.placeholder
        if self.value:
            payload['value'] = self.value
        if self.min_length:
            payload['min_length'] = self.min_length
        if self.max_length:
            payload['max_length'] = self.max_length
        if self.id:
            payload['id'] = self.id
        if self.validation_pattern:
            payload['validation_pattern'] = self.validation_pattern
        if self.masked:
            payload['masked'] = True
        return payload


class Modal(Component):
    """Represents a modal dialog from the UI Kit.

    Attributes
    ------------
    custom_id: :class:`str`
        The ID of the modal that gets received when it is submitted.
    title: :class:`str`
        The title shown at the top of the modal.
    children: List[:class:`Component`]
        The components shown inside the modal, in rendering order.
    size: Optional[:class:`ModalSize`]
        The size of the modal.
    closable: :class:`bool`
        Whether the modal can be dismissed by the user.
    """

    __slots__ = ('custom_id', 'title', 'children', 'size', 'closable')

    __repr_info__: ClassVar[Tuple[str, ...]] = ('custom_id', 'title', 'children')

    def __init__(
        self,
        *,
        custom_id: str = '',
        title: str = '',
        children: Optional[Sequence[Component]] = None,
        size: Optional[ModalSize] = None,
        closable: bool = False,
    ) -> None:
        self.custom_id: str = custom_id
        self.title: str = title
        self.children: List[Component] = list(children) if children else []
        self.size: Optional[ModalSize] = size
        self.closable: bool = closable

    @property
    def type(self) -> Literal[ComponentType.modal]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.modal

    def _update(self, data: ModalPayload, decoder: _ComponentDecoder) -> None:
        self.custom_id = _field(data, 'custom_id', str, '')
        self.title = _field(data, 'title', str, '')
        self.children = decoder.decode_many(data, 'components')
        size = _field(data, 'size', str)
        self.size = try_enum(ModalSize, size) if size else None
        self.closable = _field(data, 'closable', bool, False)

    def to_dict(self) -> ModalPayload:
        payload: ModalPayload = {
            'type': self.type.value,
            'custom_id': self.custom_id,
            'title': self.title,
            'components': [c.to_dict() for c in self.children],
        }  # type: ignore
        if self.size:
            payload['size'] = _value_of(self.size)
        if self.closable:
            payload['closable'] = True
        return payload


class Tab:
    """Represents a single tab of a :class:`Tabs` component.

    Attributes
    -----------
    id: :class:`str`
        The identifier of the tab.
    label: :class:`str`
        The label shown on the tab.
    content: Optional[:class:`Component`]
        The component shown when the tab is selected.
    badge: Optional[:class:`int`]
        The number shown in the tab's badge.
    icon: Optional[:class:`PartialEmoji`]
        The icon shown next to the label.
    """

    __slots__ = ('id', 'label', 'content', 'badge', 'icon')

    def __init__(
        self,
        *,
        id: str,
        label: str,
        content: Optional[Component] = None,
        badge: Optional[int] = None,
        icon: Optional[Union[str, PartialEmoji]] = None,
    ) -> None:
        self.id: str = id
        self.label: str = label
        self.content: Optional[Component] = content
        self.badge: Optional[int] = badge
        self.icon: Optional[PartialEmoji] = _coerce_emoji(icon)

    def __repr__(self) -> str:
        return f'<Tab id={self.id!r} label={self.label!r} content={self.content!r}>'

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Tab):
            return NotImplemented
        return all(getattr(self, slot) == getattr(other, slot) for slot in self.__slots__)

    __hash__ = None  # type: ignore

    @classmethod
    def _from_data(cls, data: TabPayload, decoder: _ComponentDecoder) -> Tab:
        return cls(
            id=_field(data, 'id', str, ''),
            label=_field(data, 'label', str, ''),
            content=decoder.decode_optional(data.get('content')),
            badge=_field(data, 'badge', int),
            icon=_emoji_field(data, 'icon'),
        )

    def to_dict(self) -> TabPayload:
        payload: TabPayload = {
            'id': self.id,
            'label': self.label,
            'content': self.content.to_dict() if self.content is not None else None,
        }  # type: ignore
        if self.badge is not None:
            payload['badge'] = self.badge
        if self.icon is not None:
            payload['icon'] = self.icon.to_dict()
        return payload


class Tabs(Component):
    """Represents a tab strip from the UI Kit.

    Each tab owns exactly one content component.

    Attributes
    ------------
    custom_id: :class:`str`
        The ID of the tab strip.
    tabs: List[:class:`Tab`]
        The tabs, in rendering order.
    default_tab: Optional[:class:`str`]
        The identifier of the tab selected initially.
    """

    __slots__ = ('custom_id', 'tabs', 'default_tab')

    __repr_info__: ClassVar[Tuple[str, ...]] = __slots__

    def __init__(
        self,
        *,
        custom_id: str = '',
        tabs: Optional[Sequence[Tab]] = None,
        default_tab: Optional[str] = None,
    ) -> None:
        self.custom_id: str = custom_id
        self.tabs: List[Tab] = list(tabs) if tabs else []
        self.default_tab: Optional[str] = default_tab

    @property
    def type(self) -> Literal[ComponentType.tabs]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.tabs

    @property
    def children(self) -> List[Component]:
        """List[:class:`Component`]: The content of every tab, in tab order.

        Tabs without content are skipped, so indices here do not line up
        with :attr:`tabs`.
        """
        return [tab.content for tab in self.tabs if tab.content is not None]

    def _update(self, data: TabsPayload, decoder: _ComponentDecoder) -> None:
        self.custom_id = _field(data, 'custom_id', str, '')
        self.tabs = [Tab._from_data(tab, decoder) for tab in decoder.array(data, 'tabs')]
        self.default_tab = _field(data, 'default_tab', str)

    def to_dict(self) -> TabsPayload:
        payload: TabsPayload = {
            'type': self.type.value,
            'custom_id': self.custom_id,
            'tabs': [tab.to_dict() for tab in self.tabs],
        }  # type: ignore
        if self.default_tab:
            payload['default_tab'] = self.default_tab
        return payload


class AccordionItem:
    """Represents a single collapsible item of an :class:`Accordion`.

    Attributes
    -----------
    id: :class:`str`
        The identifier of the item.
    title: :class:`str`
        The title shown on the item's header.
    content: Optional[:class:`Component`]
        The component shown when the item is expanded.
    open: :class:`bool`
        Whether the item starts expanded.
    """

    __slots__ = ('id', 'title', 'content', 'open')

    def __init__(self, *, id: str, title: str, content: Optional[Component] = None, open: bool = False) -> None:
        self.id: str = id
        self.title: str = title
        self.content: Optional[Component] = content
        self.open: bool = open

    def __repr__(self) -> str:
        return f'<AccordionItem id={self.id!r} title={self.title!r} open={self.open!r} content={self.content!r}>'

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AccordionItem):
            return NotImplemented
        return all(getattr(self, slot) == getattr(other, slot) for slot in self.__slots__)

    __hash__ = None  # type: ignore

    @classmethod
    def _from_data(cls, data: AccordionItemPayload, decoder: _ComponentDecoder) -> AccordionItem:
        return cls(
            id=_field(data, 'id', str, ''),
            title=_field(data, 'title', str, ''),
            content=decoder.decode_optional(data.get('content')),
            open=_field(data, 'open', bool, False),
        )

    def to_dict(self) -> AccordionItemPayload:
        payload: AccordionItemPayload = {
            'id': self.id,
            'title': self.title,
            'content': self.content.to_dict() if self.content is not None else None,
        }  # type: ignore
        if self.open:
            payload['open'] = True
        return payload


class Accordion(Component):
    """Represents an accordion from the UI Kit.

    Attributes
    ------------
    custom_id: :class:`str`
        The ID of the accordion.
    items: List[:class:`AccordionItem`]
        The items, in rendering order.
    multiple: :class:`bool`
        Whether more than one item can be expanded at a time.
    """

    __slots__ = ('custom_id', 'items', 'multiple')

    __repr_info__: ClassVar[Tuple[str, ...]] = __slots__

    def __init__(
        self,
        *,
        custom_id: str = '',
        items: Optional[Sequence[AccordionItem]] = None,
        multiple: bool = False,
    ) -> None:
        self.custom_id: str = custom_id
        self.items: List[AccordionItem] = list(items) if items else []
        self.multiple: bool = multiple

    @property
    def type(self) -> Literal[ComponentType.accordion]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.accordion

    @property
    def children(self) -> List[Component]:
        """List[:class:`Component`]: The content of every item, in item order.

        Items without content are skipped, so indices here do not line up
        with :attr:`items`.
        """
        return [item.content for item in self.items if item.content is not None]

    def _update(self, data: AccordionPayload, decoder: _ComponentDecoder) -> None:
        self.custom_id = _field(data, 'custom_id', str, '')
        self.items = [AccordionItem._from_data(item, decoder) for item in decoder.array(data, 'items')]
        self.multiple = _field(data, 'multiple', bool, False)

    def to_dict(self) -> AccordionPayload:
        payload: AccordionPayload = {
            'type': self.type.value,
            'custom_id': self.custom_id,
            'items': [item.to_dict() for item in self.items],
        }  # type: ignore
        if self.multiple:
            payload['multiple'] = True
        return payload


class _PlaceholderComponent(Component):
    # Layout kinds that are only carried by their type tag.

    __slots__ = ()

    __repr_info__: ClassVar[Tuple[str, ...]] = ()
    _component_type: ClassVar[ComponentType]

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}>'

    @property
    def type(self) -> ComponentType:
        """:class:`ComponentType`: The type of component."""
        return self._component_type

    def _update(self, data: PlaceholderComponentPayload, decoder: _ComponentDecoder) -> None:
        pass

    def to_dict(self) -> PlaceholderComponentPayload:
        return {'type': self._component_type.value}  # type: ignore


class Section(_PlaceholderComponent):
    """Represents a Section layout component (type 9)."""

    __slots__ = ()
    _component_type = ComponentType.section


class TextDisplay(_PlaceholderComponent):
    """Represents a Text Display component (type 10)."""

    __slots__ = ()
    _component_type = ComponentType.text_display


class Thumbnail(_PlaceholderComponent):
    """Represents a Thumbnail accessory component (type 11)."""

    __slots__ = ()
    _component_type = ComponentType.thumbnail


class MediaGallery(_PlaceholderComponent):
    """Represents a Media Gallery component (type 12)."""

    __slots__ = ()
    _component_type = ComponentType.media_gallery


class FileComponent(_PlaceholderComponent):
    """Represents a File component (type 13)."""

    __slots__ = ()
    _component_type = ComponentType.file


class Separator(_PlaceholderComponent):
    """Represents a Separator layout component (type 14)."""

    __slots__ = ()
    _component_type = ComponentType.separator


class Container(_PlaceholderComponent):
    """Represents a Container layout component (type 17)."""

    __slots__ = ()
    _component_type = ComponentType.container


# ---- Registry ---------------------------------------------------------------

component_registry: Mapping[int, Callable[[], Component]] = MappingProxyType(
    {
        ComponentType.action_row.value: ActionRow,
        ComponentType.button.value: Button,
        ComponentType.text_input.value: TextInput,
        **{t.value: functools.partial(SelectMenu, menu_type=t) for t in _SELECT_TYPES},
        ComponentType.section.value: Section,
        ComponentType.text_display.value: TextDisplay,
        ComponentType.thumbnail.value: Thumbnail,
        ComponentType.media_gallery.value: MediaGallery,
        ComponentType.file.value: FileComponent,
        ComponentType.separator.value: Separator,
        ComponentType.container.value: Container,
        ComponentType.modal.value: Modal,
        ComponentType.tabs.value: Tabs,
        ComponentType.accordion.value: Accordion,
    }
)


def create_component(type: Any) -> Component:
    """Creates an empty component for the given discriminator.

    Parameters
    -----------
    type: :class:`int`
        The component type code, as found in a payload's ``type`` field.

    Raises
    -------
    UnknownComponentType
        The code is not a registered component type.

    Returns
    --------
    :class:`Component`
        A fresh component with every field at its default.
    """
    # bool is an int subclass and would otherwise hit action_row
    if isinstance(type, bool) or not isinstance(type, int):
        raise UnknownComponentType(type)

    try:
        factory = component_registry[type]
    except KeyError:
        raise UnknownComponentType(type) from None
    return factory()


# ---- Decoding ---------------------------------------------------------------


class _ComponentDecoder:
    # Children are created as soon as their parent is read, but populated later
    # from an explicit stack, so tree depth never touches the interpreter's stack.

    __slots__ = ('max_depth', 'depth', '_pending')

    def __init__(self, max_depth: Optional[int] = None) -> None:
        if max_depth is not None and max_depth < 1:
            raise ValueError('max_depth must be at least 1')

        self.max_depth: Optional[int] = max_depth
        self.depth: int = 0
        self._pending: List[Tuple[Component, Dict[str, Any], int]] = []

    def _create(self, data: Any) -> Component:
        if not isinstance(data, dict):
            raise ParseError(f'expected a component object, received {data.__class__.__name__}')

        # The discriminator is read on its own before anything else is touched
        component = create_component(data.get('type', 0))

        depth = self.depth + 1
        if self.max_depth is not None and depth > self.max_depth:
            _log.debug('Rejecting %s component nested %d levels deep.', component.type.name, depth)
            raise DecodeDepthExceeded(self.max_depth)

        self._pending.append((component, data, depth))
        return component

    def decode(self, data: Any) -> Component:
        self.depth = 0
        self._pending.clear()
        root = self._create(data)

        stack: List[Tuple[Component, Dict[str, Any], int]] = []
        while self._pending or stack:
            # Reversed so siblings are populated in payload order
            stack.extend(reversed(self._pending))
            self._pending.clear()

            component, payload, self.depth = stack.pop()
            _log.debug('Decoding %s component at depth %d.', component.type.name, self.depth)
            try:
                component._update(payload, self)
            except ComponentException:
                raise
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                raise ParseError(f'invalid {component.type.name} component payload: {exc}') from exc

        self.depth = 0
        return root

    def decode_optional(self, data: Any) -> Optional[Component]:
        if data is None:
            return None
        return self._create(data)

    def array(self, data: Dict[str, Any], key: str) -> List[Any]:
        value = data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise ParseError(f'expected {key!r} to be an array, received {value.__class__.__name__}')
        return value

    def decode_many(self, data: Dict[str, Any], key: str) -> List[Component]:
        return [self._create(child) for child in self.array(data, key)]


def _parse(data: Union[str, bytes, bytearray]) -> Any:
    try:
        return _from_json(data)
    except (ValueError, RecursionError) as exc:
        raise ParseError(f'malformed component JSON: {exc}') from exc


def component_from_dict(data: Any, *, max_depth: Optional[int] = None) -> Component:
    """Decodes an already parsed payload into a component.

    Parameters
    -----------
    data: :class:`dict`
        The component payload.
    max_depth: Optional[:class:`int`]
        The maximum nesting depth to accept. The top level component
        counts as depth 1. ``None`` means no limit.

    Raises
    -------
    ParseError
        The payload or one of its children has an invalid shape.
    UnknownComponentType
        The payload or one of its children has an unknown ``type``.
    DecodeDepthExceeded
        The tree nests deeper than ``max_depth``.

    Returns
    --------
    :class:`Component`
        The decoded component. Check :attr:`Component.type` before
        accessing variant specific attributes.
    """
    return _ComponentDecoder(max_depth).decode(data)


def component_from_json(data: Union[str, bytes, bytearray], *, max_depth: Optional[int] = None) -> Component:
    """Decodes a JSON document representing a single component.

    This behaves like :func:`component_from_dict` but also raises
    :exc:`ParseError` if ``data`` is not valid JSON.
    """
    return component_from_dict(_parse(data), max_depth=max_depth)


def components_from_json(data: Union[str, bytes, bytearray], *, max_depth: Optional[int] = None) -> List[Component]:
    """Decodes a JSON array of components, keeping their order."""
    payload = _parse(data)
    if not isinstance(payload, list):
        raise ParseError(f'expected a component array, received {payload.__class__.__name__}')

    decoder = _ComponentDecoder(max_depth)
    return [decoder.decode(item) for item in payload]


# ---- Encoding ---------------------------------------------------------------


def components_to_dicts(components: Iterable[Component]) -> List[ComponentPayload]:
    """Encodes components into the list of payloads sent with a message."""
    return [component.to_dict() for component in components]


def component_to_json(component: Component) -> str:
    """Encodes a component into compact JSON text."""
    return _to_json(component.to_dict())


def components_to_json(components: Iterable[Component]) -> str:
    """Encodes components into a compact JSON array."""
    return _to_json(components_to_dicts(components))


# ---- Traversal utilities ----------------------------------------------------


def _iter_component_children(component: Component) -> List[Component]:
    children = getattr(component, 'children', None)
    if isinstance(children, list):
        return children
    return []


def walk_components(roots: Iterable[Component]) -> Iterator[Component]:
    """Yields every component of the given trees, depth first.

    The order follows the payload order for deterministic iteration.
    """
    stack = list(roots)
    stack.reverse()
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(_iter_component_children(node)))
