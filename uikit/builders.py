"""
The MIT License (MIT)

Copyright (c) 2021-present Dolfies

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

import copy
import logging
from typing import TYPE_CHECKING, Generic, Optional, TypeVar, Union

from .components import (
    MAX_ACTION_ROW_CHILDREN,
    Accordion,
    AccordionItem,
    ActionRow,
    Button,
    Component,
    Modal,
    SelectDefaultValue,
    SelectMenu,
    SelectOption,
    Tab,
    Tabs,
    TextInput,
)
from .enums import ButtonSize, ButtonStyle, ChannelType, ComponentType, ModalSize, SelectDefaultValueType, TextStyle
from .errors import ComponentLimitReached
from .partial_emoji import PartialEmoji

if TYPE_CHECKING:
    from typing_extensions import Self

__all__ = (
    'ComponentBuilder',
    'ButtonBuilder',
    'SelectMenuBuilder',
    'TextInputBuilder',
    'ActionRowBuilder',
    'ModalBuilder',
    'TabsBuilder',
    'AccordionBuilder',
)

_log = logging.getLogger(__name__)

C = TypeVar('C', bound=Component)


class _BaseBuilder(Generic[C]):
    __slots__ = ('_component',)

    _component: C

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} component={self._component!r}>'

    def build(self) -> C:
        """Finalises the builder.

        The returned component is a deep copy. Changing the builder
        afterwards does not affect it, and changing it does not affect
        the builder.
        """
        return copy.deepcopy(self._component)


class ButtonBuilder(_BaseBuilder[Button]):
    """Builds a :class:`Button` one field at a time.

    New buttons start out with :attr:`ButtonStyle.primary`.

    Every method returns the builder to allow for fluent-style chaining.
    """

    __slots__ = ()

    def __init__(self, label: str = '') -> None:
        self._component = Button(label=label, style=ButtonStyle.primary)

    def set_style(self, style: ButtonStyle) -> Self:
        self._component.style = style
        return self

    def primary(self) -> Self:
        return self.set_style(ButtonStyle.primary)

    def secondary(self) -> Self:
        return self.set_style(ButtonStyle.secondary)

    def success(self) -> Self:
        return self.set_style(ButtonStyle.success)

    def danger(self) -> Self:
        return self.set_style(ButtonStyle.danger)

    def premium(self) -> Self:
        return self.set_style(ButtonStyle.premium)

    def link(self, url: str) -> Self:
        """Turns the button into a link button pointing at ``url``.

        This sets both the style and the URL.
        """
        self._component.style = ButtonStyle.link
        self._component.url = url
        return self

    def set_custom_id(self, custom_id: str) -> Self:
        self._component.custom_id = custom_id
        return self

    def set_disabled(self, disabled: bool = True) -> Self:
        self._component.disabled = disabled
        return self

    def set_emoji(self, name: Optional[str] = None, id: Optional[int] = None, animated: bool = False) -> Self:
        self._component.emoji = PartialEmoji(name=name, id=id, animated=animated)
        return self

    def set_sku_id(self, sku_id: int) -> Self:
        self._component.sku_id = sku_id
        return self

    def set_tooltip(self, text: str) -> Self:
        self._component.tooltip = text
        return self

    def set_badge(self, count: int) -> Self:
        self._component.badge = count
        return self

    def set_loading(self, loading: bool = True) -> Self:
        self._component.loading = loading
        return self

    def set_size(self, size: ButtonSize) -> Self:
        self._component.size = size
        return self


class SelectMenuBuilder(_BaseBuilder[SelectMenu]):
    """Builds a :class:`SelectMenu` one field at a time.

    New menus are string selects. Use :meth:`user_select`, :meth:`role_select`,
    :meth:`mentionable_select` or :meth:`channel_select` to pick another kind.
    """

    __slots__ = ()

    def __init__(self, custom_id: str) -> None:
        self._component = SelectMenu(custom_id=custom_id)

    def set_placeholder(self, text: str) -> Self:
        self._component.placeholder = text
        return self

    def set_min_values(self, value: int) -> Self:
        self._component.min_values = value
        return self

    def set_max_values(self, value: int) -> Self:
        self._component.max_values = value
        return self

    def add_option(
        self,
        label: str,
        value: str,
        description: str = '',
        emoji: Optional[Union[str, PartialEmoji]] = None,
    ) -> Self:
        """Appends an option to the menu.

        Parameters
        -----------
        label: :class:`str`
            The label displayed to users.
        value: :class:`str`
            The value received during an interaction.
        description: :class:`str`
            An additional description of the option.
        emoji: Optional[Union[:class:`str`, :class:`PartialEmoji`]]
            The emoji of the option, if any.
        """
        option = SelectOption(label=label, value=value, description=description, emoji=emoji)
        self._component.options.append(option)
        return self

    def add_default_value(self, id: int, type: SelectDefaultValueType) -> Self:
        self._component.default_values.append(SelectDefaultValue(id=id, type=type))
        return self

    def user_select(self) -> Self:
        self._component.menu_type = ComponentType.user_select
        return self

    def role_select(self) -> Self:
        self._component.menu_type = ComponentType.role_select
        return self

    def mentionable_select(self) -> Self:
        self._component.menu_type = ComponentType.mentionable_select
        return self

    def channel_select(self, *channel_types: ChannelType) -> Self:
        """Turns the menu into a channel select limited to ``channel_types``.

        This sets both the menu type and the channel types.
        """
        self._component.menu_type = ComponentType.channel_select
        self._component.channel_types = list(channel_types)
        return self

    def set_disabled(self, disabled: bool = True) -> Self:
        self._component.disabled = disabled
        return self

    def set_searchable(self, searchable: bool = True) -> Self:
        self._component.searchable = searchable
        return self

    def set_grouped(self, grouped: bool = True) -> Self:
        self._component.grouped = grouped
        return self


class TextInputBuilder(_BaseBuilder[TextInput]):
    """Builds a :class:`TextInput` one field at a time.

    New inputs start out as :attr:`TextStyle.short`.
    """

    __slots__ = ()

    def __init__(self, custom_id: str, label: str) -> None:
        self._component = TextInput(custom_id=custom_id, label=label, style=TextStyle.short)

    def set_placeholder(self, text: str) -> Self:
        self._component.placeholder = text
        return self

    def set_value(self, text: str) -> Self:
        self._component.value = text
        return self

    def set_required(self, required: bool = True) -> Self:
        self._component.required = required
        return self

    def short(self) -> Self:
        self._component.style = TextStyle.short
        return self

    def paragraph(self) -> Self:
        self._component.style = TextStyle.paragraph
        return self

    def set_min_length(self, length: int) -> Self:
        self._component.min_length = length
        return self

    def set_max_length(self, length: int) -> Self:
        self._component.max_length = length
        return self

    def set_validation(self, pattern: str) -> Self:
        self._component.validation_pattern = pattern
        return self

    def set_masked(self, masked: bool = True) -> Self:
        self._component.masked = masked
        return self


class ActionRowBuilder(_BaseBuilder[ActionRow]):
    """Builds an :class:`ActionRow`.

    An action row holds at most 5 components. By default, components
    added past that point are dropped and a warning is logged.

    Parameters
    -----------
    strict: :class:`bool`
        Whether to raise :exc:`ComponentLimitReached` instead of dropping
        components that do not fit.
    """

    __slots__ = ('strict',)

    def __init__(self, *, strict: bool = False) -> None:
        self._component = ActionRow()
        self.strict: bool = strict

    def add_component(self, component: Component) -> Self:
        """Appends a component to the row.

        Raises
        -------
        ComponentLimitReached
            The row is already full and the builder is strict.
        """
        children = self._component.children
        if len(children) >= MAX_ACTION_ROW_CHILDREN:
            if self.strict:
                raise ComponentLimitReached(
                    MAX_ACTION_ROW_CHILDREN, f'action rows can have at most {MAX_ACTION_ROW_CHILDREN} components'
                )
            _log.warning('Action row is full, dropping %r.', component)
            return self

        children.append(component)
        return self

    def add_button(self, button: Button) -> Self:
        return self.add_component(button)

    def add_select_menu(self, menu: SelectMenu) -> Self:
        return self.add_component(menu)


class ModalBuilder(_BaseBuilder[Modal]):
    """Builds a :class:`Modal`."""

    __slots__ = ()

    def __init__(self, custom_id: str, title: str) -> None:
        self._component = Modal(custom_id=custom_id, title=title)

    def add_component(self, component: Component) -> Self:
        self._component.children.append(component)
        return self

    def add_text_input(self, text_input: TextInput) -> Self:
        return self.add_component(text_input)

    def set_size(self, size: ModalSize) -> Self:
        self._component.size = size
        return self

    def set_closable(self, closable: bool = True) -> Self:
        self._component.closable = closable
        return self


class TabsBuilder(_BaseBuilder[Tabs]):
    __slots__ = ()

    def __init__(self, custom_id: str) -> None:
        self._component = Tabs(custom_id=custom_id)

    def add_tab(
        self,
        id: str,
        label: str,
        content: Component,
        badge: Optional[int] = None,
        icon: Optional[Union[str, PartialEmoji]] = None,
    ) -> Self:
        self._component.tabs.append(Tab(id=id, label=label, content=content, badge=badge, icon=icon))
        return self

    def set_default_tab(self, id: str) -> Self:
        self._component.default_tab = id
        return self


class AccordionBuilder(_BaseBuilder[Accordion]):
    __slots__ = ()

    def __init__(self, custom_id: str) -> None:
        self._component = Accordion(custom_id=custom_id)

    def add_item(self, id: str, title: str, content: Component, open: bool = False) -> Self:
        self._component.items.append(AccordionItem(id=id, title=title, content=content, open=open))
        return self

    def set_multiple(self, multiple: bool = True) -> Self:
        self._component.multiple = multiple
        return self


class ComponentBuilder:
    """The entry point for building components.

    Each method starts a new builder for one kind of component.

    .. code-block:: python3

        row = (
            ComponentBuilder()
            .action_row()
            .add_button(ComponentBuilder().button('Accept').success().set_custom_id('accept').build())
            .build()
        )
    """

    __slots__ = ()

    def button(self, label: str = '') -> ButtonBuilder:
        return ButtonBuilder(label)

    def select_menu(self, custom_id: str) -> SelectMenuBuilder:
        return SelectMenuBuilder(custom_id)

    def text_input(self, custom_id: str, label: str) -> TextInputBuilder:
        return TextInputBuilder(custom_id, label)

    def action_row(self, *, strict: bool = False) -> ActionRowBuilder:
        return ActionRowBuilder(strict=strict)

    def modal(self, custom_id: str, title: str) -> ModalBuilder:
        return ModalBuilder(custom_id, title)

    def tabs(self, custom_id: str) -> TabsBuilder:
        return TabsBuilder(custom_id)

    def accordion(self, custom_id: str) -> AccordionBuilder:
        return AccordionBuilder(custom_id)
