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

from enum import Enum
from typing import Optional

from .components import (
    MAX_ACTION_ROW_CHILDREN,
    ActionRow,
    Button,
    Component,
    Modal,
    SelectMenu,
    TextInput,
    walk_components,
)
from .enums import ButtonStyle, ComponentType
from .errors import ValidationError

__all__ = (
    'ValidationRule',
    'check_component',
    'validate_component',
)


class ValidationRule(Enum):
    action_row_empty = 'action_row_empty'
    action_row_too_many = 'action_row_too_many'
    button_label_or_emoji = 'button_label_or_emoji'
    link_button_url = 'link_button_url'
    button_custom_id = 'button_custom_id'
    select_menu_custom_id = 'select_menu_custom_id'
    select_menu_options = 'select_menu_options'
    text_input_custom_id = 'text_input_custom_id'
    text_input_label = 'text_input_label'
    modal_custom_id = 'modal_custom_id'
    modal_title = 'modal_title'

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ValidationRule.action_row_empty: 'action row must have at least 1 component',
    ValidationRule.action_row_too_many: f'action row can have maximum {MAX_ACTION_ROW_CHILDREN} components',
    ValidationRule.button_label_or_emoji: 'button must have either label or emoji',
    ValidationRule.link_button_url: 'link button must have URL',
    ValidationRule.button_custom_id: 'non-link button must have custom ID',
    ValidationRule.select_menu_custom_id: 'select menu must have custom ID',
    ValidationRule.select_menu_options: 'string select menu must have options',
    ValidationRule.text_input_custom_id: 'text input must have custom ID',
    ValidationRule.text_input_label: 'text input must have label',
    ValidationRule.modal_custom_id: 'modal must have custom ID',
    ValidationRule.modal_title: 'modal must have title',
}


def _check_action_row(row: ActionRow) -> Optional[ValidationRule]:
    if len(row.children) > MAX_ACTION_ROW_CHILDREN:
        return ValidationRule.action_row_too_many
    if not row.children:
        return ValidationRule.action_row_empty
    return None


def _check_button(button: Button) -> Optional[ValidationRule]:
    if not button.label and button.emoji is None:
        return ValidationRule.button_label_or_emoji
    if button.style == ButtonStyle.link:
        if not button.url:
            return ValidationRule.link_button_url
    elif not button.custom_id:
        return ValidationRule.button_custom_id
    return None


def _check_select_menu(menu: SelectMenu) -> Optional[ValidationRule]:
    if not menu.custom_id:
        return ValidationRule.select_menu_custom_id
    if menu.menu_type == ComponentType.select and not menu.options:
        return ValidationRule.select_menu_options
    return None


def _check_text_input(text_input: TextInput) -> Optional[ValidationRule]:
    if not text_input.custom_id:
        return ValidationRule.text_input_custom_id
    if not text_input.label:
        return ValidationRule.text_input_label
    return None


def _check_modal(modal: Modal) -> Optional[ValidationRule]:
    if not modal.custom_id:
        return ValidationRule.modal_custom_id
    if not modal.title:
        return ValidationRule.modal_title
    return None


def _check_one(component: Component) -> Optional[ValidationError]:
    if isinstance(component, ActionRow):
        rule = _check_action_row(component)
    elif isinstance(component, Button):
        rule = _check_button(component)
    elif isinstance(component, SelectMenu):
        rule = _check_select_menu(component)
    elif isinstance(component, TextInput):
        rule = _check_text_input(component)
    elif isinstance(component, Modal):
        rule = _check_modal(component)
    else:
        rule = None

    if rule is None:
        return None
    return ValidationError(rule, component)


def check_component(component: Component, *, recursive: bool = False) -> Optional[ValidationError]:
    """Checks a component against its structural rules.

    This is never done automatically. Payloads that break these rules
    still encode and decode fine, so call this before sending a tree
    that was built locally.

    Parameters
    -----------
    component: :class:`Component`
        The component to check.
    recursive: :class:`bool`
        Whether to check every component of the tree rather than
        only ``component`` itself.

    Returns
    --------
    Optional[:class:`ValidationError`]
        The first violation found, or ``None`` if the component is valid.
    """
    nodes = walk_components([component]) if recursive else (component,)
    for node in nodes:
        error = _check_one(node)
        if error is not None:
            return error
    return None


def validate_component(component: Component, *, recursive: bool = False) -> None:
    """Like :func:`check_component` but raises the violation instead of returning it.

    Raises
    -------
    ValidationError
        The component breaks one of its rules.
    """
    error = check_component(component, recursive=recursive)
    if error is not None:
        raise error
