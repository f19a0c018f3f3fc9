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

from typing import List

from .components import ActionRow, Button, SelectMenu, SelectOption
from .enums import ButtonStyle

__all__ = (
    'quick_button',
    'quick_buttons',
    'quick_option',
    'quick_select_menu',
    'confirm_dialog',
    'pagination_row',
)


def quick_button(label: str, custom_id: str, style: ButtonStyle = ButtonStyle.primary) -> Button:
    """Creates a plain button with a label and a custom ID."""
    return Button(label=label, custom_id=custom_id, style=style)


def quick_buttons(*buttons: Button) -> ActionRow:
    """Puts the given buttons into a single :class:`ActionRow`.

    No limit is enforced here, see :func:`validate_component`.
    """
    return ActionRow(children=buttons)


def quick_option(label: str, value: str, description: str = '') -> SelectOption:
    return SelectOption(label=label, value=value, description=description)


def quick_select_menu(custom_id: str, placeholder: str, *options: SelectOption) -> SelectMenu:
    """Creates a string select menu allowing a single choice."""
    return SelectMenu(custom_id=custom_id, placeholder=placeholder, options=options, max_values=1)


def confirm_dialog(custom_id: str) -> ActionRow:
    """Creates a row with a "Yes" and a "No" button.

    The buttons' custom IDs are ``custom_id`` suffixed with ``_yes`` and ``_no``.
    """
    return quick_buttons(
        quick_button('Yes', f'{custom_id}_yes', ButtonStyle.success),
        quick_button('No', f'{custom_id}_no', ButtonStyle.danger),
    )


def pagination_row(custom_id: str, current_page: int, total_pages: int) -> ActionRow:
    """Creates a row of buttons to move between pages.

    The row holds, in order, the first, previous, current, next and last
    buttons. Their custom IDs are ``custom_id`` suffixed with ``_first``,
    ``_prev``, ``_current``, ``_next`` and ``_last``.

    Parameters
    -----------
    custom_id: :class:`str`
        The prefix of every button's custom ID.
    current_page: :class:`int`
        The page currently shown, starting at 1.
    total_pages: :class:`int`
        The number of pages.

    Returns
    --------
    :class:`ActionRow`
        The row. First and previous are disabled on the first page,
        next and last are disabled on the last page.
    """
    buttons: List[Button] = [
        quick_button('⏮️', f'{custom_id}_first', ButtonStyle.secondary),
        quick_button('◀️', f'{custom_id}_prev', ButtonStyle.secondary),
        quick_button(f'{current_page}/{total_pages}', f'{custom_id}_current', ButtonStyle.secondary),
        quick_button('▶️', f'{custom_id}_next', ButtonStyle.secondary),
        quick_button('⏭️', f'{custom_id}_last', ButtonStyle.secondary),
    ]

    if current_page <= 1:
        buttons[0].disabled = True
        buttons[1].disabled = True
    if current_page >= total_pages:
        buttons[3].disabled = True
        buttons[4].disabled = True

    return quick_buttons(*buttons)
