import pytest

import uikit
from uikit import ActionRow, Button, ButtonStyle, ComponentType


def _disabled(row: ActionRow):
    return [child.disabled for child in row.children]  # type: ignore


class TestPaginationRow:
    def test_layout(self):
        row = uikit.pagination_row('pages', 2, 5)

        assert [child.custom_id for child in row.children] == [  # type: ignore
            'pages_first',
            'pages_prev',
            'pages_current',
            'pages_next',
            'pages_last',
        ]
        assert row.children[2].label == '2/5'  # type: ignore
        assert all(child.style is ButtonStyle.secondary for child in row.children)  # type: ignore
        assert _disabled(row) == [False] * 5

    def test_first_page(self):
        row = uikit.pagination_row('pages', 1, 5)

        assert _disabled(row) == [True, True, False, False, False]

    def test_last_page(self):
        row = uikit.pagination_row('pages', 5, 5)

        assert _disabled(row) == [False, False, False, True, True]

    @pytest.mark.parametrize(('current', 'total'), [(1, 1), (0, 0), (3, 1)])
    def test_single_page(self, current: int, total: int):
        row = uikit.pagination_row('pages', current, total)

        assert _disabled(row)[:2] == [current <= 1] * 2
        assert _disabled(row)[3:] == [True, True]

    def test_is_valid(self):
        assert uikit.check_component(uikit.pagination_row('pages', 3, 7), recursive=True) is None


class TestConfirmDialog:
    def test_buttons(self):
        row = uikit.confirm_dialog('delete')

        assert row.children == [
            Button(label='Yes', custom_id='delete_yes', style=ButtonStyle.success),
            Button(label='No', custom_id='delete_no', style=ButtonStyle.danger),
        ]


class TestQuickConstructors:
    def test_quick_button(self):
        assert uikit.quick_button('Go', 'go', ButtonStyle.danger) == Button(
            label='Go', custom_id='go', style=ButtonStyle.danger
        )

    def test_quick_buttons_keeps_everything(self):
        buttons = [uikit.quick_button(str(i), str(i)) for i in range(7)]

        assert uikit.quick_buttons(*buttons).children == buttons

    def test_quick_select_menu(self):
        options = [uikit.quick_option('One', '1', 'First'), uikit.quick_option('Two', '2')]
        menu = uikit.quick_select_menu('numbers', 'Pick a number', *options)

        assert menu.type is ComponentType.select
        assert menu.max_values == 1
        assert menu.placeholder == 'Pick a number'
        assert menu.options == options
        assert options[0].description == 'First'
        assert options[1].description == ''
