import logging

import pytest

import uikit
from uikit import (
    ActionRow,
    Button,
    ButtonSize,
    ButtonStyle,
    ChannelType,
    ComponentBuilder,
    ComponentType,
    ModalSize,
    PartialEmoji,
    SelectDefaultValueType,
    TextStyle,
)


@pytest.fixture()
def builder() -> ComponentBuilder:
    return ComponentBuilder()


class TestButtonBuilder:
    def test_starts_as_primary(self, builder: ComponentBuilder):
        button = builder.button('Go').build()

        assert button.label == 'Go'
        assert button.style is ButtonStyle.primary

    @pytest.mark.parametrize(
        ('method', 'style'),
        [
            ('primary', ButtonStyle.primary),
            ('secondary', ButtonStyle.secondary),
            ('success', ButtonStyle.success),
            ('danger', ButtonStyle.danger),
            ('premium', ButtonStyle.premium),
        ],
    )
    def test_style_shortcuts(self, builder: ComponentBuilder, method: str, style: ButtonStyle):
        button = getattr(builder.button('Go'), method)().build()

        assert button.style is style

    def test_link_sets_style_and_url(self, builder: ComponentBuilder):
        button = builder.button('Docs').link('https://example.com').build()

        assert button.style is ButtonStyle.link
        assert button.url == 'https://example.com'

    def test_chaining(self, builder: ComponentBuilder):
        button = (
            builder.button('Buy')
            .premium()
            .set_sku_id(1234567890123)
            .set_disabled()
            .set_emoji('gem', 123456789012345678, animated=True)
            .set_tooltip('Buy it')
            .set_badge(1)
            .set_loading()
            .set_size(ButtonSize.medium)
            .build()
        )

        assert button == Button(
            label='Buy',
            style=ButtonStyle.premium,
            sku_id=1234567890123,
            disabled=True,
            emoji=PartialEmoji(name='gem', id=123456789012345678, animated=True),
            tooltip='Buy it',
            badge=1,
            loading=True,
            size=ButtonSize.medium,
        )

    def test_mutators_return_the_builder(self, builder: ComponentBuilder):
        button_builder = builder.button('Go')

        assert button_builder.set_custom_id('go') is button_builder
        assert button_builder.danger() is button_builder

    def test_build_is_detached(self, builder: ComponentBuilder):
        button_builder = builder.button('Go').set_custom_id('go')
        first = button_builder.build()
        button_builder.danger().set_custom_id('changed')
        second = button_builder.build()

        assert first.style is ButtonStyle.primary
        assert first.custom_id == 'go'
        assert second.style is ButtonStyle.danger

        second.label = 'mutated'
        assert button_builder.build().label == 'Go'


class TestSelectMenuBuilder:
    def test_string_select(self, builder: ComponentBuilder):
        menu = (
            builder.select_menu('fruit')
            .set_placeholder('Pick one')
            .set_min_values(1)
            .set_max_values(2)
            .add_option('Apple', 'apple', 'Red', emoji='\N{RED APPLE}')
            .add_option('Pear', 'pear')
            .set_searchable()
            .build()
        )

        assert menu.type is ComponentType.select
        assert menu.placeholder == 'Pick one'
        assert (menu.min_values, menu.max_values) == (1, 2)
        assert [option.value for option in menu.options] == ['apple', 'pear']
        assert menu.options[0].emoji == PartialEmoji(name='\N{RED APPLE}')
        assert menu.searchable is True

    @pytest.mark.parametrize(
        ('method', 'menu_type'),
        [
            ('user_select', ComponentType.user_select),
            ('role_select', ComponentType.role_select),
            ('mentionable_select', ComponentType.mentionable_select),
        ],
    )
    def test_sub_kinds(self, builder: ComponentBuilder, method: str, menu_type: ComponentType):
        menu = getattr(builder.select_menu('pick'), method)().build()

        assert menu.type is menu_type
        assert menu.to_dict()['type'] == menu_type.value

    def test_channel_select_sets_channel_types(self, builder: ComponentBuilder):
        menu = (
            builder.select_menu('channel')
            .channel_select(ChannelType.text, ChannelType.news)
            .add_default_value(41771983423143937, SelectDefaultValueType.channel)
            .set_grouped()
            .set_disabled()
            .build()
        )

        assert menu.type is ComponentType.channel_select
        assert menu.channel_types == [ChannelType.text, ChannelType.news]
        assert menu.default_values[0].id == 41771983423143937
        assert menu.grouped is True
        assert menu.disabled is True

    def test_build_copies_options(self, builder: ComponentBuilder):
        menu_builder = builder.select_menu('pick').add_option('A', 'a')
        menu = menu_builder.build()
        menu_builder.add_option('B', 'b')
        menu.options[0].label = 'changed'

        assert len(menu.options) == 1
        assert menu_builder.build().options[0].label == 'A'


class TestTextInputBuilder:
    def test_starts_as_short(self, builder: ComponentBuilder):
        text_input = builder.text_input('name', 'Name').build()

        assert text_input.style is TextStyle.short
        assert (text_input.custom_id, text_input.label) == ('name', 'Name')

    def test_chaining(self, builder: ComponentBuilder):
        text_input = (
            builder.text_input('bio', 'Bio')
            .paragraph()
            .set_placeholder('About you')
            .set_value('Hi')
            .set_required()
            .set_min_length(1)
            .set_max_length(100)
            .set_validation('^.+$')
            .set_masked()
            .build()
        )

        assert text_input == uikit.TextInput(
            custom_id='bio',
            label='Bio',
            style=TextStyle.paragraph,
            placeholder='About you',
            value='Hi',
            required=True,
            min_length=1,
            max_length=100,
            validation_pattern='^.+$',
            masked=True,
        )

    def test_short_after_paragraph(self, builder: ComponentBuilder):
        assert builder.text_input('a', 'A').paragraph().short().build().style is TextStyle.short


def _buttons(count: int):
    return [Button(label=str(i), custom_id=f'button_{i}') for i in range(count)]


class TestActionRowBuilder:
    def test_keeps_order(self, builder: ComponentBuilder):
        buttons = _buttons(3)
        row_builder = builder.action_row()
        for button in buttons:
            row_builder.add_button(button)

        assert row_builder.build().children == buttons

    def test_drops_components_past_the_fifth(self, builder: ComponentBuilder, caplog: pytest.LogCaptureFixture):
        buttons = _buttons(6)
        row_builder = builder.action_row()

        with caplog.at_level(logging.WARNING, logger='uikit.builders'):
            for button in buttons:
                row_builder.add_button(button)

        row = row_builder.build()
        assert len(row.children) == 5
        assert row.children == buttons[:5]
        assert any('Action row is full' in record.getMessage() for record in caplog.records)

    def test_strict_rejects_the_sixth(self, builder: ComponentBuilder):
        buttons = _buttons(6)
        row_builder = builder.action_row(strict=True)
        for button in buttons[:5]:
            row_builder.add_button(button)

        with pytest.raises(uikit.ComponentLimitReached) as exc_info:
            row_builder.add_button(buttons[5])

        assert exc_info.value.limit == 5
        assert len(row_builder.build().children) == 5

    def test_build_copies_children(self, builder: ComponentBuilder):
        row_builder = builder.action_row().add_button(Button(label='a', custom_id='a'))
        row = row_builder.build()
        row_builder.add_select_menu(uikit.SelectMenu(custom_id='pick'))
        row.children.append(Button(label='b', custom_id='b'))
        row.children[0].label = 'changed'

        rebuilt = row_builder.build()
        assert len(row.children) == 2
        assert [child.type for child in rebuilt.children] == [ComponentType.button, ComponentType.select]
        assert rebuilt.children[0].label == 'a'

    def test_builds_an_action_row(self, builder: ComponentBuilder):
        assert isinstance(builder.action_row().build(), ActionRow)


class TestContainerBuilders:
    def test_modal(self, builder: ComponentBuilder):
        name = builder.text_input('name', 'Name').build()
        row = builder.action_row().add_component(builder.text_input('age', 'Age').build()).build()
        modal = (
            builder.modal('signup', 'Sign up')
            .add_text_input(name)
            .add_component(row)
            .set_size(ModalSize.large)
            .set_closable()
            .build()
        )

        assert (modal.custom_id, modal.title) == ('signup', 'Sign up')
        assert modal.children == [name, row]
        assert modal.size is ModalSize.large
        assert modal.closable is True

    def test_tabs(self, builder: ComponentBuilder):
        content = builder.button('Save').set_custom_id('save').build()
        tabs = (
            builder.tabs('settings')
            .add_tab('general', 'General', content)
            .add_tab('about', 'About', uikit.TextDisplay(), badge=1, icon='\N{WHITE MEDIUM STAR}')
            .set_default_tab('about')
            .build()
        )

        assert [tab.id for tab in tabs.tabs] == ['general', 'about']
        assert tabs.children == [content, uikit.TextDisplay()]
        assert tabs.tabs[1].badge == 1
        assert tabs.default_tab == 'about'

    def test_accordion(self, builder: ComponentBuilder):
        accordion = (
            builder.accordion('faq')
            .add_item('q1', 'Why?', uikit.TextDisplay(), open=True)
            .add_item('q2', 'How?', uikit.Separator())
            .set_multiple()
            .build()
        )

        assert [(item.id, item.open) for item in accordion.items] == [('q1', True), ('q2', False)]
        assert accordion.multiple is True
        assert accordion.type is ComponentType.accordion

    def test_tabs_build_is_detached(self, builder: ComponentBuilder):
        tabs_builder = builder.tabs('t').add_tab('1', 'One', Button(label='x', custom_id='x'))
        tabs = tabs_builder.build()
        tabs_builder.add_tab('2', 'Two', uikit.Separator())

        assert len(tabs.tabs) == 1
