import pytest

from uikit import ButtonStyle, PartialEmoji
from uikit.enums import try_enum


class TestPartialEmoji:
    @pytest.mark.parametrize(
        ('value', 'name', 'id', 'animated'),
        [
            ('<a:party:123456789012345678>', 'party', 123456789012345678, True),
            ('<:party:123456789012345678>', 'party', 123456789012345678, False),
            ('party:123456789012345678', 'party', 123456789012345678, False),
            ('\N{THUMBS UP SIGN}', '\N{THUMBS UP SIGN}', None, False),
        ],
    )
    def test_from_str(self, value: str, name: str, id, animated: bool):
        emoji = PartialEmoji.from_str(value)

        assert (emoji.name, emoji.id, emoji.animated) == (name, id, animated)

    def test_to_dict_omits_empty_fields(self):
        assert PartialEmoji(name='\N{THUMBS UP SIGN}').to_dict() == {'name': '\N{THUMBS UP SIGN}'}
        assert PartialEmoji(id=123456789012345678).to_dict() == {'id': '123456789012345678'}

    def test_from_dict(self):
        emoji = PartialEmoji.from_dict({'name': 'party', 'id': '123456789012345678', 'animated': True})

        assert emoji == PartialEmoji(name='party', id=123456789012345678, animated=True)
        assert str(emoji) == '<a:party:123456789012345678>'

    def test_equality(self):
        assert PartialEmoji(name='a') == PartialEmoji(name='a')
        assert PartialEmoji(name='a') != PartialEmoji(name='b')
        assert PartialEmoji(name='a', id=1) == PartialEmoji(name='a', id=1)
        assert PartialEmoji(name='a') != 'a'

    @pytest.mark.parametrize(
        'other',
        [
            PartialEmoji(name='b', id=1),
            PartialEmoji(name='a', id=1, animated=True),
            PartialEmoji(name='a', id=2),
        ],
    )
    def test_custom_emoji_compare_every_field(self, other: PartialEmoji):
        assert PartialEmoji(name='a', id=1) != other


class TestTryEnum:
    def test_known_value(self):
        assert try_enum(ButtonStyle, 5) is ButtonStyle.link

    def test_unknown_value(self):
        assert try_enum(ButtonStyle, 99) == 99
