import logging

import pytest
from loguru import logger

import uikit
from uikit import utils


@pytest.fixture()
def messages():
    captured = []
    sink_id = logger.add(lambda message: captured.append(message.record['message']), level='DEBUG')
    yield captured
    logger.remove(sink_id)


@pytest.fixture()
def library_logger():
    library = logging.getLogger('uikit')
    handlers = list(library.handlers)
    level = library.level
    yield library
    library.handlers[:] = handlers
    library.setLevel(level)


class TestSetupLogging:
    def test_routes_library_records_to_loguru(self, messages, library_logger):
        handler = uikit.setup_logging(level=logging.DEBUG)

        logging.getLogger('uikit.components').debug('decoded %d components', 3)

        assert handler in library_logger.handlers
        assert 'decoded 3 components' in messages

    def test_respects_level(self, messages, library_logger):
        uikit.setup_logging(level=logging.WARNING)

        logging.getLogger('uikit.builders').info('not shown')
        logging.getLogger('uikit.builders').warning('shown')

        assert messages == ['shown']

    def test_builder_overflow_is_logged(self, messages, library_logger):
        uikit.setup_logging(level=logging.WARNING)
        row = uikit.ComponentBuilder().action_row()
        for i in range(6):
            row.add_button(uikit.Button(label=str(i), custom_id=str(i)))

        assert any(message.startswith('Action row is full') for message in messages)


class TestHelpers:
    def test_missing_is_falsy(self):
        assert not utils.MISSING
        assert utils.MISSING != utils.MISSING

    def test_get_as_snowflake(self):
        assert utils._get_as_snowflake({'id': '123'}, 'id') == 123
        assert utils._get_as_snowflake({'id': None}, 'id') is None
        assert utils._get_as_snowflake({}, 'id') is None

    def test_get_slots_follows_the_mro(self):
        assert list(utils.get_slots(uikit.ActionRow)) == ['children', 'id']
