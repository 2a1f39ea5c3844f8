import logging
import socket
import warnings
import pytest
from crnparse import parse
from crnparse.logging import get_logger, setup_logger, \
    DocumentLoggerAdapter, LOG_LEVEL_ENV_VAR, EXTENDED_DEBUG, \
    BASE_LOGGER_NAME


@pytest.fixture
def base_logger():
    log = logging.getLogger(BASE_LOGGER_NAME)
    handlers, level = log.handlers[:], log.level
    log.handlers = []
    yield log
    log.handlers = handlers
    log.setLevel(level)


def test_get_logger_namespace():
    logger = get_logger('crnparse.parser')
    assert logger.name == 'crnparse.parser'


def test_document_adapter():
    class Named(object):
        name = 'net'
    logger = get_logger('crnparse.test', document=Named())
    assert isinstance(logger, DocumentLoggerAdapter)
    assert logger.process('hello', {}) == ('[net] hello', {})


def test_log_level_override():
    logger = get_logger('crnparse.test_level', log_level=True)
    assert logger.level == logging.DEBUG
    with pytest.raises(ValueError):
        get_logger('crnparse.test_level', log_level='DEBUG')


def test_env_var_level(monkeypatch, base_logger):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, 'EXTENDED_DEBUG')
    log = setup_logger(console_output=False)
    assert log.level == EXTENDED_DEBUG
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, '12')
    assert setup_logger(console_output=False).level == 12


def test_env_var_invalid(monkeypatch, base_logger):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, 'LOUD')
    with pytest.raises(ValueError):
        setup_logger(console_output=False)


def test_parse_leaves_logging_unconfigured(monkeypatch, base_logger):
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)

    def no_dns(*args, **kwargs):
        raise AssertionError('parsing must not look up the host name')
    monkeypatch.setattr(socket, 'getfqdn', no_dns)

    showwarning = warnings.showwarning
    parse('A => B, 1\nA, 3', name='quiet')

    assert warnings.showwarning is showwarning
    assert logging._warnings_showwarning is None
    assert base_logger.handlers
    assert all(isinstance(h, logging.NullHandler)
               for h in base_logger.handlers)


def test_env_var_enables_console(monkeypatch, base_logger):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, 'DEBUG')
    get_logger('crnparse.parser')
    assert base_logger.level == logging.DEBUG
    assert [type(h) for h in base_logger.handlers] == [logging.StreamHandler]


def test_parse_logs_summary(caplog):
    with caplog.at_level(logging.DEBUG, logger='crnparse'):
        parse('A => B, 1\nA, 3', name='logged')
    assert '[logged] Parsed 2 lines into 1 reactions and 1 species counts' \
        in caplog.text
