import json
import logging

import pytest

from kubeext import LogFormat, configure
from kubeext._core.loggers import JsonFormatter, make_formatter


@pytest.fixture(autouse=True)
def _restore_the_loggers():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    propagations = {name: logging.getLogger(name).propagate for name in ['asyncio', 'aiohttp']}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, propagate in propagations.items():
        logging.getLogger(name).propagate = propagate
        logging.getLogger(name).handlers[:] = []


@pytest.mark.parametrize('kwargs, level', [
    (dict(), logging.INFO),
    (dict(verbose=True), logging.DEBUG),
    (dict(debug=True), logging.DEBUG),
    (dict(quiet=True), logging.WARNING),
])
def test_levels(kwargs, level):
    configure(**kwargs)
    assert logging.getLogger().level == level


def test_low_level_loggers_are_silenced():
    configure()
    assert not logging.getLogger('asyncio').propagate
    assert not logging.getLogger('aiohttp').propagate


def test_low_level_loggers_are_shown_in_debug():
    configure(debug=True)
    assert logging.getLogger('asyncio').propagate
    assert logging.getLogger('aiohttp').propagate


def test_handler_is_added():
    before = len(logging.getLogger().handlers)
    configure(log_format=LogFormat.JSON)
    handlers = logging.getLogger().handlers
    assert len(handlers) == before + 1
    assert isinstance(handlers[-1].formatter, JsonFormatter)


@pytest.mark.parametrize('log_format, expected', [
    (LogFormat.PLAIN, 'hello'),
    (LogFormat.FULL, f"{'kubeext':20s} [INFO    ] hello"),
    ('%(levelname)s:%(message)s', 'INFO:hello'),
])
def test_text_formats(log_format, expected):
    record = logging.LogRecord('kubeext', logging.INFO, __file__, 1, 'hello', (), None)
    formatter = make_formatter(log_format)
    assert formatter.format(record).endswith(expected)


def test_json_format():
    record = logging.LogRecord('kubeext', logging.INFO, __file__, 1, 'hello', (), None)
    formatter = make_formatter(LogFormat.JSON)
    data = json.loads(formatter.format(record))
    assert data['message'] == 'hello'
    assert 'timestamp' in data


def test_unsupported_format():
    with pytest.raises(ValueError):
        make_formatter(123)  # type: ignore
