import json
import logging
import subprocess
import sys
import textwrap
from datetime import datetime

import pytest

from fixerio.monitoring.logger import CustomJSONEncoder, JSONFormatter, configure_logging


@pytest.fixture
def reset_package_logger():
    package_logger = logging.getLogger('fixerio')
    level = package_logger.level
    handlers = list(package_logger.handlers)
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


def make_record(**extra):
    record = logging.LogRecord(
        name='fixerio.infrastructure.providers.fixerio',
        level=logging.ERROR,
        pathname=__file__,
        lineno=10,
        msg='Request to %s failed',
        args=('http://api.fixer.io/latest?base=EUR',),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_basic_fields():
    entry = json.loads(JSONFormatter().format(make_record()))

    assert entry['level'] == 'ERROR'
    assert entry['logger'] == 'fixerio.infrastructure.providers.fixerio'
    assert entry['message'] == 'Request to http://api.fixer.io/latest?base=EUR failed'
    assert entry['line'] == 10
    assert 'data' not in entry


def test_json_formatter_includes_extra_data():
    record = make_record(extra_data={'provider': 'fixerio', 'success': False, 'response_time_ms': 12})

    entry = json.loads(JSONFormatter().format(record))

    assert entry['data'] == {'provider': 'fixerio', 'success': False, 'response_time_ms': 12}


def test_json_formatter_includes_exception():
    try:
        raise ValueError('boom')
    except ValueError:
        record = make_record()
        record.exc_info = sys.exc_info()

    entry = json.loads(JSONFormatter().format(record))

    assert entry['exception']['type'] == 'ValueError'
    assert entry['exception']['message'] == 'boom'


def test_custom_encoder_handles_datetime():
    encoded = json.dumps({'at': datetime(2000, 1, 3, 12, 0)}, cls=CustomJSONEncoder)

    assert encoded == '{"at": "2000-01-03T12:00:00"}'


def test_configure_logging_console(reset_package_logger, capsys):
    package_logger = configure_logging('debug')

    assert package_logger is reset_package_logger
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1
    assert logging.getLogger('httpx').level == logging.WARNING

    logging.getLogger('fixerio.test').info('hello')

    assert 'hello' in capsys.readouterr().out


def test_configure_logging_json_replaces_handler(reset_package_logger, capsys):
    configure_logging('info')
    package_logger = configure_logging('info', json_output=True)

    assert len(package_logger.handlers) == 1

    logging.getLogger('fixerio.test').warning('structured', extra={'extra_data': {'k': 'v'}})

    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert json.loads(line)['data'] == {'k': 'v'}


def test_configure_logging_level_from_settings(reset_package_logger, monkeypatch):
    monkeypatch.setenv('FIXERIO_LOG_LEVEL', 'warning')

    package_logger = configure_logging()

    assert package_logger.level == logging.WARNING


def test_package_logger_has_null_handler():
    import fixerio  # noqa: F401

    handlers = logging.getLogger('fixerio').handlers

    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_library_is_silent_without_configuration():
    script = textwrap.dedent('''
        import asyncio

        import httpx

        from fixerio import AsyncApi, Config, Currency, TransportError


        async def slow(request):
            await asyncio.sleep(1)
            return httpx.Response(200, json={})


        def refused(request):
            raise httpx.ConnectError('Connection refused', request=request)


        async def main():
            api = AsyncApi(client=httpx.AsyncClient(transport=httpx.MockTransport(slow)))
            assert await api.get_timeout(Config.new(Currency.EUR), 0.01) is None

            api = AsyncApi(client=httpx.AsyncClient(transport=httpx.MockTransport(refused)))
            try:
                await api.get(Config.new(Currency.EUR))
            except TransportError:
                pass


        asyncio.run(main())
    ''')

    proc = subprocess.run([sys.executable, '-c', script], capture_output=True, text=True, timeout=30)

    assert proc.returncode == 0, proc.stderr
    assert proc.stderr == ''
