"""Shared pytest fixtures for lancelog tests."""

import io
from datetime import datetime

import pytest
from loguru import logger

import lancelog.std
from lancelog.formatter import NestedFormatter
from lancelog.levels import Level
from lancelog.logger import Logger
from lancelog.models import LogRecord


@pytest.fixture
def loguru_records():
    """Collect records reaching an application-level loguru handler."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level=0)
    yield records
    logger.remove(handler_id)


@pytest.fixture
def fixed_time():
    """A fixed instant with millisecond precision."""
    return datetime(2024, 3, 5, 14, 7, 9, 123456)


@pytest.fixture
def make_record(fixed_time):
    """Factory for LogRecords at the fixed instant."""

    def _make(message="hello", level=Level.INFO, fields=None, caller=None):
        return LogRecord(
            time=fixed_time,
            level=level,
            message=message,
            fields=fields or {},
            caller=caller,
        )

    return _make


@pytest.fixture
def output():
    """Binary sink collecting formatted lines."""
    return io.BytesIO()


@pytest.fixture
def exits():
    """Record exit statuses instead of terminating the test run."""
    return []


@pytest.fixture
def log(output, exits):
    """A Logger writing to the binary sink."""
    return Logger(
        out=output,
        formatter=NestedFormatter(no_colors=True),
        level=Level.TRACE,
        exit_func=exits.append,
    )


@pytest.fixture
def std_logger(output, exits):
    """Install a Logger as the standard logger for the duration of a test."""
    instance = Logger(
        out=output,
        formatter=NestedFormatter(no_colors=True),
        level=Level.TRACE,
        exit_func=exits.append,
    )
    previous = lancelog.std.set_logger(instance)
    yield instance
    lancelog.std.set_logger(previous)
