from __future__ import annotations

import logging
from collections.abc import Iterator  # noqa: TC003

import pytest

from assetsync.config import configure_logging


@pytest.fixture(autouse=True)
def _restore_http_loggers() -> Iterator[None]:
    yield
    for name in ("httpx", "httpcore", "hishel"):
        logging.getLogger(name).setLevel(logging.NOTSET)


def test_http_loggers_are_quiet_by_default() -> None:
    configure_logging()

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("hishel").level == logging.WARNING


def test_debug_level_enables_http_loggers() -> None:
    configure_logging(level=logging.DEBUG)

    assert logging.getLogger("httpx").level == logging.DEBUG
