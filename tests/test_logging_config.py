import io
import logging
from logging.handlers import RotatingFileHandler

import httpx
import pytest
from rich.console import Console
from rich.logging import RichHandler

from adapters.http_client import HttpxTransport, build_client
from conftest import envelope
from core.logging_config import LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def http_records():
    logger = get_logger("http")
    handler = _ListHandler()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler.records
    logger.removeHandler(handler)
    logger.setLevel(previous_level)


def test_setup_logging_replaces_handlers(clean_logger, tmp_path):
    console = Console(file=io.StringIO())

    setup_logging("INFO", tmp_path / "logs" / "echonest.log", console=console)
    assert len(clean_logger.handlers) == 2
    assert any(isinstance(h, RotatingFileHandler) for h in clean_logger.handlers)

    setup_logging("DEBUG", console=console)
    assert len(clean_logger.handlers) == 1
    assert isinstance(clean_logger.handlers[0], RichHandler)
    assert clean_logger.handlers[0].level == logging.DEBUG


def test_setup_logging_writes_to_log_file(clean_logger, tmp_path):
    log_file = tmp_path / "echonest.log"
    setup_logging("WARNING", log_file, console=Console(file=io.StringIO()))

    get_logger("dispatcher").debug("only in the file")
    for handler in clean_logger.handlers:
        handler.flush()

    assert "only in the file" in log_file.read_text(encoding="utf-8")


def test_setup_logging_quiets_http_libraries(clean_logger):
    logging.getLogger("httpx").setLevel(logging.DEBUG)
    logging.getLogger("httpcore").setLevel(logging.DEBUG)

    setup_logging(console=Console(file=io.StringIO()))

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


@pytest.mark.parametrize("trace, level", [(False, logging.DEBUG), (True, logging.INFO)])
def test_request_log_level_follows_trace_flag(settings, http_records, trace, level):
    traced = settings.model_copy(update={"trace_api_calls": trace})
    client = build_client(traced, transport=httpx.MockTransport(lambda request: httpx.Response(200, json=envelope())))

    HttpxTransport(traced, client=client).get("/api/v4/artist/list_genres", {})

    request_logs = [r for r in http_records if r.getMessage().startswith("GET /api/v4/artist/list_genres")]
    assert [r.levelno for r in request_logs] == [level]
