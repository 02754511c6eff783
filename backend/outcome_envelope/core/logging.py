"""Logging setup.

Every record carries the id of the request being served (``-`` outside a
request) so that log lines can be matched to ``X-Request-ID`` headers. The
id is stamped when the record is created, so every handler sees it.
"""

import logging
import sys
from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

_HANDLER_NAME = "outcome_envelope"
_base_record_factory = logging.getLogRecordFactory()


def _record_factory(*args, **kwargs) -> logging.LogRecord:
    record = _base_record_factory(*args, **kwargs)
    record.request_id = request_id_var.get()
    return record


def configure_logging(level: str = "INFO", fmt: str | None = None) -> None:
    """Install the application log handler on the root logger.

    Safe to call more than once; the handler is replaced, not duplicated.
    """
    logging.setLogRecordFactory(_record_factory)

    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s] %(message)s")
    )
    root.addHandler(handler)
    root.setLevel(level.upper())
