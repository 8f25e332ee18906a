"""Configure logging for the application.

Pocket credentials travel in the query string, so any logged request URL
would leak them. Every handler installed here masks the consumer_key and
access_token values before a record is written.
"""

import logging
import re
import sys

_CREDENTIAL_PARAM = re.compile(r"\b(consumer_key|access_token)=[^&\s\"']*")


class RedactCredentialsFilter(logging.Filter):
    """Replace credential query values in a record's message with ***."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _CREDENTIAL_PARAM.sub(r"\1=***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.addFilter(RedactCredentialsFilter())

    app_logger = logging.getLogger("pocket_bookmarks")
    app_logger.setLevel(level)
    app_logger.addHandler(handler)

    # httpx request lines only show up in debug mode, through the same
    # redacting handler
    httpx_logger = logging.getLogger("httpx")
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    if debug:
        httpx_logger.setLevel(logging.DEBUG)
        httpx_logger.addHandler(handler)
    else:
        httpx_logger.setLevel(logging.WARNING)
