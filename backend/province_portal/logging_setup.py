import logging

from flask import Flask, has_request_context, request


class RequestFormatter(logging.Formatter):
    """Prefix records emitted during a request with method, path and client address."""

    def format(self, record):
        if has_request_context():
            record.request_info = f"{request.method} {request.path} [{request.remote_addr}]"
        else:
            record.request_info = "-"
        return super().format(record)


def configure_logging(app: Flask) -> None:
    """Configure centralized application logging."""
    handler = logging.StreamHandler()
    handler.setFormatter(
        RequestFormatter("%(asctime)s %(levelname)s %(name)s %(request_info)s: %(message)s")
    )

    level = app.config.get("LOG_LEVEL", "INFO")

    root = logging.getLogger()
    if not root.handlers:
        root.addHandler(handler)
    root.setLevel(level)

    # Flask's own logger propagates to the root handler instead of its default one.
    app.logger.handlers = []
    app.logger.propagate = True
    app.logger.setLevel(level)
