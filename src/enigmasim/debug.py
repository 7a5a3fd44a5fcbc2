from __future__ import annotations

import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure(verbose: bool = False, log_to: str | None = None) -> None:
    """
    Set up root logging once per process.

    Messages go to stderr; if `log_to` is given they also stream to that
    file. DEBUG level shows every rotor step and signal path.
    """
    global _configured
    if _configured:
        return

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_to:
        handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )
    _configured = True
