"""
Logging für das combinatorics-Paket.

Als Bibliothek gibt das Paket von sich aus nichts aus: der Paket-Logger
"combinatorics" hat nur einen NullHandler. Wer Ausgaben sehen will, ruft
configure_logging() auf oder konfiguriert das logging der Anwendung selbst.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "combinatorics"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_package_logger = logging.getLogger(ROOT_LOGGER_NAME)
_package_logger.addHandler(logging.NullHandler())

# Handler aus configure_logging() (None = nicht konfiguriert)
_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Logger für ein Modul (i. d. R. __name__). Richtet keine Handler ein."""
    return logging.getLogger(name)


def configure_logging(
    level: int = logging.INFO,
    handler: Optional[logging.Handler] = None,
    format_string: Optional[str] = None,
) -> logging.Handler:
    """
    Opt-in: hängt genau einen Ausgabe-Handler an den Paket-Logger
    (Standard: StreamHandler auf stderr). Ein erneuter Aufruf ersetzt den
    vorherigen Handler, es entstehen keine doppelten Ausgaben.
    """
    global _handler

    if _handler is not None:
        _package_logger.removeHandler(_handler)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    _package_logger.addHandler(handler)
    _package_logger.setLevel(level)
    _handler = handler
    return handler


def set_log_level(level: int) -> None:
    _package_logger.setLevel(level)
    if _handler is not None:
        _handler.setLevel(level)


def enable_debug_logging() -> None:
    set_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_log_level(logging.INFO)


def reset_logging() -> None:
    """Zurück zum Import-Zustand: nur NullHandler, Level NOTSET."""
    global _handler

    if _handler is not None:
        _package_logger.removeHandler(_handler)
        _handler = None
    _package_logger.setLevel(logging.NOTSET)
