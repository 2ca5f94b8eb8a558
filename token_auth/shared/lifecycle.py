"""
Process lifecycle helpers for services hosting token verification.

These run once at process level: reading mandatory environment variables
during startup and keeping the process alive until it is asked to stop.
Nothing here is used by the verification core.
"""

import os
import signal
import threading
from typing import Callable, Iterable

from .errors import ConfigurationError
from .logging import get_logger

logger = get_logger("token_auth.lifecycle")

DEFAULT_SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def get_env_or_fatal(key: str) -> str:
    """Return the environment variable `key` or abort startup."""
    value = os.environ.get(key)
    if value is None:
        logger.critical("Required environment variable not set", variable=key)
        raise ConfigurationError(
            f"Environment variable {key} not found",
            details={"variable": key}
        )
    return value


def with_graceful_shutdown(
    callback: Callable[[], None],
    on_exit: Callable[[], None],
    signals: Iterable[signal.Signals] = DEFAULT_SHUTDOWN_SIGNALS,
) -> None:
    """
    Run `callback`, then block until a shutdown signal arrives.

    `on_exit` always runs before returning, including when `callback`
    raises. Intended for closing connections (db, messaging, ...) on Ctrl+C
    or a termination request from docker/kubernetes. Must be called from
    the main thread.
    """
    stop = threading.Event()
    received = []

    def _handle(signum, frame):
        received.append(signum)
        stop.set()

    previous = {}
    try:
        for sig in signals:
            previous[sig] = signal.signal(sig, _handle)
        callback()
        while not stop.wait(0.5):
            pass
        logger.info("Shutdown signal received", signal=signal.Signals(received[0]).name)
    finally:
        try:
            on_exit()
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)
