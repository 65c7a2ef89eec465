"""
Opt-in logging for proofmark.

Library entry points accept ``logger=None`` and ``log=False`` and resolve them
through :func:`resolve_logger`:

    from proofmark._logging import resolve_logger

    def compute_diff(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("diffing %d -> %d chars", len(original), len(edited))

Nothing is printed and no handlers are installed; callers that want output
either hand in their own logger or flip ``log=True`` and configure logging
themselves.
"""
from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "proofmark"


class NoopLogger:
    """Swallows every call. Returned when logging was not requested."""

    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """
    Pick the logger a call should write to.

    - An explicit `logger` always wins (anything with ``.debug`` works).
    - `enabled=True` returns the stdlib logger `name` (default "proofmark"),
      set to `level` and propagating to the root so caplog can see it.
    - Otherwise a NoopLogger.
    """
    if logger is not None:
        return logger
    if not enabled:
        return NoopLogger()
    lg = logging.getLogger(name or DEFAULT_LOGGER_NAME)
    lg.setLevel(level)
    lg.propagate = True
    return lg
