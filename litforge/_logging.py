"""
Opt-in logging helpers shared by the library.

Usage in library code:
    from litforge._logging import resolve_logger

    def process_files(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.info("Processing: %s", name)  # no-op unless enabled or logger passed

Library code never prints; the CLI is the only place that configures handlers.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Return the logger a call should report through.

    - An explicit `logger` wins.
    - With `enabled`, a named stdlib logger at `level` that propagates to root.
    - Otherwise a NoopLogger.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "litforge")
        lg.setLevel(level)
        # Propagate so pytest's caplog and the CLI's root handler both see it.
        lg.propagate = True
        return lg
    return NoopLogger()
