"""Error reporting helpers."""

import logging

from chemgraph.errors import ChemGraphError


def log_exception(
    logger: logging.Logger,
    exc: BaseException,
    *,
    show_traceback: bool = False,
) -> str:
    """Log an exception and return the message that was logged.

    Args:
        logger: Logger to write to.
        exc: Exception to report.
        show_traceback: Log the traceback at error level instead of debug.

    Returns:
        The logged message.
    """
    if isinstance(exc, ChemGraphError):
        message = exc.log_message()
    else:
        message = f"Unexpected error: {exc}"
    logger.error(message)
    if show_traceback:
        logger.error("Detailed traceback:", exc_info=exc)
    else:
        logger.debug("Detailed traceback:", exc_info=exc)
    return message


__all__ = ["log_exception"]
