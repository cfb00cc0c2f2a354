"""Package logger for azimuth, and one-time warnings for degenerate inputs"""

__all__ = ['LOGGER', 'warn_once']

import logging
import threading

LOGGER = logging.getLogger('azimuth')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

# Messages already emitted; calculations may run on many threads at once
_WARNINGS = set()
_WARNINGS_LOCK = threading.Lock()


def warn_once(warning: str, *args):
    """
    Logs a warning the first time a given message template is seen, and never again.

    Args:
        warning:
            The message template; identity is decided on the template, not the
            formatted message

        *args:
            Lazy %-style formatting arguments, as for logging.Logger.warning
    """
    with _WARNINGS_LOCK:
        if warning in _WARNINGS:
            return
        _WARNINGS.add(warning)

    LOGGER.warning(warning, *args)
