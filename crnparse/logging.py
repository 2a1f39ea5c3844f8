"""
Logging for crnparse.

Parsing never configures logging on its own: the ``crnparse`` logger gets a
``NullHandler`` and records propagate to whatever the application has set
up. Set the ``CRNPARSE_LOG`` environment variable (an integer level or a
name from :py:data:`NAMED_LOG_LEVELS`) to get console output without
touching code, or call :func:`setup_logger`.
"""
import logging
import os

LOG_LEVEL_ENV_VAR = 'CRNPARSE_LOG'
BASE_LOGGER_NAME = 'crnparse'
EXTENDED_DEBUG = 5
NAMED_LOG_LEVELS = {'NOTSET': logging.NOTSET,
                    'EXTENDED_DEBUG': EXTENDED_DEBUG,
                    'DEBUG': logging.DEBUG,
                    'INFO': logging.INFO,
                    'WARNING': logging.WARNING,
                    'ERROR': logging.ERROR,
                    'CRITICAL': logging.CRITICAL}

logging.addLevelName(EXTENDED_DEBUG, 'EXTENDED_DEBUG')


def _level_from_environment():
    """The level named by CRNPARSE_LOG, or None if it is unset."""
    value = os.environ.get(LOG_LEVEL_ENV_VAR)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        if value in NAMED_LOG_LEVELS:
            return NAMED_LOG_LEVELS[value]
        raise ValueError('Environment variable {} contains an invalid value '
                         '"{}". If set, its value must be one of {} '
                         '(case-sensitive) or an integer log level.'.format(
                             LOG_LEVEL_ENV_VAR, value,
                             ", ".join(NAMED_LOG_LEVELS)))


def setup_logger(level=logging.WARNING, console_output=True):
    """
    Send crnparse log records to the console

    Replaces any handlers already attached to the crnparse logger.

    Parameters
    ----------
    level : int
        Logging level. ``CRNPARSE_LOG``, if set, takes precedence.
    console_output : bool
        Attach a stderr handler if True (default), otherwise a NullHandler.

    Returns
    -------
    The crnparse base logging.Logger
    """
    log = logging.getLogger(BASE_LOGGER_NAME)
    env_level = _level_from_environment()
    log.setLevel(level if env_level is None else env_level)

    if console_output:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    else:
        handler = logging.NullHandler()
    log.handlers = [handler]
    return log


def get_logger(logger_name=BASE_LOGGER_NAME, document=None, log_level=None):
    """
    Returns a crnparse logger

    The first call leaves the base logger silent (a NullHandler) unless
    ``CRNPARSE_LOG`` is set, in which case it calls :func:`setup_logger`.
    Later calls don't change the base logger.

    Parameters
    ----------
    logger_name : string
        Typically __name__
    document : object with a ``name`` attribute
        If given, its name is prepended to log entries
    log_level : bool or int
        Override the level of the requested logger. True means
        logging.DEBUG; None or False leave it unchanged.

    Examples
    --------

    >>> from crnparse.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug('Test message')
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    if not base.handlers:
        if _level_from_environment() is None:
            base.addHandler(logging.NullHandler())
        else:
            setup_logger()

    logger = logging.getLogger(logger_name)

    if log_level is not None and log_level is not False:
        if isinstance(log_level, bool):
            log_level = logging.DEBUG
        elif not isinstance(log_level, int):
            raise ValueError('log_level must be a boolean, integer or None')
        logger.setLevel(log_level)

    if document is None:
        return logger
    return DocumentLoggerAdapter(logger, {'document': document})


class DocumentLoggerAdapter(logging.LoggerAdapter):
    """ A logging adapter to prepend a document's name to log entries """
    def process(self, msg, kwargs):
        return '[%s] %s' % (self.extra['document'].name, msg), kwargs
