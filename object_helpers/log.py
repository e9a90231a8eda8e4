"""Output logging."""
# pylint: disable=global-statement
from __future__ import annotations

import logging
import os

import attr
import attrs
import typeguard
from rich.logging import RichHandler
from rich.traceback import install

SUPRESS_TRACEBACK_MODULES = [typeguard, attr, attrs]

LOG_LEVEL_ENV_VAR = "OBJECT_HELPERS_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "OBJECT_HELPERS_LOG_FORMAT"


def update_traceback():
    install(show_locals=False, suppress=SUPRESS_TRACEBACK_MODULES)


def add_supress_traceback_module(module):
    if module not in SUPRESS_TRACEBACK_MODULES:
        SUPRESS_TRACEBACK_MODULES.append(module)
    update_traceback()


update_traceback()


def get_time_str(log_time):
    return log_time.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def get_env_level(default="ERROR"):
    """
    Returns the level name set by ``OBJECT_HELPERS_LOG_LEVEL``, upper-cased.
    Unset or unknown level names give ``default``.
    """
    level = os.environ.get(LOG_LEVEL_ENV_VAR, default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


SAVED_LEVEL = get_env_level()


def configure_logger(level=None, third_party_level="ERROR"):
    """
    Configures the logging system.

    :param level: The logging level for the ``object_helpers`` logger. If None, uses
        the previously saved logging level. If an integer is provided, it is read as
        a verbosity count (0 -> INFO-ish, higher -> more verbose). If a string is
        provided, it should be one of the logging level names (e.g., 'DEBUG', 'INFO',
        'WARNING', 'ERROR', 'CRITICAL'). The saved level defaults to the value of
        ``OBJECT_HELPERS_LOG_LEVEL``, or 'ERROR' when that is unset.
    :param third_party_level: The logging level for the libraries used by this
        package.

    .. note::
        - Output goes through a rich handler unless ``OBJECT_HELPERS_LOG_FORMAT``
        is set to ``plain``, in which case a plain stream handler is used.

    :returns: None
    """

    for _ in ("typeguard", "rich"):
        logging.getLogger(_).setLevel(third_party_level)

    global SAVED_LEVEL
    if level is None:
        level = SAVED_LEVEL
    else:
        if isinstance(level, int):
            level = max(0, 20 - 10 * level)
        SAVED_LEVEL = level

    if os.environ.get(LOG_FORMAT_ENV_VAR, "rich").lower() == "plain":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(pathname)s:%(lineno)d: %(message)s")
        )
    else:
        handler = RichHandler(
            rich_tracebacks=True,
            show_path=False,
            show_time=True,
            enable_link_path=False,
            log_time_format=get_time_str,
            tracebacks_word_wrap=False,
        )

    logging.basicConfig(
        level=level, format="%(name)s %(pathname)20s:%(lineno)4d \n%(message)s", handlers=[handler]
    )
    logging.getLogger("object_helpers").setLevel(level)


def get_logger(name):
    """
    Get a logger with the specified name, creating it if necessary.

    :param name: An identifying name (channel) for the logger to get. Package code
        uses "object_helpers".

    .. note::
        - Call this method rather than calling :func:`getLogger` directly to ensure
        that the logging system is properly initialized.

    :returns: Logger instance
    """

    configure_logger()
    return logging.getLogger(name)


def set_verbosity(verbosity_level):
    """
    Set the log level of the ``object_helpers`` logger, as well as the default
    verbosity for any subsequently configured loggers.

    :param verbosity_level: The logging level name or number to set.

    :returns: None
    """
    global SAVED_LEVEL
    SAVED_LEVEL = verbosity_level
    logging.getLogger("object_helpers").setLevel(verbosity_level)
