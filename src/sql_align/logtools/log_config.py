import copy
import logging.config
import sys

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(levelname)s: %(message)s [%(module)s.%(funcName)s]",
        },
        "colored": {
            "fmt": "\033[1m%(levelname)s\033[0m: %(message)s | \033[1mmodule:\033[0m '%(module)s' | \033[1mfunction:\033[0m '%(funcName)s'",
            "()": "sql_align.logtools.color_formatter.ColorFormatter",
        },
    },
    "handlers": {
        "stderr": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "plain",
            "level": "DEBUG",
        },
    },
    "loggers": {
        "sql_align": {"handlers": ["stderr"], "level": "WARNING", "propagate": False},
    },
}


def configure_logging(verbose: bool = False) -> None:
    """Install the package's logging configuration.

    Colors are used only when stderr is a terminal.
    """
    config = copy.deepcopy(LOGGING)
    if sys.stderr.isatty():
        config["handlers"]["stderr"]["formatter"] = "colored"
    if verbose:
        config["loggers"]["sql_align"]["level"] = "DEBUG"
    logging.config.dictConfig(config)
