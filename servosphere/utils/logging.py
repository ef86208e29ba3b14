"""Logging utilities for the servosphere package."""

import inspect
import json
import sys
import warnings
from datetime import datetime
from functools import wraps
from pathlib import Path

from loguru import logger as loguru_logger

DEFAULT_LOG_DIRECTORY = Path.home() / ".servosphere"


class ServosphereLogger:
    """A custom logger extending the :mod:`loguru logger <loguru._logger>`."""

    def __init__(self):
        """Initialize the logger with the :mod:`loguru._logger`."""
        self.logger = loguru_logger

    def configure(
        self,
        log_file_name: str = "servosphere",
        log_directory: Path = DEFAULT_LOG_DIRECTORY,
        console: bool = True,
    ):
        """Configure a rotating file logger and optionally a console logger.

        The log file records everything from the DEBUG level up, rotates
        at 5 MB and keeps the last file. The optional console
        (:data:`sys.stderr`) sink only shows WARNING and above.
        Alerts from the :mod:`warnings` module are redirected to the logger.

        Parameters
        ----------
        log_file_name : str, optional
            The name of the log file. Defaults to ``"servosphere"``.
        log_directory : pathlib.Path, optional
            The directory to store the log file in. Defaults to
            ``"~/.servosphere"``. A different directory can be specified,
            for example, for testing purposes.
        console : bool, optional
            Whether to add a console logger. Defaults to ``True``.

        Returns
        -------
        str
            The path of the log file.

        """
        log_directory.mkdir(parents=True, exist_ok=True)
        log_file = (log_directory / f"{log_file_name}.log").as_posix()
        self.remove()
        if console:
            self.add(sys.stderr, level="WARNING")
        self.add(log_file, level="DEBUG", rotation="5 MB", retention=1)
        warnings.showwarning = showwarning
        return log_file

    def _log_and_return_exception(self, log_method, message, *args, **kwargs):
        """Log the message and return an Exception if specified."""
        log_method(message, *args, **kwargs)
        if isinstance(message, Exception):
            return message

    def error(self, message, *args, **kwargs):
        """Log error message and optionally return an Exception.

        This allows ``raise logger.error(KeyError("..."))``.
        """
        return self._log_and_return_exception(
            self.logger.error, message, *args, **kwargs
        )

    def exception(self, message, *args, **kwargs):
        """Log error message with traceback and optionally return it."""
        return self._log_and_return_exception(
            self.logger.exception, message, *args, **kwargs
        )

    def __getattr__(self, name):
        """Redirect attribute access to the loguru logger."""
        return getattr(self.logger, name)

    def __repr__(self):
        """Return the loguru logger's representation."""
        return repr(self.logger)


logger = ServosphereLogger()


def showwarning(message, category, filename, lineno, file=None, line=None):
    """Redirect alerts from the :mod:`warnings` module to the logger."""
    formatted_message = warnings.formatwarning(
        message, category, filename, lineno, line
    )
    logger.opt(depth=2).warning(formatted_message)


def log_to_attrs(func):
    """Record the wrapped table operation in the table's ``log`` attribute.

    The wrapped function must accept a :class:`pandas.DataFrame` as its
    first argument and return a DataFrame. Each call appends an entry with
    the operation name, a timestamp and the remaining arguments to the
    JSON list stored in ``DataFrame.attrs["log"]``.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        result = func(*args, **kwargs)

        log_entry = {
            "operation": func.__name__,
            "datetime": str(datetime.now()),
        }

        signature = inspect.signature(func)
        bound_args = signature.bind(*args, **kwargs)
        bound_args.apply_defaults()

        # Skip the first argument, which is the table itself
        for param_name, value in list(bound_args.arguments.items())[1:]:
            if param_name == "kwargs" and not value:
                continue
            log_entry[param_name] = repr(value)

        if result is not None and hasattr(result, "attrs"):
            log_str = result.attrs.get("log", "[]")
            try:
                log_list = json.loads(log_str)
            except json.JSONDecodeError:
                log_list = []
                logger.warning(
                    f"Failed to decode existing log in attributes: {log_str}. "
                    f"Overwriting with an empty list."
                )

            log_list.append(log_entry)
            result.attrs["log"] = json.dumps(log_list, indent=2)

        return result

    return wrapper
