import logging
import sys

from enum import Enum

class LogLevel(Enum):
    """
    An enumeration which represents the log levels.

    Attributes:
        VERBOSE (`int`): All possible logs are printed, including every file read by the assembler.
        INFO (`int`): Informational logs are printed. Useful for following import expansion.
        WARNING (`int`): Only warnings and errors are printed. Default log level.
        ERROR (`int`): Only errors are printed. Useful for muting annoying warnings that you *know* are harmless.
    """
    VERBOSE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

# mapping onto the standard library logging levels
log_level_to_logging_dict = {
    LogLevel.VERBOSE: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}

_logger = logging.getLogger("lifedispatch")

class _ConsoleHandler(logging.StreamHandler):
    # sys.stderr is looked up on every record, it gets swapped by test runners
    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr
        super().emit(record)

__initilized_instance: bool = False


def is_initialized() -> bool:
    """
    A function which checks if the lifedispatch logging has been initialized.

    Returns:
        `bool`: A flag indicating whether lifedispatch has been initialized.
    """

    global __initilized_instance

    return __initilized_instance

def initialize(log_level: LogLevel = LogLevel.WARNING):
    """
    A function which initializes the lifedispatch log output. Calling it more
    than once has no effect, use set_log_level() to change the level afterwards.

    Args:
        log_level (`LogLevel`): The log level, which is one of the following:
            LogLevel.VERBOSE
            LogLevel.INFO
            LogLevel.WARNING
            LogLevel.ERROR
    """

    global __initilized_instance

    if __initilized_instance:
        return

    handler = _ConsoleHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s %(filename)s:%(lineno)d] %(message)s"))

    _logger.addHandler(handler)
    _logger.propagate = False
    _logger.setLevel(log_level_to_logging_dict[log_level])

    __initilized_instance = True

def set_log_level(level: LogLevel):
    """
    A function which changes the log level.

    Args:
        level (`LogLevel`): The new log level.
    """

    initialize(level)
    _logger.setLevel(log_level_to_logging_dict[level])

def get_logger() -> logging.Logger:
    return _logger

def log(text: str, end: str = '\n', level: LogLevel = LogLevel.ERROR, stack_offset: int = 1):
    """
    A function which logs a message at the specified log level. The record
    carries the file and line of the frame `stack_offset` levels up.

    Args:
        text (`str`): The message to log.
        end (`str`): Appended to the message, trailing newlines are dropped.
        level (`LogLevel`): The log level.
        stack_offset (`int`): How many frames up the reported caller is.
    """

    initialize()

    message = (text + end).rstrip("\n")

    _logger.log(
        log_level_to_logging_dict[level],
        message,
        stacklevel=stack_offset + 1
    )

def log_error(text: str, end: str = '\n'):
    """
    A function which logs an error message.

    Args:
        text (`str`): The message to log.
    """

    log(text, end, LogLevel.ERROR, 2)

def log_warning(text: str, end: str = '\n'):
    """
    A function which logs a warning message.

    Args:
        text (`str`): The message to log.
    """

    log(text, end, LogLevel.WARNING, 2)

def log_info(text: str, end: str = '\n'):
    """
    A function which logs an info message.

    Args:
        text (`str`): The message to log.
    """

    log(text, end, LogLevel.INFO, 2)

def log_verbose(text: str, end: str = '\n'):
    """
    A function which logs a verbose message.

    Args:
        text (`str`): The message to log.
    """

    log(text, end, LogLevel.VERBOSE, 2)

