import sys

from loguru import logger as log

from httpstatus.config import LOG_LEVEL

log.level("INFO", color="<green>")

fmt = ""
fmt += "<fg #FFF>{time:YYYY-MM-DD HH:mm:ss,SSS}</fg #FFF> "
fmt += "[<level>{level}</level> "
fmt += "<fg #666>{name}:{line}</fg #666>] "
fmt += "<fg #FFF>{message}</fg #FFF>"


# Add a stderr sink with the given log level and save the log_id as static variable
# Further call to this function will remove the previous sink (based on saved log_id)
# Sinks added by the host application are never touched
def set_logger(level: str = LOG_LEVEL) -> int:

    try:
        log.level(level)
    except ValueError:
        print(f"\nCan't initialize logging because {level} is not a valid log level\n")
        sys.exit(1)

    if hasattr(set_logger, "log_id"):
        log_id = getattr(set_logger, "log_id")
        log.remove(log_id)

    log_id = log.add(
        sys.stderr,
        level=level,
        colorize=True,
        format=fmt,
        # If True the exception trace is extended upward, beyond the catching point
        # to show the full stacktrace which generated the error.
        backtrace=False,
        # Display variables values in exception trace to eases the debugging.
        diagnose=False,
    )

    setattr(set_logger, "log_id", log_id)
    return log_id
