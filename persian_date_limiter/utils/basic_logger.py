import os
import sys

from loguru import logger


def get_splitter_format():
    return "\n" + "-" * 100


def loguru_logger(
    name,
    stream_level="INFO",
    file_level="DEBUG",
    filename: str = None,
    enqueue: bool = True,
    stream=None,
):
    # Remove default handlers to avoid duplicate logs
    logger.remove()

    # Determine stream level from command line arguments or environment variables
    if "--stream_level" in sys.argv:
        idx = sys.argv.index("--stream_level")
        try:
            stream_level = sys.argv[idx + 1]
        except IndexError as e:
            raise ValueError("--stream_level expects a level name") from e
    if "PERSIAN_LIMITER_STREAM_LEVEL" in os.environ:
        stream_level = os.environ["PERSIAN_LIMITER_STREAM_LEVEL"]

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level}</level> | "
        "MODULE: <cyan>{module}</cyan> - "
        "FUNC: <cyan>{function}</cyan> - "
        "LINE: <cyan>{line}</cyan> :: "
        "<level>{message}</level>"
    )

    logger.add(
        stream if stream is not None else sys.stderr,
        level=stream_level,
        format=console_format,
        colorize=stream is None,
    )

    if filename is not None:
        file_format = (
            "{time:YYYY-MM-DD HH:mm:ss} | "
            "{level} | "
            "FILENAME: {file} - "
            "MODULE: {module} - "
            "FUNC: {function} - "
            "LINE: {line} - "
            "THREAD: {thread.name} :: "
            "{message}" + get_splitter_format()
        )

        # Add file handler with rotation and asynchronous logging
        logger.add(filename, level=file_level, format=file_format, enqueue=enqueue)

    logger.debug(
        f"Logger '{name}' initialized with stream level '{stream_level}' and file level '{file_level}'"
    )

    return logger


__all__ = ("loguru_logger",)
