import logging
import sys


class _ConsoleNoiseFilter(logging.Filter):
    """Keep height_cli logs; let third-party libraries (urllib3, requests) through only at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "height_cli" or record.name.startswith("height_cli."):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Configure a single stderr handler on the root logger.

    Call once, early, before the first log call. Any pre-existing handlers are removed.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    handler.addFilter(_ConsoleNoiseFilter())
    root.addHandler(handler)

    logging.captureWarnings(True)
