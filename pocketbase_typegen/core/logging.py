import logging
import sys


class ContextFormatter(logging.Formatter):
    """Custom formatter that handles optional source and stage fields."""
    def format(self, record):
        if not hasattr(record, 'source'):
            record.source = '-'
        if not hasattr(record, 'stage'):
            record.stage = '-'
        return super().format(record)


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [source=%(source)s stage=%(stage)s] - %(message)s"
    ))
    logging.basicConfig(
        level=level.upper(),
        handlers=[handler],
    )
