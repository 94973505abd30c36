"""Logging setup for command-line entry points."""

import logging

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class CascadeStepFilter(logging.Filter):
    """Drop per-step cascade records, which dominate DEBUG output."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return False to suppress cascade step log entries."""
        return not record.getMessage().startswith('Cascade step')


def configure_logging(level: str | int = logging.INFO, quiet_cascades: bool = True) -> None:
    """Configure root logging for a CLI run.

    When *quiet_cascades* is set, the game coordinator's per-step cascade
    records are filtered out even at DEBUG level.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if quiet_cascades:
        logging.getLogger('exploding_tiles.engine.game').addFilter(CascadeStepFilter())
