import logging
from typing import Union


def setup_logging(level: Union[str, int, None] = None) -> None:
    """Configure basic logging with consistent format.

    Parameters
    ----------
    level: str | int | None
        Desired log level (e.g., "DEBUG", "INFO"). Defaults to ``WARNING``
        so that a normal run prints nothing but the report.
    """
    if level is None:
        level = "WARNING"
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
