"""Logging setup for applications embedding spotwire."""

from __future__ import annotations

import logging

LIBRARY_LOGGER = "spotwire"


def configure_logging(
    *,
    level: int = logging.INFO,
    library_level: int | None = None,
    force: bool = False,
) -> None:
    """Initialise the root logger once with a terse format.

    The library itself never calls this; it only emits records through
    ``logging.getLogger(__name__)``. ``library_level`` adjusts the ``spotwire``
    logger independently, e.g. ``logging.DEBUG`` to see every dispatch attempt.
    Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    if library_level is not None:
        logging.getLogger(LIBRARY_LOGGER).setLevel(library_level)
