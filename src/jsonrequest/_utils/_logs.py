import logging
from typing import Optional

logger: logging.Logger = logging.getLogger("jsonrequest")


def setup_logging(should_debug: Optional[bool] = None) -> None:
    """Configure the root handler once and set the package log level.

    Records from the ``jsonrequest`` logger propagate to the root handler, so
    repeated calls only change the level.
    """
    logging.basicConfig(
        format="[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)
