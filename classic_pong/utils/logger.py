"""
Logging module for Classic Pong
"""

import logging

# Change logging level to DEBUG for goal-by-goal output
logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger("classic_pong")


def set_verbose(verbose: bool) -> None:
    """Switch between INFO and DEBUG output"""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
