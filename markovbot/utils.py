import logging
import os
import random

from . import config


def setup_logging(verbose=False):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=config.LOG_FORMAT)


def seed_random(seed=None):
    """
    Returns a random.Random owned by the caller.

    Without an explicit seed, 8 bytes are read from the OS entropy source and
    the resulting value is logged so a run can be reproduced.
    """
    if seed is None:
        seed = int.from_bytes(os.urandom(8), 'big')
        logging.info(f"seed value: {seed}")
    return random.Random(seed)
