import logging
import random

from cube import NOTATION, MODIFIERS

logger = logging.getLogger(__name__)

SCRAMBLE_LENGTH = 20


def generate_scramble(scramble_length=SCRAMBLE_LENGTH, rng=None):
    """Draw scramble_length independent tokens.

    Face and modifier are both uniform. Consecutive turns of the same face are
    allowed, so a scramble may contain pairs that cancel out.
    """
    rng = rng or random
    all_moves = list(NOTATION)

    scramble = []
    for _ in range(scramble_length):
        move = rng.choice(all_moves)
        modifier = rng.choice(MODIFIERS)
        scramble.append(move + modifier)

    logger.debug("Generated scramble: %s", " ".join(scramble))
    return scramble
