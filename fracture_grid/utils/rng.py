"""Deterministic pseudo-random numbers.

A 32-bit linear congruential generator whose state is a plain ``int``. Every
function takes the current state and returns ``(next_state, result)``; the
caller stores ``next_state`` back on :class:`fracture_grid.state.State`.
There is no module-level generator, so identical inputs always yield
identical outputs regardless of what else is running.
"""

from typing import Sequence, Tuple

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2**32


def next_rng(state: int) -> Tuple[int, float]:
    """Advance the generator one step.

    Returns:
        Tuple[int, float]: The new state and a float in ``[0, 1)`` derived from it.
    """
    next_state = (state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
    return next_state, next_state / LCG_MODULUS


def random_int(state: int, max_exclusive: int) -> Tuple[int, int]:
    """Draw an integer uniformly from ``[0, max_exclusive)``."""
    next_state, value = next_rng(state)
    return next_state, int(value * max_exclusive)


def weighted_index(state: int, weights: Sequence[float]) -> Tuple[int, int]:
    """Draw an index with probability proportional to ``weights``.

    A single float is drawn and scaled by the weight total; weights are then
    subtracted in order until the running threshold drops below zero. The last
    index is returned if floating point error leaves the threshold at or above
    zero after the walk.

    Raises:
        ValueError: If ``weights`` is empty.
    """
    if not weights:
        raise ValueError("weighted_index requires at least one weight")
    total = sum(weights)
    next_state, value = next_rng(state)
    threshold = value * total
    for index, weight in enumerate(weights):
        threshold -= weight
        if threshold < 0:
            return next_state, index
    return next_state, len(weights) - 1
