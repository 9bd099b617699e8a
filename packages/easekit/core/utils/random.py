"""Process-wide random source.

Code that needs randomness (jittered timings, randomized curve parameters)
should take a ``random.Random`` argument and fall back to
``get_shared_random()``. Tests inject a seeded generator with
``set_shared_random``.
"""

from __future__ import annotations

import random

_shared: random.Random = random.Random()


def get_shared_random() -> random.Random:
    """Return the process-wide generator."""
    return _shared


def set_shared_random(rng: random.Random) -> random.Random:
    """Replace the process-wide generator.

    Args:
        rng: Generator to install.

    Returns:
        The previously installed generator, so callers can restore it.

    Raises:
        TypeError: If rng is not a random.Random.
    """
    global _shared

    if not isinstance(rng, random.Random):
        raise TypeError(f"Expected random.Random, got {type(rng).__name__}")

    previous = _shared
    _shared = rng
    return previous


def reset_shared_random(seed: int | None = None) -> random.Random:
    """Install a fresh generator, optionally seeded, and return it."""
    global _shared

    _shared = random.Random(seed)
    return _shared
