"""
Random number generation utilities.

All sampling and edge selection draw from a numpy ``Generator`` so a
session can be reproduced from a single integer seed.
"""

from typing import Optional

import numpy as np

# Global generator instance
_rng = None


def set_random_seed(seed: Optional[int]) -> None:
    """
    Reset the shared generator.

    Args:
        seed: Integer seed, or None for fresh OS entropy
    """
    global _rng
    _rng = np.random.default_rng(seed)


def get_rng() -> np.random.Generator:
    """
    Get the shared generator, creating an unseeded one on first use.

    Returns:
        numpy Generator instance
    """
    global _rng
    if _rng is None:
        _rng = np.random.default_rng()
    return _rng


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a private generator for ``seed``, or the shared one when no seed is given."""
    if seed is None:
        return get_rng()
    return np.random.default_rng(seed)
