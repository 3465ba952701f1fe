"""
Random generators for synthetic population attributes.

Every function takes an optional ``numpy.random.Generator``. Passing one
seeded through :func:`make_rng` makes the output reproducible; leaving it
out draws from a per-thread default generator with no seeding guarantee.
"""

import threading
from typing import Optional

import numpy as np

from .utils.logging import log_call

_local = threading.local()


def _default_rng() -> np.random.Generator:
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = np.random.default_rng()
        _local.rng = rng
    return rng


@log_call
def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create a random generator.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducibility. ``None`` seeds from OS entropy.

    Returns
    -------
    rng : np.random.Generator
    """
    return np.random.default_rng(seed)


@log_call
def random_int(
    lower: int,
    upper: int,
    rng: Optional[np.random.Generator] = None
) -> int:
    """
    Draw an integer uniformly from ``[lower, upper]``, both inclusive.

    Parameters
    ----------
    lower : int
        Lower bound, inclusive.
    upper : int
        Upper bound, inclusive. Must not be below ``lower``.
    rng : np.random.Generator, optional
        Source of randomness. Defaults to the per-thread generator.

    Returns
    -------
    value : int

    Examples
    --------
    >>> random_int(3, 3)
    3
    """
    if lower > upper:
        raise ValueError(f"lower ({lower}) must not exceed upper ({upper})")
    rng = rng if rng is not None else _default_rng()
    return int(rng.integers(lower, upper, endpoint=True))


@log_call
def random_string(
    lower_char: str,
    upper_char: str,
    length: int,
    rng: Optional[np.random.Generator] = None
) -> str:
    """
    Build a string of ``length`` characters drawn from a character range.

    Each character is drawn independently and uniformly from
    ``[lower_char, upper_char]``, both inclusive.

    Parameters
    ----------
    lower_char : str
        Lowest character allowed, a single character.
    upper_char : str
        Highest character allowed, a single character.
    length : int
        Number of characters to generate. Zero gives ``""``.
    rng : np.random.Generator, optional
        Source of randomness. Defaults to the per-thread generator.

    Returns
    -------
    text : str

    Examples
    --------
    >>> random_string("a", "z", 0)
    ''
    >>> random_string("x", "x", 3)
    'xxx'
    """
    if len(lower_char) != 1 or len(upper_char) != 1:
        raise ValueError("character bounds must be single characters")
    if lower_char > upper_char:
        raise ValueError(
            f"lower_char ({lower_char!r}) must not exceed "
            f"upper_char ({upper_char!r})"
        )
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    rng = rng if rng is not None else _default_rng()
    codes = rng.integers(ord(lower_char), ord(upper_char), size=length,
                         endpoint=True)
    return "".join(chr(int(code)) for code in codes)
