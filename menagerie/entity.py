"""Animal entities that announce the sound they make.

`Animal` supplies the default `announce()`; `Pig` and `Dog` override it. The
method that runs is always the one of the instance's own class, whatever type
the calling code declares for the reference.
"""
import logging
from typing import Dict, Type

_logger = logging.getLogger(__name__)


class Animal:
    def __init__(self):
        _logger.debug("constructed %s", type(self).__name__)

    def announce(self) -> None:
        """Print the sound this animal makes. Override in subclasses."""
        print("The animal makes a sound")


class Pig(Animal):
    def announce(self) -> None:
        print("The pig says: wee wee")


class Dog(Animal):
    def announce(self) -> None:
        print("The dog says: bow wow")


# Closed set of variants, keyed by lowercase name.
VARIANTS: Dict[str, Type[Animal]] = {
    "animal": Animal,
    "pig": Pig,
    "dog": Dog,
}


def variant_key(name: str) -> str:
    """Normalise `name` to a key of `VARIANTS`, raising ValueError if unknown."""
    key = str(name).strip().lower()
    if key not in VARIANTS:
        known = ", ".join(sorted(VARIANTS))
        raise ValueError(f"unknown variant {name!r} (expected one of: {known})")
    return key


def create(name: str) -> Animal:
    """Construct the variant called `name` (case-insensitive)."""
    return VARIANTS[variant_key(name)]()
