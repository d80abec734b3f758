"""A substitute for random.choice that can be replaced.
The generator asks a Chooser for one element of a list; tests
substitute a chooser that follows a script.
"""
import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class Chooser:
    """Abstract base class: picks one element from a sequence,
    or None if the sequence is empty.
    """
    def choose(self, items: Sequence[T]) -> Optional[T]:
        raise NotImplementedError(f"Class {self.__class__.__name__} needs a 'choose' method")


class UniformChooser(Chooser):
    """Uniform choice with replacement, from a private unseeded
    random number generator.
    """
    def __init__(self):
        self.rng = random.Random()

    def choose(self, items: Sequence[T]) -> Optional[T]:
        if len(items) == 0:
            return None
        return self.rng.choice(items)
