"""Values produced by parsing a scramble definition.

A Twist is one move token, opaque to us.  A Generator is a group of
twists that is drawn and applied as a unit.  A Definition bundles the
puzzle parameters with the fixed prefix and postfix and the pool of
generators to draw from.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple


@dataclass(frozen=True)
class Twist:
    text: str

    def __post_init__(self):
        if not self.text or any(ch.isspace() for ch in self.text):
            raise ValueError(f"Twist must be non-empty and contain no whitespace, got {self.text!r}")

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Generator:
    twists: Tuple[Twist, ...] = ()

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Generator":
        return cls(tuple(Twist(word) for word in words))

    def __iter__(self) -> Iterator[Twist]:
        return iter(self.twists)

    def __len__(self) -> int:
        return len(self.twists)

    def __str__(self) -> str:
        return " ".join(str(twist) for twist in self.twists)


@dataclass(frozen=True)
class Definition:
    n: int      # layer count
    d: int      # dimensionality
    depth: int  # number of random generator draws
    prefix: Generator
    postfix: Generator
    generators: Tuple[Generator, ...] = ()

    def __str__(self) -> str:
        return (f"Definition(n={self.n}, d={self.d}, depth={self.depth}, "
                f"prefix=[{self.prefix}], postfix=[{self.postfix}], "
                f"{len(self.generators)} generators)")
