"""Draw a scramble from a definition.

The scramble is the prefix, then 'depth' generators drawn
independently and uniformly (with replacement) from the pool,
then the postfix.  Drawing from an empty pool selects nothing,
so the scramble is then just prefix followed by postfix.
"""
from typing import List, Optional

from scramble.chooser import Chooser, UniformChooser
from scramble.definition import Definition, Generator, Twist

import logging
logging.basicConfig()
log = logging.getLogger(__name__)


def draw(defn: Definition, chooser: Chooser) -> List[Generator]:
    """The generators drawn for the middle of the scramble, in order"""
    if len(defn.generators) == 0:
        # Every draw would select nothing
        log.debug("Empty generator pool, no draws")
        return []
    drawn = []
    for _ in range(defn.depth):
        choice = chooser.choose(defn.generators)
        if choice is None:
            continue
        drawn.append(choice)
    log.debug(f"Drew {len(drawn)} of {defn.depth} generators "
              f"from a pool of {len(defn.generators)}")
    return drawn


def scramble_twists(defn: Definition, chooser: Optional[Chooser] = None) -> List[Twist]:
    """Prefix, drawn generators, postfix, flattened to twists"""
    if chooser is None:
        chooser = UniformChooser()
    twists = list(defn.prefix)
    for gen in draw(defn, chooser):
        twists.extend(gen)
    twists.extend(defn.postfix)
    return twists
