from typing import Sequence

import pytest

from scramble.chooser import Chooser


class ScriptedChooser(Chooser):
    """Picks the items at a fixed sequence of indexes, cycling"""

    def __init__(self, indexes: Sequence[int]):
        self.indexes = list(indexes)
        self.calls = 0

    def choose(self, items):
        if len(items) == 0:
            return None
        index = self.indexes[self.calls % len(self.indexes)]
        self.calls += 1
        return items[index]


SAMPLE = """n:3
d:  4
depth: 100
prefix: zy 
postfix:  
generators: 
IU//
 IU//a
IU IU // a 
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE


@pytest.fixture
def scripted():
    return ScriptedChooser
