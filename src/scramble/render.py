"""Render a scramble as a Hyperspeedcube puzzle log."""
from typing import Iterable, Optional

import scramble.config as config
from scramble.chooser import Chooser
from scramble.definition import Definition, Twist
from scramble.generator import scramble_twists

LOG_TEMPLATE = """# {app} puzzle log
---
version: 1
puzzle:
  Rubiks{d}D:
    layer_count: {n}
state: 1
twists: >
"""


def wrap_words(words: Iterable[str], width: int = config.WRAP_WIDTH) -> str:
    """Join words with single spaces, breaking the line before any
    word that would carry it past width.  Words are never split, so
    a word longer than width gets a line of its own.
    """
    text = ""
    column = 0
    for word in words:
        if column == 0:
            column = len(word)
            text += word
        else:
            column += len(word) + 1
            if column <= width:
                text += " "
            else:
                column = len(word)
                text += "\n"
            text += word
    return text


def render_log(defn: Definition, twists: Iterable[Twist],
               app_name: str = config.APP_NAME) -> str:
    text = LOG_TEMPLATE.format(app=app_name, d=defn.d, n=defn.n)
    for line in wrap_words(str(twist) for twist in twists).splitlines():
        text += f"{config.INDENT}{line}\n"
    return text


def generate(defn: Definition, chooser: Optional[Chooser] = None,
             app_name: str = config.APP_NAME) -> str:
    """A freshly drawn scramble for defn, as puzzle log text"""
    return render_log(defn, scramble_twists(defn, chooser), app_name=app_name)
