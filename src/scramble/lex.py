"""
Line structure of scramble definitions.

A definition file is read one meaningful line at a time.  Comments
run from '//' to the end of the line; after removing the comment and
trimming whitespace, lines with nothing left are skipped entirely.
Twists within a line are separated by whitespace.
"""
import io
from typing import List, Optional

import logging
logging.basicConfig()
log = logging.getLogger(__name__)

COMMENT = "//"


def strip_comment(line: str) -> str:
    """Remove any '//' comment and surrounding whitespace"""
    pos = line.find(COMMENT)
    if pos >= 0:
        line = line[:pos]
    return line.strip()


def split_twists(s: str) -> List[str]:
    """Whitespace separated twist tokens"""
    return s.split()


class Line(object):
    """One meaningful line of the input, with its line number"""

    def __init__(self, text: str, line_num: int):
        self.text = text
        self.line_num = line_num

    def __repr__(self) -> str:
        return f"Line('{self.text}', {self.line_num})"

    def __str__(self) -> str:
        return repr(self)


class LineStream(object):
    """
    Provides the meaningful lines within a stream one-by-one.
    Example usage:
       f = open("my_definition_file")
       stream = LineStream(f)
       while stream.has_more():
           line = stream.take()      # Removes line from front of stream
    """

    def __init__(self, f: io.TextIOBase):
        self.file = f
        self.line_num = 0  # Public variable, last physical line read
        self.pending: Optional[Line] = None

    def _check_fill(self):
        # Skip blank and comment-only lines until we hold one
        # line or hit end of file
        while self.pending is None:
            raw = self.file.readline()
            if len(raw) == 0:
                break
            self.line_num += 1
            text = strip_comment(raw)
            if text:
                self.pending = Line(text, self.line_num)
            else:
                log.debug(f"Skipping empty line {self.line_num}")

    def has_more(self) -> bool:
        """True if there are more meaningful lines in the stream"""
        self._check_fill()
        return self.pending is not None

    def take(self) -> Optional[Line]:
        """Consume next line; None at end"""
        self._check_fill()
        line = self.pending
        self.pending = None
        if line is not None:
            log.debug(f"Took {line}")
        return line
