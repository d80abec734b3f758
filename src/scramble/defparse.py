"""
A parser for scramble definition files.

Fields come in a fixed order, one per meaningful line:

   n: <layer count>
   d: <dimension>
   depth: <number of random draws>
   prefix: { twist }
   postfix: { twist }
   generators:
   { twist } { twist }     # one generator per remaining line
"""

import io
import re
from typing import Optional, TextIO, Tuple

import scramble.config as config
from scramble.definition import Definition, Generator
from scramble.lex import Line, LineStream, split_twists

import logging
logging.basicConfig()
log = logging.getLogger(__name__)


class DefinitionError(Exception):
    """Raised when we can't parse a definition"""

    def __init__(self, msg: str, field: str, line_num: Optional[int] = None):
        self.field = field
        self.line_num = line_num
        if line_num is not None:
            msg = f"{msg} (line {line_num})"
        super().__init__(msg)


class UnexpectedEof(DefinitionError):
    """Input ended before a required field"""

    def __init__(self, field: str, line_num: Optional[int] = None):
        super().__init__(f"Ran out of input looking for '{field}'", field, line_num)


class InvalidNumber(DefinitionError):
    """A numeric field is not an unsigned integer in range"""

    def __init__(self, field: str, value: str, line_num: Optional[int] = None):
        self.value = value
        super().__init__(f"Failed to parse '{field}': '{value}' is not a valid number",
                         field, line_num)


class MissingKey(DefinitionError):
    """A line does not begin with the key expected at its position"""

    def __init__(self, field: str, line_num: Optional[int] = None):
        super().__init__(f"Expecting line beginning with '{field}:'", field, line_num)


class InvalidGeneratorsHeader(DefinitionError):
    """The generators header is not exactly 'generators:'"""

    def __init__(self, text: str, line_num: Optional[int] = None):
        self.text = text
        super().__init__(f"Expecting 'generators:', but saw '{text}'", "generators", line_num)


UNSIGNED = re.compile(r"\+?[0-9]+")


def parse(text: str) -> Definition:
    """Parse the text of a definition"""
    return parse_file(io.StringIO(text))


def parse_file(srcfile: TextIO) -> Definition:
    """Parse a definition from an open text file"""
    stream = LineStream(srcfile)
    n = _number(stream, "n", config.MAX_N)
    d = _number(stream, "d", config.MAX_D)
    depth = _number(stream, "depth", config.MAX_DEPTH)
    prefix = _twists(stream, "prefix")
    postfix = _twists(stream, "postfix")
    _generators_header(stream)
    generators = []
    while stream.has_more():
        line = stream.take()
        generators.append(Generator.from_words(split_twists(line.text)))
    defn = Definition(n=n, d=d, depth=depth, prefix=prefix, postfix=postfix,
                      generators=tuple(generators))
    log.debug(f"Parsed {defn}")
    return defn


def require(stream: LineStream, field: str) -> Line:
    """Requires another line in the stream, and consumes it"""
    line = stream.take()
    if line is None:
        raise UnexpectedEof(field, stream.line_num)
    return line


def _value(stream: LineStream, field: str) -> Tuple[str, Line]:
    """The text following 'field:' on the next line"""
    line = require(stream, field)
    key = f"{field}:"
    if not line.text.startswith(key):
        raise MissingKey(field, line.line_num)
    return line.text[len(key):].lstrip(), line


def _number(stream: LineStream, field: str, limit: int) -> int:
    """field: unsigned integer no larger than limit"""
    text, line = _value(stream, field)
    if not UNSIGNED.fullmatch(text):
        raise InvalidNumber(field, text, line.line_num)
    digits = text.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(limit)):
        raise InvalidNumber(field, text, line.line_num)
    value = int(digits)
    if value > limit:
        raise InvalidNumber(field, text, line.line_num)
    return value


def _twists(stream: LineStream, field: str) -> Generator:
    """field: { twist }"""
    text, _ = _value(stream, field)
    return Generator.from_words(split_twists(text))


def _generators_header(stream: LineStream):
    line = require(stream, "generators")
    if line.text != "generators:":
        raise InvalidGeneratorsHeader(line.text, line.line_num)
