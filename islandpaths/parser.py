"""Reading and validating island map files."""

from __future__ import annotations

import os
from typing import Union

from .graph import Graph, GraphError
from .textutil import is_alpha, is_digit, split_words

INT_MAX = 2147483647

PathLike = Union[str, "os.PathLike[str]"]


class ParseError(Exception):
    """Raised when an island map cannot be read or is not valid."""


def is_number(text: str) -> bool:
    """Return True when ``text`` is non-empty and made only of decimal digits."""
    return bool(text) and all(is_digit(ch) for ch in text)


def _line_error(line_number: int) -> ParseError:
    return ParseError(f"line {line_number} is not valid")


def validate_first_line(line: str) -> int:
    """Check the island count line and return the count."""
    if not is_number(line) or line[0] == "0":
        raise _line_error(1)
    value = int(line)
    if value > INT_MAX:
        raise _line_error(1)
    return value


def validate_line(line: str, line_number: int) -> tuple[str, str, int]:
    """Check a bridge line ``Name-Name,weight`` and return its parts."""
    dash = line.find("-")
    if dash < 1:
        raise _line_error(line_number)
    comma = line.find(",")
    if comma <= dash + 1:
        raise _line_error(line_number)

    source = line[:dash]
    target = line[dash + 1:comma]
    weight_text = line[comma + 1:]

    if not all(is_alpha(ch) for ch in source + target):
        raise _line_error(line_number)
    if not is_number(weight_text) or weight_text[0] == "0":
        raise _line_error(line_number)
    weight = int(weight_text)
    if weight > INT_MAX:
        raise _line_error(line_number)
    if source == target:
        raise _line_error(line_number)
    return source, target, weight


def read_source(path: PathLike) -> str:
    """Return the text of the map file, refusing missing and empty files."""
    name = os.fspath(path)
    try:
        with open(name, encoding="utf-8", errors="surrogateescape") as handle:
            text = handle.read()
    except OSError:
        raise ParseError(f"file {name} does not exist") from None
    if not text:
        raise ParseError(f"file {name} is empty")
    return text


def parse_text(text: str) -> Graph:
    """Build the island graph described by the text of a map file."""
    lines = split_words(text, "\n")
    if len(lines) < 2:
        raise ParseError("invalid number of lines")

    graph = Graph(validate_first_line(lines[0]))
    seen: set[frozenset[str]] = set()
    total = 0

    for line_number, line in enumerate(lines[1:], start=2):
        source, target, weight = validate_line(line, line_number)
        pair = frozenset((source, target))
        if pair in seen:
            raise ParseError("duplicate bridges")
        seen.add(pair)
        total += weight
        if total > INT_MAX:
            raise ParseError("sum of bridges lengths is too big")
        try:
            graph.add_edge(source, target, weight)
        except GraphError as exc:
            raise ParseError(str(exc)) from None

    if None in graph.names:
        raise ParseError("invalid number of islands")
    return graph


def parse_file(path: PathLike) -> Graph:
    """Read and parse the map file at ``path``."""
    return parse_text(read_source(path))