"""
Tag group file parsing.

This module parses line-delimited tag files into named groups of tag
lines. Splitting a tag line into individual tags is left to the caller.
"""

from .errors import FormatError
from .schema import Group, OrphanPolicy, ParseResult
from .parser import parse, TagParser
from .dump import dump_groups

__all__ = [
    "parse",
    "TagParser",
    "dump_groups",
    "Group",
    "OrphanPolicy",
    "ParseResult",
    "FormatError",
]
