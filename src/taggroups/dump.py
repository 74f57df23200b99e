from typing import Iterable, List, Optional

from .config import get_default_delimiter, validate_delimiter
from .grammar import is_header_line
from .schema import Group


def dump_groups(groups: Iterable[Group], delimiter: Optional[str] = None) -> str:
    """
    Rebuild tag file text from parsed groups.

    Each group becomes its "[name]" header followed by its tag lines, all
    joined by the delimiter. Parsing the output gives back equal groups.

    Raises:
        ValueError: A name or tag cannot be written back unchanged, i.e.
            it contains the delimiter, a tag is blank or has surrounding
            whitespace, a tag would read back as a header, or the delimiter
            is a header bracket.
    """
    if delimiter is None:
        delimiter = get_default_delimiter()
    validate_delimiter(delimiter)
    if delimiter in "[]":
        raise ValueError(f"delimiter clashes with header brackets: {delimiter!r}")

    parts: List[str] = []
    for group in groups:
        if delimiter in group.name:
            raise ValueError(f"group name contains the delimiter: {group.name!r}")
        parts.append(f"[{group.name}]")

        for tag in group.tags:
            if delimiter in tag:
                raise ValueError(f"tag contains the delimiter: {tag!r}")
            if not tag.strip() or tag.strip() != tag:
                raise ValueError(f"tag is blank or has surrounding whitespace: {tag!r}")
            if is_header_line(tag):
                raise ValueError(f"tag would read back as a header: {tag!r}")
            parts.append(tag)

    return delimiter.join(parts)
