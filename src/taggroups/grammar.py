import re
from typing import List, Optional

# Header is matched against the trimmed line; interior kept verbatim
HEADER_RE = re.compile(r"^\[(?P<name>.*)\]$", re.DOTALL)


def split_segments(text: str, delimiter: str) -> List[str]:
    """Split raw text into candidate lines on the delimiter."""
    if not isinstance(text, str):
        raise ValueError(f"text must be a string, got {type(text).__name__}")
    if text == "":
        return []
    return text.split(delimiter)


def parse_header(line: str) -> Optional[str]:
    """
    Parse a group header line.

    Grammar:
    <Header> ::= "[" <Name> "]"
    <Name>   ::= any chars (may be empty)

    Args:
        line: A candidate line, trimmed or not

    Returns:
        The header name with the brackets removed, or None when the line
        is not a header. Unmatched brackets are not headers.
    """
    m = HEADER_RE.match(line.strip())
    if not m:
        return None
    return m.group("name")


def is_header_line(line: str) -> bool:
    """Quick check if a line looks like a group header."""
    line = line.strip()
    return len(line) >= 2 and line.startswith("[") and line.endswith("]")
