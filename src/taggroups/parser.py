from typing import Iterator, List, Optional, Tuple

from loguru import logger

from .config import get_default_delimiter, resolve_orphan_policy, validate_delimiter
from .errors import FormatError
from .grammar import parse_header, split_segments
from .schema import Group, OrphanPolicy, ParseResult

DEFAULT_GROUP_NAME = ""


def parse(
    text: str,
    delimiter: Optional[str] = None,
    orphan_policy: Optional[OrphanPolicy] = None,
) -> ParseResult:
    """
    Parse tag file text into groups.

    A line wrapped in brackets opens a new group; every other non-blank
    line is appended verbatim (trimmed) to the most recent group. Blank
    lines are skipped. Groups with the same name are kept separate.

    Args:
        text: Raw tag file contents
        delimiter: Single character separating lines (default newline)
        orphan_policy: How to treat tag lines seen before any header
            (default raises FormatError)

    Returns:
        Tuple of frozen Group records in order of appearance.

    Raises:
        FormatError: A tag line precedes the first header and the policy
            is OrphanPolicy.error.
        ValueError: The delimiter or policy is invalid.
    """
    if delimiter is None:
        delimiter = get_default_delimiter()
    validate_delimiter(delimiter)
    policy = resolve_orphan_policy(orphan_policy)

    # Built as (name, tags) pairs and frozen at the end so a failure
    # never hands back a half-built result
    pending: List[Tuple[str, List[str]]] = []
    current: Optional[List[str]] = None
    dropped = 0

    for index, segment in enumerate(split_segments(text, delimiter)):
        line = segment.strip()
        if not line:
            continue

        name = parse_header(line)
        if name is not None:
            current = []
            pending.append((name, current))
            continue

        if current is None:
            if policy == OrphanPolicy.error:
                raise FormatError(index, line)
            if policy == OrphanPolicy.drop:
                logger.debug(f"Dropping tag line {index} outside any group: {line!r}")
                dropped += 1
                continue
            logger.warning(
                f"Tag line {index} outside any group, using default group: {line!r}"
            )
            current = []
            pending.append((DEFAULT_GROUP_NAME, current))

        current.append(line)

    groups = tuple(Group(name=name, tags=tuple(tags)) for name, tags in pending)
    logger.debug(
        f"Parsed {len(groups)} groups, "
        f"{sum(len(g.tags) for g in groups)} tag lines, {dropped} dropped"
    )
    return groups


class TagParser:
    """Parses tag file text once and keeps the resulting groups."""

    def __init__(
        self,
        text: str,
        delimiter: Optional[str] = None,
        orphan_policy: Optional[OrphanPolicy] = None,
    ):
        self._groups = parse(text, delimiter=delimiter, orphan_policy=orphan_policy)

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "TagParser":
        return cls(text, **kwargs)

    def groups(self) -> ParseResult:
        return self._groups

    def group(self, name: str) -> Optional[Group]:
        """First group with the given name, or None."""
        for group in self._groups:
            if group.name == name:
                return group
        return None

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[Group]:
        return iter(self._groups)
