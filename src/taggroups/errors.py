class FormatError(ValueError):
    """A tag line was found before any group header."""

    def __init__(self, index: int, line: str):
        self.index = index
        self.line = line
        super().__init__(f"ORPHAN_TAG_LINE:{index} {line!r}")
