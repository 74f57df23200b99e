"""
Unit tests for writing groups back to text.
"""

import pytest
from taggroups import Group, dump_groups, parse


class TestDumpGroups:
    """Test cases for dump_groups."""

    def test_basic_dump(self):
        """Test the text layout of dumped groups."""
        groups = (Group(name="A", tags=["tag1", "tag2"]), Group(name="B"))

        assert dump_groups(groups) == "[A]\ntag1\ntag2\n[B]"

    def test_empty(self):
        """Test dumping no groups."""
        assert dump_groups(()) == ""

    @pytest.mark.parametrize(
        "text, delimiter",
        [
            ("[Group]\nTag1 Tag2 Tag3\nnew_tag\nTesting_tag -negated_tag", "\n"),
            ("[A]\n\n tag1 \n[A]\n[]\n\n", "\n"),
            ("[A];tag1;tag2;[B]", ";"),
            ("[ spaced name ]\n進撃の巨人", "\n"),
        ],
    )
    def test_reparse_gives_same_groups(self, text, delimiter):
        """Test that parsing a dump gives back equal groups."""
        groups = parse(text, delimiter=delimiter)
        dumped = dump_groups(groups, delimiter=delimiter)

        assert parse(dumped, delimiter=delimiter) == groups

    def test_tag_with_delimiter(self):
        """Test rejection of a tag containing the delimiter."""
        with pytest.raises(ValueError, match="delimiter"):
            dump_groups([Group(name="A", tags=["a;b"])], delimiter=";")

    def test_name_with_delimiter(self):
        """Test rejection of a name containing the delimiter."""
        with pytest.raises(ValueError, match="delimiter"):
            dump_groups([Group(name="A\nB")])

    def test_tag_like_header(self):
        """Test rejection of a tag that would read back as a header."""
        with pytest.raises(ValueError, match="header"):
            dump_groups([Group(name="A", tags=["[B]"])])

    @pytest.mark.parametrize("tag", ["", "  ", " padded"])
    def test_blank_or_padded_tag(self, tag):
        """Test rejection of tags that would not survive trimming."""
        with pytest.raises(ValueError, match="whitespace"):
            dump_groups([Group(name="A", tags=[tag])])

    @pytest.mark.parametrize("delimiter", ["[", "]"])
    def test_bracket_delimiter(self, delimiter):
        """Test rejection of a delimiter that would split the headers."""
        with pytest.raises(ValueError, match="header brackets"):
            dump_groups((Group(name="A", tags=["tag"]),), delimiter=delimiter)
