"""Tests for label index translation."""

from suffixstrip.matching.translator import join_index


class TestJoinIndex:
    """Tests for join_index function."""

    def test_points_at_separator(self):
        """Offset points at the dot before the target label."""
        labels = ["www", "mozilla", "org"]
        joined = ".".join(labels)

        offset = join_index(labels, 2)

        assert offset == 11
        assert joined[offset] == "."
        assert joined[:offset] == "www.mozilla"

    def test_second_label(self):
        """Index 1 leaves only the first label."""
        labels = ["independent", "co", "uk"]
        assert ".".join(labels)[:join_index(labels, 1)] == "independent"

    def test_every_index_falls_on_separator(self):
        """Every index from 1 maps onto a separator."""
        labels = ["a", "bb", "ccc", "dddd", "e"]
        joined = ".".join(labels)

        for index in range(1, len(labels)):
            offset = join_index(labels, index)
            assert joined[offset] == "."
            assert joined[offset + 1:].split(".")[0] == labels[index]

    def test_index_zero_is_first_label_length(self):
        """Index 0 yields the length of the first label."""
        assert join_index(["com"], 0) == 3
