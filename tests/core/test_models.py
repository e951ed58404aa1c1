"""Tests for core data models."""

import dataclasses

import pytest

from suffixstrip.core.models import SuffixRules


class TestSuffixRules:
    """Tests for SuffixRules dataclass."""

    def test_defaults_are_empty(self):
        """SuffixRules defaults to empty frozensets."""
        rules = SuffixRules()

        assert rules.exact == frozenset()
        assert rules.wildcards == frozenset()
        assert rules.excluded == frozenset()
        assert len(rules) == 0

    def test_accessors_return_rule_sets(self, sample_rules):
        """Accessor methods expose the three rule sets."""
        assert sample_rules.exact_suffixes() is sample_rules.exact
        assert sample_rules.wildcard_suffixes() is sample_rules.wildcards
        assert sample_rules.excluded_suffixes() is sample_rules.excluded

    def test_is_immutable(self, sample_rules):
        """Fields cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_rules.exact = frozenset({"net"})

    def test_merged_unions_all_sets(self):
        """merged returns the union without touching either operand."""
        left = SuffixRules(exact=frozenset({"com"}), wildcards=frozenset({"ck"}))
        right = SuffixRules(exact=frozenset({"org"}), excluded=frozenset({"www.ck"}))

        merged = left.merged(right)

        assert merged.exact == {"com", "org"}
        assert merged.wildcards == {"ck"}
        assert merged.excluded == {"www.ck"}
        assert left.exact == {"com"}

    def test_to_dict_counts(self, sample_rules):
        """to_dict reports the size of each rule set."""
        assert sample_rules.to_dict() == {"exact": 6, "wildcards": 3, "excluded": 2}
