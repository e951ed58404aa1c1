"""Core data models for suffixstrip."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SuffixRules:
    """
    Immutable public suffix rule sets.

    Built once by the loader and shared read-only by every query, so a
    single instance can serve concurrent callers without locking.
    """

    exact: frozenset[str] = field(default_factory=frozenset)  # e.g. "com", "co.uk"
    wildcards: frozenset[str] = field(default_factory=frozenset)  # "ar" for the rule "*.ar"
    excluded: frozenset[str] = field(default_factory=frozenset)  # "nhs.uk" for the rule "!nhs.uk"

    def exact_suffixes(self) -> frozenset[str]:
        """Return suffixes that are public suffixes as written."""
        return self.exact

    def wildcard_suffixes(self) -> frozenset[str]:
        """Return bases whose single-label children are public suffixes."""
        return self.wildcards

    def excluded_suffixes(self) -> frozenset[str]:
        """Return names carved out of a wildcard rule."""
        return self.excluded

    def merged(self, other: SuffixRules) -> SuffixRules:
        """Return a new rule set holding the union of both."""
        return SuffixRules(
            exact=self.exact | other.exact,
            wildcards=self.wildcards | other.wildcards,
            excluded=self.excluded | other.excluded,
        )

    def __len__(self) -> int:
        """Return the total number of rules."""
        return len(self.exact) + len(self.wildcards) + len(self.excluded)

    def to_dict(self) -> dict:
        """Summarize rule counts for display."""
        return {
            "exact": len(self.exact),
            "wildcards": len(self.wildcards),
            "excluded": len(self.excluded),
        }
