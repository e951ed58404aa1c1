"""Translation from label indexes to offsets in the normalized domain."""

from __future__ import annotations

from typing import Sequence


def join_index(labels: Sequence[str], index: int) -> int:
    """
    Translate the index of a label to its offset in the joined domain.

    The offset points at the "." preceding the label, so slicing the
    joined string up to it keeps everything left of the label.

    [www, mozilla, org] and 2 => 11 (www.mozilla)

    Index 0 has no preceding separator; callers treat it as "the whole
    domain" and must not slice with the result.
    """
    offset = len(labels[0])

    for label in labels[1:index]:
        offset += len(label) + 1  # Add one for the "." between labels

    return offset
