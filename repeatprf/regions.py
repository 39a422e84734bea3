"""Hole regions, reverse-complement mapping and alignment marking for reads."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


class RegionType(enum.Enum):
    """Kind of region annotated on a sequencing hole."""

    ADAPTER = "Adapter"
    INSERT = "Insert"
    HQ_REGION = "HQRegion"


@dataclass(frozen=True)
class HoleRegion:
    """A region of a hole, in base coordinates."""

    type: RegionType
    start: int
    stop: int
    quality: int = 0


@dataclass(frozen=True)
class AlignmentSpan:
    """Row span of an alignment on a read, with its score."""

    begin: int
    end: int
    score: int = 0


def hq_region(
    regions: Sequence[HoleRegion], hq_threshold: int, keep_invalid: bool = False
) -> tuple[int, int]:
    """Return the (start, stop) of the high-quality region of a hole.

    The last HQ region wins; when none exists the first region is used.
    A quality under the threshold gives a stop of 0. With ``keep_invalid``
    a hole whose HQ region is empty spans all its inserts instead.
    """
    if not regions:
        raise ValueError("hole has no regions")
    largest_insert = 0
    hq_index = 0
    has_valid_hq = True
    for index, region in enumerate(regions):
        if region.type is RegionType.INSERT:
            largest_insert = max(largest_insert, region.stop)
        elif region.type is RegionType.HQ_REGION:
            if region.stop == 0:
                has_valid_hq = False
            hq_index = index

    chosen = regions[hq_index]
    start, stop = chosen.start, chosen.stop
    if chosen.quality < hq_threshold:
        stop = 0
    if keep_invalid and not has_valid_hq:
        start, stop = 0, largest_insert
    return start, stop


_COMPLEMENTS = {"A": "T", "C": "G", "G": "C", "T": "A"}


def reverse_complement_mapping(mapping: Sequence[int]) -> list[int]:
    """Swap the entries of complementary bases in a letter-indexed mapping.

    Entry ``k`` of ``mapping`` belongs to the letter ``chr(ord('A') + k)``.
    """
    needed = ord("T") - ord("A") + 1
    if len(mapping) < needed:
        raise ValueError(f"mapping must cover at least {needed} letters")
    result = list(mapping)
    for base, complement in _COMPLEMENTS.items():
        result[ord(base) - ord("A")] = mapping[ord(complement) - ord("A")]
    return result


def merge_alignments(
    forward: Iterable[AlignmentSpan],
    reverse: Iterable[AlignmentSpan],
    sequence_length: int,
) -> list[AlignmentSpan]:
    """Join forward alignments with reverse-strand ones mapped to forward rows."""
    merged = list(forward)
    merged.extend(
        dataclasses.replace(
            span, begin=sequence_length - span.end, end=sequence_length - span.begin
        )
        for span in reverse
    )
    return merged


def _paint(types: str, spans: Iterable[tuple[int, int]], mark: str) -> str:
    chars = list(types)
    for first, last in spans:
        covered = len(chars[first:last])
        chars[first:last] = mark * covered
    return "".join(chars)


def mark_adapters(
    types: str,
    regions: Iterable[HoleRegion],
    frames_start: Sequence[int],
    frames_end: Sequence[int],
) -> str:
    """Mark with 'A' the frames covered by adapter regions."""
    spans = (
        (frames_start[region.start], frames_end[region.stop])
        for region in regions
        if region.type is RegionType.ADAPTER
    )
    return _paint(types, spans, "A")


def mark_alignments(
    types: str,
    alignments: Iterable[AlignmentSpan],
    frames_start: Sequence[int],
    frames_end: Sequence[int],
) -> str:
    """Mark with 'R' the frames covered by repeat alignments."""
    spans = (
        (frames_start[span.begin], frames_end[span.end]) for span in alignments
    )
    return _paint(types, spans, "R")