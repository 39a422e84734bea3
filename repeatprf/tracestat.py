"""Statistics and text exports for the frame traces of a sequencing hole."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

BASE_ORDER = "TGAC"
_BASE_CODES = {"T": 0, "G": 1, "A": 2, "C": 3, "N": 4}
STAT_SLOTS = 1 + 5 * 5
CHANNELS = 4

Trace = Sequence[float]


@dataclass(frozen=True)
class ContingencyTable:
    """Counts of a binary classification against a reference."""

    tp: int = 0
    fp: int = 0
    fn: int = 0
    tn: int = 0

    def sensitivity(self) -> float:
        """True positive rate; a table without positives gives its TP count."""
        positives = self.tp + self.fn
        return self.tp / positives if positives else float(self.tp)

    def specificity(self) -> float:
        """True negative rate; a table without negatives gives 1 - FP."""
        negatives = self.fp + self.tn
        return 1.0 - (self.fp / negatives if negatives else float(self.fp))


def count_bases(bases: Iterable[str]) -> dict[str, int]:
    """Count T, G, A and C (in that order); other symbols are ignored."""
    counts = dict.fromkeys(BASE_ORDER, 0)
    for base in bases:
        if base in counts:
            counts[base] += 1
    return counts


def expand_frames(
    n_times: int,
    bases: str,
    frames_start: Sequence[int],
    frames_end: Sequence[int],
) -> str:
    """Spread each called base over its frames; uncovered frames are 'N'."""
    if n_times < 0:
        raise ValueError("number of frames must not be negative")
    frames = ["N"] * n_times
    for base, start, stop in zip(bases, frames_start, frames_end, strict=True):
        if start < 0 or stop > n_times:
            raise ValueError(f"frames [{start},{stop}) outside trace of {n_times}")
        frames[start:stop] = base * max(stop - start, 0)
    return "".join(frames)


def decoded_mean(
    histogram: Sequence[int], decode_table: Sequence[float], bias: float, n_times: int
) -> float:
    """Mean trace value from a histogram of encoded values, minus the bias."""
    if n_times <= 0:
        raise ValueError("number of frames must be positive")
    inverse = 1.0 / n_times
    total = sum(
        count * inverse * value
        for count, value in zip(histogram, decode_table, strict=True)
    )
    return total - bias


def histogram_lines(
    histogram: Sequence[int], decode_table: Sequence[float]
) -> list[str]:
    """Lines of index, decoded value, count and running total."""
    lines = []
    running = 0
    for index, (count, value) in enumerate(zip(histogram, decode_table, strict=True)):
        running += count
        lines.append(f"{index} {value:f}\t{count}\t{running}")
    return lines


def roc_lines(
    coefs: Sequence[float], tables: Sequence[ContingencyTable]
) -> list[str]:
    """Lines of coefficient, specificity and sensitivity for a ROC curve."""
    return [
        f"{coef:f}\t{table.specificity():f}\t{table.sensitivity():f}"
        for coef, table in zip(coefs, tables, strict=True)
    ]


def frame_dna_text(bases: str, types: str, width: int = 100) -> str:
    """Collapse frame bases into a DNA string, wrapped at ``width``.

    A base is written whenever it differs from the previous symbol written
    or skipped; bases on frames of type 'S' are written in lower case and
    that lower-case letter becomes the previous symbol.
    """
    if width <= 0:
        raise ValueError("width must be positive")
    out: list[str] = []
    written = 0
    previous = "\t"
    for base, kind in zip(bases, types, strict=True):
        if base == previous:
            continue
        if base != "N":
            if written == width:
                written = 0
                out.append("\n")
            if kind == "S":
                base = base.lower()
            out.append(base)
            written += 1
        previous = base
    return "".join(out)


def _float32_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _same_trend(previous: float, following: float) -> bool:
    bits = _float32_bits(previous) ^ _float32_bits(following)
    return struct.unpack("<f", struct.pack("<I", bits))[0] > 0.0


def stair_traces(traces: Sequence[Trace]) -> list[tuple[float, ...]]:
    """Flatten traces into stairs: values are held while the trend keeps on.

    The first and last frames are kept as they are.
    """
    if len(traces) < 2:
        raise ValueError("at least two frames are needed")
    result = [tuple(frame) for frame in traces]
    base = list(traces[0])
    previous_diff = [b - a for a, b in zip(traces[0], traces[1], strict=True)]
    for i in range(1, len(traces) - 1):
        current, following = traces[i], traces[i + 1]
        values = []
        for channel, (now, nxt) in enumerate(zip(current, following, strict=True)):
            diff = previous_diff[channel] if nxt == now else nxt - now
            if _same_trend(previous_diff[channel], diff):
                values.append(base[channel])
            else:
                values.append(now)
                base[channel] = now
            previous_diff[channel] = diff
        result[i] = tuple(values)
    return result


def window_means(traces: Sequence[Trace], window_size: int) -> list[tuple[float, ...]]:
    """Sliding means over ``window_size`` frames, one entry per window end.

    The frame leaving the window trails the entering one by one step.
    """
    if not 1 <= window_size <= len(traces):
        raise ValueError(f"window size must be between 1 and {len(traces)}")
    inverse = 1.0 / window_size
    sums = [sum(channel) for channel in zip(*traces[:window_size])]
    means = [tuple(total * inverse for total in sums)]
    first = traces[0]
    for k in range(window_size, len(traces)):
        sums = [
            total + (value - old)
            for total, value, old in zip(sums, traces[k], first, strict=True)
        ]
        first = traces[k - window_size]
        means.append(tuple(total * inverse for total in sums))
    return means


def _base_code(base: str) -> int:
    try:
        return _BASE_CODES[base]
    except KeyError:
        raise ValueError(f"unexpected frame base {base!r}") from None


def transition_stats(
    indices: Sequence[Sequence[int]], bases: str
) -> list[dict[tuple[int, int], list[int]]]:
    """Per channel, count transitions between consecutive encoded values.

    Each entry maps (previous, current) to 26 counters: the total, then one
    per pair of previous and current base (T, G, A, C, N). A channel's
    starting base is the frame base at the channel's own number.
    """
    all_stats = []
    for channel, values in enumerate(indices):
        stats: dict[tuple[int, int], list[int]] = {}
        if values:
            previous = values[0]
            previous_base = _base_code(bases[channel])
            for value, base in zip(values[1:], bases[1:]):
                counters = stats.setdefault((previous, value), [0] * STAT_SLOTS)
                current_base = _base_code(base)
                counters[0] += 1
                counters[1 + previous_base * 5 + current_base] += 1
                previous, previous_base = value, current_base
        all_stats.append(stats)
    return all_stats


def cumulative_ranks(indices: Sequence[int]) -> list[int]:
    """Replace each encoded value by the number of frames at or below it."""
    counts = [0] * 256
    for value in indices:
        counts[value] += 1
    cumulative = []
    running = 0
    for count in counts:
        running += count
        cumulative.append(running)
    return [cumulative[value] for value in indices]


def trace_lines(traces: Sequence[Trace], bases: str, types: str) -> list[str]:
    """Tab separated lines of frame number, four channels, base and type."""
    lines = []
    for index, (frame, base, kind) in enumerate(zip(traces, bases, types, strict=True)):
        if len(frame) != CHANNELS:
            raise ValueError(f"frame {index} does not have {CHANNELS} channels")
        channels = "\t".join(f"{value:10.5f}" for value in frame)
        lines.append(f"{index:7d}\t{channels}\t{base}\t{kind}")
    return lines