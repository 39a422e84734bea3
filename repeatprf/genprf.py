"""Generate a DNA repeat profile (PROSITE matrix format) from a sequence."""

from __future__ import annotations

import sys
from collections.abc import Sequence

ALPHABET = "ACGT"

MATCH_COST = 5
MISMATCH_COST = -3
INSERTION_COST = -3
DELETION_COST = -5
MATCHING_INSERTION_COST = -1


class InvalidSequenceError(ValueError):
    """Raised when a sequence holds symbols other than A, C, G and T."""


def validate_sequence(sequence: str) -> str:
    """Return the sequence if it is made of DNA symbols only."""
    if not sequence:
        raise InvalidSequenceError("Your sequence is empty")
    if any(symbol not in ALPHABET for symbol in sequence):
        raise InvalidSequenceError("Your sequence contains non DNA symbols")
    return sequence


def _scores(symbol: str, same: int, other: int) -> str:
    return ",".join(str(same if symbol == letter else other) for letter in ALPHABET)


def _header(sequence: str) -> list[str]:
    length = len(sequence)
    return [
        f"ID   GenPRF_{sequence:>32}; MATRIX.",
        f"MA   /GENERAL_SPEC: ALPHABET='{ALPHABET}'; LENGTH={length};",
        f"MA   /DISJOINT: DEFINITION=PROTECT; N1=2; N2={length - 1}",
        "MA   /NORMALIZATION: MODE=1; FUNCTION=LINEAR; R1=0.0; R2=0.1; TEXT='No_units';",
        "MA   /CUT_OFF: LEVEL=-1; SCORE=65; N_SCORE=6.5; MODE=1; TEXT='?';",
        "MA   /CUT_OFF: LEVEL=0; SCORE=85; N_SCORE=8.5; MODE=1; TEXT='!';",
    ]


def _defaults(at_start: bool) -> list[str]:
    begin = "B1=*; BM=*;" if at_start else "BM=*;"
    first = "MA   /I: BM=0; BI=0; BD=0; E1=*;" if at_start else "MA   /I: BM=0; BD=0; E1=*;"
    return [
        f"MA   /DEFAULT: {begin} ME=*; DM=0; IM=0; MD=-1; MI=-1; M0=-1; "
        f"D={DELETION_COST}; I={INSERTION_COST}; II=-1; DD=-2;",
        first,
    ]


def _positions(sequence: str) -> list[str]:
    lines = []
    followers = list(sequence[1:]) + [None]
    for symbol, following in zip(sequence, followers):
        deletion = 0 if symbol == following else DELETION_COST
        lines.append(
            f"MA   /M: SY='{symbol}'; "
            f"M={_scores(symbol, MATCH_COST, MISMATCH_COST)}; D={deletion};"
        )
        if following is not None:
            lines.append(
                f"MA   /I: I={_scores(symbol, MATCHING_INSERTION_COST, INSERTION_COST)};"
            )
    return lines


def generate_profile(sequence: str, at_start: bool = False) -> str:
    """Build the profile text for a DNA repeat unit.

    With ``at_start`` the profile may also begin with an insertion.
    """
    validate_sequence(sequence)
    lines = [
        *_header(sequence),
        *_defaults(at_start),
        *_positions(sequence),
        "MA   /I: B1=*; ME=0; DE=0; ",
        "CC   Generated by GenPrf",
        "//",
    ]
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``genprf sequence [at_start]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage : genprf sequence [at_start]", file=sys.stderr)
        return 1
    try:
        text = generate_profile(args[0], at_start=len(args) == 2)
    except InvalidSequenceError as error:
        print(error, file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())