"""Square type alias and coordinate helpers.

Squares are rank-major indices: a1=0, h1=7, a2=8, ..., a8=56, h8=63.
A step is a (file delta, rank delta) pair; stepping off the board is
never an error, it just yields no square.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

Square: TypeAlias = int  # 0–63
Step: TypeAlias = tuple[int, int]

_FILES = "abcdefgh"


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq % 8


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq // 8


def make_square(file: int, rank: int) -> Square:
    return rank * 8 + file


def square_name(sq: Square) -> str:
    """e.g. 0 → 'a1', 63 → 'h8'."""
    return f"{_FILES[file_of(sq)]}{rank_of(sq) + 1}"


def parse_square(name: str) -> Square:
    """Inverse of :func:`square_name`; raises ValueError on bad input."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(_FILES.index(name[0]), int(name[1]) - 1)


def is_valid_square(sq: int) -> bool:
    return 0 <= sq < 64


def offset_square(sq: Square, dfile: int, drank: int) -> Square | None:
    """Square reached from *sq* by one step, or None off the board."""
    f = file_of(sq) + dfile
    r = rank_of(sq) + drank
    if 0 <= f <= 7 and 0 <= r <= 7:
        return make_square(f, r)
    return None


def ray(sq: Square, step: Step) -> Iterator[Square]:
    """Squares from *sq* outward along *step*, up to the board edge."""
    dfile, drank = step
    for dist in range(1, 8):
        to_sq = offset_square(sq, dfile * dist, drank * dist)
        if to_sq is None:
            return
        yield to_sq


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
