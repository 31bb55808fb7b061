from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

import pandas as pd


@dataclass(frozen=True)
class Draw:
    """
    One historical pick-3 result.

    Attributes:
        index: Draw number (1-based, chronological).
        date: ISO date string (YYYY-MM-DD).
        n1, n2, n3: The three drawn digits, each in [0, 9], in draw order.
    """

    index: int
    date: str
    n1: int
    n2: int
    n3: int

    @property
    def digits(self) -> tuple[int, int, int]:
        return (self.n1, self.n2, self.n3)

    @property
    def digit_sum(self) -> int:
        return self.n1 + self.n2 + self.n3


# Fixed embedded history, oldest first. Never mutated.
HISTORICAL_DRAWS: tuple[Draw, ...] = (
    Draw(1, "2024-10-20", 7, 6, 2),
    Draw(2, "2024-10-21", 3, 7, 1),
    Draw(3, "2024-10-22", 0, 4, 8),
    Draw(4, "2024-10-23", 0, 5, 0),
    Draw(5, "2024-10-24", 1, 4, 2),
    Draw(6, "2024-10-25", 4, 5, 2),
    Draw(7, "2024-10-26", 5, 2, 4),
    Draw(8, "2024-10-27", 7, 6, 4),
    Draw(9, "2024-10-28", 6, 1, 9),
    Draw(10, "2024-10-29", 1, 5, 1),
    Draw(11, "2024-10-30", 8, 3, 6),
    Draw(12, "2024-10-31", 2, 9, 5),
    Draw(13, "2024-11-01", 4, 7, 3),
    Draw(14, "2024-11-02", 9, 0, 8),
    Draw(15, "2024-11-03", 6, 2, 7),
    Draw(16, "2024-11-04", 3, 8, 1),
    Draw(17, "2024-11-05", 5, 4, 9),
    Draw(18, "2024-11-06", 1, 6, 0),
    Draw(19, "2024-11-07", 7, 3, 5),
    Draw(20, "2024-11-08", 2, 8, 4),
)

DRAW_COLUMNS = ["draw", "date", "n1", "n2", "n3", "digit_sum"]


def validate_draws(draws: Iterable[Draw]) -> List[Draw]:
    """
    Basic validation for a draw table.

    Raises:
        ValueError: If a record is not a Draw, has a digit outside [0, 9],
            or carries an unparseable date.
    """
    checked = list(draws)
    for draw in checked:
        if not isinstance(draw, Draw):
            raise ValueError(f"Expected Draw records, got {type(draw).__name__}")
        bad = [d for d in draw.digits if not 0 <= d <= 9]
        if bad:
            raise ValueError(f"Draw {draw.index} has digits outside 0-9: {bad}")
        try:
            pd.to_datetime(draw.date, format="%Y-%m-%d")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Draw {draw.index} has a malformed date: {draw.date!r}") from e
    return checked


def load_draws() -> List[Draw]:
    """Return the embedded historical table (oldest first) as a fresh list."""
    return validate_draws(HISTORICAL_DRAWS)


def draws_frame(draws: Sequence[Draw] | None = None) -> pd.DataFrame:
    """
    Tabular view of a draw list.

    Returns:
        One row per draw with columns draw, date (datetime64), n1, n2, n3
        and digit_sum, in the input order.
    """
    if draws is None:
        draws = HISTORICAL_DRAWS

    df = pd.DataFrame(
        [(d.index, d.date, d.n1, d.n2, d.n3) for d in draws],
        columns=DRAW_COLUMNS[:-1],
    )
    df["date"] = pd.to_datetime(df["date"], format="%Y-%m-%d")
    df["digit_sum"] = (df["n1"] + df["n2"] + df["n3"]).astype(int)
    return df[DRAW_COLUMNS]
