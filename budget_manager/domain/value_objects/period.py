"""予算期間（年月）を表現する値オブジェクト."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from ..errors import ValidationError

PERIOD_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}")
MIN_YEAR = 1900
MAX_YEAR = 2100


@dataclass(frozen=True)
class Period:
    """YYYY-MM 形式の予算期間（例: "2025-01"）.

    ゼロ埋めされた YYYY-MM は文字列順と時系列順が一致するため、
    比較はすべて文字列比較で行う。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not Period.is_valid(self.value):
            raise ValidationError(
                f'Invalid period format: "{self.value}". Use format YYYY-MM (e.g., "2025-01")',
                field="period",
                value=self.value,
            )

    @staticmethod
    def is_valid(period: str) -> bool:
        """YYYY-MM 形式かつ月・年が範囲内か判定する."""
        if not isinstance(period, str) or not PERIOD_PATTERN.fullmatch(period):
            return False
        year, month = (int(part) for part in period.split("-"))
        return 1 <= month <= 12 and MIN_YEAR <= year <= MAX_YEAR

    @classmethod
    def now(cls, today: date | None = None) -> Period:
        """今月のPeriodを生成する."""
        return cls.from_date(today or date.today())

    @classmethod
    def from_date(cls, value: date) -> Period:
        """日付の年月からPeriodを生成する."""
        return cls(f"{value.year:04d}-{value.month:02d}")

    @classmethod
    def of(cls, year: int, month: int) -> Period:
        """年と月（1-12）からPeriodを生成する."""
        return cls(f"{year:04d}-{month:02d}")

    def get_year(self) -> int:
        """年を返す."""
        return int(self.value.split("-")[0])

    def get_month(self) -> int:
        """月（1-12）を返す."""
        return int(self.value.split("-")[1])

    def previous(self) -> Period:
        """前月を返す（例: "2025-01" → "2024-12"）."""
        year, month = self.get_year(), self.get_month() - 1
        if month == 0:
            month = 12
            year -= 1
        return Period.of(year, month)

    def next(self) -> Period:
        """翌月を返す（例: "2025-12" → "2026-01"）."""
        year, month = self.get_year(), self.get_month() + 1
        if month == 13:
            month = 1
            year += 1
        return Period.of(year, month)

    @staticmethod
    def range(start: Period, end: Period) -> list[Period]:
        """開始から終了までの期間リストを返す（両端を含む）."""
        periods: list[Period] = []
        current = start
        while current.value <= end.value:
            periods.append(current)
            if current.value == end.value:
                break
            current = current.next()
        return periods

    def to_date(self) -> date:
        """月初日を返す."""
        return date(self.get_year(), self.get_month(), 1)

    def equals(self, other: Period) -> bool:
        """同じ期間か判定."""
        return self.value == other.value

    def is_after(self, other: Period) -> bool:
        """他の期間より後か判定."""
        return self.value > other.value

    def is_before(self, other: Period) -> bool:
        """他の期間より前か判定."""
        return self.value < other.value

    def is_same_or_after(self, other: Period) -> bool:
        """他の期間と同じか後か判定."""
        return self.value >= other.value

    def is_same_or_before(self, other: Period) -> bool:
        """他の期間と同じか前か判定."""
        return self.value <= other.value

    def is_current(self, today: date | None = None) -> bool:
        """今月か判定."""
        return self.equals(Period.now(today))

    def is_in_past(self, today: date | None = None) -> bool:
        """過去の期間か判定."""
        return self.is_before(Period.now(today))

    def is_in_future(self, today: date | None = None) -> bool:
        """未来の期間か判定."""
        return self.is_after(Period.now(today))

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
