from __future__ import annotations

import os
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Asia/Kathmandu"


class Clock(ABC):
    """「今日」を提供する時計

    出発済み判定・予約日・キャンセル日はすべてこの日付を基準にする。
    """

    @abstractmethod
    def today(self) -> date:
        raise NotImplementedError


class SystemClock(Clock):
    """実時刻の時計（固定タイムゾーンで日付を決める）"""

    def __init__(self, timezone: str | None = None) -> None:
        self._zone = ZoneInfo(timezone or os.getenv("BOOKING_TIMEZONE", DEFAULT_TIMEZONE))

    @property
    def zone(self) -> ZoneInfo:
        return self._zone

    def today(self) -> date:
        return datetime.now(self._zone).date()


class FixedClock(Clock):
    """日付を固定・手動で進められる時計（テスト・シミュレーション用）"""

    def __init__(self, current: date) -> None:
        self._current = current

    def today(self) -> date:
        return self._current

    def set(self, current: date) -> None:
        self._current = current

    def advance(self, days: int = 1) -> date:
        self._current = self._current + timedelta(days=days)
        return self._current
