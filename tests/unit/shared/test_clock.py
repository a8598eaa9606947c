from datetime import date

from flight_booking.shared.domain import FixedClock, SystemClock


class TestClock:
    def test_fixed_clock_can_be_advanced(self):
        clock = FixedClock(date(2026, 2, 27))

        assert clock.advance(days=2) == date(2026, 3, 1)
        assert clock.today() == date(2026, 3, 1)

    def test_system_clock_uses_configured_timezone(self, monkeypatch):
        monkeypatch.setenv("BOOKING_TIMEZONE", "Europe/London")

        assert SystemClock().zone.key == "Europe/London"

    def test_system_clock_defaults_to_kathmandu(self, monkeypatch):
        monkeypatch.delenv("BOOKING_TIMEZONE", raising=False)

        assert SystemClock().zone.key == "Asia/Kathmandu"
