from hijri_calendar.adapters.aladhan.aladhan_oracle import AladhanCalendarOracle
from hijri_calendar.adapters.aladhan.aladhan_prayer_times import AladhanPrayerTimes

__all__ = ["AladhanCalendarOracle", "AladhanPrayerTimes"]
