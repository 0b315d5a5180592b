from hijri_calendar.adapters.nager.nager_holiday_provider import NagerHolidayProvider

__all__ = ["NagerHolidayProvider"]
