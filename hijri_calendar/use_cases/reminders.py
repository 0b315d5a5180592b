"""Evaluate which reminders are due at a given minute.

The engine is polled by a ticker. Matching is done on the ``HH:MM`` of the
tick, so a ticker firing more than once a minute would see the same reminder
repeatedly; every key is therefore held back for ``refire_seconds`` after it
fires.
"""

from __future__ import annotations

from datetime import date
from datetime import datetime
from datetime import timedelta
from typing import Dict
from typing import Iterable
from typing import List
from typing import Optional

from hijri_calendar import LOGGER
from hijri_calendar.entities.calendar_day import CalendarDay
from hijri_calendar.entities.constants import (
    ADHAN_MESSAGE,
    ALARM_MESSAGES,
    FIVE_DAILY_PRAYERS,
    PRAYER_ALARM_MESSAGE,
)
from hijri_calendar.entities.custom_event import CustomEvent
from hijri_calendar.entities.custom_event import CustomHijriEvent
from hijri_calendar.entities.custom_event import ReminderPolicy
from hijri_calendar.entities.prayer import PrayerTimes
from hijri_calendar.entities.reminder import Reminder
from hijri_calendar.entities.reminder import ReminderKind
from hijri_calendar.entities.user_settings import UserSettings
from hijri_calendar.use_cases.calendar_assembly import CalendarAssembly
from hijri_calendar.use_cases.custom_event_matcher import matches_hijri
from hijri_calendar.use_cases.day_detail import fasting_info
from hijri_calendar.use_cases.interfaces.custom_event_repository_interface import (
    CustomEventRepositoryInterface,
    CustomHijriEventRepositoryInterface,
    UserSettingsRepositoryInterface,
)
from hijri_calendar.use_cases.prayer_schedule import PrayerSchedule
from hijri_calendar.utils.exceptions import HijriCalendarException
from hijri_calendar.utils.exceptions import PrayerTimesUnavailable

SUNNAH_FAST_MESSAGE = "Tomorrow is {label}. Prepare your intention and suhoor."


def hhmm(value: datetime) -> str:
    return value.strftime("%H:%M")


class ReminderEngine:
    def __init__(self, refire_seconds: int = 60, prayer_lead_minutes: int = 10):
        self.refire_seconds = refire_seconds
        self.prayer_lead = timedelta(minutes=prayer_lead_minutes)
        self._last_fired: Dict[str, datetime] = {}

    def _clock_alarms(self, now: datetime, settings: UserSettings) -> List[Reminder]:
        minute = hhmm(now)
        return [
            Reminder(
                key=f"alarm:{alarm.value}",
                kind=ReminderKind.ALARM,
                message=ALARM_MESSAGES[alarm],
                due_at=now,
            )
            for alarm, toggle in settings.alarms.items()
            if toggle.is_on and toggle.time == minute
        ]

    def _prayer_alarms(
        self, now: datetime, settings: UserSettings, timings: Optional[PrayerTimes]
    ) -> List[Reminder]:
        if timings is None:
            return []

        due = []
        minute = hhmm(now)
        if settings.five_daily_prayers_alarm:
            for prayer in FIVE_DAILY_PRAYERS:
                clock = timings.clock(prayer)
                if clock is None:
                    continue
                alarm_at = datetime.combine(now.date(), clock) - self.prayer_lead
                if hhmm(alarm_at) == minute:
                    due.append(
                        Reminder(
                            key=f"prayer:{prayer.value}",
                            kind=ReminderKind.PRAYER,
                            message=PRAYER_ALARM_MESSAGE.format(prayer=prayer.value),
                            due_at=now,
                        )
                    )

        for prayer, is_on in settings.adhan_alarms.items():
            if is_on and timings.timings.get(prayer) == minute:
                due.append(
                    Reminder(
                        key=f"adhan:{prayer.value}",
                        kind=ReminderKind.ADHAN,
                        message=ADHAN_MESSAGE.format(prayer=prayer.value),
                        due_at=now,
                    )
                )
        return due

    @staticmethod
    def _note_target(policy: ReminderPolicy, today: date) -> Optional[date]:
        if policy is ReminderPolicy.ON_DAY:
            return today
        if policy is ReminderPolicy.ONE_DAY_BEFORE:
            return today + timedelta(days=1)
        return None

    def _note_reminders(
        self,
        now: datetime,
        events: Iterable[CustomEvent],
        hijri_events: Iterable[CustomHijriEvent],
        today: Optional[CalendarDay],
        tomorrow: Optional[CalendarDay],
    ) -> List[Reminder]:
        minute = hhmm(now)
        due = []
        for event in events:
            target = self._note_target(event.reminder, now.date())
            if target is not None and event.reminder_time == minute and event.as_date() == target:
                due.append(
                    Reminder(
                        key=f"note:{event.id}", kind=ReminderKind.NOTE, message=event.text, due_at=now
                    )
                )

        for event in hijri_events:
            if event.reminder_time != minute:
                continue
            day = {ReminderPolicy.ON_DAY: today, ReminderPolicy.ONE_DAY_BEFORE: tomorrow}.get(
                event.reminder
            )
            if day is not None and matches_hijri(event, day):
                due.append(
                    Reminder(
                        key=f"hijri-note:{event.id}",
                        kind=ReminderKind.NOTE,
                        message=event.description or event.name,
                        due_at=now,
                    )
                )
        return due

    def _sunnah_reminders(
        self, now: datetime, settings: UserSettings, tomorrow: Optional[CalendarDay]
    ) -> List[Reminder]:
        if tomorrow is None:
            return []
        info = fasting_info(tomorrow)
        if not info.is_fasting or info.notification_key is None:
            return []
        toggle = settings.fasting_notification(info.notification_key)
        if not toggle.is_on or toggle.time != hhmm(now):
            return []
        return [
            Reminder(
                key=f"sunnah:{info.notification_key.value}:{tomorrow.gregorian.iso}",
                kind=ReminderKind.SUNNAH_FAST,
                message=SUNNAH_FAST_MESSAGE.format(label=info.label),
                due_at=now,
            )
        ]

    def _prune(self, now: datetime) -> None:
        self._last_fired = {
            key: fired
            for key, fired in self._last_fired.items()
            if (now - fired).total_seconds() <= self.refire_seconds
        }

    def _should_fire(self, key: str, now: datetime) -> bool:
        last = self._last_fired.get(key)
        if last is not None and (now - last).total_seconds() <= self.refire_seconds:
            return False
        self._last_fired[key] = now
        return True

    def due(
        self,
        now: datetime,
        settings: UserSettings,
        prayer_times: Optional[PrayerTimes] = None,
        events: Iterable[CustomEvent] = (),
        hijri_events: Iterable[CustomHijriEvent] = (),
        today: Optional[CalendarDay] = None,
        tomorrow: Optional[CalendarDay] = None,
    ) -> List[Reminder]:
        """Reminders to raise at ``now``.

        Args:
            now: the tick time, local
            settings: alarm and notification toggles
            prayer_times: today's timings, if known
            events: Gregorian notes
            hijri_events: Hijri notes
            today: the dual-dated day of ``now``, needed for Hijri notes
            tomorrow: the following day, needed for eve-of reminders
        """
        self._prune(now)
        candidates = (
            self._clock_alarms(now, settings)
            + self._prayer_alarms(now, settings, prayer_times)
            + self._note_reminders(now, events, hijri_events, today, tomorrow)
            + self._sunnah_reminders(now, settings, tomorrow)
        )
        fired = [reminder for reminder in candidates if self._should_fire(reminder.key, now)]
        for reminder in fired:
            LOGGER.info(f"Reminder due: {reminder.key}")
        return fired


class DueRemindersUseCase:
    """
    Gathers what the engine needs for one tick and asks it what is due.

    Missing prayer times or calendar days only silence the reminders that
    depend on them.
    """

    def __init__(
        self,
        engine: ReminderEngine,
        settings_repository: UserSettingsRepositoryInterface,
        event_repository: CustomEventRepositoryInterface,
        hijri_event_repository: CustomHijriEventRepositoryInterface,
        assembly: CalendarAssembly,
        prayer_schedule: PrayerSchedule,
    ):
        self.engine = engine
        self.settings_repository = settings_repository
        self.event_repository = event_repository
        self.hijri_event_repository = hijri_event_repository
        self.assembly = assembly
        self.prayer_schedule = prayer_schedule

    async def _day(self, value: date) -> Optional[CalendarDay]:
        try:
            return await self.assembly.find_day(value)
        except HijriCalendarException as e:
            LOGGER.warning(f"No calendar day for {value.isoformat()}: {e}")
            return None

    async def check(self, now: datetime) -> List[Reminder]:
        settings = self.settings_repository.load()
        try:
            prayer_times = await self.prayer_schedule.timings_for(settings, now.date())
        except PrayerTimesUnavailable as e:
            LOGGER.debug(f"Prayer reminders skipped: {e}")
            prayer_times = None

        return self.engine.due(
            now,
            settings,
            prayer_times=prayer_times,
            events=self.event_repository.list_events(),
            hijri_events=self.hijri_event_repository.list_events(),
            today=await self._day(now.date()),
            tomorrow=await self._day(now.date() + timedelta(days=1)),
        )
