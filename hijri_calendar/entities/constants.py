from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple


class HijriMonth(Enum):
    """Hijri month numbers."""
    MUHARRAM = 1
    SAFAR = 2
    RABI_AL_AWWAL = 3
    RABI_AL_AKHIR = 4
    JUMADA_AL_ULA = 5
    JUMADA_AL_AKHIRAH = 6
    RAJAB = 7
    SHABAN = 8
    RAMADAN = 9
    SHAWWAL = 10
    DHU_AL_QADAH = 11
    DHU_AL_HIJJAH = 12


class PrayerName(Enum):
    """Prayer and solar event names in the timings payload."""
    IMSAK = "Imsak"
    FAJR = "Fajr"
    SUNRISE = "Sunrise"
    DHUHR = "Dhuhr"
    ASR = "Asr"
    SUNSET = "Sunset"
    MAGHRIB = "Maghrib"
    ISHA = "Isha"
    MIDNIGHT = "Midnight"


# Order used to find the next prayer of the day
NEXT_PRAYER_ORDER: List[PrayerName] = [
    PrayerName.FAJR,
    PrayerName.SUNRISE,
    PrayerName.DHUHR,
    PrayerName.ASR,
    PrayerName.MAGHRIB,
    PrayerName.ISHA,
]

FIVE_DAILY_PRAYERS: List[PrayerName] = [
    PrayerName.FAJR,
    PrayerName.DHUHR,
    PrayerName.ASR,
    PrayerName.MAGHRIB,
    PrayerName.ISHA,
]

# Day ranges are inclusive (first, last)
AYYAMUL_BIDH_DAYS: Tuple[int, int] = (13, 15)
TASHREEQ_DAYS: Tuple[int, int] = (11, 13)
EARLY_DHU_AL_HIJJAH_DAYS: Tuple[int, int] = (1, 8)
SHABAN_FAST_DAYS: Tuple[int, int] = (1, 12)

# The calendar highlight and the day-detail helper disagree on the Shawwal
# fasting window. Both are kept until product owners settle it.
SHAWWAL_CLASSIFIER_DAYS: Tuple[int, int] = (2, 7)
SHAWWAL_DETAIL_DAYS: Tuple[int, int] = (3, 8)

# The day-detail helper also counts the 11th of Muharram as Ashura.
ASHURA_DETAIL_DAYS: Tuple[int, int] = (10, 11)

# (month, day) of the third day of Tashreeq, inside the Ayyamul Bidh range
TASHREEQ_THIRD_DAY: Tuple[int, int] = (HijriMonth.DHU_AL_HIJJAH.value, 13)

TASHREEQ_NO_FAST_MESSAGE = "Day of Tashreeq: fasting is discouraged"


class ObservanceLabel(Enum):
    """Display names of the observance rules."""
    HIJRI_NEW_YEAR = "Hijri New Year"
    EID_AL_FITR = "Eid al-Fitr"
    EID_AL_ADHA = "Eid al-Adha"
    RAMADAN = "Ramadan Fast"
    AYYAMUL_BIDH = "Ayyamul Bidh Fast"
    ARAFAH = "Arafah Fast"
    TASUA = "Tasu'a Fast"
    ASHURA = "Ashura Fast"
    SHAWWAL = "Shawwal Fast"
    EARLY_DHU_AL_HIJJAH = "Early Dhu al-Hijjah Fast"
    SHABAN = "Sha'ban Fast"
    MONDAY_THURSDAY = "Monday-Thursday Fast"


class InfoKey(Enum):
    """Stable identifiers for long-form observance descriptions."""
    HIJRI_NEW_YEAR = "hari-raya-tahun-baru"
    EID_AL_FITR = "hari-raya-idul-fitri"
    EID_AL_ADHA = "hari-raya-idul-adha"
    RAMADAN = "puasa-ramadhan"
    AYYAMUL_BIDH = "puasa-ayyamul-bidh"
    ARAFAH = "puasa-arafah"
    TASUA = "puasa-tasua"
    ASHURA = "puasa-asyura"
    SHAWWAL = "puasa-syawal"
    EARLY_DHU_AL_HIJJAH = "puasa-awal-dzulhijjah"
    SHABAN = "puasa-syaban"
    MONDAY_THURSDAY = "puasa-senin-kamis"


class FastingNotificationKey(Enum):
    """Toggles in the sunnah fasting notification settings."""
    MONDAY_THURSDAY = "monday_thursday"
    AYYAMUL_BIDH = "ayyamul_bidh"
    ARAFAH = "arafah"
    ASHURA = "ashura"
    SHAWWAL = "shawwal"


class ClockAlarm(Enum):
    """Fixed clock alarms and their default times."""
    TIDUR = "tidur"
    TAHAJUD = "tahajud"
    SAHUR = "sahur"
    DHUHA = "dhuha"
    JUMAT = "jumat"


DEFAULT_ALARM_TIMES: Dict[ClockAlarm, str] = {
    ClockAlarm.TIDUR: "22:05",
    ClockAlarm.TAHAJUD: "02:34",
    ClockAlarm.SAHUR: "03:33",
    ClockAlarm.DHUHA: "09:45",
    ClockAlarm.JUMAT: "11:15",
}

ALARM_MESSAGES: Dict[ClockAlarm, str] = {
    ClockAlarm.TIDUR: "Time to rest. Recite the evening remembrance before sleeping.",
    ClockAlarm.TAHAJUD: "Reminder for Qiyamullail (night prayer).",
    ClockAlarm.SAHUR: "Reminder for suhoor time today.",
    ClockAlarm.DHUHA: "Reminder for Dhuha prayer today.",
    ClockAlarm.JUMAT: "Friday prayer is approaching. Let's prepare early.",
}

PRAYER_ALARM_MESSAGE = "{prayer} time is approaching. Let's prepare early."
ADHAN_MESSAGE = "It is time for {prayer}."
DEFAULT_FASTING_NOTIFICATION_TIME = "17:00"

# Al-Adhan calculation method ids offered to the user
PRAYER_METHODS: Dict[int, str] = {
    20: "Kemenag (Indonesia)",
    3: "Muslim World League",
    2: "ISNA (North America)",
    4: "Umm Al-Qura, Makkah",
    5: "Egyptian General Authority",
    1: "University of Islamic Sciences, Karachi",
    8: "Gulf Region",
    10: "Kuwait",
    12: "Qatar",
    15: "Majlis Ugama Islam Singapura",
}
