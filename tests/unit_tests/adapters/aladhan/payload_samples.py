"""Al-Adhan response fragments shaped like the live API."""


def day_payload(
    gregorian="01-03-2025",
    weekday="Saturday",
    hijri="01-09-1446",
    hijri_weekday="Al Sabt",
    holidays=None,
    month_length=29,
):
    g_day, g_month, g_year = gregorian.split("-")
    h_day, h_month, h_year = hijri.split("-")
    return {
        "gregorian": {
            "date": gregorian,
            "day": g_day,
            "weekday": {"en": weekday},
            "month": {"number": int(g_month), "en": "March"},
            "year": g_year,
        },
        "hijri": {
            "date": hijri,
            "day": h_day,
            "weekday": {"en": hijri_weekday, "ar": "السبت"},
            "month": {"number": int(h_month), "en": "Ramaḍān", "days": month_length},
            "year": h_year,
            "holidays": holidays or [],
        },
    }
