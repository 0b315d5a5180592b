"""Exception taxonomy for the Hijri calendar service."""

from typing import Any, Dict, Optional, Union

from fastapi import HTTPException, status


class HijriCalendarException(Exception):
    """Base exception for calendar, oracle and persistence failures.

    Attributes:
        message: Structured error description
        status_code: HTTP status code the API layer should answer with
        headers: Optional HTTP headers
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: Union[str, Dict[str, Any]],
        status_code: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: A plain string or a dictionary with error details
            status_code: Overrides the class-level HTTP status code
            headers: Optional HTTP headers
        """
        if isinstance(message, str):
            message = {"error": message}
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.headers = headers
        super().__init__(self.message)

    def __str__(self) -> str:
        return str(self.message.get("error", self.message))


class OracleUnavailable(HijriCalendarException):
    """The calendrical service failed transiently and retries are exhausted."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class OracleDataInvalid(HijriCalendarException):
    """The calendrical service answered, but with an empty or malformed payload."""

    status_code = status.HTTP_502_BAD_GATEWAY


class InvalidHijriDate(HijriCalendarException):
    """The calendrical service rejected a (day, month, year) Hijri triple."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class HolidayDataUnavailable(HijriCalendarException):
    """National holiday lookup failed; callers treat this as no holidays."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class PrayerTimesUnavailable(HijriCalendarException):
    """Prayer timings could not be retrieved."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class EventNotFound(HijriCalendarException):
    """A note with the requested id does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class StorageCorrupt(HijriCalendarException):
    """The persisted document cannot be read; writes are refused so it is not overwritten."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class CustomHTTPException(HTTPException):
    """HTTP exception built from a :class:`HijriCalendarException`."""

    def __init__(
        self,
        status_code: int,
        message: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.message = message
        super().__init__(status_code=status_code, detail=message, headers=headers)

    @classmethod
    def from_exception(cls, exc: HijriCalendarException) -> "CustomHTTPException":
        return cls(status_code=exc.status_code, message=exc.message, headers=exc.headers)
