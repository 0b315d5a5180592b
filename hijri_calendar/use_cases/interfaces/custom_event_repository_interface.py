from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import List

from hijri_calendar.entities.custom_event import CustomEvent
from hijri_calendar.entities.custom_event import CustomEventDraft
from hijri_calendar.entities.custom_event import CustomHijriEvent
from hijri_calendar.entities.custom_event import CustomHijriEventDraft
from hijri_calendar.entities.user_settings import UserSettings


class CustomEventRepositoryInterface(ABC):
    """Gregorian-anchored notes."""

    @abstractmethod
    def list_events(self) -> List[CustomEvent]:
        pass

    @abstractmethod
    def add_event(self, draft: CustomEventDraft) -> CustomEvent:
        pass

    @abstractmethod
    def update_event(self, event_id: str, draft: CustomEventDraft) -> CustomEvent:
        """
        Raises:
            EventNotFound: no note has ``event_id``
        """
        pass

    @abstractmethod
    def delete_event(self, event_id: str) -> None:
        """
        Raises:
            EventNotFound: no note has ``event_id``
        """
        pass


class CustomHijriEventRepositoryInterface(ABC):
    """Hijri-anchored notes."""

    @abstractmethod
    def list_events(self) -> List[CustomHijriEvent]:
        pass

    @abstractmethod
    def add_event(self, draft: CustomHijriEventDraft) -> CustomHijriEvent:
        pass

    @abstractmethod
    def update_event(self, event_id: str, draft: CustomHijriEventDraft) -> CustomHijriEvent:
        pass

    @abstractmethod
    def delete_event(self, event_id: str) -> None:
        pass


class UserSettingsRepositoryInterface(ABC):
    """Stored user preferences."""

    @abstractmethod
    def load(self) -> UserSettings:
        pass

    @abstractmethod
    def save(self, settings: UserSettings) -> None:
        pass
