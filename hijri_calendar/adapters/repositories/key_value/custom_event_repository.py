"""Note repositories stored as one list per collection in the key-value store."""

from __future__ import annotations

import uuid
from typing import Generic
from typing import List
from typing import Type
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError

from hijri_calendar import LOGGER
from hijri_calendar.entities.custom_event import CustomEvent
from hijri_calendar.entities.custom_event import CustomEventDraft
from hijri_calendar.entities.custom_event import CustomHijriEvent
from hijri_calendar.entities.custom_event import CustomHijriEventDraft
from hijri_calendar.use_cases.interfaces.custom_event_repository_interface import (
    CustomEventRepositoryInterface,
    CustomHijriEventRepositoryInterface,
)
from hijri_calendar.use_cases.interfaces.key_value_store_interface import KeyValueStoreInterface
from hijri_calendar.utils.exceptions import EventNotFound

CUSTOM_EVENTS_KEY = "custom_events"
CUSTOM_HIJRI_EVENTS_KEY = "custom_hijri_events"

EventT = TypeVar("EventT", bound=BaseModel)
DraftT = TypeVar("DraftT", bound=BaseModel)


class _KeyValueEventCollection(Generic[EventT, DraftT]):
    key: str
    model: Type[EventT]

    def __init__(self, store: KeyValueStoreInterface):
        self.store = store

    def list_events(self) -> List[EventT]:
        raw = self.store.get(self.key) or []
        events = []
        for item in raw:
            try:
                events.append(self.model.model_validate(item))
            except ValidationError as e:
                LOGGER.warning(f"Skipping unreadable entry in {self.key}: {e}")
        return events

    def _save(self, events: List[EventT]) -> None:
        self.store.set(self.key, [event.model_dump(mode="json") for event in events])

    def add_event(self, draft: DraftT) -> EventT:
        event = self.model(id=uuid.uuid4().hex, **draft.model_dump())
        events = self.list_events()
        events.append(event)
        self._save(events)
        LOGGER.info(f"Added {self.key} entry {event.id}")
        return event

    def update_event(self, event_id: str, draft: DraftT) -> EventT:
        events = self.list_events()
        for index, existing in enumerate(events):
            if existing.id == event_id:
                events[index] = self.model(id=event_id, **draft.model_dump())
                self._save(events)
                return events[index]
        raise EventNotFound(f"No entry {event_id} in {self.key}")

    def delete_event(self, event_id: str) -> None:
        events = self.list_events()
        remaining = [event for event in events if event.id != event_id]
        if len(remaining) == len(events):
            raise EventNotFound(f"No entry {event_id} in {self.key}")
        self._save(remaining)
        LOGGER.info(f"Deleted {self.key} entry {event_id}")


class CustomEventRepository(
    _KeyValueEventCollection[CustomEvent, CustomEventDraft], CustomEventRepositoryInterface
):
    key = CUSTOM_EVENTS_KEY
    model = CustomEvent


class CustomHijriEventRepository(
    _KeyValueEventCollection[CustomHijriEvent, CustomHijriEventDraft],
    CustomHijriEventRepositoryInterface,
):
    key = CUSTOM_HIJRI_EVENTS_KEY
    model = CustomHijriEvent
