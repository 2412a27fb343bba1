from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal, Protocol

EventType = Literal[
    "DEALER_SHOWING",
    "DEALER_TOTAL",
    "PLAYER_TOTAL",
    "CARD_DEALT",
    "MONSTER_ENCOUNTERED",
    "DAMAGE_DEALT",
    "FLEE_ATTEMPTED",
    "CREATURE_DIED",
    "GOLD_LOOTED",
    "LEVEL_UP",
    "SESSION_ENDED",
]


@dataclass(frozen=True, slots=True)
class RenderEvent:
    type: EventType
    payload: dict[str, Any]
    ts: datetime

    @staticmethod
    def now(*, type: EventType, payload: dict[str, Any]) -> "RenderEvent":
        return RenderEvent(type=type, payload=payload, ts=datetime.now(timezone.utc))


class RenderSink(Protocol):
    def emit(self, event: RenderEvent) -> None:  # pragma: no cover
        ...


@dataclass(slots=True)
class EventLog:
    """Sink that keeps every event in emission order."""

    events: list[RenderEvent] = field(default_factory=list)

    def emit(self, event: RenderEvent) -> None:
        self.events.append(event)

    def types(self) -> list[EventType]:
        return [e.type for e in self.events]

    def of_type(self, type: EventType) -> list[RenderEvent]:
        return [e for e in self.events if e.type == type]


@dataclass(frozen=True, slots=True)
class FanOutSink:
    sinks: tuple[RenderSink, ...]

    def emit(self, event: RenderEvent) -> None:
        for sink in self.sinks:
            sink.emit(event)


def emit(sink: RenderSink, type: EventType, **payload: Any) -> RenderEvent:
    event = RenderEvent.now(type=type, payload=payload)
    sink.emit(event)
    return event
