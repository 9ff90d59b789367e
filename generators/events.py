from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True, slots=True)
class GenerationEvent:
    """Progress notice sent at generator start/finish and at attempt boundaries."""

    stage: str
    message: str
    attempt: int = 0


EventSink = Optional[Callable[[GenerationEvent], None]]
CancelCheck = Optional[Callable[[], bool]]


def emit(sink: EventSink, stage: str, message: str, attempt: int = 0) -> None:
    if sink is not None:
        sink(GenerationEvent(stage, message, attempt))
