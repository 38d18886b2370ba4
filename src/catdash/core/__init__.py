"""Core framework components for CATDASH."""

from .state import GamePhase, PhaseMachine
from .events import EventBus, Event, EventType

__all__ = ["GamePhase", "PhaseMachine", "EventBus", "Event", "EventType"]
