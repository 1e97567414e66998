"""
Place Value Showdown Host Layer.

Timer scheduling, match events and the controller a UI drives.
"""

from showdown.host.controller import MatchController, MatchTimings
from showdown.host.events import EventPayload, MatchEvent, classify_transition
from showdown.host.scheduler import TimerScheduler

__all__ = [
    "EventPayload",
    "MatchController",
    "MatchEvent",
    "MatchTimings",
    "TimerScheduler",
    "classify_transition",
]
