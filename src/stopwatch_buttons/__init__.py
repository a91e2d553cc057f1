from .UI import StopwatchUI
from .stopwatch import Stopwatch
from .shared import StopwatchState, Lap, LapKind, classifyLaps
from .clock_system import SystemClock, ThreadTicker, TextualTicker
from .clock_dummy import ManualClock, ManualTicker
from .formatting import formatDuration, pointerAngle

__all__ = [
    "StopwatchUI", "Stopwatch", "StopwatchState", "Lap", "LapKind", 
    "classifyLaps", "SystemClock", "ThreadTicker", "TextualTicker", 
    "ManualClock", "ManualTicker", "formatDuration", "pointerAngle", 
]
