from __future__ import annotations

import typing as tp
from enum import Enum

from pydantic import BaseModel, ConfigDict

class LapKind(Enum):
    REGULAR = 'regular'
    SHORTEST = 'shortest'
    LONGEST = 'longest'

class Lap(BaseModel):
    duration: float     # seconds
    kind: LapKind

    model_config = ConfigDict(
        frozen=True,
    )

def classifyLaps(durations: tp.Sequence[float]) -> tuple[Lap, ...]:
    '''
    Global, from scratch. Ties at an extreme are all marked.
    If every duration is equal (incl. a single lap), all are regular.
    '''
    if not durations:
        return ()
    shortest = min(durations)
    longest = max(durations)
    if shortest == longest:
        return tuple(Lap(duration=d, kind=LapKind.REGULAR) for d in durations)
    def kindOf(d: float) -> LapKind:
        if d == shortest:
            return LapKind.SHORTEST
        if d == longest:
            return LapKind.LONGEST
        return LapKind.REGULAR
    return tuple(Lap(duration=d, kind=kindOf(d)) for d in durations)

class StopwatchState(BaseModel):
    absolute_start_time: float | None = None
    current_time: float = 0.0
    additional_time: float = 0.0
    last_lap_end: float = 0.0
    completed_laps: tuple[Lap, ...] = ()

    model_config = ConfigDict(
        frozen=True,
    )

    def isRunning(self) -> bool:
        return self.absolute_start_time is not None

    def totalTime(self) -> float:
        if self.absolute_start_time is None:
            return self.additional_time
        return max(
            0.0,
            self.additional_time + self.current_time - self.absolute_start_time,
        )

    def currentLapTime(self) -> float:
        return self.totalTime() - self.last_lap_end

    def laps(self) -> tuple[Lap, ...]:
        '''
        Completed laps plus the one in progress.
        Empty before anything has been timed.
        '''
        if self.totalTime() <= 0.0:
            return ()
        return (*self.completed_laps, Lap(
            duration=self.currentLapTime(), kind=LapKind.REGULAR,
        ))

    def started(self, now: float) -> StopwatchState:
        if self.isRunning():
            return self
        return self.model_copy(update=dict(
            current_time=now,
            absolute_start_time=now,
        ))

    def ticked(self, now: float) -> StopwatchState:
        if not self.isRunning():
            return self
        # A clock going backwards must not shrink the total.
        return self.model_copy(update=dict(
            current_time=max(now, self.current_time),
        ))

    def stopped(self) -> StopwatchState:
        if not self.isRunning():
            return self
        return self.model_copy(update=dict(
            additional_time=self.totalTime(),
            absolute_start_time=None,
        ))

    def lapped(self) -> StopwatchState:
        total = self.totalTime()
        if total <= 0.0:
            return self
        durations = [
            *(lap.duration for lap in self.completed_laps),
            total - self.last_lap_end,
        ]
        return self.model_copy(update=dict(
            completed_laps=classifyLaps(durations),
            last_lap_end=total,
        ))
