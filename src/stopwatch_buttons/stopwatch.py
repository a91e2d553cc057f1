from __future__ import annotations

import typing as tp
import threading
import weakref
import logging

from .shared import StopwatchState, Lap
from .clock_interface import ClockInterface, TickerInterface, TickHandle
from .clock_system import SystemClock, ThreadTicker

log = logging.getLogger(__name__)

Observer = tp.Callable[['Stopwatch'], None]

class Stopwatch:
    def __init__(
        self,
        clock: ClockInterface | None = None,
        ticker: TickerInterface | None = None,
        tick_interval: float = 0.01,    # seconds
    ) -> None:
        '''
        `clock` defaults to the monotonic system clock.
        `ticker` defaults to a background thread per run.
        '''
        if clock is None:
            clock = SystemClock()
        if ticker is None:
            ticker = ThreadTicker()
        self.clock = clock
        self.ticker = ticker
        self.tick_interval = tick_interval

        self.lock = threading.RLock()
        self.__state = StopwatchState()
        self.__handle: TickHandle | None = None
        self.__generation = 0
        self.__observers: list[Observer] = []

    @property
    def state(self) -> StopwatchState:
        with self.lock:
            return self.__state

    def totalTime(self) -> float:
        return self.state.totalTime()

    def isRunning(self) -> bool:
        return self.state.isRunning()

    def laps(self) -> tuple[Lap, ...]:
        return self.state.laps()

    def subscribe(self, observer: Observer) -> tp.Callable[[], None]:
        with self.lock:
            self.__observers.append(observer)
        def unsubscribe() -> None:
            with self.lock:
                if observer in self.__observers:
                    self.__observers.remove(observer)
        return unsubscribe

    def notify(self) -> None:
        with self.lock:
            observers = tuple(self.__observers)
        for observer in observers:
            try:
                observer(self)
            except Exception:
                log.exception(f'Observer {observer!r} failed.')

    def start(self) -> None:
        with self.lock:
            if self.__state.isRunning():
                log.debug('start() while running. Ignored.')
                return
            now = self.clock.now()
            generation = self.__generation + 1
            # Nothing changes unless scheduling succeeds.
            handle = self.ticker.schedule(
                self.tick_interval, self.weakTick(generation),
            )
            self.__generation = generation
            self.__handle = handle
            self.__state = self.__state.started(now)
            log.info(f'Started at {self.__state.additional_time:.2f} s.')
        self.notify()

    def weakTick(self, generation: int) -> tp.Callable[[], None]:
        '''
        The ticker must not keep the stopwatch alive, 
        or `__del__` would never release the handle.  
        '''
        onTick = weakref.WeakMethod(self.onTick)
        def callback() -> None:
            method = onTick()
            if method is not None:
                method(generation)
        return callback

    def onTick(self, generation: int) -> None:
        with self.lock:
            if generation != self.__generation:
                return  # from a cancelled handle
            applied = self.applyTick(self.clock.now())
        if applied:
            self.notify()

    def tick(self, now: float) -> None:
        with self.lock:
            applied = self.applyTick(now)
        if applied:
            self.notify()

    def applyTick(self, now: float) -> bool:
        if not self.__state.isRunning():
            log.debug('Stray tick while stopped. Ignored.')
            return False
        self.__state = self.__state.ticked(now)
        return True

    def stop(self) -> None:
        with self.lock:
            if not self.__state.isRunning():
                log.debug('stop() while stopped. Ignored.')
                return
            handle = self.detachHandle()
            self.__state = self.__state.stopped()
            log.info(f'Stopped at {self.__state.totalTime():.2f} s.')
        self.cancel(handle)
        self.notify()

    def lap(self) -> None:
        with self.lock:
            before = self.__state
            self.__state = before.lapped()
            if self.__state is before:
                log.debug('lap() at zero time. Ignored.')
                return
            log.info(
                f'Lap {len(self.__state.completed_laps)}: '
                f'{self.__state.completed_laps[-1].duration:.2f} s.'
            )
        self.notify()

    def reset(self) -> None:
        with self.lock:
            handle = self.detachHandle()
            self.__state = StopwatchState()
            log.info('Reset.')
        self.cancel(handle)
        self.notify()

    def detachHandle(self) -> TickHandle | None:
        with self.lock:
            self.__generation += 1
            handle, self.__handle = self.__handle, None
        return handle

    @staticmethod
    def cancel(handle: TickHandle | None) -> None:
        # Outside the lock: cancelling may wait for an in-flight tick.
        if handle is not None:
            handle.cancel()

    def close(self) -> None:
        '''
        Releases the tick handle. Elapsed time is frozen.
        '''
        with self.lock:
            if self.__state.isRunning():
                self.__state = self.__state.stopped()
            handle = self.detachHandle()
        self.cancel(handle)

    def __enter__(self) -> Stopwatch:
        return self

    def __exit__(self, *_) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except AttributeError:
            pass    # __init__ did not finish
