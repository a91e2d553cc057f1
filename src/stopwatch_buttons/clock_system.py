import typing as tp
import time
import threading
import logging

from textual.app import App
from textual.timer import Timer

from .clock_interface import ClockInterface, TickerInterface, TickHandle

log = logging.getLogger(__name__)

class SystemClock(ClockInterface):
    def now(self) -> float:
        return time.monotonic()

class ThreadTickHandle(TickHandle):
    def __init__(
        self, interval: float, callback: tp.Callable[[], None],
    ) -> None:
        self.interval = interval
        self.callback = callback
        self.cancelled = threading.Event()
        self.thread = threading.Thread(
            target=self.loop, name='stopwatch-ticker', daemon=True,
        )

    def loop(self) -> None:
        while not self.cancelled.wait(self.interval):
            try:
                self.callback()
            except Exception:
                log.exception('Tick callback failed. Ticker stops.')
                return

    def cancel(self) -> None:
        self.cancelled.set()
        if threading.current_thread() is not self.thread:
            # waits out a callback already in flight
            self.thread.join()

class ThreadTicker(TickerInterface):
    '''
    One daemon thread per handle.
    Callbacks run off the caller's thread, so whatever they touch
    must be locked.
    '''
    def schedule(
        self, interval: float, callback: tp.Callable[[], None],
    ) -> ThreadTickHandle:
        handle = ThreadTickHandle(interval, callback)
        handle.thread.start()
        return handle

class TextualTickHandle(TickHandle):
    def __init__(self, timer: Timer) -> None:
        self.timer = timer

    def cancel(self) -> None:
        self.timer.stop()

class TextualTicker(TickerInterface):
    '''
    Ticks on the app's event loop, same as rendering.
    '''
    def __init__(self, app: App) -> None:
        self.app = app

    def schedule(
        self, interval: float, callback: tp.Callable[[], None],
    ) -> TickHandle:
        return TextualTickHandle(self.app.set_interval(interval, callback))
