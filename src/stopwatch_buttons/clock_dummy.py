import typing as tp

from .clock_interface import ClockInterface, TickerInterface, TickHandle

class ManualClock(ClockInterface):
    def __init__(self, start: float = 0.0) -> None:
        self.t = start

    def now(self) -> float:
        return self.t

    def advance(self, dt: float) -> float:
        self.t += dt
        return self.t

    def set(self, t: float) -> None:
        self.t = t

class ManualTickHandle(TickHandle):
    def __init__(self, callback: tp.Callable[[], None]) -> None:
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

class ManualTicker(TickerInterface):
    '''
    Fires only when told to.
    '''
    def __init__(self) -> None:
        self.handles: list[ManualTickHandle] = []
        self.interval: float | None = None

    def schedule(
        self, interval: float, callback: tp.Callable[[], None], 
    ) -> TickHandle:
        self.interval = interval
        handle = ManualTickHandle(callback)
        self.handles.append(handle)
        return handle

    def active(self) -> list[ManualTickHandle]:
        return [h for h in self.handles if not h.cancelled]

    def fire(self, n: int = 1) -> None:
        for _ in range(n):
            for handle in self.active():
                handle.callback()
