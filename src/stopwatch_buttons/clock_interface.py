import typing as tp
from abc import ABC, abstractmethod

class ClockInterface(ABC):
    @abstractmethod
    def now(self) -> float:
        '''
        Seconds from an arbitrary epoch.  
        Only differences between two calls are meaningful.  
        '''
        raise NotImplementedError

class TickHandle(ABC):
    @abstractmethod
    def cancel(self) -> None:
        '''
        Must be idempotent.  
        After it returns, no callback for this handle is running or 
        will start, unless called from within that callback.  
        Do not call it while holding a lock the callback takes.  
        '''
        raise NotImplementedError

class TickerInterface(ABC):
    @abstractmethod
    def schedule(
        self, interval: float, callback: tp.Callable[[], None], 
    ) -> TickHandle:
        '''
        Invoke `callback` every `interval` seconds until the 
        returned handle is cancelled.  
        '''
        raise NotImplementedError
