'''
Pure text and angle helpers for durations. No shared formatter state.
'''

import math

SECONDS_PER_REVOLUTION = 60

def formatDuration(seconds: float) -> str:
    '''
    `MM:SS.hh`. Minutes are not wrapped into hours.  
    Hundredths are truncated, so the display never runs ahead.  
    '''
    if not seconds > 0.0:   # also catches NaN
        seconds = 0.0
    centi = math.floor(seconds * 100 + 1e-6)
    whole, hundredths = divmod(centi, 100)
    minutes, secs = divmod(whole, 60)
    return f'{minutes:02d}:{secs:02d}.{hundredths:02d}'

def pointerAngle(seconds: float) -> float:
    '''
    Degrees clockwise from 12 o'clock. One revolution per minute.
    '''
    return (seconds * 360 / SECONDS_PER_REVOLUTION) % 360
