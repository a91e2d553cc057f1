from stopwatch_buttons.shared import StopwatchState, Lap, LapKind, classifyLaps

def durations(laps):
    return [lap.duration for lap in laps]

def kinds(laps):
    return [lap.kind for lap in laps]

def test_fresh_state_is_stopped_and_empty():
    s = StopwatchState()
    assert not s.isRunning()
    assert s.totalTime() == 0.0
    assert s.laps() == ()

def test_pause_resume_does_not_double_count():
    s = StopwatchState().started(100.0).ticked(105.0).stopped()
    assert s.totalTime() == 5.0
    s = s.started(200.0).ticked(203.0)
    assert s.totalTime() == 8.0
    assert s.stopped().totalTime() == 8.0

def test_total_time_frozen_while_stopped():
    s = StopwatchState().started(0.0).ticked(4.0).stopped()
    assert s.ticked(50.0).totalTime() == 4.0

def test_operations_return_new_state():
    s = StopwatchState()
    running = s.started(1.0)
    assert running is not s
    assert not s.isRunning()
    assert running.isRunning()

def test_double_start_keeps_segment():
    s = StopwatchState().started(0.0).ticked(3.0)
    assert s.started(10.0) is s
    assert s.started(10.0).totalTime() == 3.0

def test_stop_while_stopped_is_noop():
    s = StopwatchState()
    assert s.stopped() is s

def test_backwards_tick_never_shrinks_total():
    s = StopwatchState().started(10.0).ticked(15.0).ticked(12.0)
    assert s.totalTime() == 5.0

def test_total_time_non_negative_for_monotonic_sequences():
    s = StopwatchState()
    t = 0.0
    for step in range(20):
        if step % 3 == 0:
            s = s.started(t)
        t += step * 0.5
        s = s.ticked(t)
        assert s.totalTime() >= 0.0
        if step % 4 == 0:
            s = s.stopped()
        assert s.totalTime() >= 0.0

def test_lap_at_zero_time_is_noop():
    s = StopwatchState().started(0.0)
    assert s.lapped() is s
    assert s.laps() == ()

def test_laps_include_current_lap():
    s = StopwatchState().started(0.0).ticked(10.0).lapped().ticked(13.0)
    laps = s.laps()
    assert len(laps) == len(s.completed_laps) + 1
    assert laps[-1] == Lap(duration=3.0, kind=LapKind.REGULAR)

def test_end_to_end_classification():
    s = StopwatchState().started(0.0).ticked(10.0).lapped()
    assert s.completed_laps == (Lap(duration=10.0, kind=LapKind.REGULAR),)
    s = s.ticked(25.0).lapped()
    assert s.completed_laps == (
        Lap(duration=10.0, kind=LapKind.SHORTEST),
        Lap(duration=15.0, kind=LapKind.LONGEST),
    )
    s = s.stopped()
    assert s.totalTime() == 25.0

def test_new_lap_can_take_over_an_extreme():
    s = StopwatchState().started(0.0)
    for t in (10.0, 25.0, 27.0):
        s = s.ticked(t).lapped()
    assert durations(s.completed_laps) == [10.0, 15.0, 2.0]
    assert kinds(s.completed_laps) == [
        LapKind.REGULAR, LapKind.LONGEST, LapKind.SHORTEST,
    ]

def test_lap_while_stopped():
    s = StopwatchState().started(0.0).ticked(6.0).stopped().lapped()
    assert durations(s.completed_laps) == [6.0]
    s = s.lapped()
    assert durations(s.completed_laps) == [6.0, 0.0]
    assert kinds(s.completed_laps) == [LapKind.LONGEST, LapKind.SHORTEST]

def test_classify_ties_at_extremes():
    assert kinds(classifyLaps([5, 5, 10])) == [
        LapKind.SHORTEST, LapKind.SHORTEST, LapKind.LONGEST,
    ]

def test_classify_all_equal():
    assert kinds(classifyLaps([7, 7])) == [LapKind.REGULAR, LapKind.REGULAR]

def test_classify_single_and_empty():
    assert kinds(classifyLaps([3])) == [LapKind.REGULAR]
    assert classifyLaps([]) == ()

def test_classify_middle_is_regular():
    assert kinds(classifyLaps([1, 2, 3])) == [
        LapKind.SHORTEST, LapKind.REGULAR, LapKind.LONGEST,
    ]
