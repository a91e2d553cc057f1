import typing as tp

from textual import on
from textual.app import App, ComposeResult, ScreenStackError
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Footer, Header, Static, ContentSwitcher

from .shared import Lap, LapKind
from .stopwatch import Stopwatch
from .clock_system import TextualTicker
from .clock_face_ascii import ClockFace
from .formatting import formatDuration

LAP_CLASSES = {
    LapKind.REGULAR:  'lap-regular',
    LapKind.SHORTEST: 'lap-shortest',
    LapKind.LONGEST:  'lap-longest',
}

class LapRow(Horizontal):
    def __init__(self, *args, **kw) -> None:
        super().__init__(*args, **kw)

        self.sLabel = Static('', classes='lap-label')
        self.sDuration = Static('', classes='lap-duration')
        self.shown: tuple[int, float, LapKind] | None = None

    def compose(self) -> ComposeResult:
        yield self.sLabel
        yield self.sDuration

    def setLap(self, number: int, lap: Lap) -> None:
        key = (number, lap.duration, lap.kind)
        if key == self.shown:
            return
        self.shown = key
        self.sLabel.update(f'Lap {number}')
        self.sDuration.update(formatDuration(lap.duration))
        for kind, cls in LAP_CLASSES.items():
            self.set_class(kind is lap.kind, cls)

class StopwatchUI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("space", "toggle_running", "Start/Stop", priority=True),
        Binding("l", "lap", "Lap"),
        Binding("r", "reset", "Reset"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        stopwatch: Stopwatch | None = None,
        tick_interval: float = 0.01,  # seconds
    ) -> None:
        '''
        An injected `stopwatch` must notify on this app's thread.
        '''
        super().__init__()

        if stopwatch is None:
            stopwatch = Stopwatch(
                ticker=TextualTicker(self), tick_interval=tick_interval,
            )
        self.stopwatch = stopwatch
        self.unsubscribe = self.stopwatch.subscribe(lambda _: self.myUpdate())
        self.lap_rows: list[LapRow] = []

        self.title = "Stopwatch"

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        yield ClockFace(id="clock-face")
        yield Static(formatDuration(0.0), id="total-display")
        with Horizontal(id="controls"):
            with ContentSwitcher(id="left-switcher", initial="reset-btn"):
                yield Button("Lap", id="lap-btn")
                yield Button("Reset", id="reset-btn")
            yield Static('', id="controls-gap")
            with ContentSwitcher(id="right-switcher", initial="start-btn"):
                yield Button("Start", id="start-btn", variant="success")
                yield Button("Stop", id="stop-btn", variant="error")
        yield VerticalScroll(id="lap-list")
        yield Footer(compact=True)

    @on(Button.Pressed, '#start-btn')
    def action_start(self) -> None:
        self.stopwatch.start()

    @on(Button.Pressed, '#stop-btn')
    def action_stop(self) -> None:
        self.stopwatch.stop()

    @on(Button.Pressed, '#lap-btn')
    def action_lap(self) -> None:
        self.stopwatch.lap()

    @on(Button.Pressed, '#reset-btn')
    def action_reset(self) -> None:
        self.stopwatch.reset()

    def action_toggle_running(self) -> None:
        if self.stopwatch.isRunning():
            self.stopwatch.stop()
        else:
            self.stopwatch.start()

    def on_mount(self) -> None:
        self.myUpdate()
        self.query_one('#start-btn', Button).focus()

    def myUpdate(self) -> None:
        try:
            self.screen
        except ScreenStackError:
            return
        state = self.stopwatch.state
        total = state.totalTime()
        laps = state.laps()
        running = state.isRunning()

        clockFace: ClockFace = self.query_one('#clock-face', ClockFace)
        clockFace.total_time = total
        clockFace.lap_time = laps[-1].duration if laps else None
        sTotal: Static = self.query_one('#total-display', Static)
        sTotal.update(formatDuration(total))

        left: ContentSwitcher = self.query_one('#left-switcher', ContentSwitcher)
        left.current = 'lap-btn' if running else 'reset-btn'
        right: ContentSwitcher = self.query_one('#right-switcher', ContentSwitcher)
        right.current = 'stop-btn' if running else 'start-btn'
        focused = self.focused
        if isinstance(focused, Button) and not focused.display:
            switcher = right if focused.id in ('start-btn', 'stop-btn') else left
            target = switcher.current
            if target is not None:
                self.query_one('#' + target, Button).focus()

        self.updateLapList(laps)

    def updateLapList(self, laps: tp.Sequence[Lap]) -> None:
        lapList: VerticalScroll = self.query_one('#lap-list', VerticalScroll)
        while len(self.lap_rows) > len(laps):
            self.lap_rows.pop().remove()
        while len(self.lap_rows) < len(laps):
            row = LapRow(classes='lap-row')
            self.lap_rows.append(row)
            lapList.mount(row)
        # newest first
        for row, (i, lap) in zip(
            self.lap_rows, reversed(list(enumerate(laps))),
        ):
            row.setLap(i + 1, lap)

    def on_unmount(self) -> None:
        self.unsubscribe()
        self.stopwatch.close()

    def exit(self, result=None, return_code: int = 0, message=None) -> None:
        self.stopwatch.close()
        return super().exit(result, return_code, message)
