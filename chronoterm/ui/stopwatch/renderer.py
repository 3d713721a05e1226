# chronoterm/ui/stopwatch/renderer.py
# Rendering components for the interactive stopwatch display (pure: snapshot in, renderables out)

from __future__ import annotations

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..theming.theme_engine import ChronoColors
from ...core.constants import TimerStatus, DEFAULT_MAX_VISIBLE_LAPS
from ...core.formatting import format_duration, format_delta
from ...core.timer import TimerSnapshot
from .big_digits import render_big, big_width
from .bindings import HELP_ENTRIES

TITLE = "chronoterm - High Precision Stopwatch"

# panel borders & padding eat this many columns around the time line
_PANEL_CHROME = 4


# * Status badge text & color for a snapshot
def status_label(snapshot: TimerSnapshot) -> tuple[str, str]:
    if snapshot.capped:
        return "CAP REACHED", ChronoColors.CAPPED
    if snapshot.status is TimerStatus.RUNNING:
        return "RUNNING", ChronoColors.RUNNING
    if snapshot.status is TimerStatus.PAUSED:
        return "PAUSED", ChronoColors.PAUSED
    return "STOPPED", ChronoColors.STOPPED


# titled section of the screen; borders follow the theme unless a status color is given
def _section(content: RenderableType, title: str, border: str | None = None) -> Panel:
    return Panel(
        content,
        title=f"[bold]{title}[/]",
        title_align="left",
        border_style=border or ChronoColors.ACCENT_SECONDARY,
        padding=(0, 1),
    )


class StopwatchRenderer:
    def __init__(
        self,
        width: int = 80,
        show_deltas: bool = True,
        big_digits: bool = False,
        max_visible_laps: int = DEFAULT_MAX_VISIBLE_LAPS,
    ):
        self.width = width
        self.show_deltas = show_deltas
        self.big_digits = big_digits
        self.max_visible_laps = max_visible_laps

    # ===== TIME DISPLAY =====

    def render_time(self, snapshot: TimerSnapshot) -> Text:
        time_str = format_duration(snapshot.elapsed_ms)
        if self.big_digits and big_width(time_str) <= self.width - _PANEL_CHROME:
            return Text("\n".join(render_big(time_str)), style=f"bold {ChronoColors.ACCENT_PRIMARY}")
        return Text(time_str, style=f"bold {ChronoColors.ACCENT_PRIMARY}")

    def render_status(self, snapshot: TimerSnapshot) -> Text:
        label, color = status_label(snapshot)
        text = Text()
        text.append("● ", style=color)
        text.append(label, style=f"bold {color}")
        laps = len(snapshot.laps)
        if laps:
            text.append(f"   {laps} lap{'s' if laps != 1 else ''}", style=ChronoColors.DIM)
        return text

    # ===== LAP DISPLAY =====

    # plain lap lines, most recent `max_visible_laps` only, in recording order
    def render_lap_lines(self, snapshot: TimerSnapshot) -> list[Text]:
        rows = snapshot.lap_rows
        if not rows:
            return [Text("No laps recorded", style=ChronoColors.DIM)]

        lines: list[Text] = []
        hidden = max(0, len(rows) - self.max_visible_laps)
        if hidden:
            lines.append(
                Text(
                    f"{hidden} earlier lap{'s' if hidden != 1 else ''} hidden",
                    style=ChronoColors.DIM,
                )
            )

        label_width = len(f"Lap {len(rows)}")
        for row in rows[hidden:]:
            line = Text()
            line.append(f"Lap {row.index}".ljust(label_width), style=ChronoColors.ACCENT_LIGHT)
            line.append("  ")
            line.append(format_duration(row.elapsed_ms), style="bold")
            if self.show_deltas:
                line.append("  ")
                line.append(format_delta(row.delta_ms), style=ChronoColors.ACCENT_MEDIUM)
            lines.append(line)
        return lines

    def render_laps(self, snapshot: TimerSnapshot) -> Table:
        table = Table.grid(padding=(0, 1))
        table.add_column()
        for line in self.render_lap_lines(snapshot):
            table.add_row(line)
        return table

    # ===== HELP DISPLAY =====

    def render_help(self) -> Text:
        text = Text()
        for i, (key_label, description) in enumerate(HELP_ENTRIES):
            if i:
                text.append(" | ", style=ChronoColors.DIM)
            text.append(key_label, style=f"bold {ChronoColors.ACCENT_DEEP}")
            text.append(f" {description}")
        return text

    # ===== FULL SCREEN =====

    def render_screen(self, snapshot: TimerSnapshot) -> RenderableType:
        time_block = Group(
            Align.center(self.render_time(snapshot)),
            Align.center(self.render_status(snapshot)),
        )
        return Group(
            Align.center(Text(TITLE, style=f"bold {ChronoColors.ACCENT_PRIMARY}")),
            _section(time_block, "Time", border=status_label(snapshot)[1]),
            _section(self.render_laps(snapshot), "Laps"),
            _section(self.render_help(), "Controls"),
        )


# * Build a renderer sized to the given console
def create_renderer_from_console(console, **kwargs) -> StopwatchRenderer:
    return StopwatchRenderer(width=console.size.width, **kwargs)
