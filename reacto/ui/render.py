"""Rich renderables for the configuration and active-session views."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from reacto.i18n import Language, translate
from reacto.session.state import SessionView

_PULSE_STYLE = "bold black on bright_white"
_PULSE_BORDER = "bright_white"
_IDLE_BORDER = "cyan"


def render_session(view: SessionView, language: Language) -> Panel:
    """Active-session panel. Drawn inverted while the visual pulse is on."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(justify="right")
    grid.add_column()
    grid.add_row(
        translate("timeRemaining", language),
        Text(view.remaining_formatted, style="bold"),
    )
    hint = Text(translate("stopHint", language), style="dim")
    pulse = view.is_pulse_active
    return Panel(
        Group(grid, Text(""), hint),
        title=f"[bold]{translate('trainingInProgress', language)}[/bold]",
        subtitle=f"[dim]{translate('stopTraining', language)}[/dim]",
        border_style=_PULSE_BORDER if pulse else _IDLE_BORDER,
        style=_PULSE_STYLE if pulse else "",
        padding=(1, 2),
    )


def render_config(
    duration_seconds: int,
    min_interval_seconds: int,
    max_interval_seconds: int,
    language: Language,
) -> Panel:
    """Summary of the parameters a session is about to use."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold green", min_width=24)
    table.add_column()
    table.add_row(translate("sessionDuration", language), str(duration_seconds))
    table.add_row(translate("minimumInterval", language), str(min_interval_seconds))
    table.add_row(translate("maximumInterval", language), str(max_interval_seconds))
    return Panel(
        table,
        title=f"[bold]{translate('trainingConfiguration', language)}[/bold]",
        border_style="blue",
        padding=(1, 0),
    )


def render_summary(view: SessionView, language: Language) -> Panel:
    """End-of-session panel: completed on timeout, stopped otherwise."""
    completed = view.remaining_seconds == 0
    key = "sessionComplete" if completed else "sessionStopped"
    return Panel(
        f"{translate('timeRemaining', language)} [bold]{view.remaining_formatted}[/bold]",
        title=f"[bold]{translate(key, language)}[/bold]",
        border_style="green" if completed else "yellow",
        padding=(1, 2),
    )
