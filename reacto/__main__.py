"""Entry point: python -m reacto."""

from __future__ import annotations

import asyncio
import logging
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from reacto.config import (
    AppConfig,
    deep_merge_config,
    read_config_data,
    write_config_data,
)
from reacto.errors import ConfigError, SessionParametersError
from reacto.form import validate_form
from reacto.i18n import Language, translate, window_title
from reacto.logging_config import set_log_level, setup_logging
from reacto.paths import ReactoPaths, resolve_paths
from reacto.session.params import SessionParameters
from reacto.settings import (
    load_language,
    load_last_parameters,
    save_language,
    save_last_parameters,
)

logger = logging.getLogger(__name__)

_console = Console()


# ---------------------------------------------------------------------------
# Config helpers
# ---------------------------------------------------------------------------


def load_config(paths: ReactoPaths | None = None) -> AppConfig:
    """Load, auto-create, and smart-merge the config.

    On first start the file is written from the Pydantic defaults. On every
    load it is deep-merged with the current defaults so that new fields are
    added without destroying user settings.
    """
    paths = paths or resolve_paths()
    config_path = paths.config_path

    if not config_path.exists():
        write_config_data(config_path, AppConfig().model_dump(mode="json"))
        logger.info("Created default config at %s", config_path)

    try:
        user_data = read_config_data(config_path)
    except ConfigError:
        logger.exception("Failed to parse config at %s", config_path)
        sys.exit(1)
    defaults = AppConfig().model_dump(mode="json")
    merged, changed = deep_merge_config(user_data, defaults)

    if changed:
        write_config_data(config_path, merged)
        logger.info("Extended config with new default fields")

    return AppConfig.model_validate(merged)


def _bootstrap(verbose: bool) -> tuple[ReactoPaths, AppConfig]:
    """Set up file logging and load the config."""
    paths = resolve_paths()
    if verbose:
        setup_logging(paths.logs_dir, level=logging.DEBUG, console=_console)
    else:
        setup_logging(paths.logs_dir)
    config = load_config(paths)
    if not verbose:
        set_log_level(config.log_level)
    return paths, config


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


def _run(params: SessionParameters, paths: ReactoPaths, config: AppConfig) -> None:
    """Show the parameters, run a session, print the summary."""
    from reacto.ui.render import render_config, render_summary
    from reacto.ui.runner import run_session

    language = load_language(config)
    _console.print()
    _console.print(
        render_config(
            params.duration_seconds,
            params.min_interval_seconds,
            params.max_interval_seconds,
            language,
        )
    )
    final = asyncio.run(run_session(params, config, paths, _console, language=language))
    _console.print(render_summary(final, language))
    _console.print()


def _cmd_start(verbose: bool) -> None:
    """Run a session with the last-used parameters, no prompts."""
    paths, config = _bootstrap(verbose)
    language = load_language(config)
    form = validate_form(*load_last_parameters(config))
    if not form.ok:
        for error in form.errors.values():
            _console.print(f"[bold red]{translate(error, language)}[/bold red]")
        _console.print("[dim]Run [bold]reacto[/bold] to configure the session.[/dim]")
        sys.exit(1)
    _run(form.to_parameters(), paths, config)


def _default_action(verbose: bool) -> None:
    """Configuration view, then the session."""
    from reacto.ui.wizard import ask_parameters

    paths, config = _bootstrap(verbose)
    language = load_language(config)
    _console.print()
    _console.print(
        Panel(
            f"[bold cyan]{window_title(language)}[/bold cyan]",
            border_style="cyan",
            padding=(0, 2),
        ),
    )
    try:
        params = ask_parameters(load_last_parameters(config), language)
    except SessionParametersError:
        logger.exception("Prompted parameters failed validation")
        sys.exit(1)
    if params is None:
        _console.print("\n[dim]Cancelled.[/dim]\n")
        return
    save_last_parameters(paths.config_path, params)
    _run(params, paths, config)


# ---------------------------------------------------------------------------
# Settings & status
# ---------------------------------------------------------------------------


def _cmd_lang(args: list[str], verbose: bool) -> None:
    """Set the language preference: ``reacto lang [fi|en]``."""
    paths, config = _bootstrap(verbose)
    current = load_language(config)
    code = _parse_lang_argument(args)
    requested: Language | None = None
    if code is not None:
        if code not in {lang.value for lang in Language}:
            _console.print(f"[bold red]Unknown language '{code}' (use fi or en)[/bold red]")
            sys.exit(1)
        requested = Language(code)
    if requested is None:
        from reacto.ui.wizard import ask_language

        requested = ask_language(current)
        if requested is None:
            return
    save_language(paths.config_path, requested)
    _console.print(
        f"[green]{translate('language', requested)}: "
        f"{translate('finnish' if requested is Language.FI else 'english', requested)}[/green]"
    )


def _parse_lang_argument(args: list[str]) -> str | None:
    """Extract the language code after 'lang' from CLI args."""
    found_lang = False
    for a in args:
        if a.startswith("-"):
            continue
        if not found_lang and a in ("lang", "language"):
            found_lang = True
            continue
        if found_lang:
            return a.lower()
    return None


def _cmd_status() -> None:
    """Print stored settings and paths."""
    paths = resolve_paths()
    _console.print()
    if not paths.config_path.exists():
        _console.print(
            Panel(
                "[bold yellow]No saved settings.[/bold yellow]\n\n"
                "Run [bold]reacto[/bold] to configure a session.",
                title="[bold]Status[/bold]",
                border_style="yellow",
                padding=(1, 2),
            ),
        )
        _console.print()
        return
    try:
        data = read_config_data(paths.config_path)
    except ConfigError as exc:
        _console.print(f"[bold red]{exc}[/bold red]")
        return

    merged, _ = deep_merge_config(data, AppConfig().model_dump(mode="json"))
    config = AppConfig.model_validate(merged)
    duration, min_interval, max_interval = load_last_parameters(config)
    lines = [
        f"Language:  [cyan]{load_language(config).value}[/cyan]",
        f"Duration:  [cyan]{duration}s[/cyan]",
        f"Interval:  [cyan]{min_interval}-{max_interval}s[/cyan]",
        f"Cue:       [cyan]{config.cue.player}[/cyan] pulse={config.cue.pulse_ms}ms",
        "",
        "[bold]Paths:[/bold]",
        f"  Home:    [cyan]{paths.reacto_home}[/cyan]",
        f"  Config:  [cyan]{paths.config_path}[/cyan]",
        f"  Logs:    [cyan]{paths.logs_dir}[/cyan]",
        f"  Sound:   [cyan]{paths.resolve_asset(config.cue.sound_asset)}[/cyan]",
    ]
    _console.print(
        Panel(
            "\n".join(lines),
            title="[bold]Status[/bold]",
            border_style="green",
            padding=(1, 2),
        ),
    )
    _console.print()


def _print_usage() -> None:
    """Print commands."""
    _console.print()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold green", min_width=20)
    table.add_column()
    table.add_row("reacto", "Configure and start a training session")
    table.add_row("reacto start", "Start a session with the last-used parameters")
    table.add_row("reacto lang [fi|en]", "Set the language")
    table.add_row("reacto status", "Show saved settings and paths")
    table.add_row("reacto help", "Show this message")
    table.add_row("-v, --verbose", "Verbose logging output")
    _console.print(
        Panel(table, title="[bold]Commands[/bold]", border_style="blue", padding=(1, 0)),
    )
    _console.print()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


_COMMANDS: dict[str, str] = {
    "help": "help",
    "start": "start",
    "lang": "lang",
    "language": "lang",
    "status": "status",
}


def main() -> None:
    """CLI entry point."""
    args = sys.argv[1:]
    commands = [a for a in args if not a.startswith("-")]
    verbose = "--verbose" in args or "-v" in args

    if "--help" in args or "-h" in args:
        commands.insert(0, "help")

    action = next((_COMMANDS[c] for c in commands if c in _COMMANDS), None)

    dispatch: dict[str, object] = {
        "help": _print_usage,
        "start": lambda: _cmd_start(verbose),
        "lang": lambda: _cmd_lang(args, verbose),
        "status": _cmd_status,
    }

    handler = dispatch.get(action) if action else None
    try:
        if handler is not None:
            handler()  # type: ignore[operator]
        else:
            _default_action(verbose)
    except KeyboardInterrupt:
        _console.print("\n[dim]Interrupted.[/dim]\n")


if __name__ == "__main__":
    main()
