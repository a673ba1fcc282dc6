import shutil
import sys

import click

from devmux.config import ResolvedConfig, StartupError, load_config
from devmux.constants import PROJECTS_DIRNAME, TMUX_BIN
from devmux.models import NavigationState, Selected
from devmux.services.directories import session_name_for, shorten_path
from devmux.services.tmux import LaunchError, launch, tmux_session_name


def _check_prerequisites() -> None:
    """Verify tmux is available, exit with a helpful message if not."""
    if shutil.which(TMUX_BIN):
        return
    click.echo("Missing required tool:\n", err=True)
    click.echo("  • tmux — install via: brew install tmux (macOS) or apt install tmux (Linux)", err=True)
    sys.exit(1)


def _load_config_or_exit() -> ResolvedConfig:
    try:
        return load_config()
    except StartupError as e:
        click.echo(str(e), err=True)
        raise SystemExit(1)


def _browse_and_launch(config: ResolvedConfig, state: NavigationState) -> None:
    # Lazy import: BrowserApp pulls in Textual, which is slow to load.
    from devmux.app import BrowserApp

    app = BrowserApp(state, home=config.home)
    outcome = app.run()
    # run() has restored the terminal by now, on every exit path.
    if app.return_code:
        click.echo("Browser exited with an error.", err=True)
        raise SystemExit(1)

    if not isinstance(outcome, Selected):
        click.echo("Cancelled.")
        return

    session_name = tmux_session_name(session_name_for(outcome.path))
    click.echo(f"Selected: {shorten_path(outcome.path, config.home)} -> starting tmux session '{session_name}'")
    try:
        launch(session_name, outcome.path, notify=click.echo)
    except LaunchError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@click.command()
def cli() -> None:
    """Browse ~/Developer and open the chosen project in a split tmux session."""
    _check_prerequisites()
    config = _load_config_or_exit()
    state = NavigationState.start(config.projects_root, nested=True)
    _browse_and_launch(config, state)


@click.command()
def cli_flat() -> None:
    """Pick a top-level project in ~/Developer and open it in a split tmux session."""
    _check_prerequisites()
    config = _load_config_or_exit()
    state = NavigationState.start(config.projects_root, nested=False)
    if not state.listing:
        click.echo(f"No projects found in ~/{PROJECTS_DIRNAME}", err=True)
        raise SystemExit(1)
    _browse_and_launch(config, state)
