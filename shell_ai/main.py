"""
Shell AI entrypoint.

Parses the command line with click, runs one command handler, and is the
only place that decides what gets printed at the end and which exit
status the process returns.
"""

import logging
import sys
from typing import List, Optional

import click

from . import config_file
from .commands import (
    PROG_NAME,
    AppContext,
    Outcome,
    apikey_command,
    model_command,
    shell_command,
)
from .errors import MissingSettingError, ShellAIError
from .llm import config as llm_config
from .paths import AppPaths

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=VERSION, prog_name=PROG_NAME)
def cli() -> None:
    """Turn a natural-language request into a shell command."""
    pass


@cli.command()
@click.option("--set", "set_value", type=str, default=None, help="Set the API key")
@click.option("--get", is_flag=True, help="Get the API key")
@click.pass_obj
def apikey(app: AppContext, set_value: Optional[str], get: bool) -> Outcome:
    """Set or get the API key."""
    return apikey_command(app, set_value, get)


@cli.command()
@click.option("--set", "set_", is_flag=True, help="Set the model")
@click.option("--get", is_flag=True, help="Get the model")
@click.option("--list", "list_", is_flag=True, help="List available models")
@click.pass_obj
def model(app: AppContext, set_: bool, get: bool, list_: bool) -> Outcome:
    """Set or get the model."""
    return model_command(app, set_, get, list_)


@cli.command()
@click.argument("prompt", nargs=-1, required=True)
@click.option("--unsafe", is_flag=True, help="Run the command without asking")
@click.option("--debug", is_flag=True, help="Print the raw API response")
@click.pass_obj
def shell(app: AppContext, prompt: tuple, unsafe: bool, debug: bool) -> Outcome:
    """Prompt for a shell command and run it."""
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
    return shell_command(app, prompt, unsafe, debug)


def _error(message: str) -> None:
    click.echo(click.style(message, fg="bright_red"), err=True)


def _finish(result) -> int:
    """Print a handler's Outcome and return its exit status."""
    if isinstance(result, Outcome):
        if result.message:
            click.echo(result.message, err=result.error)
        return result.exit_code
    if isinstance(result, int):
        # --help and --version end with click's own exit code
        return result
    return 0


def main(
    argv: Optional[List[str]] = None,
    paths: Optional[AppPaths] = None,
    app: Optional[AppContext] = None,
) -> int:
    """Run one command and return the process exit status."""
    logging.basicConfig(level=logging.WARNING, format="%(name)s: %(message)s")

    try:
        if app is None:
            # ./.env may set SHELL_AI_CONFIG_DIR, so load it before resolving paths
            llm_config.load_environment()
            paths = paths or AppPaths.default()
            cfg = config_file.load_config(paths.config_file)
            if cfg.get("debug"):
                logging.getLogger().setLevel(logging.DEBUG)
            app = AppContext.create(paths, cfg)

        result = cli.main(
            args=argv,
            prog_name=PROG_NAME,
            obj=app,
            standalone_mode=False,
        )
    except click.ClickException as e:
        e.show()
        return 1
    except click.exceptions.Abort:
        _error("Aborted!")
        return 1
    except MissingSettingError as e:
        _error(str(e))
        click.echo("Set it with:", err=True)
        click.echo(f"  {click.style(e.remedy, fg='bright_green')}", err=True)
        return 1
    except ShellAIError as e:
        _error(str(e))
        return 1
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        _error(str(e) or e.__class__.__name__)
        return 1

    return _finish(result)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
