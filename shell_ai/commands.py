"""
Command handlers for Shell AI.

Each handler takes the application context plus its options and returns
an Outcome. Handlers never exit the process; main() turns the Outcome
into output and an exit status.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

import click

from . import assets
from .agent import build_request, synthesize
from .gate import Decision, ExecutionGate, run_in_shell
from .llm import config as llm_config
from .llm.completion import EmptyResponse, MalformedResponse
from .llm.provider_factory import create_provider
from .llm.providers import BaseProvider
from .llm.utils import to_jsonable
from .paths import AppPaths
from .resolver import NotFound, SettingsResolver
from .store.repositories import BaseRepository
from .store.repository_factory import StoreType, create_repository
from .system_info import SystemInfo, get_system_info

logger = logging.getLogger(__name__)

PROG_NAME = "shell-ai"


@dataclass(frozen=True)
class Outcome:
    exit_code: int = 0
    message: Optional[str] = None
    error: bool = False


def choose_action(command: str) -> Decision:
    """Show the command and ask whether to run it."""
    click.echo(
        f"{click.style(command, fg='bright_green')} "
        f"{click.style('What do you want to do with the command?', fg='bright_blue')}"
    )
    answer = click.prompt(
        "Action",
        type=click.Choice([d.value for d in Decision], case_sensitive=False),
    )
    return Decision(answer)


def select_model(models: List[str]) -> str:
    """Numbered menu of the catalog; returns the chosen name."""
    click.echo("Select a model:")
    for index, name in enumerate(models, start=1):
        click.echo(f"  {index}) {name}")
    choice = click.prompt("Model", type=click.IntRange(1, len(models)), default=1)
    return models[choice - 1]


@dataclass
class AppContext:
    """Everything a command needs, built once in main()."""

    paths: AppPaths
    config: Dict[str, Any]
    repository: BaseRepository
    resolver: SettingsResolver
    provider_factory: Callable[[str, str], BaseProvider]
    choose: Callable[[str], Decision] = choose_action
    select: Callable[[List[str]], str] = select_model
    runner: Callable[[str], None] = run_in_shell
    system_info: Callable[[], SystemInfo] = get_system_info

    @classmethod
    def create(cls, paths: AppPaths, config: Dict[str, Any]) -> "AppContext":
        repository = create_repository(StoreType(config.get("backend", "env")), paths)

        def provider_factory(api_key: str, model: str) -> BaseProvider:
            return create_provider(api_key, model, config)

        return cls(
            paths=paths,
            config=config,
            repository=repository,
            resolver=SettingsResolver(repository),
            provider_factory=provider_factory,
        )


def wrong_command() -> Outcome:
    help_cmd = click.style(f"{PROG_NAME} --help", fg="bright_green")
    return Outcome(1, f"Run {help_cmd} to see available commands", error=True)


def apikey_command(app: AppContext, set_value: Optional[str], get: bool) -> Outcome:
    if set_value is None and not get:
        return wrong_command()

    if get:
        result = app.resolver.resolve(llm_config.API_KEY_NAME)
        if isinstance(result, NotFound):
            return Outcome(1, click.style("API key not found", fg="bright_red"), error=True)
        return Outcome(0, f"{click.style('API key:', fg='bright_green')} {result.value}")

    app.repository.upsert(llm_config.API_KEY_NAME, set_value)
    return Outcome(0, f"{click.style('API key saved to', fg='bright_green')} {app.repository.describe()}")


def model_command(app: AppContext, set_: bool, get: bool, list_: bool) -> Outcome:
    if not (set_ or get or list_):
        return wrong_command()

    if get:
        result = app.resolver.resolve(llm_config.MODEL_NAME)
        if isinstance(result, NotFound):
            return Outcome(
                1, click.style("Model not found, set it with --set option", fg="bright_red"), error=True
            )
        return Outcome(0, result.value)

    models = assets.list_models(app.paths)

    if list_:
        lines = [click.style("Available models:", fg="bright_green"), *models]
        return Outcome(0, "\n".join(lines))

    if not models:
        return Outcome(1, click.style("No models available", fg="bright_red"), error=True)

    selected = app.select(models)
    app.repository.upsert(llm_config.MODEL_NAME, selected)
    return Outcome(0, f"{click.style('Model saved:', fg='bright_green')} {selected}")


def _print_debug(response: Any, full_prompt: str, system_info: SystemInfo) -> None:
    def field_line(label: str, value: Any) -> None:
        if isinstance(value, (dict, list)):
            value = json.dumps(value, indent=2, default=str)
        click.echo(f"{click.style(label, fg='green')} {value}")

    click.echo(click.style("--- DEBUG START ---", fg="yellow"))
    field_line("ID:", getattr(response, "id", None))
    field_line("Object:", getattr(response, "object", None))
    field_line("Created:", getattr(response, "created", None))
    field_line("Model:", getattr(response, "model", None))
    field_line("Usage:", to_jsonable(getattr(response, "usage", None)))
    field_line("Fingerprint:", getattr(response, "system_fingerprint", None))
    field_line("Choices:", to_jsonable(getattr(response, "choices", None)))
    field_line("Prompt:", full_prompt)
    field_line("System info:", {"shell": system_info.shell, "os": system_info.operating_system})
    click.echo(click.style("--- DEBUG END ---", fg="yellow"))


def shell_command(app: AppContext, prompt: Sequence[str], unsafe: bool, debug: bool) -> Outcome:
    prompt_text = " ".join(prompt).strip()
    if not prompt_text:
        return wrong_command()

    system_info = app.system_info()
    template = assets.load_prompt_template(app.paths)
    full_prompt = build_request(prompt_text, template, system_info)

    api_key = app.resolver.require(
        llm_config.API_KEY_NAME, f"{PROG_NAME} apikey --set <value>", label="API key"
    )
    model = app.resolver.require(llm_config.MODEL_NAME, f"{PROG_NAME} model --set", label="Model")

    provider = app.provider_factory(api_key, model)
    click.echo(click.style("Fetching shell command...", dim=True), err=True)
    result = synthesize(full_prompt, provider, debug=debug or bool(app.config.get("debug")))

    if debug:
        _print_debug(result.raw, full_prompt, system_info)

    if isinstance(result, EmptyResponse):
        return Outcome(1, click.style("The model returned no command", fg="bright_red"), error=True)
    if isinstance(result, MalformedResponse):
        return Outcome(
            1, click.style(f"Unexpected response from the model: {result.reason}", fg="bright_red"), error=True
        )

    gate = ExecutionGate(choose=app.choose, runner=app.runner)
    gate.process(result.command, unsafe=unsafe)
    return Outcome(0)
