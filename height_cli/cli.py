"""Command-line entry point: `experimental-db-dev-tools list|task`."""

import functools
import json
import logging
import signal
import sys

import click

from height_cli import __version__
from height_cli.config import get_settings
from height_cli.context import build_context
from height_cli.exceptions import AuthenticationError, IntegrationError, RateLimitError
from height_cli.logging_setup import setup_logging
from height_cli.models.common import Unimplemented
from height_cli.models.lists import ListQueryOptions
from height_cli.services import lists as lists_service
from height_cli.services import tasks as tasks_service

logger = logging.getLogger(__name__)

PROG_NAME = "experimental-db-dev-tools"

COMMAND_ALIASES = {
    "lists": "list",
    "tasks": "task",
}


class AliasedGroup(click.Group):
    """click.Group that also resolves the names in COMMAND_ALIASES."""

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx, args):
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args


def _on_interrupt(signum, frame):
    click.echo("Ctrl+C pressed, exiting", err=True)
    sys.exit(0)


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2))


def handle_errors(f):
    """Turn Height API failures into a logged error and exit status 1."""

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (AuthenticationError, IntegrationError, RateLimitError) as e:
            logger.debug("Command failed", exc_info=True)
            raise click.ClickException(str(e)) from e

    return wrapper


@click.group(cls=AliasedGroup, name=PROG_NAME)
@click.version_option(__version__, prog_name=PROG_NAME, message="%(version)s")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Task management CLI tool powered by height.app API"""
    if ctx.obj is None:
        ctx.obj = build_context()


@cli.command("list")
@click.argument("query", required=False)
@click.pass_obj
@handle_errors
def list_cmd(app, query: str | None) -> None:
    """Retrieve all tasks in a list (or multiple lists) [alias: lists]"""
    options = ListQueryOptions(query=query, search_param=app.settings.list_search_param)
    lists = lists_service.fetch_lists(app, options)
    _echo_json([item.model_dump(mode="json", by_alias=True) for item in lists])


@cli.command("task")
@click.argument("id")
@click.pass_obj
@handle_errors
def task_cmd(app, id: str) -> None:
    """Retrieve a single task [alias: tasks]"""
    result = tasks_service.get_task(app, id)
    if isinstance(result, Unimplemented):
        click.echo(result.message, err=True)
        return
    _echo_json(result.model_dump(mode="json", by_alias=True))


def main() -> None:
    signal.signal(signal.SIGINT, _on_interrupt)
    setup_logging(get_settings().log_level)
    cli(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
