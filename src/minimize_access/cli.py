"""CLI entry point for the exposure examples."""

from __future__ import annotations

import click

from .core.config import build_facade, load_settings
from .core.enums import ExposureStrategy
from .core.errors import ConfigError
from .observability.logger import get_logger, setup_logging

log = get_logger(__name__)


@click.group()
@click.option("--config", default="configs/default.toml", help="Config file path")
@click.pass_context
def main(ctx: click.Context, config: str) -> None:
    """Publish private sequences safely: views, copies, and the hazard."""
    try:
        settings = load_settings(config_path=config)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format.value,
    )
    log.debug("cli_started", command=ctx.invoked_subcommand, config=config)
    ctx.obj = settings


@main.command()
def constant() -> None:
    """Print the published scalar constant."""
    from .published import EXAMPLE_CONSTANT

    click.echo(EXAMPLE_CONSTANT)


@main.command()
def hazard() -> None:
    """Mutate a directly exposed array to show the aliasing hazard."""
    from .hazard import demonstrate_aliasing_hazard

    before, after = demonstrate_aliasing_hazard([2, 3])
    click.echo(before)
    click.echo(after)


@main.command()
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in ExposureStrategy]),
    default=None,
    help="Publish as a read-only view or a copy (default from config)",
)
@click.pass_obj
def show(settings, strategy: str | None) -> None:
    """Publish the configured sequence and print it."""
    facade = build_facade(settings)
    published = facade.publish(strategy)
    click.echo(f"{type(published).__name__}: {list(published)}")


@main.command()
@click.option("--index", default=0, type=int, help="Index to overwrite")
@click.option("--value", default=9, type=int, help="New value for the index")
@click.pass_obj
def compare(settings, index: int, value: int) -> None:
    """Mutate the backing sequence and show how each published form reacts."""
    facade = build_facade(settings)
    view = facade.unmodifiable_view()
    copy = facade.copy_of()

    try:
        facade.update(index, value)
    except IndexError as exc:
        raise click.BadParameter(
            f"index {index} out of range for length {len(facade)}",
            param_hint="--index",
        ) from exc

    click.echo(f"view: {list(view)}")
    click.echo(f"copy: {copy}")
