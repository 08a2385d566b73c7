from __future__ import annotations

import click

from orderdesk.domain.exceptions import DomainException
from orderdesk.domain.service.order_id_generator import next_order_id
from orderdesk.infrastructure.bootstrap import (
    configure_logging,
    load_settings,
    order_repository,
)
from orderdesk.infrastructure.cli.session import OrderSession


@click.group()
@click.option("--log-level", default=None, help="Logging level (default: $ORDERDESK_LOG_LEVEL or WARNING).")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """orderdesk: order entry and management"""
    settings = load_settings()
    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@cli.command("session")
@click.pass_obj
def session(settings) -> None:
    """Start an interactive order session."""
    OrderSession(order_repository(), settings).run()


@cli.command("next-id")
@click.argument("last_id", required=False)
@click.pass_obj
def next_id(settings, last_id: str | None) -> None:
    """Print the identifier that follows LAST_ID."""
    try:
        click.echo(next_order_id(last_id, settings.id_prefix))
    except DomainException as exc:
        raise click.ClickException(str(exc))
