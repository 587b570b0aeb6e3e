"""CLI entry point for aiomilvus.

Provides commands for checking service health and waiting on
long-running operations from the shell.
"""

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

import click

from aiomilvus import __version__
from aiomilvus.errors import ConfigurationError, MilvusClientError, PollTimeoutError

config_option = click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
interval_option = click.option(
    "--interval",
    type=float,
    default=None,
    help="Seconds between progress checks",
)
timeout_option = click.option(
    "--timeout",
    type=float,
    default=None,
    help="Seconds to wait before giving up (inf waits without limit)",
)


def _run(config: Path | None, action: Callable[[Any], Awaitable[None]]) -> None:
    """Load config, configure logging and run ``action`` with a connected client."""
    from aiomilvus.client import MilvusClient
    from aiomilvus.config.loader import load_config
    from aiomilvus.utils.logging import configure_logging

    try:
        cfg = load_config(config)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    configure_logging(cfg.logging, cfg.connection.base_url)

    async def main() -> None:
        async with MilvusClient(cfg) as client:
            await action(client)

    try:
        asyncio.run(main())
    except PollTimeoutError as e:
        raise click.ClickException(str(e)) from e
    except MilvusClientError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}") from e


def _echo_progress(value: Any) -> None:
    click.echo(f"  progress: {value}")


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Async Milvus client.

    Checks service health and waits on long-running operations
    such as collection loading, index building and compaction.
    """
    pass


@cli.command()
@config_option
def health(config: Path | None) -> None:
    """Check whether the Milvus service is healthy."""

    async def action(client: Any) -> None:
        state = await client.health()
        click.echo(f"{client.address}: {'healthy' if state.is_healthy else 'unhealthy'}")
        for reason in state.reasons:
            click.echo(f"  reason: {reason}")

    _run(config, action)


@cli.command("wait-load")
@click.argument("collection")
@click.option(
    "--partition",
    "-p",
    "partitions",
    multiple=True,
    help="Partition to wait for (repeatable)",
)
@config_option
@interval_option
@timeout_option
def wait_load(
    collection: str,
    partitions: tuple[str, ...],
    config: Path | None,
    interval: float | None,
    timeout: float | None,
) -> None:
    """Wait until a collection is fully loaded into memory."""

    async def action(client: Any) -> None:
        await client.collection(collection).wait_for_collection_load(
            partition_names=list(partitions),
            waiting_interval=interval,
            timeout=timeout,
            progress=_echo_progress,
        )
        click.echo(f"Collection '{collection}' loaded")

    _run(config, action)


@cli.command("wait-index")
@click.argument("collection")
@click.argument("field")
@config_option
@interval_option
@timeout_option
def wait_index(
    collection: str,
    field: str,
    config: Path | None,
    interval: float | None,
    timeout: float | None,
) -> None:
    """Wait until the index on a field has been built."""

    def report(build: Any) -> None:
        _echo_progress(f"{build.indexed_rows}/{build.total_rows} rows")

    async def action(client: Any) -> None:
        await client.collection(collection).wait_for_index_build(
            field,
            waiting_interval=interval,
            timeout=timeout,
            progress=report,
        )
        click.echo(f"Index on '{collection}.{field}' built")

    _run(config, action)


@cli.command()
@click.argument("collection_id", type=int)
@click.option("--wait", "-w", is_flag=True, help="Wait for the compaction to complete")
@config_option
@interval_option
@timeout_option
def compact(
    collection_id: int,
    wait: bool,
    config: Path | None,
    interval: float | None,
    timeout: float | None,
) -> None:
    """Start a manual compaction of a collection."""

    async def action(client: Any) -> None:
        compaction_id = await client.manual_compaction(collection_id)
        click.echo(f"Started compaction {compaction_id}")
        if wait:
            await client.wait_for_compaction(
                compaction_id,
                waiting_interval=interval,
                timeout=timeout,
                progress=lambda state: _echo_progress(state.name.lower()),
            )
            click.echo(f"Compaction {compaction_id} completed")

    _run(config, action)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
