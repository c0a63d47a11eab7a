"""Command-line interface for crud-mcp."""

import asyncio
import json
import logging
import sys
from collections.abc import Sequence

import click

from crud_mcp import __version__
from crud_mcp.api.mcp.server import FastMcpServerAdapter
from crud_mcp.core.config.settings import get_settings
from crud_mcp.servers.crud.providers import CrudToolProvider
from crud_mcp.servers.crud.resources import CollectionResourceProvider
from crud_mcp.store.errors import ApiError
from crud_mcp.store.interface import ResourceApi
from crud_mcp.store.logging_api import LoggingResourceApi
from crud_mcp.store.memory import InMemoryResourceApi
from crud_mcp.store.seed import SeedError, load_seed_file, seed_api


def configure_logging(level: str) -> None:
    """Send log records to stderr so stdout stays free for the stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def build_api(log_operations: bool = False) -> ResourceApi:
    """Create the in-memory resource API, optionally wrapped with operation logging."""
    api: ResourceApi = InMemoryResourceApi()
    if log_operations:
        api = LoggingResourceApi(api)
    return api


def build_server(
    api: ResourceApi,
    collections: Sequence[str],
    name: str = "crud-mcp",
    version: str = __version__,
) -> FastMcpServerAdapter:
    """Wire the CRUD tools and collection resources into a FastMCP server."""
    server = FastMcpServerAdapter(name, version=version)
    server.add_tool_provider(CrudToolProvider(api))
    server.add_resource_provider(CollectionResourceProvider(api, collections))
    return server


@click.group()
@click.version_option(version=__version__, prog_name="crud-mcp")
def cli() -> None:
    """CRUD MCP - generic resource operations over MCP"""
    pass


@cli.command()
def info() -> None:
    """Show project information."""
    settings = get_settings()
    click.echo(f"crud-mcp v{__version__}")
    click.echo("CRUD MCP - generic resource operations over MCP")
    click.echo(f"   Collections: {', '.join(settings.server.collections)}")
    click.echo("   Tools: create, get, list, update, delete")


@cli.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--transport",
    "-t",
    help="Transport type: stdio, http, sse (overrides MCP_TRANSPORT)",
)
@click.option("--host", help="Server host (overrides MCP_HOST)")
@click.option("--port", type=int, help="Server port (overrides MCP_PORT)")
@click.option("--path", help="Server path for HTTP transport (overrides MCP_PATH)")
@click.option(
    "--collection",
    "-C",
    multiple=True,
    help="Collection type to expose as <name>://list and <name>://{id} (overrides MCP_COLLECTIONS)",
)
@click.option(
    "--seed",
    "seed_file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file of records to create at startup (overrides MCP_SEED_FILE)",
)
@click.option(
    "--log-operations/--no-log-operations",
    default=None,
    help="Log every resource operation (overrides MCP_LOG_OPERATIONS)",
)
@click.option("--debug", is_flag=True, help="Enable debug logging (overrides DEBUG)")
def serve(
    transport: str | None,
    host: str | None,
    port: int | None,
    path: str | None,
    collection: tuple[str, ...],
    seed_file: str | None,
    log_operations: bool | None,
    debug: bool,
) -> None:
    """Start the CRUD MCP server.

    Exposes create/get/list/update/delete tools plus read-only
    <collection>://list and <collection>://{id} resources, backed by an
    in-memory store.

    Examples:
        crud-mcp serve
        crud-mcp serve -t http --port 3000
        crud-mcp serve -C users -C invoices --seed fixtures.yaml
    """
    settings = get_settings()
    server_settings = settings.server

    configure_logging(
        "DEBUG" if debug or settings.application.debug else settings.application.log_level
    )

    # Override settings with CLI options if provided
    actual_transport = (
        transport if transport is not None else server_settings.transport
    )
    actual_host = host if host is not None else server_settings.host
    actual_port = port if port is not None else server_settings.port
    actual_path = path if path is not None else server_settings.path
    actual_collections = list(collection) or server_settings.collections
    actual_seed = seed_file if seed_file is not None else server_settings.seed_file
    actual_log_operations = (
        log_operations if log_operations is not None else server_settings.log_operations
    )

    if actual_transport not in {"stdio", "http", "sse"}:
        raise click.BadParameter(
            f"Unsupported transport '{actual_transport}'", param_hint="--transport"
        )
    if not actual_collections:
        raise click.ClickException("❌ At least one collection must be configured.")

    api = build_api(actual_log_operations)

    if actual_seed:
        try:
            created = asyncio.run(seed_api(api, load_seed_file(actual_seed)))
        except SeedError as e:
            raise click.ClickException(f"❌ Failed to load seed file: {e}") from e
        total = sum(len(ids) for ids in created.values())
        click.echo(f"🌱 Seeded {total} records from {actual_seed}", err=True)

    server = build_server(
        api,
        actual_collections,
        name=server_settings.server_name,
        version=server_settings.server_version,
    )

    # stdout belongs to the protocol on stdio, so status goes to stderr
    click.echo(f"🚀 Starting {server_settings.server_name} MCP Server", err=True)
    click.echo(f"   Transport: {actual_transport}", err=True)
    click.echo(f"   Collections: {', '.join(actual_collections)}", err=True)
    if actual_transport == "http":
        click.echo(
            f"   Endpoint: http://{actual_host}:{actual_port}{actual_path}", err=True
        )
        click.echo(f"   Health: http://{actual_host}:{actual_port}/health", err=True)
    elif actual_transport == "sse":
        click.echo(f"   Endpoint: http://{actual_host}:{actual_port}", err=True)
    if actual_log_operations:
        click.echo("   Operation logging: enabled", err=True)

    server.start(
        transport=actual_transport,
        host=actual_host,
        port=actual_port,
        path=actual_path,
        allowed_hosts=server_settings.allowed_hosts,
        allowed_origins=server_settings.allowed_origins,
    )


@cli.command()
def demo() -> None:
    """Walk through every CRUD operation against the in-memory store."""
    api = LoggingResourceApi(InMemoryResourceApi())
    asyncio.run(_run_demo(api))

    click.echo("\nOperation log:")
    for entry in api.history:
        click.echo(f"   - {entry}")


async def _run_demo(api: ResourceApi) -> None:
    def show(label: str, value: object) -> None:
        click.echo(f"{label} {json.dumps(value, indent=2)}\n")

    click.echo("=== CRUD MCP Demo ===\n")

    click.echo("1. Creating users and a product...")
    john = await api.create(
        "users", {"name": "John Doe", "email": "john@example.com", "age": 30}
    )
    jane = await api.create(
        "users", {"name": "Jane Smith", "email": "jane@example.com", "age": 25}
    )
    product = await api.create(
        "products", {"name": "Laptop", "price": 999.99, "category": "Electronics"}
    )
    click.echo(f"Created users {john['id']}, {jane['id']} and product {product['id']}\n")

    click.echo("2. Listing all users...")
    show("Users:", await api.list("users"))

    click.echo("3. Updating the first user...")
    await api.update("users", john["id"], {"age": 31, "city": "New York"})
    show("Updated user:", await api.get("users", john["id"]))

    click.echo("4. Listing users with age 25...")
    show("Filtered users:", await api.list("users", {"age": 25}))

    click.echo("5. Deleting the first user...")
    await api.delete("users", john["id"])
    show("Remaining users:", await api.list("users"))

    click.echo("6. Reading the deleted user (should fail)...")
    try:
        await api.get("users", john["id"])
    except ApiError as e:
        click.echo(f"Error caught: {e.kind.value} ({e.status_code}) {e.message}")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
