"""Command to run the catalog HTTP API."""

import click
import uvicorn

from megastore.api.app import create_app
from megastore.core.config import settings


@click.command("serve")
@click.option("--host", default=None, help="Interface to bind (default: API_HOST or 127.0.0.1)")
@click.option("--port", type=int, default=None, help="Port to listen on (default: API_PORT or 8000)")
@click.pass_context
def serve(ctx, host: str | None, port: int | None):
    """Serve the catalog API over HTTP."""
    app = create_app(db=ctx.obj["db"], settings=settings)
    uvicorn.run(
        app,
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_level=settings.log_level.lower(),
    )


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
