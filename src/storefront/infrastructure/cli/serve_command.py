"""CLI command that runs the HTTP API."""

from __future__ import annotations

import click
import uvicorn

from storefront.infrastructure.bootstrap import handlers
from storefront.infrastructure.config import AppConfig
from storefront.infrastructure.http.app import create_app


@click.command("serve")
@click.option("--host", default=None, help="Bind address (defaults to $HOST).")
@click.option("--port", default=None, type=int, help="Port (defaults to $PORT).")
@click.pass_obj
def serve(config: AppConfig, host: str | None, port: int | None) -> None:
    """Run the REST API."""
    app = create_app(handlers(config))
    uvicorn.run(
        app,
        host=host or config.host,
        port=port or config.port,
        log_level=config.log_level.lower(),
    )
