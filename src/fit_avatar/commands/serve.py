"""Web server command."""

import click

from ..config import get_settings
from .base import get_repository


@click.command()
@click.option("--host", default=None, help="Host to bind to (default from settings)")
@click.option("--port", "-p", default=None, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool):
    """Start the JSON API server.

    Examples:

        fit-avatar serve

        fit-avatar serve --port 3000
    """
    repo = get_repository(ctx)
    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    import uvicorn

    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting fit-avatar API...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo(f"  Docs:    http://{host}:{port}/docs")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    if reload:
        uvicorn.run(
            "fit_avatar.web:create_app",
            host=host,
            port=port,
            reload=True,
            factory=True,
        )
    else:
        uvicorn.run(create_app(repo.db_path), host=host, port=port)
