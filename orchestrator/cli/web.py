"""
CLI for launching the HTTP API server.
"""

from typing import Optional

import click
import uvicorn
from rich.console import Console

from ..config import settings
from ..version import get_version_string

console = Console()


@click.command()
@click.option(
    "--host",
    default=None,
    help=f"Host to bind to (default: {settings.host})",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help=f"Port to bind to (default: {settings.port})",
)
@click.option(
    "--reload",
    is_flag=True,
    help="Enable auto-reload for development",
)
def web(host: Optional[str], port: Optional[int], reload: bool) -> None:
    """Launch the Orchestrator API server."""
    host = host or settings.host
    port = port or settings.port

    version_str = get_version_string()
    console.print(
        f"\n[bold cyan]The Orchestrator[/bold cyan] [dim]v{version_str}[/dim]\n"
    )
    console.print(f"Server: http://{host}:{port}\n")
    console.print("[green]Starting web server...[/green]")

    uvicorn.run(
        "orchestrator.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )


if __name__ == "__main__":
    web()
