"""Root Typer application for docker-status."""

from __future__ import annotations

import logging
import os
from contextlib import closing, contextmanager
from typing import Generator, Optional

import typer
from rich.console import Console
from rich.table import Table

from docker_status.config import get_settings
from docker_status.errors import DockerStatusError
from docker_status.models import ContainerView
from docker_status.services.aggregator import ContainerAggregator
from docker_status.services.daemon import DaemonClient
from docker_status.services.lifecycle import LifecycleCommander

app = typer.Typer(
    name="docker-status",
    help="Docker containers grouped by compose project.",
    no_args_is_help=True,
)
console = Console()


def _daemon() -> DaemonClient:
    return DaemonClient.connect(get_settings().docker_host)


@contextmanager
def _reporting_errors() -> Generator[None, None, None]:
    try:
        yield
    except DockerStatusError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(exc.exit_code)


def _container_table(title: str, containers: list[ContainerView]) -> Table:
    table = Table(title=title)
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("ID")
    table.add_column("Ports")
    for c in containers:
        color = "green" if c.status == "running" else "yellow"
        table.add_row(c.name, f"[{color}]{c.status}[/{color}]", c.id[:12], "\n".join(c.ports))
    return table


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Listening port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the dashboard web server."""
    import uvicorn

    if port is not None:
        # get_base_url strips this port from the Host header
        os.environ["DOCKER_STATUS_PORT"] = str(port)
        get_settings.cache_clear()
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "docker_status.main:app",
        host=host or settings.host,
        port=settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command(name="ls")
def list_containers(
    base_url: str = typer.Option("http://localhost", help="Prefix for published port links"),
) -> None:
    """Show containers grouped by compose project."""
    with _reporting_errors(), closing(_daemon()) as daemon:
        result = ContainerAggregator(daemon).collect(base_url)

    for group in result.groups:
        title = group.name if not group.config_dir else f"{group.name} ({group.config_dir})"
        console.print(_container_table(title, group.containers))
    if result.standalone:
        console.print(_container_table("Standalone", result.standalone))
    if not result.groups and not result.standalone:
        console.print("[yellow]No containers found[/yellow]")


@app.command()
def start(
    container_id: str = typer.Argument(help="Container id"),
    base_url: str = typer.Option("http://localhost", help="Prefix for published port links"),
) -> None:
    """Start a container."""
    with _reporting_errors(), closing(_daemon()) as daemon:
        view = LifecycleCommander(daemon).start(container_id, base_url)
    console.print(f"[green]{view.name}: {view.status}[/green]")


@app.command()
def stop(
    container_id: str = typer.Argument(help="Container id"),
    base_url: str = typer.Option("http://localhost", help="Prefix for published port links"),
) -> None:
    """Stop a container (60s grace period before kill)."""
    with _reporting_errors(), closing(_daemon()) as daemon:
        view = LifecycleCommander(daemon).stop(container_id, base_url)
    console.print(f"[yellow]{view.name}: {view.status}[/yellow]")


@app.command(name="rm")
def remove(
    container_id: str = typer.Argument(help="Container id"),
) -> None:
    """Remove a container."""
    with _reporting_errors(), closing(_daemon()) as daemon:
        LifecycleCommander(daemon).remove(container_id)
    console.print(f"[green]Removed {container_id}[/green]")


if __name__ == "__main__":
    app()
