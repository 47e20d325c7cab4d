"""Main CLI application module."""

from typing import Optional

import typer
from rich.console import Console

from .user_commands import users_app

console = Console()

app = typer.Typer(
    help="Contact API administration tool",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(users_app, name="users")


@app.command("init-db")
def init_db() -> None:
    """Create all database tables."""
    from src.contact_api.runtime.init_db import init_db as _init_db

    _init_db()
    console.print("[green]✅ Database tables created[/green]")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API under uvicorn."""
    import uvicorn

    from src.contact_api.runtime.context import get_config

    config = get_config()
    uvicorn.run(
        "src.contact_api.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,  # Request logging middleware writes the access log
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
