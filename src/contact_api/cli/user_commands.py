"""User management CLI commands."""

import typer
from rich.console import Console
from rich.table import Table

from src.contact_api.core.errors import ContactApiError
from src.contact_api.core.services import DbSessionService, UserManagementService

console = Console()

users_app = typer.Typer(help="Manage API users and their tokens")


@users_app.command("add")
def add_user(
    username: str = typer.Argument(..., help="Username for the new user"),
    name: str = typer.Option(..., "--name", "-n", help="Display name"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, help="Password"
    ),
) -> None:
    """Create a user and print its API token."""
    db_service = DbSessionService()
    try:
        with db_service.session_scope() as session:
            user = UserManagementService(session).create_user(username, name, password)
    except ContactApiError as e:
        console.print(f"[red]❌ Failed to create user: {e.message}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        db_service.close()

    console.print(f"[green]✅ User '{user.username}' created[/green]")
    console.print(f"API token: [bold cyan]{user.token}[/bold cyan]")


@users_app.command("token")
def rotate_token(
    username: str = typer.Argument(..., help="Username to issue a token for"),
) -> None:
    """Issue a new API token, invalidating the previous one."""
    db_service = DbSessionService()
    try:
        with db_service.session_scope() as session:
            token = UserManagementService(session).issue_token(username)
    except ContactApiError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        db_service.close()

    console.print(f"API token for '{username}': [bold cyan]{token}[/bold cyan]")


@users_app.command("list")
def list_users() -> None:
    """List all users."""
    db_service = DbSessionService()
    try:
        with db_service.session_scope() as session:
            users = UserManagementService(session).list_users()
    finally:
        db_service.close()

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Users")
    table.add_column("ID", style="cyan")
    table.add_column("Username", style="green")
    table.add_column("Name", style="magenta")
    table.add_column("Logged in", style="yellow")

    for user in users:
        table.add_row(user.id, user.username, user.name, "✅" if user.token else "❌")

    console.print(table)
    console.print(f"\n[green]Found {len(users)} users[/green]")
