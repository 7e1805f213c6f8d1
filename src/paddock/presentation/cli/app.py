"""Paddock CLI application using Typer.

Operator utilities: secret generation, schema creation, admin
provisioning and running the API server.
"""

import asyncio
import secrets

import typer
import uvicorn
from rich.console import Console
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from paddock_auth import JWTService, OpaqueTokenService, PasswordHashingService
from paddock_config.settings import Settings, get_settings
from paddock_identity.application.services import AccountService
from paddock_identity.domain.user import UserProfile
from paddock_identity.exceptions import IdentityError
from paddock_identity.infrastructure.email import EmailService
from paddock_identity.infrastructure.persistence.sqlalchemy import (
    CredentialStoreSQLAlchemy,
    build_engine,
    create_tables,
)

app = typer.Typer(
    name="paddock",
    help="Paddock - equestrian marketplace identity service CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
users_app = typer.Typer(
    name="users",
    help="User administration",
    no_args_is_help=True,
)
app.add_typer(secrets_app)
app.add_typer(db_app)
app.add_typer(users_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Paddock configuration.

    - JWT_SECRET_KEY: Secret for signing session tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Paddock Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _init_db(settings: Settings) -> None:
    engine = build_engine(settings.database_url)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def init_db() -> None:
    """Create missing tables in the configured database."""
    settings = get_settings()
    asyncio.run(_init_db(settings))
    console.print("[green]Database schema is up to date.[/green]")


async def _create_admin(
    settings: Settings,
    email: str,
    password: str,
    first_name: str,
    last_name: str,
) -> UserProfile:
    engine = build_engine(settings.database_url)
    try:
        await create_tables(engine)
        session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with session_maker() as session:
            service = AccountService(
                credential_store=CredentialStoreSQLAlchemy(session),
                password_service=PasswordHashingService(
                    rounds=settings.password_hash_rounds,
                ),
                jwt_service=JWTService(
                    secret_key=settings.jwt_secret_key.get_secret_value(),
                    access_token_expire_hours=settings.jwt_access_token_expire_hours,
                ),
                token_service=OpaqueTokenService(),
                mail_dispatcher=EmailService(settings),
                frontend_base_url=settings.frontend_base_url,
            )
            profile = await service.provision_admin(
                email=email,
                password=password,
                first_name=first_name,
                last_name=last_name,
            )
            await session.commit()
            return profile
    finally:
        await engine.dispose()


@users_app.command("create-admin")
def create_admin(
    email: str = typer.Argument(..., help="Email address of the admin"),
    first_name: str = typer.Option(..., "--first-name", help="First name"),
    last_name: str = typer.Option(..., "--last-name", help="Last name"),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (prompted when omitted)",
    ),
) -> None:
    """Create an already verified admin account."""
    settings = get_settings()
    try:
        profile = asyncio.run(
            _create_admin(settings, email, password, first_name, last_name),
        )
    except IdentityError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1) from e

    console.print(f"[green]Admin created:[/green] {profile.email} ({profile.id})")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default from API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default from API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "paddock.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
