"""HouseBroker CLI application using Typer.

Command-line utilities for the HouseBroker backend: secret generation,
database initialization, commission lookups and serving the API.
"""

import asyncio
import secrets
from decimal import Decimal

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from housebroker.application.services import CommissionService
from housebroker.domain.commission import (
    CommissionQuote,
    InvalidPriceError,
    NoMatchingTierError,
)
from housebroker.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    get_engine,
    seed_reference_data,
)
from housebroker.infrastructure.persistence.sqlalchemy.repositories import (
    CommissionRateRepositorySQLAlchemy,
)
from housebroker_config.settings import get_settings

app = typer.Typer(
    name="housebroker",
    help="HouseBroker backend CLI",
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
    help="Database management",
    no_args_is_help=True,
)
commission_app = typer.Typer(
    name="commission",
    help="Commission lookups against the configured database",
    no_args_is_help=True,
)
app.add_typer(secrets_app)
app.add_typer(db_app)
app.add_typer(commission_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for HouseBroker configuration.

    Generates the two required secrets:
    - JWT_SECRET_KEY: Secret for signing session tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]HouseBroker Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 48 random bytes, well above the 32-byte HS256 minimum
    jwt_secret = secrets.token_urlsafe(48)
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


async def _init_db(engine: AsyncEngine, seed_rates: bool) -> None:
    try:
        await create_tables(engine)
        async with AsyncSession(engine, expire_on_commit=False) as session:
            await seed_reference_data(session, seed_rates=seed_rates)
            await session.commit()
    finally:
        await engine.dispose()


@db_app.command("init")
def init_db(
    seed_rates: bool = typer.Option(
        False,
        "--seed-rates",
        help="Seed the default commission tiers into an empty table",
    ),
) -> None:
    """Create missing tables and seed the role catalog."""
    asyncio.run(_init_db(get_engine(), seed_rates=seed_rates))
    console.print("[green]Database initialized.[/green]")


async def _quote(engine: AsyncEngine, price: str) -> CommissionQuote:
    try:
        async with AsyncSession(engine, expire_on_commit=False) as session:
            service = CommissionService(CommissionRateRepositorySQLAlchemy(session))
            return await service.resolve(price)
    finally:
        await engine.dispose()


def _format_amount(value: Decimal) -> str:
    return f"{value:,.2f}"


@commission_app.command("quote")
def quote(
    price: str = typer.Argument(..., help="Transaction price, e.g. 30000.00"),
) -> None:
    """Resolve the commission owed on PRICE."""
    try:
        result = asyncio.run(_quote(get_engine(), price))
    except (InvalidPriceError, NoMatchingTierError) as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1) from e

    table = Table(title="Commission")
    table.add_column("Price", justify="right")
    table.add_column("Rate", justify="right")
    table.add_column("Commission", justify="right", style="green")
    table.add_column("Tier")
    table.add_row(
        _format_amount(result.price),
        f"{result.rate_percentage}%",
        _format_amount(result.amount),
        result.tier_description,
    )
    console.print(table)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default from settings)"),
    port: int | None = typer.Option(None, help="Port (default from settings)"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "housebroker.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
