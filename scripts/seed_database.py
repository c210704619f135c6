#!/usr/bin/env python3
"""
CLI script to seed the database with demo companies from a CSV file.

Usage:
    # Basic seeding
    python scripts/seed_database.py

    # Clear existing data before seeding
    python scripts/seed_database.py --clear

    # Seed users and profiles without running calculations
    python scripts/seed_database.py --skip-calculations

    # Use a different data directory
    python scripts/seed_database.py --data-dir path/to/csv/files
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path so we can import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.config import get_config
from app.database.base import engine_kw, get_db_url
from app.database.session_manager.db_session import Database
from app.services.calculators.emission_factors import EmissionFactors
from app.services.leaderboard_service import LeaderboardService
from app.services.seed_database import DatabaseSeeder
from app.utils.constants import ConfigFile
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

console = Console()


def print_header(text: str, style: str = "bold cyan"):
    """Print a formatted header using Rich Panel."""
    console.print(
        Panel(
            Text(text, justify="center", style=style),
            border_style="cyan",
            padding=(1, 2),
        )
    )


def print_config(args):
    """Print configuration details."""
    config_table = Table(show_header=False, box=None, padding=(0, 2))
    config_table.add_column("Setting", style="bold yellow")
    config_table.add_column("Value", style="green")

    config_table.add_row("Config", args.config)
    config_table.add_row("Data Directory", args.data_dir)
    config_table.add_row("Clear Existing", "Yes" if args.clear else "No")
    config_table.add_row("Skip Calculations", "Yes" if args.skip_calculations else "No")

    console.print(config_table)
    console.print()


def print_stats(stats: dict):
    """Print seeding statistics using Rich Table."""
    print_header("SEEDING STATISTICS", "bold green")

    stats_table = Table(show_header=True, box=None, padding=(0, 2))
    stats_table.add_column("Category", style="bold cyan", width=30)
    stats_table.add_column("Seeded", justify="right", style="bold green")
    stats_table.add_column("Total in DB", justify="right", style="green")

    totals = stats.get("totals", {})
    for label, key in [
        ("Users", "users"),
        ("Company Profiles", "company_profiles"),
        ("Emission Records", "emission_records"),
    ]:
        stats_table.add_row(label, str(stats[key]), str(totals.get(key, "-")))

    console.print(stats_table)

    if stats.get("errors"):
        console.print()
        console.print(
            Panel(
                f"[yellow]{len(stats['errors'])} rows skipped during seeding[/yellow]",
                border_style="yellow",
            )
        )
        for i, error in enumerate(stats["errors"][:5], 1):
            console.print(f"  {i}. [dim]{error}[/dim]")
        if len(stats["errors"]) > 5:
            console.print(f"  [dim]... and {len(stats['errors']) - 5} more[/dim]")

    console.print()


def print_leaderboard(entries):
    """Print the green-score leaderboard."""
    print_header("LEADERBOARD", "bold green")

    table = Table(show_header=True, padding=(0, 1))
    table.add_column("#", justify="right", style="bold")
    table.add_column("Company", style="cyan")
    table.add_column("Sector")
    table.add_column("Green Score", justify="right", style="bold green")
    table.add_column("CO2 (t)", justify="right")
    table.add_column("Distance (km)", justify="right")

    for entry in entries:
        table.add_row(
            str(entry.rank),
            entry.company_name,
            entry.sector,
            f"{entry.green_score:,.2f}",
            f"{entry.co2_emissions:,.3f}",
            f"{entry.total_distance:,.0f}",
        )

    console.print(table)
    console.print()


async def main():
    """Main entry point for the seeding script."""
    parser = argparse.ArgumentParser(
        description="Seed the database with demo companies from a CSV file"
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear existing data before seeding",
    )
    parser.add_argument(
        "--skip-calculations",
        action="store_true",
        help="Store users and profiles without emission records",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default="app/test/test_data",
        help="Directory containing companies.csv (default: app/test/test_data)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=ConfigFile.DEVELOPMENT,
        help="Configuration file to use (default: development.toml)",
    )

    args = parser.parse_args()

    print_header("DATABASE SEEDING", "bold cyan")
    print_config(args)

    try:
        config = get_config(args.config)
        Database.init(get_db_url(config), engine_kw=engine_kw)
        logger.info("Database initialized")

        with console.status("[bold cyan]Seeding database...", spinner="dots"):
            async with DatabaseSeeder(
                data_dir=args.data_dir, factors=EmissionFactors.from_config(config)
            ) as seeder:
                stats = await seeder.seed_all(
                    clear_existing=args.clear,
                    skip_calculations=args.skip_calculations,
                )

        print_stats(stats)
        print_leaderboard(await LeaderboardService().get_leaderboard())

        console.print(
            Panel(
                Text("SEEDING COMPLETED SUCCESSFULLY", justify="center"),
                border_style="bold green",
                style="bold green",
            )
        )

    except Exception as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)

        console.print()
        console.print(
            Panel(
                f"[bold red]SEEDING FAILED[/bold red]\n\n[red]{e!s}[/red]",
                border_style="bold red",
            )
        )
        console.print()
        sys.exit(1)
    finally:
        await Database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
