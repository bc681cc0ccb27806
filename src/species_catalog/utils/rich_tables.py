# ABOUTME: Rich table utilities for styled CLI output
# ABOUTME: Provides pre-configured table generators for lookup results, drafts and logging status

from typing import Any

from rich.box import ROUNDED, SIMPLE
from rich.console import Console
from rich.table import Table

from species_catalog.extraction.models import ExtractedFields
from species_catalog.models import SpeciesDraft


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a two-column key-value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, width=None, no_wrap=False)
    table.add_column("Value", style=value_style, width=None, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_species_fields_table(query: str, fields: ExtractedFields) -> Table:
    """Create a table of the fields extracted for a lookup.

    Missing fields are shown explicitly so extraction misses are visible.
    """
    field_data = {
        "🔬 Scientific Name": fields.scientific_name or "❌ Not found",
        "🏷️ Common Name": fields.common_name or "❌ Not found",
        "👥 Total Population": f"{fields.total_population:,}" if fields.total_population else "❌ Not found",
        "📄 Description": fields.description,
    }

    return create_key_value_table(
        title=f"🌿 Wikipedia: {query}",
        data=field_data,
        title_style="bold green",
        key_style="cyan",
        value_style="white",
    )


def create_species_draft_table(draft: SpeciesDraft) -> Table:
    draft_data = {
        "Scientific name": draft.scientific_name,
        "Common name": draft.common_name or "-",
        "Kingdom": draft.kingdom.value,
        "Total population": f"{draft.total_population:,}" if draft.total_population else "-",
        "Image": str(draft.image) if draft.image else "-",
        "Description": draft.description or "-",
    }

    return create_key_value_table(
        title="📝 Species Draft",
        data=draft_data,
        title_style="bold magenta",
        key_style="blue",
        value_style="white",
        box_style=SIMPLE,
    )


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    # Add log files if they exist
    if status["log_files"]["main"]:
        logging_data["📝 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["json"]:
        logging_data["📊 JSON Log"] = status["log_files"]["json"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing and style.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()  # Add spacing before
    console.print(table)
    console.print()  # Add spacing after
