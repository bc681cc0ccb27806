# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands for Wikipedia species lookup, the chat assistant and the web server

import json

import asyncclick as click
from rich.console import Console
from rich.panel import Panel

from species_catalog.config import get_config
from species_catalog.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_species_context,
)
from species_catalog.utils.rich_tables import (
    create_logging_status_table,
    create_species_draft_table,
    create_species_fields_table,
    print_rich_table,
)

console = Console()


@click.command()
@click.argument("species")
@click.option("--draft", is_flag=True, help="Also show the species form draft autofilled from the result")
@click.pass_context
async def lookup(ctx, species: str, draft: bool):
    """
    🌿 Look up a species on Wikipedia and extract form fields.

    Searches for the best-matching article and mines the scientific name,
    common name, description and population from its introduction.
    """
    await _lookup_async(species, draft, ctx.obj["json_output"])


async def _lookup_async(species: str, draft: bool, json_output: bool):
    from species_catalog.extraction.wiki import WikipediaSpeciesExtractor
    from species_catalog.models import SpeciesDraft

    with with_species_context(species) as logger:
        logger.info("Starting species lookup")

        async with WikipediaSpeciesExtractor(settings=get_config().wikipedia_settings()) as extractor:
            if json_output:
                fields = await extractor.lookup(species)
            else:
                with console.status(f"🔎 Searching Wikipedia for {species}..."):
                    fields = await extractor.lookup(species)

        if fields is None:
            logger.info("No Wikipedia data found")
            if json_output:
                click.echo("null")
            else:
                console.print("[red]❌ No Wikipedia article found[/red]")
            return

        if json_output:
            click.echo(json.dumps(fields.to_payload()))
            return

        print_rich_table(console, create_species_fields_table(species, fields))

        if draft:
            base = SpeciesDraft(scientific_name=fields.scientific_name or species)
            print_rich_table(console, create_species_draft_table(base.autofill(fields)))
            console.print(f"[green]Autofilled: {', '.join(SpeciesDraft.autofilled_fields(fields))}[/green]")


@click.command()
@click.argument("question")
@click.pass_context
async def ask(ctx, question: str):
    """
    💬 Ask the species chat assistant a question.
    """
    from species_catalog.services.chat import SpeciesChatService
    from species_catalog.utils.retry import ChatServiceError

    json_output = ctx.obj["json_output"]
    service = SpeciesChatService()
    try:
        answer = await service.generate_response(question)
    except ChatServiceError as e:
        if json_output:
            click.echo(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]❌ {e}[/red]")
        ctx.exit(1)
    finally:
        await service.aclose()

    if json_output:
        click.echo(json.dumps({"answer": answer}))
    else:
        console.print(Panel(answer, title="🦉 Species Assistant", border_style="green"))


@click.command()
@click.option("--host", default=None, help="Bind address (defaults to config)")
@click.option("--port", type=int, default=None, help="Port (defaults to config)")
async def serve(host: str | None, port: int | None):
    """
    🌐 Run the species catalog HTTP API.
    """
    import uvicorn

    from species_catalog.web import create_app

    config = get_config()
    server = uvicorn.Server(
        uvicorn.Config(create_app(config), host=host or config.host, port=port or config.port, log_config=None)
    )
    await server.serve()


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else config.log_mode

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output JSON instead of rich tables")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    🌿 Species Catalog - Wikipedia autofill and species assistant

    Look up species on Wikipedia, ask the species chat assistant, or run the
    HTTP API used by the catalog UI.
    """
    # Store global options in context for commands to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Add commands to the main group
app.add_command(lookup)
app.add_command(ask)
app.add_command(serve)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
