"""
Command-line interface for the OpenAPI MCP server.
"""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml

from .compiler import OpenAPIToolCompiler
from .config import load_config
from .dispatcher import ToolDispatcher
from .exceptions import OpenAPIMCPError, SpecLoadError
from .server import OpenAPIMCPServer

app = typer.Typer(help="Expose an OpenAPI specification as MCP tools")


@app.callback()
def configure_logging(
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level for stderr diagnostics"),
) -> None:
    """Send all diagnostics to stderr; stdout belongs to the MCP protocol."""
    logging.basicConfig(
        stream=sys.stderr,
        level=log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _save_listing(listing: list, path: Path) -> None:
    """Save the tool listing as JSON or YAML, chosen by file suffix.

    Args:
        listing: The tool listing to save
        path: Path where to save the file

    Raises:
        typer.Exit: If the file cannot be saved
    """
    try:
        with open(path, "w") as f:
            if path.suffix in (".yaml", ".yml"):
                yaml.safe_dump({"tools": listing}, f, sort_keys=False)
            else:
                json.dump({"tools": listing}, f, indent=2)
    except OSError as e:
        typer.echo(f"Error saving to {path}: {str(e)}", err=True)
        raise typer.Exit(1)


@app.command()
def serve(
    server_version: Optional[str] = typer.Option(
        None, "--server-version", "-v", help="Server version (defaults to $SERVER_VERSION or 1.0.1)"
    ),
    api_base_url: Optional[str] = typer.Option(None, "--api-base-url", help="Base URL for API calls"),
    openapi_spec: Optional[str] = typer.Option(
        None, "--openapi-spec", help="URL or path of the OpenAPI document"
    ),
) -> None:
    """Compile the OpenAPI document and serve its tools over stdio."""
    config = load_config(
        server_version=server_version,
        api_base_url=api_base_url,
        openapi_spec=openapi_spec,
    )
    server = OpenAPIMCPServer(config)
    try:
        server.initialize()
    except SpecLoadError as e:
        typer.echo(f"Failed to start server: {str(e)}", err=True)
        raise typer.Exit(1)

    asyncio.run(server.run_stdio())


@app.command()
def tools(
    openapi_spec: Optional[str] = typer.Option(
        None, "--openapi-spec", help="URL or path of the OpenAPI document"
    ),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Save the listing to this file (.json, .yaml or .yml). Printed as JSON if not provided",
    ),
) -> None:
    """Print the tools compiled from the OpenAPI document."""
    config = load_config(openapi_spec=openapi_spec)
    try:
        registry = OpenAPIToolCompiler.from_source(config.openapi_spec).compile()
    except SpecLoadError as e:
        typer.echo(f"Error: {str(e)}", err=True)
        raise typer.Exit(1)

    listing = registry.listing()
    if output_file is None:
        typer.echo(json.dumps(listing, indent=2))
        return

    _save_listing(listing, output_file)
    typer.echo(f"Saved {len(listing)} tools to {output_file}", err=True)


@app.command()
def call(
    tool_id: Optional[str] = typer.Option(None, "--id", help="Tool identifier, e.g. GET-v1-voices"),
    name: Optional[str] = typer.Option(None, "--name", help="Tool name (first match wins)"),
    arguments: str = typer.Option("{}", "--arguments", "-a", help="Tool arguments as a JSON object"),
    api_base_url: Optional[str] = typer.Option(None, "--api-base-url", help="Base URL for API calls"),
    openapi_spec: Optional[str] = typer.Option(
        None, "--openapi-spec", help="URL or path of the OpenAPI document"
    ),
) -> None:
    """Invoke a single tool and print its response."""
    if not tool_id and not name:
        typer.echo("Error: one of --id or --name is required", err=True)
        raise typer.Exit(1)

    try:
        parsed_arguments = json.loads(arguments)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: invalid --arguments: {str(e)}", err=True)
        raise typer.Exit(1)

    config = load_config(api_base_url=api_base_url, openapi_spec=openapi_spec)
    try:
        registry = OpenAPIToolCompiler.from_source(config.openapi_spec).compile()
        dispatcher = ToolDispatcher(registry, config.api_base_url, headers=config.headers)
        result = asyncio.run(
            dispatcher.dispatch(tool_id=tool_id, name=name, arguments=parsed_arguments)
        )
    except OpenAPIMCPError as e:
        typer.echo(f"Error: {str(e)}", err=True)
        raise typer.Exit(1)

    for block in result.content:
        typer.echo(block.text)


def main():
    """Entry point for the CLI."""
    app()
