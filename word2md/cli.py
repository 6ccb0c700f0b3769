"""CLI entry point for word2md."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.panel import Panel
from rich.syntax import Syntax

from word2md.config import Word2MdConfig, load_config
from word2md.config.loader import DEFAULT_CONFIG_TEMPLATE
from word2md.converter import UnsupportedFileError, WordConverter
from word2md.log import configure_logging

app = typer.Typer(
    name="word2md",
    help="Convert Word documents (.docx) to clean GitHub-flavored Markdown.",
)

config_app = typer.Typer(help="Manage word2md configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: Word2MdConfig | None = None


def _get_config() -> Word2MdConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to word2md.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


@app.command()
def convert(
    file: str = typer.Argument(..., help="Path to the .docx file to convert"),
    output: str | None = typer.Option(None, "--output", "-o", help="Write markdown to file"),
) -> None:
    """Convert a Word document to markdown."""
    cfg = _get_config()
    converter = WordConverter(extraction=cfg.extraction, lint=cfg.lint)

    try:
        result = asyncio.run(converter.convert_with_result(file))
    except UnsupportedFileError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        rprint(f"[red]Error:[/red] Could not convert '{file}': {e}")
        raise typer.Exit(1)

    if output:
        Path(output).write_text(result.markdown + "\n", encoding="utf-8")
        rprint(f"[green]Written to[/green] {output}")
        rprint(
            Panel(
                f"[dim]Source:[/dim]    {result.source}\n"
                f"[dim]Size:[/dim]      {result.size} bytes\n"
                f"[dim]Warnings:[/dim]  {len(result.messages)}",
                title="Conversion Result",
                border_style="green",
            )
        )
    else:
        typer.echo(result.markdown)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on"),
) -> None:
    """Run the HTTP conversion API."""
    import uvicorn

    from word2md.server import create_app

    cfg = _get_config()
    bind_host = host or cfg.server.host
    bind_port = port or cfg.server.port
    rprint(f"[bold]word2md[/bold] listening on http://{bind_host}:{bind_port}")
    uvicorn.run(create_app(cfg), host=bind_host, port=bind_port, log_config=None)


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing word2md.yaml"),
) -> None:
    """Write a default word2md.yaml in the current directory."""
    path = Path("word2md.yaml")
    if path.exists() and not force:
        rprint(f"[yellow]{path} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    path.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {path}")


@config_app.command("show")
def config_show() -> None:
    """Print the resolved configuration."""
    cfg = _get_config()
    rendered = yaml.safe_dump(cfg.model_dump(), sort_keys=False)
    rprint(Syntax(rendered, "yaml", theme="ansi_dark"))


if __name__ == "__main__":
    app()
