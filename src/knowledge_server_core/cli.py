"""Command line entry point: run the API server or ingest files locally."""

import asyncio
from pathlib import Path
from typing import List, Optional

import typer
import uvicorn

from .server import KnowledgeServer
from .utils.config_utils import read_config
from .utils.log_utils import setup_logging

app = typer.Typer(
    name="knowledge-server",
    help="Ingest PDF/DOCX documents into a knowledge store and answer questions over it.",
    no_args_is_help=True,
)


@app.command()
def serve(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (overrides config)."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port (overrides config)."),
):
    """Start the HTTP API."""
    from .api import create_app

    settings = read_config(config)
    setup_logging(settings)
    server = KnowledgeServer(config=settings)
    uvicorn.run(
        create_app(server),
        host=host or settings["server"]["host"],
        port=port or settings["server"]["port"],
    )


@app.command()
def ingest(
    files: List[Path] = typer.Argument(..., exists=True, dir_okay=False, help="PDF or DOCX files."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
    store: bool = typer.Option(False, "--store", help="Insert extracted text into the configured store."),
):
    """Run the extraction pipeline over local files and report each outcome."""
    settings = read_config(config)
    setup_logging(settings, console=False)
    server = KnowledgeServer(config=settings)

    failures = asyncio.run(_ingest_files(server, files, store))
    if failures:
        raise typer.Exit(code=1)


async def _ingest_files(server: KnowledgeServer, files: List[Path], store: bool) -> int:
    failures = 0
    async with server:
        for path in files:
            data = path.read_bytes()
            if store:
                result = await server.upload_file(data, path.name)
                if result["success"]:
                    typer.echo(f"{path.name}: stored via {result['method']} ({result['characters']} characters)")
                else:
                    failures += 1
                    typer.echo(f"{path.name}: {result['kind']}: {result['error']}", err=True)
                continue

            outcome = await server.pipeline.extract_bytes(data, path.name)
            if outcome.ok:
                typer.echo(f"{path.name}: {outcome.method.value} ({len(outcome.text)} characters)")
            else:
                failures += 1
                typer.echo(f"{path.name}: {outcome.kind.value}: {outcome.message}", err=True)
    return failures


def main():
    app()


if __name__ == "__main__":
    main()
