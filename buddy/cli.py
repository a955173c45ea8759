"""Onboarding Buddy CLI - knowledge base management and local Q&A."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import replace

import click

from buddy.logging_config import configure_logging


def _load(ctx: click.Context):
    from buddy.config import load_config

    cfg = ctx.obj.get("config")
    if cfg is None:
        try:
            cfg = load_config(ctx.obj.get("config_path"))
        except Exception as e:
            click.echo(f"✗ Configuration error: {e}", err=True)
            raise click.Abort()
        ctx.obj["config"] = cfg
    return cfg


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Configuration file path")
@click.option("--log-level", default="INFO", show_default=True, help="Logging level")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, log_level: str):
    """Onboarding Buddy CLI - knowledge base management and local Q&A."""
    configure_logging(log_level.upper())
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--chunk-size", type=int, default=None, help="Override chunk size (characters)")
@click.option("--overlap", type=int, default=None, help="Override chunk overlap (characters)")
@click.pass_context
def ingest(ctx: click.Context, file: str, chunk_size: int | None, overlap: int | None):
    """Ingest a knowledge base file ({"documents": [...]}) into the index."""
    from buddy.container import build_ingestor

    cfg = _load(ctx)
    chunking = cfg.chunking
    if chunk_size is not None:
        chunking = replace(chunking, chunk_size=chunk_size)
    if overlap is not None:
        chunking = replace(chunking, overlap=overlap)
    if chunking.chunk_size <= 0 or not 0 <= chunking.overlap < chunking.chunk_size:
        raise click.BadParameter(
            f"overlap ({chunking.overlap}) must be >= 0 and smaller than chunk size ({chunking.chunk_size})"
        )

    try:
        ingestor = build_ingestor(replace(cfg, chunking=chunking))
        report = ingestor.ingest_file(file)
    except Exception as e:
        click.echo(f"✗ Ingestion failed: {e}", err=True)
        raise click.Abort()

    click.echo(f"✓ Ingested: {report.ingested}/{report.total} documents")
    click.echo(f"  Skipped: {report.skipped}")
    click.echo(f"  Chunks: {report.chunks}")
    if report.errors:
        click.echo(f"  Errors: {len(report.errors)}")
        for err in report.errors[:5]:
            click.echo(f"    - {err['source']}: {err['error']}")


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print stats as JSON")
@click.pass_context
def stats(ctx: click.Context, as_json: bool):
    """Show knowledge index statistics."""
    from buddy.container import build_index

    cfg = _load(ctx)
    index_stats = build_index(cfg).get_stats()

    if as_json:
        click.echo(json.dumps(index_stats.to_dict(), indent=2))
        return

    click.echo(f"Index: {cfg.storage.index_path}")
    click.echo(f"  Total chunks: {index_stats.total_chunks}")
    click.echo(f"  Avg chunk length: {index_stats.avg_chunk_length}")
    click.echo(f"  Sources ({len(index_stats.sources)}):")
    for source in index_stats.sources:
        click.echo(f"    - {source}")


@cli.command()
@click.argument("source")
@click.pass_context
def delete(ctx: click.Context, source: str):
    """Delete every chunk of SOURCE from the index."""
    from buddy.container import build_index

    removed = build_index(_load(ctx)).delete_by_source(source)
    click.echo(f"✓ Deleted {removed} chunks from {source}")


@cli.command()
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def clear(ctx: click.Context, yes: bool):
    """Remove every chunk from the index."""
    from buddy.container import build_index

    cfg = _load(ctx)
    if not yes:
        click.confirm(f"Clear the knowledge index at {cfg.storage.index_path}?", abort=True)
    build_index(cfg).clear()
    click.echo("✓ Cleared knowledge index")


@cli.command()
@click.argument("question")
@click.option("--user-id", default="cli", show_default=True, help="User id passed to the agent")
@click.pass_context
def ask(ctx: click.Context, question: str, user_id: str):
    """Ask the onboarding agent a QUESTION."""
    from buddy.container import build_agent

    cfg = _load(ctx)
    try:
        agent = build_agent(cfg)
    except ValueError as e:
        click.echo(f"✗ {e}", err=True)
        raise click.Abort()

    click.echo(asyncio.run(agent.handle_message(user_id, question)))


@cli.command()
@click.option("--host", default=None, help="Bind host (defaults to api.host)")
@click.option("--port", type=int, default=None, help="Bind port (defaults to api.port)")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from buddy.api.app import create_app

    cfg = _load(ctx)
    logging.getLogger(__name__).info("Starting API server")
    uvicorn.run(create_app(cfg), host=host or cfg.api.host, port=port or cfg.api.port)


def main():
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
