"""CLI interface for the meme generator."""

import logging
from pathlib import Path

import click

from memepen.api.builder import build_service
from memepen.config import load_config
from memepen.exceptions import MemepenError


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to memepen.toml. Defaults to ./memepen.toml if present.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config: Path | None) -> None:
    """Render text onto meme templates."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"config_path": config}


def _load(ctx: click.Context):
    try:
        cfg = load_config(ctx.obj["config_path"])
        return cfg, build_service(cfg)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@main.command()
@click.pass_context
def templates(ctx: click.Context) -> None:
    """List available templates."""
    _, service = _load(ctx)
    for template in service.templates.list():
        click.echo(
            f"{template.id}  {template.name}  "
            f"({template.field_count} field(s), {template.image.width}x{template.image.height})"
        )


@main.command()
@click.argument("template_id")
@click.argument("text", nargs=-1, required=True)
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Output PNG path. Defaults to <template_id>.png",
)
@click.pass_context
def render(ctx: click.Context, template_id: str, text: tuple[str, ...], output: Path | None) -> None:
    """
    Render TEXT onto a template and save it locally.

    Pass one TEXT argument per text field, in template order:

        memepen render yall-got-any-more-of-them "TOP TEXT" "BOTTOM TEXT"
    """
    _, service = _load(ctx)
    output = output or Path(f"{template_id}.png")

    try:
        img = service.create_meme_from_template_id(template_id, list(text))
        img.save(output, "PNG")
    except MemepenError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    except OSError as e:
        click.echo(f"Error: could not write {output}: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"✓ Meme saved to: {output}")


@main.command()
@click.argument("template_id")
@click.argument("text", nargs=-1, required=True)
@click.pass_context
def create(ctx: click.Context, template_id: str, text: tuple[str, ...]) -> None:
    """Render TEXT onto a template, upload it and print its URL."""
    _, service = _load(ctx)

    try:
        meme = service.create_meme_and_upload_from_template_id(template_id, list(text))
    except MemepenError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"✓ Meme {meme.id} uploaded: {meme.image.path}")


@main.command()
@click.option("--host", type=str, help="Bind address. Uses config value if not specified.")
@click.option("--port", type=int, help="Port. Uses config value if not specified.")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    from memepen.api.server import create_app

    cfg, service = _load(ctx)
    uvicorn.run(
        create_app(service),
        host=host or cfg.server.host,
        port=port or cfg.server.port,
    )


if __name__ == "__main__":
    main()
