"""Command line entry point for dockgen."""

from pathlib import Path
from typing import Optional

import click

from dockgen import __version__
from dockgen.config import get_settings
from dockgen.logging import configure_logging
from dockgen.runtime.errors import DockgenError, NoRuntimeDetectedError
from dockgen.runtime.prompt import StaticPortPrompt, validate_port
from dockgen.runtime.registry import default_registry


def _parse_overrides(pairs: tuple[str, ...]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--set")
        overrides[key.strip()] = value
    return overrides


def _port_option(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return validate_port(value)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="dockgen")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """dockgen - generate a Dockerfile for a project directory.

    The project's runtime is detected from its manifest files; the
    toolchain version is read from project metadata when present.
    """
    settings = get_settings()
    configure_logging(verbose=verbose, level=settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".")
@click.pass_context
def detect(ctx: click.Context, path: Path) -> None:
    """Print the runtime detected in PATH."""
    registry = default_registry(settings=ctx.obj["settings"])
    detector = registry.detect(path)
    if detector is None:
        raise click.ClickException(str(NoRuntimeDetectedError(path)))
    click.echo(detector.name.value)


@cli.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".")
@click.option("-o", "--output", default="Dockerfile", show_default=True,
              help="File to write, relative to PATH; '-' for stdout")
@click.option("-r", "--runtime", "runtime_name", default=None,
              help="Skip detection and use this runtime (net, go)")
@click.option("-p", "--port", default=None, callback=_port_option,
              help="Container port (1-65535); prompts when omitted")
@click.option("-s", "--set", "pairs", multiple=True, metavar="KEY=VALUE",
              help="Override a template parameter (repeatable)")
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing output file")
@click.pass_context
def generate(
    ctx: click.Context,
    path: Path,
    output: str,
    runtime_name: Optional[str],
    port: Optional[str],
    pairs: tuple[str, ...],
    force: bool,
) -> None:
    """Generate a Dockerfile for the project in PATH."""
    settings = ctx.obj["settings"]
    overrides = _parse_overrides(pairs)
    prompt = StaticPortPrompt(port) if port is not None else None
    registry = default_registry(settings=settings, prompt=prompt)

    try:
        if runtime_name:
            detector = registry.get(runtime_name)
            content = detector.generate(path, overrides)
            name = detector.name
        else:
            name, content = registry.generate(path, overrides)
    except DockgenError as exc:
        raise click.ClickException(str(exc)) from exc

    if output == "-":
        click.echo(content.decode("utf-8"), nl=False)
        return

    target = path / output
    if target.exists() and not force:
        raise click.ClickException(f"{target} already exists (use --force to overwrite)")
    target.write_bytes(content)
    click.echo(f"Wrote {name.value} Dockerfile to {target}")


if __name__ == "__main__":
    cli()
