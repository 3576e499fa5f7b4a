from __future__ import annotations

import os
from collections.abc import Callable
from functools import wraps
from importlib import metadata
from pathlib import Path
from typing import Any

import typer
import yaml

from .config import load_spectrum_config
from .interpolate import LinearInterpolator
from .interval import Interval
from .types import Spectrum, SpectrumSample
from .utils.logging import get_logger
from .version import __version__

_DEBUG_ENV = "BANDLIMIT_DEBUG"

app = typer.Typer(add_completion=False)
_LOG = get_logger(__name__)


def _debug_enabled() -> bool:
    return os.getenv(_DEBUG_ENV, "").lower() in {"1", "true", "yes", "on"}


def _echo_error(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)


def _log_cli_exception(exc: Exception, context: str) -> None:
    if _debug_enabled():
        _LOG.exception("%s", exc)
    else:
        _LOG.error("%s failed: %s", context, exc)


def handle_cli_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Provide consistent logging and user-friendly errors for CLI commands."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (typer.BadParameter, typer.Exit, KeyboardInterrupt):
            raise
        except (
            FileNotFoundError,
            OSError,
            yaml.YAMLError,
            ValueError,
            IndexError,
        ) as exc:
            _log_cli_exception(exc, func.__name__)
            _echo_error(str(exc))
        except Exception as exc:  # pragma: no cover - handled by debug path
            if _debug_enabled():
                raise
            _LOG.exception("Unexpected error while running %s: %s", func.__name__, exc)
            _echo_error(f"Unexpected error. Re-run with {_DEBUG_ENV}=1 for a traceback.")

        raise typer.Exit(code=1)

    return wrapper


def _package_version() -> str:
    try:
        return metadata.version("bandlimit")
    except metadata.PackageNotFoundError:
        return __version__


def _print_version() -> None:
    typer.echo(f"bandlimit version: {_package_version()}")


def _format_sample(sample: SpectrumSample) -> str:
    return f"wavelength_nm={float(sample.wavelength):.6g} amplitude={float(sample.amplitude):.6g}"


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version information and exit.",
        is_eager=True,
    ),
) -> None:
    if version:
        _print_version()
        raise typer.Exit()


@app.command("version")  # type: ignore[misc]
def version_command() -> None:
    """Print the package version."""

    _print_version()


@app.command()  # type: ignore[misc]
@handle_cli_exceptions
def info(config: Path) -> None:
    """Summarise the spectrum declared in CONFIG."""

    spectrum = Spectrum.from_config(load_spectrum_config(config))
    typer.echo(f"range: {spectrum.lambda_min} .. {spectrum.lambda_max}")
    typer.echo(f"bins: {spectrum.size()}")
    typer.echo(f"dtype: {spectrum.dtype}")


@app.command()  # type: ignore[misc]
@handle_cli_exceptions
def sample(
    config: Path,
    position: float | None = typer.Option(
        None, "--position", "-p", help="Normalised position in [0, 1]"
    ),
    wavelength: float | None = typer.Option(
        None, "--wavelength", "-w", help="Wavelength in nanometres"
    ),
    interval: tuple[float, float] = typer.Option(
        (None, None), "--interval", "-i", help="Normalised interval to average over"
    ),
) -> None:
    """Reconstruct the spectrum declared in CONFIG at one query."""

    has_interval = interval[0] is not None
    chosen = sum((position is not None, wavelength is not None, has_interval))
    if chosen != 1:
        raise typer.BadParameter("Pass exactly one of --position, --wavelength or --interval")

    cfg = load_spectrum_config(config)
    interpolator = LinearInterpolator(Spectrum.from_config(cfg))
    _LOG.debug("Loaded %d bins from %s", len(cfg.bins), config)

    if position is not None:
        result = interpolator.at_position(position)
    elif wavelength is not None:
        result = interpolator.at_wavelength(wavelength)
    else:
        result = interpolator.average(Interval(interval[0], interval[1]))

    typer.echo(_format_sample(result))


if __name__ == "__main__":  # pragma: no cover
    app()
