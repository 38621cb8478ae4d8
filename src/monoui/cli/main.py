"""MonoUI CLI.

Command-line front end for inspecting colors and rectangle bounds.
"""

from __future__ import annotations

import json
import math
from enum import Enum
from typing import Annotated

import typer

from monoui import __version__
from monoui.colors import ColorFormatError, ColorRgb
from monoui.config import settings
from monoui.geometry import Matrix, Rect
from monoui.utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="monoui",
    help="MonoUI: geometry and color primitives",
    add_completion=False,
)


class ColorModel(str, Enum):
    """Target color model."""

    rgb = "rgb"
    hsl = "hsl"
    hsv = "hsv"


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"monoui {__version__}")


@app.command()
def color(
    text: Annotated[
        str,
        typer.Argument(help="Color string: #hex, rgb(), hsl(), hsv() or a known name"),
    ],
    to: Annotated[
        ColorModel | None,
        typer.Option("--to", "-t", help="Target color model (default from settings)"),
    ] = None,
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Increase verbosity")
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Parse a color and print it in the target model."""
    _configure_logging(verbose)
    logger = get_logger(__name__)

    model = to or ColorModel(settings.DEFAULT_COLOR_MODEL)
    logger.info("Converting color", text=text, model=model.value)

    try:
        parsed = ColorRgb.parse(text)
    except ColorFormatError as e:
        if json_output:
            typer.echo(json.dumps({"error": str(e)}))
        else:
            typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    converted = {
        ColorModel.rgb: parsed,
        ColorModel.hsl: parsed.to_hsl(),
        ColorModel.hsv: parsed.to_hsv(),
    }[model]

    if json_output:
        typer.echo(
            json.dumps(
                {"model": model.value, "text": converted.to_string(), **converted.model_dump()}
            )
        )
    else:
        typer.echo(converted.to_string())


@app.command()
def bounds(  # noqa: PLR0913
    x: Annotated[float, typer.Argument(help="Left edge")],
    y: Annotated[float, typer.Argument(help="Top edge")],
    width: Annotated[float, typer.Argument(help="Width (may be negative)")],
    height: Annotated[float, typer.Argument(help="Height (may be negative)")],
    rotate: Annotated[
        float, typer.Option("--rotate", "-r", help="Rotation in degrees")
    ] = 0.0,
    scale_x: Annotated[float, typer.Option("--scale-x", help="Horizontal scale")] = 1.0,
    scale_y: Annotated[float, typer.Option("--scale-y", help="Vertical scale")] = 1.0,
    translate_x: Annotated[
        float, typer.Option("--translate-x", help="Horizontal offset")
    ] = 0.0,
    translate_y: Annotated[
        float, typer.Option("--translate-y", help="Vertical offset")
    ] = 0.0,
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Increase verbosity")
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Print the axis-aligned bounds of a rectangle after scale, rotate, translate."""
    _configure_logging(verbose)
    logger = get_logger(__name__)

    matrix = (
        Matrix.create_scale(scale_x, scale_y)
        * Matrix.create_rotation(math.radians(rotate))
        * Matrix.create_translation(translate_x, translate_y)
    )
    source = Rect(x, y, width, height).normalize()
    aabb = source.transform_to_aabb(matrix)
    logger.info("Computed bounds", source=source, matrix=matrix, bounds=aabb)

    if json_output:
        typer.echo(json.dumps(aabb.model_dump()))
    else:
        typer.echo(str(aabb))


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)
