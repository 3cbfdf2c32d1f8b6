from pathlib import Path
from typing import Optional

import typer

from .config import Settings
from .logging import get_logger
from .imaging.loading import ImageLoadError, load_mask
from .imaging.rendering import OverlaySaveError, render_overlay, save_overlay
from .regions.detection import RegionDetectionConfig, detect_regions
from .regions.tracer import TraceDidNotConvergeError

app = typer.Typer(
    help=(
        "alpharects – segment a binary image into distinct rectangles using marching squares. "
        "Coordinates start at (0,0) in the top left corner; results are printed as (x, y, w, h) tuples."
    ),
    no_args_is_help=True,
)


@app.command()
def detect(
    image_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, metavar="IMAGE",
        help="The image in any standard format to be processed",
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", metavar="OUTPUT",
        help="An optional output image file to render the results to",
    ),
    max_trace_steps: Optional[int] = typer.Option(
        None, min=1, help="Abort a boundary trace that takes this many moves without closing (default: derived from image size)",
    ),
) -> None:
    """
    Detect opaque regions in IMAGE and print one rectangle per line.

    A pixel is opaque when its alpha value is non-zero. Rectangle edges are
    inclusive on both sides.
    """
    logger = get_logger(__name__)
    settings = Settings(max_trace_steps=max_trace_steps)

    try:
        mask = load_mask(image_path)
    except ImageLoadError as exc:
        logger.error(f"Failed to load image: {exc}")
        raise typer.Exit(code=1) from exc

    logger.info(f"Loaded {image_path} ({mask.width}x{mask.height}, {mask.count()} opaque pixels)")

    try:
        rects = detect_regions(mask, RegionDetectionConfig.from_settings(settings))
    except TraceDidNotConvergeError as exc:
        logger.error(f"Region detection aborted: {exc}")
        raise typer.Exit(code=1) from exc

    for rect in rects:
        typer.echo(str(rect))

    if output is not None:
        overlay = render_overlay(mask.dimensions(), rects, alpha=settings.overlay_alpha)
        try:
            save_overlay(overlay, output)
        except OverlaySaveError as exc:
            logger.error(f"Failed to save overlay: {exc}")
            raise typer.Exit(code=1) from exc
        logger.info(f"Wrote overlay with {len(rects)} regions to {output}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
