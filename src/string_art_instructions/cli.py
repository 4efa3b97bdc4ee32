"""Unified CLI for string-art-instructions.

Commands are registered on a single ``typer.Typer`` app exposed via the
``string-art`` console entry-point.  ``generate-instructions`` runs the
``generate`` command on its own.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from .document import InstructionError

app = typer.Typer(
    name="string-art",
    help="Turn string-art renderer output into step-by-step stringing instructions.",
    add_completion=False,
    no_args_is_help=True,
)

# ---------------------------------------------------------------------------
# Shared option types
# ---------------------------------------------------------------------------

DocumentArg = Annotated[
    Path, typer.Argument(help="Renderer output JSON (pins and line segments).")
]
WidthArg = Annotated[
    Optional[float],
    typer.Argument(help="Physical board width in inches; enables thread estimate."),
]
ConfigOpt = Annotated[
    Optional[Path], typer.Option(help="Preview settings JSON (default: string_art.json).")
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Log to stderr.")]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _check_width(width_inches: float | None) -> float | None:
    """Reject a non-positive board width; None keeps the plain variant."""
    if width_inches is not None and width_inches <= 0:
        raise typer.BadParameter(
            f"Physical width must be positive, got {width_inches}."
        )
    return width_inches


def _load(document: Path, width_inches: float | None):
    """Run the pipeline, turning validation failures into exit code 1."""
    from .pipeline import process_document

    try:
        return process_document(document, width_inches)
    except (InstructionError, FileNotFoundError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _load_settings(config: Path | None) -> dict[str, object]:
    from .settings import load_defaults

    try:
        return load_defaults(config)
    except InstructionError as exc:
        raise typer.BadParameter(str(exc)) from exc


# ── Instructions ──────────────────────────────────────────────────────────


@app.command()
def generate(
    document: DocumentArg,
    width_inches: WidthArg = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print the stringing sequence, with thread length when a width is given."""
    from .printer import write_instructions

    _configure_logging(verbose)
    width_inches = _check_width(width_inches)
    result = _load(document, width_inches)
    write_instructions(result.lines(), sys.stdout)


@app.command()
def summary(
    document: DocumentArg,
    width_inches: WidthArg = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print counts for the sequenced artwork without the full step list."""
    _configure_logging(verbose)
    width_inches = _check_width(width_inches)
    result = _load(document, width_inches)

    rows = [
        ("pins", result.document.pin_count),
        ("segments", result.total_steps),
        ("wraps", result.wraps),
        ("label base", result.encoder.base),
        ("label digits", result.encoder.digits),
    ]
    if result.estimate is not None:
        rows.append(("thread (in)", result.estimate.rounded_inches))
        rows.append(("thread (km)", f"{result.estimate.kilometers:.3f}"))
    for key, value in rows:
        print(f"  {key:<14} {value}")


# ── Preview ───────────────────────────────────────────────────────────────


@app.command()
def preview(
    document: DocumentArg,
    output: Annotated[Path, typer.Option(help="Output image path.")] = Path(
        "preview.png"
    ),
    config: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Render the sequenced traversal to an image, wraps highlighted."""
    from .preview import render_traversal, save_preview

    _configure_logging(verbose)
    settings = _load_settings(config)
    result = _load(document, None)

    image = render_traversal(
        result.document,
        result.traversal,
        line_color=tuple(settings["preview_line_color"]),  # type: ignore[arg-type]
        wrap_color=tuple(settings["preview_wrap_color"]),  # type: ignore[arg-type]
        pin_color=tuple(settings["preview_pin_color"]),  # type: ignore[arg-type]
        background=tuple(settings["preview_background"]),  # type: ignore[arg-type]
        thickness=int(settings["preview_thickness"]),  # type: ignore[arg-type]
    )
    try:
        save_preview(image, output)
    except OSError as exc:
        raise typer.BadParameter(str(exc)) from exc
    print(f"Saved preview ({result.total_steps} steps, {result.wraps} wraps) to {output}")


# ── Single-command entry point ────────────────────────────────────────────

generate_app = typer.Typer(
    name="generate-instructions",
    add_completion=False,
    no_args_is_help=True,
)
generate_app.command()(generate)


def main() -> None:
    app()


def generate_main() -> None:
    generate_app()
