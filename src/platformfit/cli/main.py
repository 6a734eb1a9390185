from __future__ import annotations

import json
from contextlib import contextmanager
from dataclasses import asdict
from pathlib import Path
from typing import Iterator

import typer

from platformfit.config.settings import Settings
from platformfit.crop import CropOptions, FocusPoint, calculate_smart_crop, output_size
from platformfit.exceptions import PlatformFitError
from platformfit.platforms import PlatformRegistry, PlatformSpec
from platformfit.platforms.catalog import build_registry
from platformfit.safezone import ElementBounds, check_safe_zone
from platformfit.utils.logging import configure_logging, get_logger

app = typer.Typer(add_completion=False)
log = get_logger(__name__)


@contextmanager
def _reported_errors() -> Iterator[None]:
    try:
        yield
    except PlatformFitError as err:
        typer.echo(f"{err.label()}: {err.message}", err=True)
        raise typer.Exit(code=err.exit_code) from err


def _load_settings(log_level: str | None = None, catalog: str | None = None) -> Settings:
    settings = Settings()
    if catalog is not None:
        settings.catalog_path = catalog

    # Configure logging after overrides so we use the final resolved level
    with _reported_errors():
        configure_logging(log_level or settings.log_level)
    return settings


def _require_platform(registry: PlatformRegistry, platform_id: str) -> PlatformSpec:
    spec = registry.get_spec(platform_id.strip().lower())
    if spec is None:
        valid = ", ".join(registry.ids())
        raise typer.BadParameter(f"Unknown platform '{platform_id}'. Use one of: {valid}.")
    return spec


def _parse_dimensions(value: str, *, label: str) -> tuple[float, float]:
    parts = value.lower().replace(" ", "").split("x")
    if len(parts) != 2:
        raise typer.BadParameter(f"Invalid {label} '{value}'. Use WIDTHxHEIGHT, e.g. 1920x1080.")
    try:
        width, height = float(parts[0]), float(parts[1])
    except ValueError:
        raise typer.BadParameter(f"Invalid {label} '{value}'. Use WIDTHxHEIGHT, e.g. 1920x1080.")
    return width, height


def _parse_focus(value: str | None) -> FocusPoint:
    if value is None:
        return FocusPoint()
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2:
        raise typer.BadParameter(f"Invalid focus '{value}'. Use X,Y with values in 0..1.")
    try:
        return FocusPoint(float(parts[0]), float(parts[1]))
    except ValueError:
        raise typer.BadParameter(f"Invalid focus '{value}'. Use X,Y with values in 0..1.")


def _load_elements(path: Path) -> list[ElementBounds]:
    if not path.exists():
        raise typer.BadParameter(f"Elements file not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        raise typer.BadParameter(f"Elements file is not valid JSON: {path}")
    if isinstance(payload, dict):
        payload = payload.get("elements", [])
    try:
        return [ElementBounds.from_dict(item) for item in payload]
    except (KeyError, TypeError, ValueError) as exc:
        raise typer.BadParameter(f"Invalid element entry in {path}: {exc}")


@app.command()
def platforms(
    catalog: str = typer.Option(None, help="Platform catalog JSON (overrides config)."),
) -> None:
    """List available platforms."""
    settings = _load_settings(catalog=catalog)
    with _reported_errors():
        registry = build_registry(settings)
    for spec in registry:
        typer.echo(f"{spec.id}\t{spec.name}\t{len(spec.sizes)} sizes")


@app.command()
def spec(
    platform_id: str = typer.Argument(..., help="Platform id, e.g. xiaohongshu."),
    catalog: str = typer.Option(None, help="Platform catalog JSON (overrides config)."),
    json_output: bool = typer.Option(False, "--json", help="Output the platform spec as JSON."),
) -> None:
    """Show a platform's sizes, safe zone and file rules."""
    settings = _load_settings(catalog=catalog)
    with _reported_errors():
        registry = build_registry(settings)
    platform = _require_platform(registry, platform_id)

    if json_output:
        typer.echo(json.dumps(asdict(platform), indent=2, ensure_ascii=False))
        return

    recommended = registry.get_recommended_size(platform.id)
    typer.echo(f"{platform.name} ({platform.id})")
    typer.echo("name\twidth\theight\taspect_ratio\trecommended")
    for size in platform.sizes:
        height = str(size.height) if size.height else "auto"
        flag = "*" if size is recommended else ""
        typer.echo(f"{size.name}\t{size.width}\t{height}\t{size.aspect_ratio}\t{flag}")
    zone = platform.safe_zone
    if zone is not None:
        typer.echo(f"safe_zone: top={zone.top} bottom={zone.bottom} left={zone.left} right={zone.right}")
    file_spec = platform.file_spec
    typer.echo(f"formats: {', '.join(file_spec.formats)}\tmax_size_kb: {file_spec.max_size_kb:g}")


@app.command()
def crop(
    platform_id: str = typer.Argument(..., help="Platform id, e.g. xiaohongshu."),
    source: str = typer.Option(..., help="Source canvas size as WIDTHxHEIGHT."),
    size: str = typer.Option(None, help="Target size name (defaults to the recommended size)."),
    strategy: str = typer.Option(None, help="Crop strategy: center, focus, smart (overrides config)."),
    focus: str = typer.Option(None, help="Focus point X,Y in 0..1 (focus strategy)."),
    catalog: str = typer.Option(None, help="Platform catalog JSON (overrides config)."),
    log_level: str = typer.Option(None, help="Log level (overrides config)."),
) -> None:
    """Compute the crop region for fitting a canvas to a platform size."""
    settings = _load_settings(log_level=log_level, catalog=catalog)
    source_width, source_height = _parse_dimensions(source, label="source")

    with _reported_errors():
        registry = build_registry(settings)
        platform = _require_platform(registry, platform_id)
        target = platform.find_size(size) if size else registry.get_recommended_size(platform.id)
        if target is None:
            valid = ", ".join(s.name for s in platform.sizes)
            raise typer.BadParameter(f"Unknown size '{size}' for {platform.id}. Use one of: {valid}.")

        options = CropOptions(
            safe_zone=platform.safe_zone,
            focus_point=_parse_focus(focus),
            strategy=strategy or settings.default_strategy,
        )
        result = calculate_smart_crop(source_width, source_height, target, options)

    out_width, out_height = output_size(result, target)
    payload = {
        "platform": platform.id,
        "size": target.name,
        "output": {"width": out_width, "height": out_height},
        **result.to_dict(),
    }
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command("check-file")
def check_file(
    platform_id: str = typer.Argument(..., help="Platform id, e.g. taobao."),
    size_kb: float = typer.Option(..., "--size-kb", help="File size in KB."),
    file_format: str = typer.Option(..., "--format", help="File format, e.g. png."),
    catalog: str = typer.Option(None, help="Platform catalog JSON (overrides config)."),
) -> None:
    """Check a file's size and format against a platform's rules."""
    settings = _load_settings(catalog=catalog)
    with _reported_errors():
        registry = build_registry(settings)
    result = registry.check_file_compliance(platform_id.strip().lower(), size_kb, file_format)
    if result.valid:
        typer.echo("✅ compliant")
        return
    for error in result.errors:
        typer.echo(f"❌ {error}")
    raise typer.Exit(code=1)


@app.command("check-safe-zone")
def check_safe_zone_cmd(
    platform_id: str = typer.Argument(..., help="Platform id, e.g. douyin."),
    elements: Path = typer.Argument(..., help="JSON file with a list of element bounds."),
    canvas: str = typer.Option(None, help="Canvas size WIDTHxHEIGHT (defaults to the recommended size)."),
    catalog: str = typer.Option(None, help="Platform catalog JSON (overrides config)."),
    json_output: bool = typer.Option(False, "--json", help="Output the report as JSON."),
) -> None:
    """Report elements that intrude into a platform's safe zone."""
    settings = _load_settings(catalog=catalog)
    with _reported_errors():
        registry = build_registry(settings)
    platform = _require_platform(registry, platform_id)
    if platform.safe_zone is None:
        typer.echo(f"{platform.id} defines no safe zone.")
        return

    if canvas is not None:
        canvas_width, canvas_height = _parse_dimensions(canvas, label="canvas")
    else:
        recommended = registry.get_recommended_size(platform.id)
        if recommended.is_unbounded_height:
            raise typer.BadParameter(f"Pass --canvas: '{recommended.name}' has no fixed height.")
        canvas_width, canvas_height = recommended.width, recommended.height

    report = check_safe_zone(canvas_width, canvas_height, _load_elements(elements), platform.safe_zone)

    if json_output:
        typer.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    elif report.is_in_safe_zone:
        typer.echo("✅ all elements inside the safe zone")
    else:
        typer.echo("element\ttype\tedge\toverflow_px")
        for v in report.violations:
            typer.echo(f"{v.element_name}\t{v.element_type}\t{v.violated_zone.value}\t{v.overflow_amount:g}")
    if not report.is_in_safe_zone:
        raise typer.Exit(code=1)


@app.command()
def config() -> None:
    """Print resolved config."""
    s = Settings()
    typer.echo(json.dumps(s.to_public_dict(), indent=2))


def _main() -> None:
    app()


if __name__ == "__main__":
    _main()
