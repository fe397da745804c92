import json

import click

from wayfinder.detection.models.enums import AssignmentOrder, ContainmentMode, DiscoveryBackend


@click.group()
def main() -> None:
    """Wayfinder - infer workspaces and projects from source-folder layout."""


@main.command()
@click.argument("search_paths", nargs=-1, type=click.Path(file_okay=False))
@click.option(
    "--ext",
    "extensions",
    multiple=True,
    help="File extension to look for, without the dot (repeatable; default: from WAYFINDER_SEARCH_FILE_EXTENSIONS).",
)
@click.option("--source-folder", default=None, help="Source folder name (default: from WAYFINDER_SOURCE_FOLDER_NAME).")
@click.option("--blacklist", "black_list", multiple=True, help="Path prefix to exclude (repeatable).")
@click.option(
    "--containment",
    type=click.Choice([mode.value for mode in ContainmentMode]),
    default=None,
    help="How workspace roots are compared while merging.",
)
@click.option(
    "--assignment-order",
    type=click.Choice([order.value for order in AssignmentOrder]),
    default=None,
    help="Order in which workspaces claim project roots.",
)
@click.option(
    "--backend",
    type=click.Choice([backend.value for backend in DiscoveryBackend]),
    default=None,
    help="File discovery backend (default: from WAYFINDER_DISCOVERY_BACKEND or walk).",
)
@click.option("--case-insensitive/--case-sensitive", default=None, help="Force path case handling.")
@click.option("--touch", is_flag=True, default=False, help="Populate lastTouched from modification times.")
def detect(
    search_paths: tuple[str, ...],
    extensions: tuple[str, ...],
    source_folder: str | None,
    black_list: tuple[str, ...],
    containment: str | None,
    assignment_order: str | None,
    backend: str | None,
    case_insensitive: bool | None,
    touch: bool,
) -> None:
    """Detect workspaces under SEARCH_PATHS and print them as JSON."""
    from wayfinder.detection.discovery import DiscoveryError, create_discoverer
    from wayfinder.detection.inference.hierarchy import UnassignedProjectRootError
    from wayfinder.detection.log import setup_logging
    from wayfinder.detection.managers.detection import run_detection
    from wayfinder.detection.models.api import DetectRequest
    from wayfinder.detection.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level)

    body = DetectRequest(
        search_paths=list(search_paths),
        search_file_extensions=list(extensions) or None,
        source_folder_name=source_folder,
        black_list=list(black_list) or None,
        case_insensitive=case_insensitive,
        containment=containment,
        assignment_order=assignment_order,
        touch=touch,
    )
    discoverer = create_discoverer(
        DiscoveryBackend(backend) if backend else settings.discovery_backend,
        case_insensitive=settings.resolve_case_insensitive() if case_insensitive is None else case_insensitive,
        timeout=settings.discovery_timeout,
    )

    try:
        workspaces = run_detection(body, settings, discoverer)
    except DiscoveryError as exc:
        raise click.ClickException(str(exc)) from None
    except UnassignedProjectRootError as exc:
        raise click.ClickException(f"Internal error: {exc}") from None

    payload = [ws.model_dump(mode="json", by_alias=True) for ws in workspaces]
    click.echo(json.dumps(payload, indent=2))


@main.command()
@click.option("--host", default=None, help="Bind host (default: from WAYFINDER_HOST or 127.0.0.1).")
@click.option("--port", default=None, type=int, help="Bind port (default: from WAYFINDER_PORT or 8000).")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the detection HTTP API."""
    import uvicorn

    from wayfinder.detection.settings import WayfinderSettings

    settings = WayfinderSettings()

    uvicorn.run(
        "wayfinder.detection.app:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level="warning",  # uvicorn's own logging is intercepted by loguru
    )


if __name__ == "__main__":
    main()
