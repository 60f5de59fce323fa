"""Installed-version lookup and PyPI update checks.

Update checks are best-effort: any network, HTTP or parsing problem is
treated as "no information" so that a flaky connection never interrupts a
command.
"""

from __future__ import annotations

from importlib import metadata

import httpx
from packaging.version import InvalidVersion, Version
from rich.panel import Panel

from radnt.config import Config
from radnt.utils import console


def get_current_version(package_name: str = "radnt") -> str:
    """Return the installed distribution version, or ``"unknown"``."""
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return "unknown"


async def get_latest_version(
    config: Config,
    client: httpx.AsyncClient | None = None,
) -> str | None:
    """Fetch the latest released version from the PyPI JSON API.

    Args:
        config: Supplies the release URL and request timeout.
        client: Optional pre-built client (tests pass one with a
            ``MockTransport``).

    Returns:
        The version string, or ``None`` if it could not be determined.
    """
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=httpx.Timeout(config.update_check_timeout))

    try:
        response = await client.get(config.release_url)
        response.raise_for_status()
        version = response.json()["info"]["version"]
    except (httpx.HTTPError, ValueError, KeyError, TypeError):
        return None
    finally:
        if owns_client:
            await client.aclose()

    return version if isinstance(version, str) and version else None


def is_newer(latest: str, current: str) -> bool:
    """Return ``True`` if *latest* is a strictly greater version than *current*.

    Unparseable versions (``"unknown"`` included) never count as newer.
    """
    try:
        return Version(latest) > Version(current)
    except InvalidVersion:
        return False


async def check_for_updates(
    config: Config,
    client: httpx.AsyncClient | None = None,
) -> str | None:
    """Print an update notice when PyPI has a newer release.

    Returns:
        The newer version if one was announced, otherwise ``None``.
    """
    current = get_current_version(config.package_name)
    latest = await get_latest_version(config, client)
    if latest is None or not is_newer(latest, current):
        return None

    console.print(
        Panel(
            f"[dim]Current version:[/dim] {current}\n"
            f"[green]Latest version:[/green]  {latest}\n\n"
            f"[cyan]To update, run:[/cyan]\n"
            f"  pip install --upgrade {config.package_name}",
            title="[bold yellow]Update available![/bold yellow]",
            border_style="yellow",
            expand=False,
        )
    )
    return latest
