"""Radnt configuration.

Typed configuration shared by every command.  The project directory and the
other locations the commands touch are explicit fields here rather than being
read from the process working directory deep inside library code, so commands
can be pointed at any project (tests use ``tmp_path``).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from radnt.errors import ConfigError
from radnt.utils import format_validation_error


class Config(BaseModel):
    """Global Radnt configuration.

    Instances are created once by the CLI entry point (usually through
    ``Config.from_env``) and passed to the command functions.
    """

    project_dir: Path = Field(default=Path("."), description="Root of the Next.js project")
    components_json: str = Field(default="components.json")
    ui_dir: str | None = Field(
        default=None,
        description=(
            "Directory, relative to the project, that receives UI components. "
            "Derived from the components alias in components.json when unset."
        ),
    )
    package_name: str = Field(default="radnt", description="Distribution name on PyPI")
    pypi_url: str = Field(default="https://pypi.org/pypi")
    update_check_timeout: int = Field(
        default=5, ge=1, description="Seconds to wait for PyPI during update checks"
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def components_json_path(self) -> Path:
        """Path to the shadcn/ui ``components.json`` of the project."""
        return self.project_dir / self.components_json

    @property
    def package_json_path(self) -> Path:
        return self.project_dir / "package.json"

    @property
    def release_url(self) -> str:
        """PyPI JSON endpoint describing the latest release."""
        return f"{self.pypi_url.rstrip('/')}/{self.package_name}/json"

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            RADNT_PROJECT_DIR, RADNT_UI_DIR, RADNT_PYPI_URL,
            RADNT_UPDATE_TIMEOUT.

        Keyword arguments that are not ``None`` take precedence over the
        environment.

        Raises:
            ConfigError: If a value is malformed or out of range.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("RADNT_PROJECT_DIR"):
            kwargs["project_dir"] = Path(os.environ["RADNT_PROJECT_DIR"])
        if os.environ.get("RADNT_UI_DIR"):
            kwargs["ui_dir"] = os.environ["RADNT_UI_DIR"]
        if os.environ.get("RADNT_PYPI_URL"):
            kwargs["pypi_url"] = os.environ["RADNT_PYPI_URL"]
        if os.environ.get("RADNT_UPDATE_TIMEOUT"):
            raw_timeout = os.environ["RADNT_UPDATE_TIMEOUT"]
            try:
                kwargs["update_check_timeout"] = int(raw_timeout)
            except ValueError:
                raise ConfigError(
                    f"RADNT_UPDATE_TIMEOUT must be a whole number of seconds, got {raw_timeout!r}"
                ) from None

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return cls(**kwargs)
        except ValidationError as exc:
            raise ConfigError(format_validation_error(exc)) from exc
