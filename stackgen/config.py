"""stackgen configuration.

Typed settings for a generator run.  The interactive answers live in
``GenerationConfig`` (see :mod:`stackgen.scaffolder.models`); this module
covers everything that is decided before the prompts: where to write, which
template variant to use, and how dependencies get installed.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from stackgen.utils import print_warning

_ENV_FIELDS: dict[str, str] = {
    "STACKGEN_OUTPUT_DIR": "output_dir",
    "STACKGEN_INCLUDE_AUTH": "include_auth",
    "STACKGEN_RUN_INSTALL": "run_install",
    "STACKGEN_PACKAGE_MANAGER": "package_manager",
    "STACKGEN_INSTALL_TIMEOUT": "install_timeout",
}
_BOOL_FIELDS = frozenset({"include_auth", "run_install"})

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class Config(BaseModel):
    """Global stackgen configuration.

    Instances are created once by the CLI entry point (usually via
    :meth:`from_env` plus command-line overrides) and passed to the
    scaffolder and installer.
    """

    output_dir: Path = Field(default=Path("project"))
    include_auth: bool = Field(
        default=True,
        description="Emit the Firebase / JWT authentication variant of the templates",
    )
    run_install: bool = Field(
        default=True, description="Run the package manager after scaffolding"
    )
    package_manager: str = Field(default="npm", min_length=1)
    install_timeout: int | None = Field(
        default=None, ge=1, description="Per-directory install timeout in seconds"
    )

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            STACKGEN_OUTPUT_DIR, STACKGEN_INCLUDE_AUTH, STACKGEN_RUN_INSTALL,
            STACKGEN_PACKAGE_MANAGER, STACKGEN_INSTALL_TIMEOUT.

        A variable that does not parse or validate is reported with a warning
        and its field keeps the default.  *overrides* (already-typed values,
        usually from command-line flags) are applied on top.  Unless set
        explicitly, ``run_install`` follows ``include_auth``: the variant
        without authentication does not install dependencies.
        """
        kwargs: dict[str, Any] = {}
        for name, field_name in _ENV_FIELDS.items():
            raw = os.environ.get(name)
            if not raw:
                continue
            try:
                value = _parse_bool(name, raw) if field_name in _BOOL_FIELDS else raw
                cls.model_validate({field_name: value})
            except ValidationError as exc:
                _ignore(name, raw, exc.errors()[0]["msg"])
                continue
            except ValueError as exc:
                _ignore(name, raw, str(exc))
                continue
            kwargs[field_name] = value

        kwargs.update(overrides)
        kwargs.setdefault("run_install", kwargs.get("include_auth", True))
        return cls(**kwargs)


def _ignore(name: str, raw: str, reason: str) -> None:
    print_warning(f"Ignoring {name}={raw!r} ({reason}); using the default.")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean")
