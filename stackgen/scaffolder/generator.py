"""Main scaffolding orchestrator.

Takes a ``GenerationConfig`` and writes the matching boilerplate tree
(package manifests, compiler configs, entry points, Prisma schema, Docker
files) under the output directory.

Writing is best-effort: a file that cannot be created is reported and
skipped, and the remaining files are still written.  Nothing already on disk
is rolled back.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import TemplateNotFound

from stackgen.utils import print_error, print_info, print_success, write_file

from .catalog import TemplateEntry, select_groups
from .models import GenerationConfig
from .templates import TemplateRenderer


FIREBASE_INSTRUCTIONS = """
1. Go to https://console.firebase.google.com/ and create a new project.
2. Set up Firebase Authentication in the Firebase console.
3. Replace the placeholder values in src/firebaseConfig.ts with your Firebase project's API key, authDomain, and other details.
"""


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass
class EmitResult:
    """Outcome of one ``generate`` call."""

    root: Path
    written: list[Path] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed

    def relative_paths(self) -> list[str]:
        """Written files as ``/``-separated paths relative to ``root``."""
        return [p.relative_to(self.root).as_posix() for p in self.written]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes the template catalog's selection for a ``GenerationConfig``.

    Args:
        include_auth: Use the Firebase / JWT variant of the templates.
        renderer: Template loader; defaults to the packaged templates.
    """

    def __init__(
        self,
        include_auth: bool = True,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.include_auth = include_auth
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(
        self, config: GenerationConfig, output_dir: str | Path
    ) -> EmitResult:
        """Generate the project tree for *config* under *output_dir*.

        Returns:
            An ``EmitResult`` listing written files and per-file failures.
        """
        result = EmitResult(root=Path(output_dir))

        print_info(f"Project will use: {config.stack.value}")
        if config.needs_database:
            print_info("Setting up database...")
        else:
            print_info("No database setup required.")

        for group in select_groups(config, self.include_auth):
            for entry in group.entries:
                await self._emit(entry, result)
            print_success(group.message)

        if self.include_auth:
            print_info("Setting up Firebase authentication...")
            print_info(FIREBASE_INSTRUCTIONS)

        print_success("Project structure generated!")
        return result

    # -- Internals ---------------------------------------------------------

    async def _emit(self, entry: TemplateEntry, result: EmitResult) -> None:
        """Write one entry, recording a failure instead of raising."""
        target = result.root / entry.path
        try:
            content = self.renderer.source(entry.template)
            await asyncio.to_thread(write_file, target, content)
        except TemplateNotFound as exc:
            result.failed[entry.path] = f"missing template {exc.name}"
            print_error(f"Error creating file {target}: missing template {exc.name}")
            return
        except OSError as exc:
            result.failed[entry.path] = str(exc)
            print_error(f"Error creating file {target}: {exc}")
            return
        result.written.append(target)
