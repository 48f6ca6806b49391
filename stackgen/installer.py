"""Post-install runner.

Runs ``<package manager> install`` in each generated project directory, one
after the other.  Failures are reported per directory and never stop the
next install.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from stackgen.utils import print_error, print_info, print_success, run_command

INSTALL_DIRECTORIES: tuple[str, ...] = ("frontend", "backend")


@dataclass
class InstallResult:
    """Outcome of installing one directory."""

    directory: Path
    success: bool
    skipped: bool = False
    error: str = ""


class PackageInstaller:
    """Installs dependencies for generated projects.

    Args:
        package_manager: Executable to run, looked up on ``PATH``.
        timeout: Seconds to wait for each install; ``None`` waits indefinitely.
    """

    def __init__(self, package_manager: str = "npm", timeout: int | None = None) -> None:
        self.package_manager = package_manager
        self.timeout = timeout

    @property
    def command(self) -> list[str]:
        return [self.package_manager, "install"]

    async def install(self, directory: Path) -> InstallResult:
        """Run the install command with *directory* as working directory."""
        label = directory.name.capitalize()

        if not (directory / "package.json").is_file():
            print_info(f"Skipping {directory.name}: no package.json.")
            return InstallResult(directory=directory, success=False, skipped=True)

        try:
            returncode, _stdout, stderr = await run_command(
                self.command, cwd=directory, timeout=self.timeout, capture=False
            )
        except OSError as exc:
            print_error(f"Error installing {directory.name} dependencies: {exc}")
            return InstallResult(directory=directory, success=False, error=str(exc))

        if returncode != 0:
            error = stderr or f"exit status {returncode}"
            print_error(f"Error installing {directory.name} dependencies: {error}")
            return InstallResult(directory=directory, success=False, error=error)

        print_success(f"{label} dependencies installed.")
        return InstallResult(directory=directory, success=True)

    async def install_all(
        self,
        root: str | Path,
        directories: tuple[str, ...] = INSTALL_DIRECTORIES,
    ) -> list[InstallResult]:
        """Install every directory under *root* in order."""
        print_info(f"Running installations for {' and '.join(directories)}...")
        root = Path(root)
        results: list[InstallResult] = []
        for name in directories:
            results.append(await self.install(root / name))
        return results
