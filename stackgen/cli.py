"""stackgen command-line entry point.

Asks which stack to use and whether a database is needed, writes the
boilerplate tree, then installs dependencies::

    stackgen
    stackgen --output ./my-app --no-auth --skip-install
    python -m stackgen --package-manager pnpm
"""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from stackgen.config import Config
from stackgen.installer import InstallResult, PackageInstaller
from stackgen.prompt import collect_answers
from stackgen.scaffolder import EmitResult, GenerationConfig, ProjectGenerator
from stackgen.utils import print_summary_table


@dataclass
class RunReport:
    """Everything one run produced."""

    generation: GenerationConfig
    emitted: EmitResult
    installs: list[InstallResult] = field(default_factory=list)

    def summary(self) -> dict[str, str]:
        installed = [r.directory.name for r in self.installs if r.success]
        failed = [r.directory.name for r in self.installs if not r.success and not r.skipped]
        data = {
            "Stack": self.generation.stack.value,
            "Database": "yes" if self.generation.needs_database else "no",
            "Output": str(self.emitted.root),
            "Files written": str(len(self.emitted.written)),
            "Files failed": str(len(self.emitted.failed)),
        }
        if self.installs:
            data["Installed"] = ", ".join(installed) or "-"
            data["Install failures"] = ", ".join(failed) or "-"
        return data


async def run(config: Config, stream: TextIO | None = None) -> RunReport:
    """Collect answers, emit the project, then install dependencies.

    Errors along the way are reported on the console and recorded in the
    returned report; nothing here raises for a failed write or install.
    """
    generation = collect_answers(stream)

    generator = ProjectGenerator(include_auth=config.include_auth)
    emitted = await generator.generate(generation, config.output_dir)
    report = RunReport(generation=generation, emitted=emitted)

    if config.run_install:
        installer = PackageInstaller(
            package_manager=config.package_manager,
            timeout=config.install_timeout,
        )
        report.installs = await installer.install_all(config.output_dir)

    print_summary_table(report.summary(), title="stackgen")
    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stackgen",
        description="stackgen -- interactive full-stack project scaffolder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  stackgen\n"
            "  stackgen -o ./my-app --no-auth\n"
            "  stackgen --skip-install\n"
        ),
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: ./project, or STACKGEN_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--no-auth",
        action="store_true",
        help=(
            "Generate the variant without Firebase / JWT authentication; "
            "installs are skipped unless STACKGEN_RUN_INSTALL is set"
        ),
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not run the package manager after scaffolding",
    )
    parser.add_argument(
        "--package-manager",
        default=None,
        help="Package manager executable used for installs (default: npm)",
    )
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Merge command-line flags on top of the environment configuration."""
    overrides: dict[str, object] = {}
    if args.output:
        overrides["output_dir"] = Path(args.output)
    if args.no_auth:
        overrides["include_auth"] = False
    if args.skip_install:
        overrides["run_install"] = False
    if args.package_manager:
        overrides["package_manager"] = args.package_manager
    return Config.from_env(**overrides)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``stackgen`` and ``python -m stackgen``."""
    args = build_parser().parse_args(argv)

    asyncio.run(run(load_config(args)))


if __name__ == "__main__":
    main()
