"""Command-line entry point for the feature scaffolder.

Stands in for the IDE action: it supplies the project root and asks for a
package name when none is given on the command line.
"""

from __future__ import annotations

import sys
from pathlib import Path

from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from feature_scaffold.config import ScaffoldConfig
from feature_scaffold.scaffolder import GenerationError, GenerationPlan, ModuleGenerator
from feature_scaffold.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
)


PACKAGE_PROMPT = "Enter the package name (e.g., com.example.cleanarch)"


def _print_plan(plan: GenerationPlan) -> None:
    """Print every directory and file a run would create."""
    table = Table(
        title=f"Plan for {escape(plan.package_name)}",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Kind", style="dim", no_wrap=True)
    table.add_column("Path")

    for directory in plan.directories:
        table.add_row("dir", escape(directory.as_posix()))
    for generated in plan.files:
        table.add_row("file", escape(generated.relative_path.as_posix()))
    for line in plan.settings_patch.lines:
        table.add_row("settings", escape(line))

    console.print(table)
    console.print()


def _load_config(config_path: str | None) -> ScaffoldConfig:
    if config_path:
        return ScaffoldConfig.load(Path(config_path))
    return ScaffoldConfig.from_env()


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m feature_scaffold``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="feature-scaffold",
        description="Generate a clean-architecture feature module skeleton",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  feature-scaffold com.example.app\n"
            "  feature-scaffold com.example.app --project-root ./MyApp\n"
            "  feature-scaffold com.example.app --dry-run\n"
        ),
    )

    parser.add_argument(
        "package_name",
        nargs="?",
        default=None,
        help="Dot-delimited package name (prompted for when omitted)",
    )
    parser.add_argument(
        "--project-root", "-p",
        default=".",
        help="Project root containing settings.gradle (default: .)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to a JSON config file (default: read from environment)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print what would be generated without writing anything",
    )

    args = parser.parse_args(argv)

    project_root = Path(args.project_root)
    if not project_root.is_dir():
        print_error(f"Error: Project root not found: {project_root}")
        sys.exit(1)

    try:
        config = _load_config(args.config)
    except (OSError, ValueError) as exc:
        print_error(f"Error: Could not load config: {exc}")
        sys.exit(1)

    package_name = args.package_name
    if package_name is None:
        try:
            package_name = Prompt.ask(
                PACKAGE_PROMPT, console=console, default="", show_default=False
            )
        except (EOFError, KeyboardInterrupt):
            console.print()
            package_name = None

    generator = ModuleGenerator(config)

    try:
        if args.dry_run:
            _print_plan(generator.plan(package_name))
            return
        result = generator.generate(project_root, package_name)
    except GenerationError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    except OSError as exc:
        print_error(f"Error: Generation stopped part-way: {exc}")
        sys.exit(1)

    print_summary_table(
        {
            "Package": result.package_name,
            "Feature directory": str(result.base_dir),
            "Directories": str(len(result.directories)),
            "Files": str(len(result.files)),
            "Settings": (
                f"updated ({result.settings_path.name})"
                if result.settings_updated
                else "not found"
            ),
        },
        title="Scaffold Summary",
    )
    print_success(f"Feature {result.package_name} generated.")


if __name__ == "__main__":
    main()
