"""Radnt command-line entry point.

Usage::

    radnt init
    radnt add alert
    radnt add --all
    radnt version
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.markup import escape

from radnt.commands import add_components, init_project
from radnt.config import Config
from radnt.errors import RadntError
from radnt.project import BASE_COLORS, STYLES
from radnt.utils import console, print_error, print_warning
from radnt.version import check_for_updates, get_current_version


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radnt",
        description="Radnt CLI -- Next.js projects with shadcn/ui",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  radnt init --yes\n"
            "  radnt add alert\n"
            "  radnt add --all\n"
            "  radnt version\n"
        ),
    )
    parser.add_argument(
        "--project-dir", "-C",
        default=None,
        help="Project directory (default: $RADNT_PROJECT_DIR or the current directory)",
    )
    subparsers = parser.add_subparsers(dest="command")

    add = subparsers.add_parser("add", help="Add shadcn/ui components to your project")
    add.add_argument("component", nargs="?", help="Component name to add")
    add.add_argument("--all", "-a", dest="add_all", action="store_true",
                     help="Add all available components")

    init = subparsers.add_parser("init", help="Initialize shadcn/ui in an existing Next.js project")
    init.add_argument("--style", choices=STYLES, default=None)
    init.add_argument("--base-color", choices=BASE_COLORS, default=None)
    init.add_argument("--no-css-variables", dest="css_variables", action="store_false",
                      help="Use utility classes instead of CSS variables for colors")
    init.add_argument("--yes", "-y", action="store_true",
                      help="Accept defaults and overwrite an existing components.json")

    subparsers.add_parser("version", help="Show version information and check for updates")
    return parser


async def _run(args: argparse.Namespace, config: Config) -> None:
    if args.command == "add":
        await add_components(config, args.component, add_all=args.add_all)
    elif args.command == "init":
        await init_project(
            config,
            style=args.style,
            base_color=args.base_color,
            css_variables=args.css_variables,
            assume_yes=args.yes,
        )
    elif args.command == "version":
        console.print(f"[bold blue]Radnt CLI v{get_current_version(config.package_name)}[/bold blue]")
        await check_for_updates(config)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``radnt`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    project_dir = Path(args.project_dir) if args.project_dir else None

    try:
        config = Config.from_env(project_dir=project_dir)
        asyncio.run(_run(args, config))
    except RadntError as exc:
        print_error(escape(str(exc)))
        sys.exit(1)
    except KeyboardInterrupt:
        print_warning("Aborted.")
        sys.exit(130)


if __name__ == "__main__":
    main()
