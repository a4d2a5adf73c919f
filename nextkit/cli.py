"""nextkit command-line interface.

Usage::

    nextkit add
    nextkit add-redux user product
    nextkit add-module dashboard --routes "overview, stats" --with-api
    nextkit add-env --file .env.local API_URL=https://api.example.com
    nextkit add-component --name user-card --with-tests
    nextkit add-tailwind
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from nextkit import __version__
from nextkit.commands import (
    CommandContext,
    run_add,
    run_add_component,
    run_add_env,
    run_add_module,
    run_add_redux,
    run_add_tailwind,
)
from nextkit.config import Config
from nextkit.errors import ConfigurationError, InputError
from nextkit.utils import configure_logging, print_error, print_warning

EXIT_OK = 0
EXIT_CONFIGURATION = 1
EXIT_INTERRUPTED = 130


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--cwd", type=Path, default=None, help="Project root (default: current directory)")
    common.add_argument(
        "--yes", "-y",
        action="store_true",
        default=None,
        help="Accept the default answer for every prompt",
    )
    common.add_argument(
        "--skip-install",
        action="store_true",
        default=None,
        help="Do not run the package manager",
    )
    common.add_argument(
        "--package-manager",
        choices=["npm", "yarn", "pnpm"],
        default=None,
        help="Package manager to use (default: detected from lock files)",
    )
    common.add_argument("--verbose", "-v", action="store_true", default=None, help="Enable debug logging")
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nextkit",
        description="Enhance an existing Next.js project with a detailed boilerplate",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Usage::", 1)[1] if __doc__ else None,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    common = _common_options()
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "add",
        parents=[common],
        help="Add the boilerplate structure to an existing Next.js project",
    )

    redux = subparsers.add_parser("add-redux", parents=[common], help="Add a Redux Toolkit store and slices")
    redux.add_argument("slice_names", nargs="*", help="Slice names (comma or space separated)")

    module = subparsers.add_parser("add-module", parents=[common], help="Add route modules with sub-routes")
    module.add_argument("names", nargs="?", default=None, help="Comma-separated module names (e.g. auth,dashboard)")
    module.add_argument("--routes", default=None, help="Comma-separated sub-route names (ignored for auth)")
    module.add_argument("--with-api", action="store_true", help="Emit an API handler stub per sub-route")
    module.add_argument("--with-redux", action="store_true", help="Add a Redux slice per module")

    env = subparsers.add_parser("add-env", parents=[common], help="Create or extend an environment file")
    env.add_argument("--file", default=None, help="Environment file name (e.g. .env.local)")
    env.add_argument("variables", nargs="*", help="KEY=VALUE pairs to append")

    component = subparsers.add_parser("add-component", parents=[common], help="Add a React component")
    component.add_argument("--name", required=True, help="Component name (e.g. user-card)")
    component.add_argument("--dir", dest="directory", default=None, help="Folder under the base folder (default: components)")
    component.add_argument("--with-tests", action="store_true", help="Also create a test file")

    subparsers.add_parser("add-tailwind", parents=[common], help="Configure Tailwind CSS")

    return parser


def _dispatch(ctx: CommandContext, args: argparse.Namespace) -> None:
    if args.command == "add":
        run_add(ctx)
    elif args.command == "add-redux":
        run_add_redux(ctx, args.slice_names)
    elif args.command == "add-module":
        run_add_module(ctx, args.names, routes=args.routes, with_api=args.with_api, with_redux=args.with_redux)
    elif args.command == "add-env":
        run_add_env(ctx, file=args.file, variables=args.variables)
    elif args.command == "add-component":
        run_add_component(ctx, args.name, directory=args.directory, with_tests=args.with_tests)
    elif args.command == "add-tailwind":
        run_add_tailwind(ctx)


def main(argv: list[str] | None = None, ctx: CommandContext | None = None) -> int:
    """CLI entry point for ``nextkit`` / ``python -m nextkit``.

    *ctx* lets tests inject fake capabilities; it is built from the
    environment and the parsed flags otherwise.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if ctx is None:
        try:
            config = Config.from_env().merged(
                root_dir=args.cwd,
                assume_yes=args.yes,
                skip_install=args.skip_install,
                package_manager=args.package_manager,
                verbose=args.verbose,
            )
        except ValidationError as exc:
            for error in exc.errors():
                field = ".".join(str(part) for part in error["loc"]) or "config"
                print_error(f"Error: Invalid configuration for {field}: {error['msg']}")
            return EXIT_CONFIGURATION
        configure_logging(config.verbose)
        if not config.root_dir.is_dir():
            print_error(f"Error: Project directory not found: {config.root_dir}")
            return EXIT_CONFIGURATION
        ctx = CommandContext.from_config(config)

    try:
        _dispatch(ctx, args)
    except ConfigurationError as exc:
        print_error(f"Error: {exc}")
        return EXIT_CONFIGURATION
    except InputError as exc:
        # Input problems are reported but are not fatal.
        print_error(f"Error: {exc}")
        return EXIT_OK
    except KeyboardInterrupt:
        print_warning("Aborted.")
        return EXIT_INTERRUPTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
