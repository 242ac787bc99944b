"""
Main CLI entrypoint for ppx-install.

Usage:
    ppx-install
    ppx-install install --dry-run
    ppx-install status
    ppx-install --version
"""

import argparse
import logging
import platform
import sys

from ppx_install import __version__
from ppx_install.config import load_config
from ppx_install.errors import ExitCode, PpxInstallError
from ppx_install.installer import install, link_status
from ppx_install.log import configure_logging
from ppx_install.platform import detect_host

logger = logging.getLogger(__name__)


def get_version_string() -> str:
    """Generate a detailed version string."""
    host = detect_host()
    return (
        f"ppx-install {__version__}\n"
        f"  python: {platform.python_version()}\n"
        f"  platform: {host.platform} ({host.system} {host.machine})"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for ppx-install."""
    parser = argparse.ArgumentParser(
        prog="ppx-install",
        description="Link the prebuilt graphql_ppx binary for this platform to ppx",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ppx-install
  ppx-install install --dry-run
  ppx-install --root node_modules/graphql_ppx status
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=get_version_string(),
    )

    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only report warnings and errors",
    )

    parser.add_argument(
        "-c", "--config",
        dest="config_file",
        default=None,
        help="YAML config file (default: <root>/ppx-install.yml if present)",
    )

    parser.add_argument(
        "--root",
        dest="root_dir",
        default=None,
        help="Package root holding bin/ and the link (env: PPX_INSTALL_ROOT)",
    )

    parser.add_argument(
        "--bin-dir",
        dest="bin_dir",
        default=None,
        help="Directory of binary variants (default: bin)",
    )

    parser.add_argument(
        "--link-name",
        dest="link_name",
        default=None,
        help="Link target path (default: ppx)",
    )

    parser.add_argument(
        "--platform",
        dest="system",
        default=None,
        help="OS identifier to use instead of detection (e.g. Linux, Darwin)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    install_parser = subparsers.add_parser(
        "install",
        help="Link the binary variant (default)",
    )
    install_parser.add_argument(
        "-n", "--dry-run",
        action="store_true",
        help="Show the link that would be made without changing anything",
    )

    subparsers.add_parser(
        "status",
        help="Check whether the link points at this platform's variant",
    )

    return parser


def run_install(args: argparse.Namespace) -> int:
    config = load_config(
        config_file=args.config_file,
        root_dir=args.root_dir,
        bin_dir=args.bin_dir,
        link_name=args.link_name,
    )
    install(config, system=args.system, dry_run=getattr(args, "dry_run", False))
    return ExitCode.SUCCESS


def run_status(args: argparse.Namespace) -> int:
    config = load_config(
        config_file=args.config_file,
        root_dir=args.root_dir,
        bin_dir=args.bin_dir,
        link_name=args.link_name,
    )
    host = detect_host(args.system)
    status = link_status(config, system=args.system)

    print(f"platform: {status.platform} ({host.system} {host.machine})")
    print(f"variant:  {status.expected}")
    print(f"link:     {status.destination}")
    if status.current is None:
        print("state:    not linked")
    elif status.linked:
        print("state:    linked")
    else:
        print(f"state:    stale (points to {status.current})")

    return ExitCode.SUCCESS if status.linked else ExitCode.GENERIC_ERROR


def main(args: list[str] | None = None) -> int:
    """Main entrypoint for ppx-install CLI."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    configure_logging(-1 if parsed.quiet else parsed.verbose)

    try:
        if parsed.command == "status":
            return run_status(parsed)
        return run_install(parsed)
    except PpxInstallError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return ExitCode.KEYBOARD_INTERRUPT


if __name__ == "__main__":
    sys.exit(main())
