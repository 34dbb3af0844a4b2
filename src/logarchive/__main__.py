#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from logarchive.bootstrap import bootstrap_base_env, bootstrap_run_context


def _dispatch_help(argv: list[str]) -> int:
    # Support:
    #   logarchive help
    #   logarchive help archive
    if argv and argv[0] == "help":
        argv = argv[1:]

    parser = build_parser()
    try:
        parser.parse_args(argv + ["--help"])
    except SystemExit:
        pass
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="logarchive",
        description="Archive rotated log files before retention deletes them",
    )

    sub = p.add_subparsers(dest="command", required=True)

    help_cmd = sub.add_parser("help", help="Show help")
    help_cmd.add_argument("path", nargs="*", help="Command path to show help for")
    help_cmd.set_defaults(_help=True)

    # Keep imports inside builder to avoid early side effects.
    from logarchive.cli.cli_archive import build_archive_parser
    from logarchive.cli.cli_env import build_env_parser
    from logarchive.cli.cli_prune import build_prune_parser
    from logarchive.cli.cli_sweep import build_sweep_parser

    build_archive_parser(sub)
    build_prune_parser(sub)
    build_sweep_parser(sub)
    build_env_parser(sub)

    return p


def main(argv: list[str] | None = None) -> int:
    # Load config/.env and base environment early
    bootstrap_base_env()

    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "_help", False):
        return _dispatch_help(argv)

    # Stamp run context early (so the logger picks it up)
    bootstrap_run_context(
        command=args.command,
        verbose=bool(getattr(args, "verbose", False)),
        quiet=bool(getattr(args, "quiet", False)),
    )

    # Initialize logging AFTER run-context env stamping
    from logarchive.archive import ArchiveConfigError
    from logarchive.env import ConfigError
    from logarchive.logger import get_logger, init_logging

    log = get_logger("logarchive")

    try:
        # The own-log sweep may archive with the env settings, so it can fail
        # like any command.
        init_logging()
        log.debug(f"Command: {args.command}")

        if args.command == "archive":
            from logarchive.cli.cli_archive import handle_archive

            return handle_archive(args)

        if args.command == "prune":
            from logarchive.cli.cli_prune import handle_prune

            return handle_prune(args)

        if args.command == "sweep":
            from logarchive.cli.cli_sweep import handle_sweep

            return handle_sweep(args)

        if args.command == "env":
            from logarchive.cli.cli_env import handle_env

            return handle_env(args)
    except (ArchiveConfigError, ConfigError) as e:
        log.error(f"Invalid configuration: {e}")
        return 2
    except OSError as e:
        log.error(f"{args.command} failed: {e}")
        return 1

    raise RuntimeError(f"Unknown command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
