"""
Task List CLI — Command-Line Interface
========================================

Usage:
    # Start the API server (default 0.0.0.0:8080)
    python -m taskapi serve
    python -m taskapi serve --port 9000 --log-level debug

    # Start with an empty task list
    python -m taskapi serve --no-seed

    # Print the fixture tasks a fresh server starts with
    python -m taskapi tasks
"""

from __future__ import annotations

import argparse
import json
import sys

from taskapi.config import ServerConfig
from taskapi.models import fixture_tasks

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


# ─────────────────────────────────────────────────────────────
#  Commands
# ─────────────────────────────────────────────────────────────

def cmd_serve(args):
    """Launch the task API server."""
    try:
        import uvicorn  # noqa: F401
    except ImportError:
        print("✘ uvicorn is required to run the server.")
        print("  Install it with:  pip install uvicorn fastapi")
        return 1

    from taskapi.server import run_server

    config = ServerConfig.from_env().override(
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        seed=False if args.no_seed else None,
    )
    run_server(config)
    return 0


def cmd_tasks(args):
    """Print the fixture tasks as a JSON object keyed by id."""
    tasks = {t.id: t.to_dict() for t in fixture_tasks()}
    print(json.dumps(tasks, ensure_ascii=False, indent=args.indent))
    return 0


# ─────────────────────────────────────────────────────────────
#  Main
# ─────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskapi",
        description="Task List API — in-memory task records over HTTP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  taskapi serve\n"
            "  taskapi serve --port 9000 --no-seed\n"
            "  taskapi tasks\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # serve
    p_serve = subparsers.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=None, help="Bind address (default: 0.0.0.0)")
    p_serve.add_argument("--port", "-p", default=None, type=int,
                         help="Port number (default: 8080)")
    p_serve.add_argument("--log-level", default=None, choices=LOG_LEVELS,
                         help="Log level (default: info)")
    p_serve.add_argument("--no-seed", action="store_true",
                         help="Start with an empty task list")

    # tasks
    p_tasks = subparsers.add_parser("tasks", help="Print the fixture tasks")
    p_tasks.add_argument("--indent", default=2, type=int, help="JSON indent")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "serve": cmd_serve,
        "tasks": cmd_tasks,
    }

    if args.command in commands:
        sys.exit(commands[args.command](args))
    parser.print_help()


if __name__ == "__main__":
    main()
