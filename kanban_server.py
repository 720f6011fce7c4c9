#!/usr/bin/env python3
"""
Task Board Server
-----------------
Runs the Kanban web UI and JSON API over an in-memory task store.
Tasks live only as long as the process.

Usage:
    python kanban_server.py
    python kanban_server.py --config config.yaml --port 8080 --empty

Access:
    http://localhost:3000

Configuration:
    config.yaml next to this file (see config.example.yaml), overridden by
    TASKBOARD_HOST / TASKBOARD_PORT / TASKBOARD_SEED / TASKBOARD_LOG_LEVEL /
    TASKBOARD_API_SECRET, overridden by command-line flags.
"""
import argparse
import logging
import sys

from taskboard.config import BoardConfig, ConfigError
from taskboard.render import render, format_board
from taskboard.server import create_app
from taskboard.store import TaskStore, seed_tasks

logger = logging.getLogger("taskboard")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Kanban Task Board Server")
    parser.add_argument("--config", help="Path to config YAML (default: ./config.yaml if present)")
    parser.add_argument("--host", help="Bind address (use 0.0.0.0 to expose on network)")
    parser.add_argument("--port", type=int)
    parser.add_argument("--empty", action="store_true", help="Start with an empty board")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        cfg = BoardConfig.load(args.config)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    if args.host:
        cfg.host = args.host
    if args.port:
        cfg.port = args.port
    if args.empty:
        cfg.seed = False

    logging.basicConfig(
        level=getattr(logging, cfg.log_level),
        format="%(asctime)s [taskboard] %(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    store = TaskStore(seed_tasks() if cfg.seed else None)
    app = create_app(store, cfg)

    logger.info(f"Serving {cfg.board_title!r} on http://{cfg.host}:{cfg.port}")
    logger.debug("Initial board:\n" + format_board(render(store.list())))

    # One request at a time: the store has a single owner
    app.run(host=cfg.host, port=cfg.port, debug=False, threaded=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
