"""
Entry point for the Health vs Poverty scatter.

Usage:
    python -m health_scatter [--data data.csv] [--port 8050] [--debug]
"""

import argparse
import logging
import sys

from . import APP_NAME, APP_VERSION
from .config import DATA_ENV_VAR, default_data_path


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="health-scatter", description=APP_NAME)
    parser.add_argument("--data", default=None,
                        help=f"CSV file to plot (default: ${DATA_ENV_VAR} or the bundled sample)")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8050)
    parser.add_argument("--debug", action="store_true", help="Run the Dash dev server in debug mode")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(name)s: %(message)s", stream=sys.stderr)

    from .app import create_app
    from .data import load_dataset

    # A missing or unreadable file aborts start-up
    dataset = load_dataset(args.data or default_data_path())
    app = create_app(dataset)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
