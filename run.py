"""Growth rate service CLI entry point.

Provides subcommands for running the JSON query server and for inspecting the
built-in growth rates from a terminal. Accepts configuration via flags and
environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Growth Rates

    Serve the experience growth curves over HTTP, or query them from the
    command line. Configuration can be provided via CLI flags or environment
    variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                  Bind address for the web server (default: 0.0.0.0)
          PORT                  Port for the web server (default: 5000)
          GROWTH_MAXIMUM_LEVEL  Maximum attainable level (default: 100)
          GROWTH_LOG_LEVEL      debug | info | warn | error (default: info)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Show the Exp table of the Fast growth rate
          python run.py table Fast

          # Which level is 250000 Exp on the Erratic curve?
          python run.py level Erratic 250000

          # Minimum Exp for level 120 with the level cap raised
          python run.py --max-level 150 exp Erratic 120
        """
    )

    parser = argparse.ArgumentParser(
        prog="GrowthRates",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--max-level",
        dest="max_level",
        type=int,
        default=None,
        help="Maximum attainable level (default: env GROWTH_MAXIMUM_LEVEL or 100)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Growth Rates {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the JSON query server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask growth rate query server",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    list_parser = subparsers.add_parser("list", help="List the registered growth rates")
    list_parser.set_defaults(command="list")

    table_parser = subparsers.add_parser("table", help="Print the level/Exp table of a growth rate")
    table_parser.add_argument("growth_rate", help="Growth rate id (e.g. Fast)")
    table_parser.set_defaults(command="table")

    level_parser = subparsers.add_parser("level", help="Print the level reached with an Exp amount")
    level_parser.add_argument("growth_rate", help="Growth rate id")
    level_parser.add_argument("exp", type=int, help="Exp amount")
    level_parser.set_defaults(command="level")

    exp_parser = subparsers.add_parser("exp", help="Print the minimum Exp for a level")
    exp_parser.add_argument("growth_rate", help="Growth rate id")
    exp_parser.add_argument("level", type=int, help="Level")
    exp_parser.set_defaults(command="exp")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    return parser.parse_args(argv)


def _label(text: str) -> str:
    return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text


def _value(val) -> str:
    return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)


def _run_query(mode: str, args: argparse.Namespace) -> int:
    from growthrates.errors import GrowthRateError
    from growthrates.seed_growth_rates import build_registry

    registry = build_registry()
    try:
        if mode == "list":
            for growth_rate in registry:
                padded_id = f"{growth_rate.id:24}"
                print(f"{_label(padded_id)} {growth_rate.name:16} {_value(growth_rate.maximum_exp())}")
        elif mode == "table":
            for level, exp in registry.get(args.growth_rate).exp_table():
                print(f"{level:>4} {exp:>10}")
        elif mode == "level":
            print(registry.get(args.growth_rate).level_from_exp(args.exp))
        elif mode == "exp":
            print(registry.get(args.growth_rate).minimum_exp_for_level(args.level))
    except GrowthRateError as e:
        print(f"[ERROR] {e}")
        return 1
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    from growthrates import settings
    from growthrates.errors import InvalidLevelError

    if args.max_level is not None:
        try:
            settings.configure_max_level(args.max_level)
        except InvalidLevelError as e:
            print(f"[ERROR] {e}")
            return 1

    mode = (getattr(args, "command", None) or "server").lower()
    if mode != "server":
        return _run_query(mode, args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoints only after environment is ready
    from growthrates.logging_utils import log
    from growthrates.server import start_server

    title = f"{Fore.CYAN}{Style.BRIGHT}Growth Rate Server Bootup{Style.RESET_ALL}" if _COLOR_ENABLED else "Growth Rate Server Bootup"
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {_label('Host:'):12} {_value(host)}",
        f"  {_label('Port:'):12} {_value(port)}",
        f"  {_label('Max level:'):12} {_value(settings.max_level())}",
        divider,
        "",
    ]
    print("\n".join(lines))
    log.info(event="startup", mode=mode, host=host, port=port, max_level=settings.max_level())

    start_server(host=host, port=port, debug=bool(getattr(args, "debug", False)))
    return 0


def cli() -> None:
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
