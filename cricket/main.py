"""Cricket Darts console - argument parsing and the command loop"""

import argparse
import logging
import sys

from cricket.config import load_settings
from cricket.console import ConsoleSession, HELP_TEXT, render


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Track a Cricket Darts match from the terminal")
    parser.add_argument("--config", help="Path to a TOML settings file")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--no-demo", action="store_true", help="Start with an empty roster")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = load_settings(args.config)

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    session = ConsoleSession(demo_players=[] if args.no_demo else settings.demo_players)
    print(HELP_TEXT)
    print(render(session.engine, session.state))

    for line in sys.stdin:
        output = session.execute(line)
        if output:
            print(output)
        if session.finished:
            break
    return 0
