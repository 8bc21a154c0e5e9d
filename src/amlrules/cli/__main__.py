from __future__ import annotations

import argparse
import sys

import yaml
from pydantic import ValidationError

from amlrules.cli import check
from amlrules.config.loader import DEFAULT_CONFIG


def _cmd_check(args: argparse.Namespace) -> int:
    return check.run(config_path=args.config, send_notification=args.notify)


def _cmd_summary(args: argparse.Namespace) -> int:
    check.summary(config_path=args.config)
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="amlrules")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="Check candidate and table businesses against amalgamation rules")
    p_check.add_argument("--config", default=DEFAULT_CONFIG)
    p_check.add_argument("--notify", action="store_true", help="Post violations to SLACK_WEBHOOK_URL")
    p_check.set_defaults(func=_cmd_check)

    p_sum = sub.add_parser("summary", help="Show which kinds of business are in the table")
    p_sum.add_argument("--config", default=DEFAULT_CONFIG)
    p_sum.set_defaults(func=_cmd_summary)

    args = p.parse_args(argv)

    try:
        return args.func(args)
    except FileNotFoundError as e:
        print(f"config not found: {e.filename}")
    except OSError as e:
        print(f"config unreadable: {e.filename}: {e.strerror}")
    except KeyError as e:
        print(f"config missing key: {e}")
    except (ValidationError, TypeError, yaml.YAMLError) as e:
        first = str(e).splitlines()[0] if str(e) else ""
        print(f"config invalid: {type(e).__name__}: {first}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
