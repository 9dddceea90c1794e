"""
Unified CLI entry point for SqlCrud.

Usage:
    python -m sql_crud.cli <command> [options]

Available commands:
    inspect      - Show the resolved schema and SQL of a record type
"""

import argparse
import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """
    Dispatch to a subcommand.

    Returns:
        Exit code of the subcommand
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = argparse.ArgumentParser(
        prog="sql_crud.cli",
        description="SqlCrud command line tools",
    )
    parser.add_argument("command", choices=["inspect"], help="Command to run")
    args = parser.parse_args(argv[:1])

    if args.command == "inspect":
        from sql_crud.cli.inspect_record import main as inspect_main

        return inspect_main(argv[1:])

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
