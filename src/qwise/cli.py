from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from .configs import dump_config, load_config
from .masks import default_mask_registry


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="qwise",
        description="Frame-based spectral gain filtering",
    )
    parser.add_argument(
        "--list-masks",
        action="store_true",
        help="Print available gain-mask provider names and exit",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the resolved configuration as YAML and exit",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file",
    )
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        help="Configuration override in dotted key=value form",
    )
    args = parser.parse_args(argv)

    if args.list_masks:
        for name in default_mask_registry().available():
            print(name)
        return

    if args.print_config:
        config = load_config(args.config, overrides=args.set)
        print(dump_config(config), end="")
        return

    parser.print_help()


if __name__ == "__main__":
    main()
