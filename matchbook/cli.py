"""Command line entry point that runs one of the demonstrations."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from matchbook import exchange_demo, management_demo, queue_demo, streaming_demo

_DEMOS = ("exchange", "management", "streaming", "queue", "multi")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the chosen demonstration on standard output; default is the exchange."""
    parser = argparse.ArgumentParser(prog="matchbook", description=__doc__)
    parser.add_argument("demo", nargs="?", choices=_DEMOS, default="exchange")
    parser.add_argument(
        "--no-delay", action="store_true", help="skip simulated delays in threaded demos"
    )
    args = parser.parse_args(argv)
    out = sys.stdout

    if args.demo == "exchange":
        exchange_demo.run(out)
    elif args.demo == "management":
        management_demo.run(out)
    elif args.demo == "streaming":
        streaming_demo.run(out, 0.0 if args.no_delay else 0.1)
    elif args.demo == "queue":
        if args.no_delay:
            queue_demo.run_basic(out, 0.0, 0.0)
        else:
            queue_demo.run_basic(out)
    else:
        if args.no_delay:
            queue_demo.run_multi(out, produce_delay=0.0, consume_delay=0.0)
        else:
            queue_demo.run_multi(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())