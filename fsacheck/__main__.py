# fsacheck/__main__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Usage: python -m fsacheck [INPUT [OUTPUT]]

Validates the automaton declared in INPUT (default ``fsa.txt``) and writes the
report to OUTPUT (default ``result.txt``).
"""

import logging
import sys

from fsacheck.runtime.executor import Executor, RunConfig


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 2:
        print(__doc__.strip(), file=sys.stderr)
        return 2

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    config = RunConfig(*args)
    report = Executor(config).run()
    return 1 if report.failed else 0


if __name__ == "__main__":
    sys.exit(main())
