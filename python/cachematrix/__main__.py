"""Walk through the cached-inverse example from the command line."""
from __future__ import annotations

import argparse
import sys

import numpy as np

import cachematrix

_EXAMPLE = [[1, 4, 6], [2, 1, 7], [3, 7, 8]]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="python -m cachematrix", description=__doc__)
    parser.add_argument(
        "--repeat",
        type=int,
        default=2,
        help="number of times to resolve the inverse (default: 2)",
    )
    args = parser.parse_args(argv)

    cm = cachematrix.make_cache_matrix(_EXAMPLE)
    print(cm.get())

    def _notice(holder: cachematrix.CacheMatrix) -> None:
        print(cachematrix.CACHE_HIT_MESSAGE)

    with np.printoptions(precision=7, suppress=True):
        for _ in range(max(args.repeat, 0)):
            try:
                inverse = cachematrix.cache_solve(cm, on_hit=_notice)
            except np.linalg.LinAlgError as exc:
                print(f"error: {exc}", file=sys.stderr)
                return 1
            print(inverse)

    return 0


if __name__ == "__main__":
    sys.exit(main())
