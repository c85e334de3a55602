import argparse

from .tree import FenwickTree
from .utils import plot_prefix_sums


def run(capacity=10):
    if capacity < 3:
        raise ValueError(f"demo needs a capacity of at least 3, got {capacity}")
    f = FenwickTree(capacity)
    f.add(1, 1)
    f.add(2, 3)
    f.add(3, 8)
    f.add(3, 2)
    print(f"f: {f!r}")
    print(f"f.query(3): {f.query(3)}")
    return f


def main(argv=None):
    parser = argparse.ArgumentParser(description="Fenwick tree demonstration")
    parser.add_argument("--capacity", type=int, default=10, help="Number of addressable positions")
    parser.add_argument("--plot", default=None, help="Save a plot of values and prefix sums to this file")
    args = parser.parse_args(argv)

    if args.capacity < 3:
        parser.error("--capacity must be at least 3")

    f = run(args.capacity)
    if args.plot:
        plot_prefix_sums(f, filename=args.plot)
        print(f"Plot saved to {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
