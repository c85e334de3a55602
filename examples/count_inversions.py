import numpy as np
import sys
import os

# Add the project root to the path so we can import ftree
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ftree import FenwickTree

def count_inversions(values):
    # Compress values to ranks 1..k so they can index the tree
    ranks = {v: i for i, v in enumerate(sorted(set(values)), start=1)}
    seen = FenwickTree(len(ranks))
    inversions = 0
    for v in reversed(values):
        r = ranks[v]
        inversions += seen.query(r - 1)
        seen.add(r, 1)
    return inversions

def count_inversions_naive(values):
    n = len(values)
    return sum(1 for i in range(n) for j in range(i + 1, n) if values[i] > values[j])

def main():
    size = 500
    rng = np.random.default_rng(0)
    values = rng.permutation(size).tolist()

    fast = count_inversions(values)
    slow = count_inversions_naive(values)
    print(f"Permutation size: {size}")
    print(f"Inversions (Fenwick tree): {fast}")
    print(f"Inversions (naive): {slow}")
    if fast != slow:
        raise SystemExit(f"Mismatch: Fenwick tree counted {fast}, naive counted {slow}")
    print("Counts match.")

if __name__ == "__main__":
    main()
