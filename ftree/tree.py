import logging
import operator
from typing import Callable, Iterable, List

import numpy as np

logger = logging.getLogger(__name__)


def lowbit(i: int) -> int:
    return i & -i


def _infer_dtype(items: List) -> Callable:
    kinds = {type(v) for v in items}
    if kinds <= {int, bool}:
        return int
    if kinds <= {int, bool, float}:
        return float
    if len(kinds) == 1:
        kind = kinds.pop()
        return int if kind is np.bool_ else kind
    raise TypeError(
        f"cannot infer a single dtype from {sorted(k.__name__ for k in kinds)}, pass dtype explicitly"
    )


class FenwickTree:
    """Fenwick tree (binary indexed tree) over positions 1..n.

    Slot ``a[i]`` holds the sum of the positions ``(i - lowbit(i), i]``, so
    both ``add`` and ``query`` touch O(log n) slots. ``a[0]`` is unused and
    always holds the additive identity ``dtype()``.

    Any numeric type with ``+`` and a zero from its no-argument constructor
    works as ``dtype`` (int, float, Fraction, Decimal, numpy scalars). For
    floats, sums follow the tree's grouping of terms and may round
    differently from a left-to-right sum.
    """

    def __init__(self, n: int, dtype: Callable = int):
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"capacity must be non-negative, got {n}")
        self.n = n
        self.dtype = dtype
        self.zero = dtype()
        self.a = [self.zero] * (n + 1)

    @classmethod
    def from_array(cls, values: Iterable, dtype: Callable = None) -> "FenwickTree":
        """Builds a tree holding ``values`` at positions 1..len(values) in O(n)."""
        if isinstance(values, np.ndarray):
            if values.ndim != 1:
                raise ValueError(f"expected a 1-D array, got shape {values.shape}")
            if dtype is None:
                # bool addition is logical or, so count booleans as ints
                dtype = int if values.dtype.kind == "b" else values.dtype.type
            items = list(values)
        else:
            items = list(values)
            if dtype is None:
                dtype = _infer_dtype(items)

        tree = cls(len(items), dtype=dtype)
        a = tree.a
        for i, v in enumerate(items, start=1):
            a[i] = dtype(v)
        # Push each partial sum up to the slot that owns it next
        for i in range(1, tree.n + 1):
            parent = i + lowbit(i)
            if parent <= tree.n:
                a[parent] += a[i]
        logger.debug("built FenwickTree of %d %s values", tree.n, getattr(dtype, "__name__", dtype))
        return tree

    def _check_range(self, idx: int, low: int) -> int:
        idx = operator.index(idx)
        if not low <= idx <= self.n:
            raise IndexError(f"index {idx} out of range [{low}, {self.n}]")
        return idx

    def add(self, idx: int, x) -> None:
        """Adds ``x`` to position ``idx`` (1-indexed)."""
        idx = operator.index(idx)
        assert idx > 0, "index must be positive"
        idx = self._check_range(idx, 1)
        a = self.a
        while idx <= self.n:
            a[idx] += x
            idx += idx & -idx

    def query(self, idx: int):
        """Returns the sum of positions 1..idx; ``query(0)`` is the identity."""
        idx = self._check_range(idx, 0)
        total = self.zero
        a = self.a
        while idx > 0:
            total += a[idx]
            idx -= idx & -idx
        return total

    def range_sum(self, lo: int, hi: int):
        """Returns the sum of positions lo..hi, inclusive."""
        lo = self._check_range(lo, 1)
        hi = self._check_range(hi, 1)
        if lo > hi:
            raise ValueError(f"empty range: lo={lo} > hi={hi}")
        return self.query(hi) - self.query(lo - 1)

    def get(self, idx: int):
        return self.range_sum(idx, idx)

    def __getitem__(self, idx: int):
        return self.get(idx)

    def search(self, value) -> int:
        """Smallest idx with ``query(idx) >= value``, or ``n + 1`` if none.

        Assumes every position holds a non-negative value, so that prefix
        sums never decrease.
        """
        pos = 0
        step = 1 << (self.n.bit_length() - 1) if self.n else 0
        a = self.a
        while step:
            nxt = pos + step
            if nxt <= self.n and a[nxt] < value:
                pos = nxt
                value -= a[nxt]
            step >>= 1
        return pos + 1

    @property
    def total(self):
        return self.query(self.n)

    def values(self) -> List:
        """Recovers the point value of every position in O(n)."""
        out = list(self.a)
        for i in range(1, self.n + 1):
            parent = i + lowbit(i)
            if parent <= self.n:
                out[parent] -= self.a[i]
        return out[1:]

    def to_array(self) -> np.ndarray:
        return np.asarray(self.values())

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"FenwickTree(n={self.n}, a={self.a!r})"
