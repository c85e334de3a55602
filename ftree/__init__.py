from .tree import FenwickTree, lowbit
