from .plotting import plot_prefix_sums
