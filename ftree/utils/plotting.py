import matplotlib.pyplot as plt
import numpy as np

def plot_prefix_sums(tree, filename='prefix_sums.png'):
    values = tree.to_array()
    positions = np.arange(1, len(tree) + 1)

    plt.figure(figsize=(12, 5))

    plt.subplot(1, 2, 1)
    plt.bar(positions, values, label='Value')
    plt.xlabel('Index')
    plt.ylabel('Value')
    plt.title('Point Values')
    plt.legend()

    plt.subplot(1, 2, 2)
    # Prefix sums straight from the tree, not a cumsum of the values
    prefix = [tree.query(i) for i in positions]
    plt.plot(positions, prefix, marker='o', label='query(i)')
    plt.xlabel('Index')
    plt.ylabel('Prefix Sum')
    plt.title('Prefix Sums')
    plt.legend()

    plt.tight_layout()
    plt.savefig(filename)
    plt.close()
    return filename
