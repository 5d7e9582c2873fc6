"""
Ordered Tree Demo -- Seeded insertion order, successor splicing on erase, traversal
orders, deep copies, and a rendering of the tree shape.

Generates:
- viz/01_tree_shape.png -- Tree before and after the erase
"""

import sys
import os
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))
from ordered_tree import OrderedTree, Order
from sequence_tools import perfect_shuffle, format_sequence

SEED = 0
SEQUENCE_LENGTH = 10
ERASE_KEY = 5

VIZ_DIR = Path(__file__).parent / "viz"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


def node_positions(tree):
    """Lay nodes out with x = in-order rank and y = -depth."""
    positions = {}
    edges = []
    rank = 0
    stack = []
    node = tree.root
    depth = 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node = node.left
            depth += 1
        node, depth = stack.pop()
        positions[node.key] = (rank, -depth)
        rank += 1
        for child in (node.left, node.right):
            if child is not None:
                edges.append((node.key, child.key))
        node = node.right
        depth += 1
    return positions, edges


def draw_tree(ax, tree, title, highlight=None):
    positions, edges = node_positions(tree)
    for parent, child in edges:
        (x0, y0), (x1, y1) = positions[parent], positions[child]
        ax.plot([x0, x1], [y0, y1], color=COLORS["dark"], linewidth=1.2, zorder=1)
    for key, (x, y) in positions.items():
        color = COLORS["red"] if key == highlight else COLORS["blue"]
        ax.scatter([x], [y], s=500, color=color, zorder=2)
        ax.annotate(str(key), (x, y), ha="center", va="center", color="white",
                    fontsize=10, fontweight="bold", zorder=3)
    if positions:
        depths = np.array([y for _, y in positions.values()])
        ax.set_ylim(depths.min() - 0.8, 0.8)
        ax.set_xlim(-0.8, len(positions) - 0.2)
    ax.set_title(title, fontsize=11, fontweight="bold")
    ax.axis("off")


# ---------------------------------------------------------------------------
# Example 1: Build, Erase, Traverse
# ---------------------------------------------------------------------------
def example_1_build_and_erase():
    """Insert a seeded permutation, erase one key, print every view of the tree."""
    print("=" * 60)
    print("Example 1: Build, Erase, Traverse")
    print("=" * 60)

    numbers = list(range(SEQUENCE_LENGTH))
    perfect_shuffle(numbers, SEED)
    print(f"\n  Insertion order: {format_sequence(numbers)}")

    tree: OrderedTree[int] = OrderedTree()
    for number in numbers:
        tree.insert(number)
    before = tree.copy()

    erased = tree.erase(ERASE_KEY)
    print(f"  erase({ERASE_KEY}): {erased}")
    print(f"  erase({ERASE_KEY}) again: {tree.erase(ERASE_KEY)}")

    for order in Order:
        print(f"  {order.value:>9}: {format_sequence(tree.traverse(order))}")

    print("\n  Debug dump:")
    for line in tree.debuginfo().splitlines():
        print(f"    {line}")

    return before, tree


# ---------------------------------------------------------------------------
# Example 2: Deep Copies and Swap
# ---------------------------------------------------------------------------
def example_2_copy_and_swap(tree):
    """Show that copies share no nodes and that swap only exchanges roots."""
    print("\n" + "=" * 60)
    print("Example 2: Deep Copies and Swap")
    print("=" * 60)

    clone = OrderedTree(tree)
    clone.insert(SEQUENCE_LENGTH)
    print(f"\n  source after inserting into clone: {format_sequence(tree.traverse())}")
    print(f"  clone:                             {format_sequence(clone.traverse())}")
    shared = [key for key in tree.traverse() if clone.find(key) is tree.find(key)]
    print(f"  shared nodes: {format_sequence(shared)}")

    other: OrderedTree[int] = OrderedTree()
    other.swap(clone)
    print(f"  after swap, clone empty: {clone.empty()}, other size: {len(other)}")


# ---------------------------------------------------------------------------
# Example 3: Tree Shape
# ---------------------------------------------------------------------------
def example_3_tree_shape(before, after):
    """Render the tree before and after the erase."""
    print("\n" + "=" * 60)
    print("Example 3: Tree Shape")
    print("=" * 60)

    VIZ_DIR.mkdir(exist_ok=True)
    fig, axes = plt.subplots(1, 2, figsize=(14, 6))
    draw_tree(axes[0], before, f"Before erase({ERASE_KEY})", highlight=ERASE_KEY)
    draw_tree(axes[1], after, f"After erase({ERASE_KEY})")

    fig.suptitle("Ordered Tree: In-order Successor Splicing", fontsize=14, fontweight="bold", y=1.0)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_tree_shape.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_tree_shape.png")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Ordered Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    before, after = example_1_build_and_erase()
    example_2_copy_and_swap(after)
    example_3_tree_shape(before, after)

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print("=" * 60)


if __name__ == "__main__":
    main()
