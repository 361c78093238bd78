"""
Binary Heap Demo -- Pop order, comparator polarity, comparison cost analysis,
and bulk heapify versus repeated push.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import BinaryHeap
from ordering import natural_order

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

SIZES = [16, 64, 256, 1024, 4096, 16384]


class CountingComparator:
    """Natural order that counts how often it is called."""

    def __init__(self):
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return natural_order(a, b)


class Job:
    def __init__(self, priority, name):
        self.priority = priority
        self.name = name


def example_1_pop_order():
    """Min-heap and max-heap over the same values."""
    print("=" * 60)
    print("Example 1: Pop Order")
    print("=" * 60)

    values = [10, 2, 8, 5, 7]
    min_heap = BinaryHeap()
    max_heap = BinaryHeap(ascending=False)
    for v in values:
        min_heap.push(v)
        max_heap.push(v)

    print(f"Pushed:          {values}")
    print(f"Min-heap peek:   {min_heap.peek()}")
    print(f"Min-heap order:  {list(min_heap)}")
    print(f"Max-heap order:  {list(max_heap)}")
    print(f"count(8) = {min_heap.count(8)}, contains(3) = {min_heap.contains(3)}")

    fig, ax = plt.subplots(figsize=(8, 5))
    steps = np.arange(1, len(values) + 1)
    ax.plot(steps, list(min_heap), "o-", color="steelblue", linewidth=2, label="ascending=True")
    ax.plot(steps, list(max_heap), "s-", color="coral", linewidth=2, label="ascending=False")
    ax.set_xlabel("Pop #")
    ax.set_ylabel("Value")
    ax.set_title("Pop Order by Polarity")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_pop_order.png", dpi=150)
    plt.close(fig)

    return fig


def example_2_custom_comparator():
    """Scheduling jobs that have no natural order."""
    print("\n" + "=" * 60)
    print("Example 2: Custom Comparator")
    print("=" * 60)

    heap = BinaryHeap.with_less_than(lambda a, b: a.priority < b.priority)
    for priority, name in [(3, "compile"), (1, "fetch"), (2, "link"), (1, "lint")]:
        heap.push(Job(priority, name))

    probe = Job(1, "probe")
    print(f"Jobs with priority 1: {heap.count(probe)}")
    order = []
    while heap:
        job = heap.pop()
        order.append(job)
        print(f"  run {job.name:<8} (priority {job.priority})")

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.barh([j.name for j in order][::-1], [j.priority for j in order][::-1], color="#1abc9c")
    ax.set_xlabel("Priority")
    ax.set_title("Execution Order (top runs first)")
    ax.grid(True, alpha=0.3, axis="x")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_custom_comparator.png", dpi=150)
    plt.close(fig)

    return fig


def example_3_comparison_cost():
    """Comparisons per push and per pop against log2(n)."""
    print("\n" + "=" * 60)
    print("Example 3: Comparison Cost")
    print("=" * 60)

    push_costs = []
    pop_costs = []
    for n in SIZES:
        compare = CountingComparator()
        heap = BinaryHeap(compare)
        for v in np.random.randint(0, 10 * n, size=n).tolist():
            heap.push(v)
        push_costs.append(compare.calls / n)

        compare.calls = 0
        while heap:
            heap.pop()
        pop_costs.append(compare.calls / n)
        print(f"n = {n:>6}: {push_costs[-1]:6.2f} cmp/push, {pop_costs[-1]:6.2f} cmp/pop")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(SIZES, push_costs, "o-", color="#3498db", linewidth=2, label="push")
    ax.plot(SIZES, pop_costs, "s-", color="#e74c3c", linewidth=2, label="pop")
    ax.plot(SIZES, 2 * np.log2(SIZES), "k--", alpha=0.6, label="2 log2(n)")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Heap size n")
    ax.set_ylabel("Comparisons per operation")
    ax.set_title("Average Comparisons per Operation")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_comparison_cost.png", dpi=150)
    plt.close(fig)

    return fig, push_costs, pop_costs


def example_4_heapify_vs_push():
    """Bulk from_array against n individual pushes."""
    print("\n" + "=" * 60)
    print("Example 4: Heapify vs Repeated Push")
    print("=" * 60)

    heapify_costs = []
    push_costs = []
    for n in SIZES:
        values = np.random.permutation(n).tolist()

        compare = CountingComparator()
        BinaryHeap.from_array(values, compare)
        heapify_costs.append(compare.calls)

        compare = CountingComparator()
        heap = BinaryHeap(compare)
        for v in values:
            heap.push(v)
        push_costs.append(compare.calls)
        print(f"n = {n:>6}: heapify {heapify_costs[-1]:>7} cmp, push {push_costs[-1]:>7} cmp")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(SIZES, heapify_costs, "o-", color="#27ae60", linewidth=2, label="from_array")
    ax.plot(SIZES, push_costs, "s-", color="#9b59b6", linewidth=2, label="repeated push")
    ax.set_xscale("log", base=2)
    ax.set_yscale("log")
    ax.set_xlabel("n")
    ax.set_ylabel("Total comparisons")
    ax.set_title("Building a Heap of n Random Elements")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_heapify_vs_push.png", dpi=150)
    plt.close(fig)

    return fig, heapify_costs, push_costs


def generate_pdf_report(figures_data):
    pdf_path = Path(__file__).parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Binary Heap Report", fontsize=20, ha="center", fontweight="bold")
        summary_text = """
Summary
=======
• Array-backed heap, parent of i at (i - 1) // 2
• Ordering supplied by a three-way comparator:
  - natural order, ascending or descending
  - custom comparator or strictly-less predicate
• Membership queries use comparator equivalence

Key Findings:
  1. Push and pop stay within a small multiple of log2(n) comparisons
  2. from_array builds a heap with fewer comparisons than repeated push
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, filename in figures_data:
            fig_page = plt.figure(figsize=(11, 8.5))
            fig_page.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            img = plt.imread(VIZ_DIR / filename)
            ax = fig_page.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig_page)
            plt.close(fig_page)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 22 + "BINARY HEAP DEMO" + " " * 20 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_pop_order()
    example_2_custom_comparator()
    example_3_comparison_cost()
    example_4_heapify_vs_push()

    generate_pdf_report([
        ("Example 1: Pop Order", "01_pop_order.png"),
        ("Example 2: Custom Comparator", "02_custom_comparator.png"),
        ("Example 3: Comparison Cost", "03_comparison_cost.png"),
        ("Example 4: Heapify vs Push", "04_heapify_vs_push.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
