"""Basic usage example.

This example demonstrates:
- Building lines from partial options
- Generating alternating point sequences in each sort order
- Testing membership and stepping along a line
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from plot_helper import generate_line_plot, generate_sort_plot

from line_segment import ValidationError, inside, move, one, points


def main():
    """Basic usage example with the documented values."""

    print("=" * 80)
    print("BASIC LINE SEGMENT USAGE")
    print("=" * 80)

    # The same line described three different ways
    configs = [
        {"end": -10, "count": 3},
        {"dis": 10, "count": 3, "neg": True},
        {"spacing": 5, "count": 3, "neg": True},
    ]

    print("\nLines:")
    print(f"  {'Options':<40} {'Spacing':<10} {'Min':<8} {'Max':<8} {'Points'}")
    print("  " + "-" * 76)
    for cfg in configs:
        line = one(cfg)
        print(
            f"  {str(cfg):<40} {line.spacing:<10.2f} {line.min:<8} {line.max:<8} "
            f"{line.points}"
        )

    # Alternating sequences around zero
    print("\nPoint sequences (count=5, spacing=2):")
    for sort in ("zero", "neg", "pos"):
        print(f"  {sort:<6} {points({'count': 5, 'spacing': 2, 'sort': sort})}")

    # Walk along a line until the far end is reached
    line = one({"end": -10, "count": 3})
    position = 0
    print(f"\nWalking along {line.min}..{line.max} in steps of 4:")
    while True:
        next_position = move(line, position, 4)
        print(f"  {position} -> {next_position} (inside: {inside(line, next_position)})")
        if next_position == position:
            break
        position = next_position

    # Invalid configurations are rejected up front
    print("\nValidation:")
    for cfg in ({"dis": -1}, {"count": 1}):
        try:
            one(cfg)
        except ValidationError as e:
            print(f"  {cfg}: {e}")

    print("\n" + "=" * 80)
    print("GENERATING PLOTS")
    print("=" * 80)
    generate_line_plot("basic_usage", one({"end": -10, "count": 5}))
    generate_sort_plot("basic_usage", count=9, spacing=1.0)
    print()


if __name__ == "__main__":
    main()
