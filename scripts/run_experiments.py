#!/usr/bin/env python
"""
Run all experiment presets and print a summary table

Usage:
    python scripts/run_experiments.py
    python scripts/run_experiments.py --plot out/density_sweep.png
"""

import sys
import argparse
from pathlib import Path

import pandas as pd

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from buoysim.scenarios import SCENARIOS, run_scenario
from buoysim.physics import explain


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Run buoyancy experiment presets")
    parser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Also save a density sweep plot (V=100 cm³, h=10 cm) to this path"
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the explanation sentence for each preset"
    )
    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()

    rows = []
    for scenario in SCENARIOS:
        result = run_scenario(scenario.id)
        rows.append({
            "id": scenario.id,
            "density_g_cm3": scenario.obj.density_g_cm3,
            "volume_cm3": scenario.obj.volume_cm3,
            "depth_cm": scenario.obj.depth_cm,
            "displacement_volume": result.displacement_volume,
            "buoyant_force": result.buoyant_force,
            "weight": result.weight,
            "net_force": result.net_force,
            "pressure": result.pressure,
            "float_state": result.float_state,
            "expected": scenario.expected_outcome,
        })
        if args.explain:
            print(f"{scenario.title}: {explain(result)}")

    df = pd.DataFrame(rows)
    print(f"\n{'='*70}")
    print("Buoyancy experiment presets")
    print(f"{'='*70}")
    print(df.to_string(index=False, float_format=lambda x: f"{x:.2f}"))

    if args.plot:
        import matplotlib

        matplotlib.use("Agg")
        from buoysim.physics.sweep import density_sweep
        from buoysim.plotting import plot_density_sweep
        from buoysim.config import ControlRanges

        sweep = density_sweep(ControlRanges().density_g_cm3.grid(), 100.0, 10.0)
        path = plot_density_sweep(sweep, args.plot)
        print(f"\n✓ Plot saved: {path}")


if __name__ == "__main__":
    main()
