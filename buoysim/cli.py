from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .config import SimulatorConfig
from .core.types import SubmergedObject
from .core.validation import InvalidInput
from .physics import SimulationResult, evaluate, explain, format_result

logger = logging.getLogger(__name__)


def _print_result(result: SimulationResult) -> None:
    for key, text in format_result(result).items():
        print(f"  {key:<20} {text}")
    print()
    print(explain(result))


def _cmd_evaluate(args: argparse.Namespace, cfg: SimulatorConfig) -> int:
    obj = SubmergedObject(volume_cm3=args.volume, density_g_cm3=args.density, depth_cm=args.depth)
    _print_result(evaluate(obj, fluid=cfg.fluid))
    return 0


def _cmd_presets(_args: argparse.Namespace, _cfg: SimulatorConfig) -> int:
    from .scenarios import SCENARIOS

    for s in SCENARIOS:
        o = s.obj
        print(
            f"{s.id:<8} {s.title:<26} ρ={o.density_g_cm3:<5} V={o.volume_cm3:<6} "
            f"h={o.depth_cm:<5} -> {s.expected_outcome}"
        )
    return 0


def _cmd_preset(args: argparse.Namespace, cfg: SimulatorConfig) -> int:
    from .scenarios import get_scenario, run_scenario

    scenario = get_scenario(args.id)
    print(f"{scenario.title}: {scenario.description}")
    print(f"Learning goal: {scenario.learning_goal}")
    print()
    _print_result(run_scenario(scenario.id, fluid=cfg.fluid))
    return 0


def _cmd_sweep(args: argparse.Namespace, cfg: SimulatorConfig) -> int:
    from .physics.sweep import density_sweep

    df = density_sweep(cfg.ranges.density_g_cm3.grid(), args.volume, args.depth, fluid=cfg.fluid)
    print(df.to_string(index=False, float_format=lambda x: f"{x:.2f}"))

    if args.plot:
        import matplotlib

        matplotlib.use("Agg")
        from .plotting import plot_density_sweep

        path = plot_density_sweep(df, args.plot)
        logger.info("plot written to %s", path)
        print(f"\nPlot: {path}")
    return 0


def _cmd_quiz(args: argparse.Namespace, _cfg: SimulatorConfig) -> int:
    from .quiz import QUESTIONS, score, verdict

    answers = [None if a < 0 else a for a in args.answers]
    points = score(answers)
    for q, a in zip(QUESTIONS, answers):
        mark = "+" if a == q.correct_answer else "-"
        print(f"[{mark}] {q.question}")
        print(f"    {q.explanation}")
    print()
    print(f"Your Score: {points}/{len(QUESTIONS)}")
    print(verdict(points, len(QUESTIONS)))
    return 0


def build_parser(cfg: SimulatorConfig | None = None) -> argparse.ArgumentParser:
    cfg = cfg or SimulatorConfig()
    r = cfg.ranges

    ap = argparse.ArgumentParser(
        prog="buoysim",
        description="Buoyancy and fluid pressure of a submerged object (CGS units)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("evaluate", help="Evaluate a single object")
    p.add_argument("--density", type=float, required=True,
                   help=f"g/cm³ (UI range {r.density_g_cm3.lo}..{r.density_g_cm3.hi})")
    p.add_argument("--volume", type=float, required=True,
                   help=f"cm³ (UI range {r.volume_cm3.lo:.0f}..{r.volume_cm3.hi:.0f})")
    p.add_argument("--depth", type=float, default=0.0,
                   help=f"cm (UI range {r.depth_cm.lo:.0f}..{r.depth_cm.hi:.0f})")
    p.set_defaults(func=_cmd_evaluate)

    p = sub.add_parser("presets", help="List experiment presets")
    p.set_defaults(func=_cmd_presets)

    p = sub.add_parser("preset", help="Run an experiment preset")
    p.add_argument("id", type=str)
    p.set_defaults(func=_cmd_preset)

    p = sub.add_parser("sweep", help="Sweep object density over the UI range")
    p.add_argument("--volume", type=float, default=100.0)
    p.add_argument("--depth", type=float, default=10.0)
    p.add_argument("--plot", type=str, default=None, help="Save a PNG of forces vs density")
    p.set_defaults(func=_cmd_sweep)

    p = sub.add_parser("quiz", help="Score quiz answers (option indices, -1 = skipped)")
    p.add_argument("--answers", type=int, nargs="+", required=True)
    p.set_defaults(func=_cmd_quiz)

    return ap


def main(argv: Sequence[str] | None = None) -> int:
    cfg = SimulatorConfig()
    args = build_parser(cfg).parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return int(args.func(args, cfg))
    except InvalidInput as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
