from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

_STATE_COLORS = {"floating": "tab:blue", "sinking": "tab:red", "suspended": "tab:green"}


def plot_density_sweep(df: pd.DataFrame, out_path: str | Path, title: str | None = None) -> Path:
    """Силы (дин) в зависимости от плотности тела; точки окрашены по состоянию."""

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(9, 5))
    ax.plot(df["density_g_cm3"], df["buoyant_force"], label="buoyant force", lw=1.5)
    ax.plot(df["density_g_cm3"], df["weight"], label="weight", lw=1.5)
    ax.plot(df["density_g_cm3"], df["net_force"], label="net force", lw=1, ls="--")

    for state, color in _STATE_COLORS.items():
        sel = df[df["float_state"] == state]
        if not sel.empty:
            ax.scatter(sel["density_g_cm3"], sel["net_force"], s=12, color=color, label=state)

    ax.axhline(0.0, color="black", lw=0.5)
    ax.set_xlabel("object density, g/cm³")
    ax.set_ylabel("force, dynes")
    if title is None:
        V = float(df["volume_cm3"].iloc[0])
        title = f"V = {V:.0f} cm³"
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend(fontsize=8)

    fig.tight_layout()
    fig.savefig(out_path, dpi=120)
    plt.close(fig)
    return out_path
