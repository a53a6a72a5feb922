from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def plot_orientation_bar(counts: pd.Series, outdir: Path, *, show: bool) -> Path | None:
    if counts.empty:
        return None

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure()
    plt.bar(counts.index.astype(str), counts.astype(int))
    plt.title("Puzzles with a completing move, by orientation")
    plt.xlabel("orientation")
    plt.ylabel("puzzles")

    path = outdir / "orientation_counts.png"
    if show:
        plt.show()
        return None
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_cell_heatmap(grid: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """
    Board-shaped heatmap, row 1 at the top, of how often each cell completes a line.
    """
    if grid.empty:
        return None

    if not show:
        _ensure_dir(outdir)

    fig, ax = plt.subplots(figsize=(7, 6))
    im = ax.imshow(grid.to_numpy(), cmap="viridis")
    ax.set_xticks(range(grid.shape[1]), labels=[str(c) for c in grid.columns])
    ax.set_yticks(range(grid.shape[0]), labels=[str(r) for r in grid.index])
    ax.set_xlabel("column")
    ax.set_ylabel("row")
    ax.set_title("Completing cells")
    for i in range(grid.shape[0]):
        for j in range(grid.shape[1]):
            ax.text(j, i, str(int(grid.iat[i, j])), ha="center", va="center", color="w")
    fig.colorbar(im, ax=ax)

    path = outdir / "completion_heatmap.png"
    if show:
        plt.show()
        return None
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path
