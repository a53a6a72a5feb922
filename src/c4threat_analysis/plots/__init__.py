from .chart import (
    plot_cell_heatmap,
    plot_orientation_bar,
)

__all__ = [
    "plot_cell_heatmap",
    "plot_orientation_bar",
]
