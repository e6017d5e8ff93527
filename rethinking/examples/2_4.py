# rethinking/examples/2_4.py

import os
import sys

# Add the root of the project to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from rethinking.motors import grid_approx
from rethinking.plotting import plot_grid_approx, plot_grid_resolutions

def main():
    """
    Runs the grid approximation for two different numbers of grid points
    and displays the resulting posterior distributions.
    """
    # Define parameters
    trials = 9
    num_successes = 6

    tables = []
    for num_points in (5, 20):
        table = grid_approx(
            trials=trials,
            num_successes=num_successes,
            num_points=num_points
        )
        tables.append(table)
        print(f"{num_points} points: MAP on grid = {table.mode:.4f}")

        fig = plot_grid_approx(table)
        fig.update_layout(title=f"Grid Approximation (Points = {num_points})")
        fig.show()

    # --- Both resolutions side by side ---
    plot_grid_resolutions(tables).show()

if __name__ == "__main__":
    main()
