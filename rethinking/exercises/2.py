# rethinking/exercises/2.py

import os
import sys

# Add the root of the project to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import plotly.graph_objects as go
from rethinking.motors import ObservationSummary, Step, Uniform, estimate

def main():
    """
    2M1 and 2M2: grid approximations for three toss sequences, first with a
    flat prior and then with a prior that is zero below p = 0.5.
    """
    # Define the scenarios
    scenarios = ["WWW", "WWWL", "LWWLWWW"]

    num_points = 100

    priors = {
        "2M1 (uniform prior)": Uniform(),
        "2M2 (step prior)": Step(threshold=0.5),
    }

    for title, prior in priors.items():
        # Create a single figure to hold all plots
        fig = go.Figure()

        # Iterate through scenarios and add traces to the figure
        for tosses in scenarios:
            observations = ObservationSummary.from_tosses(tosses)
            table = estimate(observations, n_points=num_points, prior=prior)

            # Add a trace for the current scenario
            fig.add_trace(go.Scatter(
                x=table.p_grid,
                y=table.posterior,
                mode='lines',
                name=f"{tosses}: Trials={observations.trials}, Successes={observations.successes}"
            ))

        # Update the layout for the combined figure
        fig.update_layout(
            title=f"Grid Approximation for Multiple Scenarios - {title}",
            xaxis_title="Parameter Value (p)",
            yaxis_title="Posterior Probability",
            legend_title="Scenarios"
        )

        fig.show()

if __name__ == "__main__":
    main()
