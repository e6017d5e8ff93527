import argparse
from dataclasses import dataclass, field
from typing import Optional, Sequence

from rethinking.motors import (
    DoubleExponential,
    InvalidParameter,
    ObservationSummary,
    Prior,
    Step,
    Uniform,
    make_grid,
)


PRIOR_NAMES = ("uniform", "step", "double-exponential")
QUAP_METHODS = ("closed_form", "pyro")


@dataclass(frozen=True)
class EstimationConfig:
    """
    Settings for one globe-tossing run: the data, the grid resolutions
    to compare and the prior.
    """

    successes: int = 6
    trials: int = 9
    n_points: tuple[int, ...] = (20,)
    prior: Prior = field(default_factory=Uniform)
    quap_method: str = "closed_form"
    plot: bool = True

    def __post_init__(self):
        ObservationSummary(successes=self.successes, trials=self.trials)
        if not self.n_points:
            raise InvalidParameter("At least one grid resolution is required")
        for n in self.n_points:
            make_grid(n)
        if self.quap_method not in QUAP_METHODS:
            raise InvalidParameter(f"Unknown approximation method: {self.quap_method}")

    @property
    def observations(self) -> ObservationSummary:
        return ObservationSummary(successes=self.successes, trials=self.trials)


def parse_prior(
    name: str,
    threshold: Optional[float] = None,
    rate: Optional[float] = None,
    center: Optional[float] = None,
) -> Prior:
    """
    Builds a prior from its command-line name; unset options take the
    variant's defaults.
    """
    if name == "uniform":
        return Uniform()
    if name == "step":
        return Step() if threshold is None else Step(threshold=threshold)
    if name == "double-exponential":
        kwargs = {}
        if rate is not None:
            kwargs["rate"] = rate
        if center is not None:
            kwargs["center"] = center
        return DoubleExponential(**kwargs)
    raise InvalidParameter(f"Unknown prior '{name}', expected one of {PRIOR_NAMES}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grid and quadratic approximation of the globe-tossing posterior."
    )
    parser.add_argument(
        "--successes",
        type=int,
        default=6,
        help="Number of tosses landing on water.",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=9,
        help="Total number of tosses.",
    )
    parser.add_argument(
        "--tosses",
        type=str,
        default=None,
        help="Toss sequence such as WLWWWLWLW; overrides --successes/--trials.",
    )
    parser.add_argument(
        "--n-points",
        type=int,
        nargs="+",
        default=[20],
        help="One or more grid resolutions to compare.",
    )
    parser.add_argument(
        "--prior",
        choices=PRIOR_NAMES,
        default="uniform",
        help="Prior over the proportion of water.",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Threshold of the step prior.",
    )
    parser.add_argument(
        "--rate",
        type=float,
        default=None,
        help="Rate of the double-exponential prior.",
    )
    parser.add_argument(
        "--center",
        type=float,
        default=None,
        help="Center of the double-exponential prior.",
    )
    parser.add_argument(
        "--quap",
        choices=QUAP_METHODS,
        default="closed_form",
        help="How to compute the quadratic approximation.",
    )
    parser.add_argument(
        "--no-plot",
        action="store_true",
        help="Print results only, without opening figures.",
    )
    return parser


def config_from_args(argv: Optional[Sequence[str]] = None) -> EstimationConfig:
    args = build_parser().parse_args(argv)

    successes, trials = args.successes, args.trials
    if args.tosses is not None:
        observations = ObservationSummary.from_tosses(args.tosses)
        successes, trials = observations.successes, observations.trials

    return EstimationConfig(
        successes=successes,
        trials=trials,
        n_points=tuple(args.n_points),
        prior=parse_prior(args.prior, args.threshold, args.rate, args.center),
        quap_method=args.quap,
        plot=not args.no_plot,
    )
