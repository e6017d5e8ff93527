from rethinking.motors.beta_model import beta_posterior
from rethinking.motors.comparison import ApproximationComparison, compare_approximations
from rethinking.motors.errors import DegeneratePosterior, InvalidParameter
from rethinking.motors.grid_model import (
    GridPosteriorEstimator,
    PosteriorTable,
    binomial_likelihood,
    estimate,
    evaluate_prior,
    grid_approx,
    make_grid,
)
from rethinking.motors.observations import ObservationSummary
from rethinking.motors.priors import DoubleExponential, Prior, Step, Uniform
from rethinking.motors.quap_model import (
    GaussianApproximation,
    QuadraticPosteriorApproximator,
    fit_quad_approx,
    get_map_using_grad,
    get_quad_approx,
    globe_tossing_model,
    quadratic_approx,
)
