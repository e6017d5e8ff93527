import scipy.stats as st

from rethinking.motors.errors import InvalidParameter
from rethinking.motors.observations import ObservationSummary


def beta_posterior(
    observations: ObservationSummary, alpha: float = 1.0, beta: float = 1.0
):
    """
    Exact posterior of p for a binomial likelihood and a Beta(alpha, beta) prior.

    The default Beta(1, 1) is the uniform prior, giving Beta(W + 1, L + 1).

    Returns:
        A frozen `scipy.stats.beta` distribution.
    """
    if not (alpha > 0 and beta > 0):
        raise InvalidParameter(
            f"Beta prior parameters must be positive, got ({alpha}, {beta})"
        )
    return st.beta(observations.successes + alpha, observations.failures + beta)
