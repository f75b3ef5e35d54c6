"""Densities and distribution functions of common probability laws."""

from .densities import (
    beta_density,
    cauchy_density,
    chi_square_density,
    exponential_density,
    f_density,
    gaussian_density,
    gumbels_maximum_density,
    gumbels_minimum_density,
    kumaraswamys_density,
    laplace_density,
    logistic_density,
    pareto_density,
    t2_density,
    uniform_0_1_density,
    weibull_density,
)
from .distributions import (
    gaussian_distribution,
    beta_distribution,
    gamma_distribution,
    absolute_student_t_distribution,
    absolute_student_t_distribution_large_dof,
    student_t_distribution_large_dof,
    cauchy_distribution,
    chi_square_distribution,
    chi_square_distribution_large_dof,
    exponential_distribution,
    f_distribution,
    f_distribution_large_denominator_dof,
    f_distribution_large_dofs,
    gumbels_maximum_distribution,
    gumbels_minimum_distribution,
    kolmogorov_asymptotic_distribution,
    kumaraswamys_distribution,
    laplace_distribution,
    logistic_distribution,
    pareto_distribution,
    t2_distribution,
    uniform_0_1_distribution,
    weibull_distribution,
)
from .point_distributions import (
    binomial_point_distribution,
    geometric_point_distribution,
    hypergeometric_point_distribution,
    log_series_point_distribution,
    negative_binomial_point_distribution,
    poisson_point_distribution,
)
from .cumulative_distributions import (
    binomial_cumulative_distribution,
    geometric_cumulative_distribution,
    hypergeometric_cumulative_distribution,
    log_series_cumulative_distribution,
    negative_binomial_cumulative_distribution,
    poisson_cumulative_distribution,
)

__all__ = [
    "beta_density",
    "cauchy_density",
    "chi_square_density",
    "exponential_density",
    "f_density",
    "gaussian_density",
    "gumbels_maximum_density",
    "gumbels_minimum_density",
    "kumaraswamys_density",
    "laplace_density",
    "logistic_density",
    "pareto_density",
    "t2_density",
    "uniform_0_1_density",
    "weibull_density",
    "gaussian_distribution",
    "beta_distribution",
    "gamma_distribution",
    "absolute_student_t_distribution",
    "absolute_student_t_distribution_large_dof",
    "student_t_distribution_large_dof",
    "cauchy_distribution",
    "chi_square_distribution",
    "chi_square_distribution_large_dof",
    "exponential_distribution",
    "f_distribution",
    "f_distribution_large_denominator_dof",
    "f_distribution_large_dofs",
    "gumbels_maximum_distribution",
    "gumbels_minimum_distribution",
    "kolmogorov_asymptotic_distribution",
    "kumaraswamys_distribution",
    "laplace_distribution",
    "logistic_distribution",
    "pareto_distribution",
    "t2_distribution",
    "uniform_0_1_distribution",
    "weibull_distribution",
    "binomial_point_distribution",
    "geometric_point_distribution",
    "hypergeometric_point_distribution",
    "log_series_point_distribution",
    "negative_binomial_point_distribution",
    "poisson_point_distribution",
    "binomial_cumulative_distribution",
    "geometric_cumulative_distribution",
    "hypergeometric_cumulative_distribution",
    "log_series_cumulative_distribution",
    "negative_binomial_cumulative_distribution",
    "poisson_cumulative_distribution",
]
