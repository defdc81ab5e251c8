"""
Non-central t distribution family implementation.

Contains the NoncentralT family with the standard (df, ncp) parameterization
and the sample-size/effect-size parameterization used in power analysis.
The numerics are delegated to :data:`scipy.stats.nct`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln
from scipy.stats import nct

from pysatl_nct.errors import ComputationError
from pysatl_nct.families.parametric_family import ParametricFamily
from pysatl_nct.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_nct.families.registry import ParametricFamilyRegister
from pysatl_nct.types import CharacteristicName, FamilyName
from pysatl_nct.validation import as_float

if TYPE_CHECKING:
    from typing import Any

    from pysatl_nct.families.distribution import DistributionHandle
    from pysatl_nct.types import Number, NumericArray


def _checked(
    values: Any,
    points: NumericArray,
    characteristic: str,
    parameters: Parametrization,
) -> Any:
    """
    Reject NaN results produced from non-NaN input points.

    SciPy reports domain errors and non-convergence as NaN; this turns them
    into :class:`ComputationError` carrying the position of the first bad point.
    """
    result = np.asarray(values, dtype=np.float64)
    bad = np.isnan(result) & ~np.isnan(points)
    if np.any(bad):
        if result.ndim == 0:
            raise ComputationError(
                f"{characteristic} of {FamilyName.NONCENTRAL_T}{parameters.parameters} "
                f"could not be evaluated at {float(points)}"
            )
        index = int(np.flatnonzero(bad)[0])
        raise ComputationError(
            f"{characteristic} of {FamilyName.NONCENTRAL_T}{parameters.parameters} "
            f"could not be evaluated at {float(points[index])}",
            index=index,
        )
    if result.ndim == 0:
        return float(result)
    return result


def configure_noncentral_t_family() -> None:
    """
    Configure and register the non-central t distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NONCENTRAL_T):
        return

    NONCENTRAL_T_DOC = """
    Non-central Student's t distribution.

    The distribution of (Z + δ) / sqrt(V / ν) where Z is standard normal,
    V is chi-squared with ν degrees of freedom independent of Z, and δ is the
    non-centrality parameter. With δ = 0 it reduces to Student's t.

    It is the distribution of the one-sample t statistic under the
    alternative hypothesis, which makes it the basis of power analysis for
    t-tests.
    """

    def pdf(parameters: Parametrization, x: Number | NumericArray) -> Any:
        """
        Probability density function for non-central t distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - df: float (degrees of freedom)
            - ncp: float (non-centrality)
        x : Number or NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        float or NumericArray
            Probability density values at points x

        Raises
        ------
        ComputationError
            If SciPy cannot evaluate the density at some point
        """
        parameters = cast(_Standard, parameters)
        points = np.asarray(x, dtype=np.float64)

        with np.errstate(all="ignore"):
            values = nct.pdf(points, parameters.df, parameters.ncp)
        values = np.where(np.isinf(points), 0.0, values)
        return _checked(values, points, CharacteristicName.PDF, parameters)

    def cdf(parameters: Parametrization, q: Number | NumericArray) -> Any:
        """
        Cumulative distribution function for non-central t distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - df: float (degrees of freedom)
            - ncp: float (non-centrality)
        q : Number or NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        float or NumericArray
            Probabilities P(X ≤ q) for each point q
        """
        parameters = cast(_Standard, parameters)
        points = np.asarray(q, dtype=np.float64)

        with np.errstate(all="ignore"):
            values = nct.cdf(points, parameters.df, parameters.ncp)
        values = np.where(np.isposinf(points), 1.0, np.where(np.isneginf(points), 0.0, values))
        return _checked(np.clip(values, 0.0, 1.0), points, CharacteristicName.CDF, parameters)

    def ppf(parameters: Parametrization, p: Number | NumericArray) -> Any:
        """
        Percent point function (inverse CDF) for non-central t distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - df: float (degrees of freedom)
            - ncp: float (non-centrality)
        p : Number or NumericArray
            Probability from [0, 1]

        Returns
        -------
        float or NumericArray
            Quantiles corresponding to probabilities p
            If p[i] is 0 or 1, then the result[i] is -inf and inf correspondingly

        Raises
        ------
        ComputationError
            If probability is outside [0, 1] or the root search fails
        """
        parameters = cast(_Standard, parameters)
        probs = np.asarray(p, dtype=np.float64)

        outside = (probs < 0) | (probs > 1)
        if np.any(outside):
            index = None if probs.ndim == 0 else int(np.flatnonzero(outside)[0])
            raise ComputationError("Probability must be in [0, 1]", index=index)

        with np.errstate(all="ignore"):
            values = nct.ppf(probs, parameters.df, parameters.ncp)
        values = np.where(probs == 0, -np.inf, np.where(probs == 1, np.inf, values))
        return _checked(values, probs, CharacteristicName.PPF, parameters)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of non-central t distribution, defined for df > 1."""
        parameters = cast(_Standard, parameters)
        df, ncp = parameters.df, parameters.ncp
        if df <= 1:
            raise ComputationError(f"Mean is undefined for df = {df} <= 1")
        if math.isinf(df):
            return ncp
        return ncp * math.sqrt(df / 2) * math.exp(gammaln((df - 1) / 2) - gammaln(df / 2))

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of non-central t distribution, defined for df > 2."""
        parameters = cast(_Standard, parameters)
        df, ncp = parameters.df, parameters.ncp
        if df <= 2:
            raise ComputationError(f"Variance is undefined for df = {df} <= 2")
        if math.isinf(df):
            return 1.0
        mean = mean_func(parameters, None)
        return df * (1 + ncp**2) / (df - 2) - mean**2

    NoncentralT = ParametricFamily(
        name=FamilyName.NONCENTRAL_T,
        distr_parametrizations=["standard", "sampleEffect"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
    )
    NoncentralT.__doc__ = NONCENTRAL_T_DOC

    @parametrization(family=NoncentralT, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of non-central t distribution.

        Parameters
        ----------
        df : float
            Degrees of freedom
        ncp : float
            Non-centrality parameter (0 gives the central t distribution)
        """

        df: float
        ncp: float

        @constraint(description="df > 0")
        def check_df_positive(self) -> bool:
            """Check that degrees of freedom are positive."""
            return self.df > 0

        @constraint(description="ncp is finite")
        def check_ncp_finite(self) -> bool:
            """Check that the non-centrality parameter is a finite number."""
            return math.isfinite(self.ncp)

    @parametrization(family=NoncentralT, name="sampleEffect")
    class _SampleEffect(Parametrization):
        """
        One-sample t-test parametrization of non-central t distribution.

        The t statistic of a sample of size n drawn from a population whose
        mean differs from the hypothesised one by ``effect`` standard
        deviations follows NoncentralT(df = n - 1, ncp = effect * sqrt(n)).

        Parameters
        ----------
        n : float
            Sample size
        effect : float
            Standardized effect size (Cohen's d)
        """

        n: float
        effect: float

        @constraint(description="n >= 2")
        def check_n_at_least_two(self) -> bool:
            """Check that the sample leaves at least one degree of freedom."""
            return self.n >= 2

        @constraint(description="effect is finite")
        def check_effect_finite(self) -> bool:
            """Check that the effect size is a finite number."""
            return math.isfinite(self.effect)

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            ncp = self.effect * math.sqrt(self.n) if self.n >= 0 else math.nan
            return _Standard(df=self.n - 1, ncp=ncp)

    ParametricFamilyRegister.register(NoncentralT)


def noncentral_t(df: float, ncp: float) -> DistributionHandle:
    """
    Create a handle for the non-central t distribution.

    Parameters
    ----------
    df : float
        Degrees of freedom. Not checked here; a non-positive value makes
        every evaluation of the handle fail.
    ncp : float
        Non-centrality parameter.

    Returns
    -------
    DistributionHandle
        Immutable handle for NoncentralT(df, ncp).

    Raises
    ------
    InvalidArgumentError
        If ``df`` or ``ncp`` is not a number.
    """
    from pysatl_nct.families.configuration import configure_families_register

    family = configure_families_register().get(FamilyName.NONCENTRAL_T)
    return family.distribution(df=as_float(df, "df"), ncp=as_float(ncp, "ncp"))
