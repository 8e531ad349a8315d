# MIT License
#
# Copyright (c) 2022 Quandela
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Gurvits/Glynn randomized estimation of the permanent, see https://arxiv.org/abs/1212.0025

For :math:`x` uniformly drawn in :math:`\\{-1,+1\\}^n`, :math:`(\\prod_i x_i) \\prod_j \\sum_i x_i A_{j,i}` is an
unbiased estimator of :math:`perm(A)`, so averaging many draws approximates the permanent up to an additive error.
"""
from __future__ import annotations

import math
from numbers import Integral

import numpy as np

from permanents.utils._enums import ConvergenceStatus
from permanents.utils._validated_params import ValidatedFloat, ValidatedInt
from permanents.utils.logging import get_logger, channel, ILogger
from permanents.utils.matrix import as_square_matrix, is_exact, RandomSource

_CHUNK_SIZE = 8192


def _numeric_matrix(matrix) -> np.ndarray:
    a = as_square_matrix(matrix)
    if is_exact(a):
        a = a.astype(complex)
    return a


def _check_trials(trials):
    if isinstance(trials, bool) or not isinstance(trials, Integral) or trials < 1:
        raise ValueError(f"trials must be a strictly positive integer, got {trials}")


def _draw_signs(rng: np.random.Generator, count: int, n: int) -> np.ndarray:
    return 2 * rng.integers(0, 2, size=(count, n)) - 1


def _samples(a: np.ndarray, x: np.ndarray) -> np.ndarray:
    """One estimator sample per row of x"""
    return np.prod(x, axis=1) * np.prod(x @ a.T, axis=1)


def glynn_estimator_sample(matrix, x):
    """Single estimator sample for the sign vector x"""
    a = _numeric_matrix(matrix)
    x = np.asarray(x)
    return np.prod(x) * np.prod(a @ x)


def combine_glynn_estimators(est1, est2, n1: int, n2: int):
    """combines two glynn estimations of n1,n2 trials to give one with (n1 + n2)"""
    return (n1 * est1 + n2 * est2) / (n1 + n2)


def _chunks(trials: int):
    done = 0
    while done < trials:
        size = min(_CHUNK_SIZE, trials - done)
        yield size
        done += size


def estimate_permanent(matrix, trials: int, rng: RandomSource = None):
    """Approximates the permanent of a matrix through the Gurvits/Glynn algorithm

    :param matrix: square matrix
    :param trials: number of random sign vectors drawn
    :param rng: a numpy Generator or a seed, None for fresh entropy
    :return: mean of the estimator samples
    """
    _check_trials(trials)
    a = _numeric_matrix(matrix)
    rng = np.random.default_rng(rng)
    n = a.shape[0]
    estimate = 0
    done = 0
    for size in _chunks(trials):
        chunk_mean = _samples(a, _draw_signs(rng, size, n)).mean()
        estimate = combine_glynn_estimators(estimate, chunk_mean, done, size)
        done += size
    return estimate


def estimate_permanent_with_error(matrix, trials: int, rng: RandomSource = None) -> tuple[complex, float]:
    """Same as estimate_permanent, also returning the standard error of the mean

    :return: (estimate, standard error), the error is infinite for a single trial
    """
    _check_trials(trials)
    a = _numeric_matrix(matrix)
    rng = np.random.default_rng(rng)
    n = a.shape[0]
    total = 0
    total_sq = 0.
    for size in _chunks(trials):
        samples = _samples(a, _draw_signs(rng, size, n))
        total += samples.sum()
        total_sq += float(np.sum(np.abs(samples) ** 2))
    mean = total / trials
    if trials == 1:
        return mean, math.inf
    variance = max(total_sq - trials * abs(mean) ** 2, 0.) / (trials - 1)
    return mean, math.sqrt(variance / trials)


class AdaptiveEstimate:
    """Result of an adaptive estimation, telling whether the relative tolerance was reached"""

    def __init__(self, value, total_iterations: int, status: ConvergenceStatus, relative_error: float):
        self.value = value
        self.total_iterations = total_iterations
        self.status = status
        self.relative_error = relative_error

    @property
    def converged(self) -> bool:
        return self.status == ConvergenceStatus.CONVERGED

    def __repr__(self):
        return f"AdaptiveEstimate(value={self.value}, total_iterations={self.total_iterations}, " \
               f"status={self.status.name}, relative_error={self.relative_error})"


class AdaptiveSettings:
    """Validated settings of the adaptive precision controller"""
    rtol = ValidatedFloat(min_value=0, default_value=1e-5)
    miniter = ValidatedInt(min_value=1, default_value=100)
    maxiter = ValidatedInt(min_value=1, default_value=100000)
    steps = ValidatedInt(min_value=1, default_value=5)

    def __init__(self, rtol=None, miniter=None, maxiter=None, steps=None):
        self.rtol = rtol
        self.miniter = miniter
        self.maxiter = maxiter
        self.steps = steps
        if self.maxiter < self.miniter:
            raise ValueError(f"maxiter ({self.maxiter}) must be greater than or equal to miniter ({self.miniter})")

    @property
    def growth_factor(self) -> float:
        """the number of iterations is multiplied by this number at each round"""
        return (self.maxiter / self.miniter) ** (1 / self.steps)


def _relative_difference(new, old) -> float:
    diff = abs(new - old)
    mean = abs(0.5 * (new + old))
    if mean == 0:
        return 0. if diff == 0 else math.inf
    return float(diff / mean)


def estimate_permanent_adaptive(matrix, rtol: float = 1e-5, miniter: int = 100, maxiter: int = 100000,
                                steps: int = 5, rng: RandomSource = None, logger: ILogger = None) -> AdaptiveEstimate:
    """Estimates the permanent with a growing number of trials until two successive estimates agree

    Starting from miniter trials, the number of trials is multiplied by (maxiter/miniter)^(1/steps) at each round.
    Stops when the relative difference of the last two estimates is below rtol, or when maxiter trials were
    consumed. At least one refinement round is run after the first estimate.

    :param matrix: square matrix
    :param rtol: relative tolerance between two successive estimates
    :param miniter: number of trials of the first round
    :param maxiter: budget of trials over all rounds
    :param steps: expected number of rounds to reach the budget
    :param rng: a numpy Generator or a seed, None for fresh entropy
    :param logger: diagnostics sink, default to the package logger
    """
    settings = AdaptiveSettings(rtol, miniter, maxiter, steps)
    logger = logger or get_logger()
    rng = np.random.default_rng(rng)
    a = _numeric_matrix(matrix)

    growth_factor = settings.growth_factor
    if growth_factor <= 2:
        logger.warn(f"small growth factor ({growth_factor:.3g}), results may be inaccurate: decrease steps",
                    channel.user)
    if settings.miniter < 100:
        logger.warn("small miniter may give false results if the first estimations are by chance close to the "
                    "next ones", channel.user)

    niter = settings.miniter
    estimates = [(niter, estimate_permanent(a, niter, rng))]
    total_iter = niter
    status = ConvergenceStatus.BUDGET_EXHAUSTED

    while True:
        niter *= growth_factor
        trials = max(1, round(niter))
        estimates.append((trials, estimate_permanent(a, trials, rng)))
        rel_err = _relative_difference(estimates[-1][1], estimates[-2][1])
        total_iter += trials
        logger.debug(f"glynn adaptive round {len(estimates) - 1}: {trials} trials, estimate {estimates[-1][1]}, "
                     f"relative difference {rel_err:.3g}", channel.general)

        if rel_err < settings.rtol:
            status = ConvergenceStatus.CONVERGED
            break
        if total_iter >= settings.maxiter:
            break

    return AdaptiveEstimate(estimates[-1][1], total_iter, status, rel_err)
