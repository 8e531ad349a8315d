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

from typing import Tuple

import numpy as np

from ._abstract_backends import APermanentBackend
from permanents.algorithms import estimate_permanent, estimate_permanent_with_error, estimate_permanent_adaptive, \
    AdaptiveEstimate, AdaptiveSettings
from permanents.utils._validated_params import ValidatedInt
from permanents.utils.logging import ILogger
from permanents.utils.matrix import RandomSource


class GlynnApproxBackend(APermanentBackend):
    """Gurvits/Glynn randomized estimation of permanents with a fixed number of trials"""
    iterations = ValidatedInt(min_value=1, default_value=10000)

    def __init__(self, iterations: int = 10000, rng: RandomSource = None):
        self.iterations = iterations
        self._rng = np.random.default_rng(rng)

    @property
    def name(self) -> str:
        return "GlynnApprox"

    @property
    def is_exact(self) -> bool:
        return False

    def permanent(self, matrix):
        return estimate_permanent(matrix, self.iterations, self._rng)

    def permanent_with_error(self, matrix) -> Tuple[complex, float]:
        return estimate_permanent_with_error(matrix, self.iterations, self._rng)


class AdaptiveGlynnBackend(APermanentBackend):
    """Gurvits/Glynn estimation with a number of trials growing until the estimates stabilize

    The full outcome of the last computation (including whether it converged) is kept in last_estimate.
    """

    def __init__(self, rtol: float = 1e-5, miniter: int = 100, maxiter: int = 100000, steps: int = 5,
                 rng: RandomSource = None, logger: ILogger = None):
        self.settings = AdaptiveSettings(rtol, miniter, maxiter, steps)
        self._rng = np.random.default_rng(rng)
        self._logger = logger
        self.last_estimate: AdaptiveEstimate = None

    @property
    def name(self) -> str:
        return "AdaptiveGlynn"

    @property
    def is_exact(self) -> bool:
        return False

    def permanent(self, matrix):
        s = self.settings
        self.last_estimate = estimate_permanent_adaptive(matrix, s.rtol, s.miniter, s.maxiter, s.steps,
                                                         rng=self._rng, logger=self._logger)
        return self.last_estimate.value
