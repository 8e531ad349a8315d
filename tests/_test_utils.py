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

import numpy as np
import pytest

from permanents.utils.logging import ILogger, LoggerConfig, channel, level


class RecordingLogger(ILogger):
    """Diagnostics sink keeping every message in memory, as (level, message, channel) tuples"""

    def __init__(self):
        self.records = []

    def apply_config(self, config: LoggerConfig):
        pass

    def set_level(self, lvl: level, ch: channel = channel.user):
        pass

    def debug(self, msg: str, ch: channel = channel.user):
        self.records.append((level.debug, msg, ch))

    def info(self, msg: str, ch: channel = channel.user):
        self.records.append((level.info, msg, ch))

    def warn(self, msg: str, ch: channel = channel.user):
        self.records.append((level.warn, msg, ch))

    def error(self, msg: str, ch: channel = channel.user, exc_info=None):
        self.records.append((level.err, msg, ch))

    def critical(self, msg: str, ch: channel = channel.user, exc_info=None):
        self.records.append((level.critical, msg, ch))

    def messages(self, lvl: level = None, ch: channel = None) -> list:
        return [msg for (l, msg, c) in self.records
                if (lvl is None or l == lvl) and (ch is None or c == ch)]


def random_matrix(n: int, seed: int, is_complex: bool = True) -> np.ndarray:
    rng = np.random.default_rng(seed)
    m = rng.uniform(-1, 1, (n, n))
    if is_complex:
        m = m + 1j * rng.uniform(-1, 1, (n, n))
    return m


def random_gram_matrix(n: int, seed: int) -> np.ndarray:
    """Gram matrix of n random normalized internal states"""
    rng = np.random.default_rng(seed)
    v = rng.standard_normal((n, n)) + 1j * rng.standard_normal((n, n))
    v /= np.linalg.norm(v, axis=1)[:, None]
    return v.conj() @ v.T


def assert_scalar_close(value, expected, rel=1e-9, abs=1e-12):
    assert complex(value) == pytest.approx(complex(expected), rel=rel, abs=abs), f"{value} != {expected}"
