"""Oracle interface for the final point-evaluation query.

The verifier only ever asks the oracle for f(r_1, ..., r_n) once, after the
last round. A commitment-opening oracle can replace PolyOracle without any
change to the protocol.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from sumcheck_spec.primitives.mlpoly import MLPoly


class Oracle(ABC):
    """Answers point queries on the polynomial under test."""

    @abstractmethod
    def query(self, point: Sequence):
        """Evaluate the polynomial at point (length n_vars)."""
        pass


class PolyOracle(Oracle):
    """Oracle with direct access to the polynomial (testing / no commitment)."""

    def __init__(self, poly: MLPoly):
        self.poly = poly

    def query(self, point: Sequence):
        return self.poly.eval_at(point)
