"""Round-by-round prover and verifier state for the sumcheck IOP.

These hold the per-round logic shared by the Fiat-Shamir protocol
(prover.prove / verifier.verify) and the interactive public-coin mode
(run_interactive), where the verifier samples challenges at random.
"""

from typing import Optional

import numpy as np

from sumcheck_spec.errors import DimensionMismatchError, InvalidProofError
from sumcheck_spec.primitives.mlpoly import MLPoly
from sumcheck_spec.protocol.oracle import Oracle
from sumcheck_spec.protocol.proof import RoundPoly, Statement


class SumcheckProver:
    """Prover state: the partially folded polynomial and bound challenges."""

    def __init__(self, stmt: Statement, poly: MLPoly):
        if poly.n_vars != stmt.n_vars:
            raise DimensionMismatchError(
                f"polynomial has {poly.n_vars} variables, statement has {stmt.n_vars}"
            )
        self.stmt = stmt
        self.round = 0
        self.poly = poly
        self.r_vec = []

    def is_done(self) -> bool:
        return self.round == self.stmt.n_vars

    def _check_active(self) -> None:
        if self.is_done():
            raise DimensionMismatchError(f"all {self.stmt.n_vars} rounds already bound")

    def round_poly(self) -> RoundPoly:
        """Round polynomial for the current (first unbound) variable."""
        self._check_active()
        g0, g1 = self.poly.round_sum_g0_g1()
        return RoundPoly(g0, g1)

    def fold_challenge(self, r) -> None:
        """Bind the current variable to the verifier's challenge r."""
        self._check_active()
        self.poly = self.poly.fold_first_var(r)
        self.r_vec.append(r)
        self.round += 1


class VerifierState:
    """Verifier state: the running claim and the challenges issued so far."""

    def __init__(self, stmt: Statement):
        self.stmt = stmt
        self.round = 0
        self.claim = stmt.claim_sum
        self.r_vec = []

    def check_round(self, round_poly: RoundPoly) -> None:
        """Soundness gate: g(0) + g(1) must equal the running claim.

        Raises:
            InvalidProofError: If the sum does not match
            DimensionMismatchError: If every variable is already bound
        """
        if self.round >= self.stmt.n_vars:
            raise DimensionMismatchError("more round polynomials than variables")
        if round_poly.g0 + round_poly.g1 != self.claim:
            raise InvalidProofError(f"sum check failed in round {self.round}")

    def bind(self, round_poly: RoundPoly, r) -> None:
        """Reduce the claim to g(r) for the next round."""
        self.claim = round_poly.eval(r)
        self.r_vec.append(r)
        self.round += 1

    def update_challenge(self, round_poly: RoundPoly, rng: Optional[np.random.Generator] = None):
        """Check a round and answer it with a uniformly random challenge."""
        self.check_round(round_poly)
        r = self.stmt.field.Random(seed=rng)
        self.bind(round_poly, r)
        return r

    def finalize_with_oracle(self, oracle: Oracle) -> bool:
        """Compare the final claim against the oracle at (r_1, ..., r_n)."""
        if len(self.r_vec) != self.stmt.n_vars:
            raise DimensionMismatchError(
                f"r_vec length {len(self.r_vec)} does not match n_vars {self.stmt.n_vars}"
            )
        return bool(oracle.query(self.r_vec) == self.claim)


def run_interactive(stmt: Statement, poly: MLPoly, oracle: Oracle, seed: Optional[int] = None) -> bool:
    """Execute the interactive protocol with random verifier challenges.

    Args:
        stmt: Public statement
        poly: Prover's polynomial
        oracle: Verifier's final-query oracle
        seed: Seed for the verifier's coins

    Returns:
        True if the final oracle check passes, False otherwise
    """
    rng = np.random.default_rng(seed)
    prover = SumcheckProver(stmt, poly)
    verifier = VerifierState(stmt)
    while not prover.is_done():
        r = verifier.update_challenge(prover.round_poly(), rng)
        prover.fold_challenge(r)
    return verifier.finalize_with_oracle(oracle)
