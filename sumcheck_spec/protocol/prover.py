"""Non-interactive sumcheck proof generation.

Each round the prover sends g(0), g(1) for the first unbound variable,
absorbs them into the transcript, squeezes the challenge r and folds the
polynomial at r. The transcript replaces the verifier's coins (Fiat-Shamir).
"""

from sumcheck_spec.primitives.mlpoly import MLPoly
from sumcheck_spec.primitives.transcript import Transcript
from sumcheck_spec.protocol.iop import SumcheckProver
from sumcheck_spec.protocol.proof import (
    CHALLENGE_LABEL,
    G0_LABEL,
    G1_LABEL,
    Statement,
    SumcheckProof,
)


def prove(stmt: Statement, poly: MLPoly, transcript: Transcript) -> SumcheckProof:
    """Generate a sumcheck proof.

    The claimed sum is not re-checked: a proof for a wrong claim_sum is
    produced as usual and rejected by verify().

    Args:
        stmt: Public statement (n_vars must match poly)
        poly: The multilinear polynomial being summed
        transcript: Fiat-Shamir transcript, mutated in place

    Returns:
        SumcheckProof with exactly stmt.n_vars round polynomials
    """
    prover = SumcheckProver(stmt, poly)
    round_polys = []

    while not prover.is_done():
        # g(0) + g(1) equals the current claim for an honest prover
        round_poly = prover.round_poly()

        transcript.append_field(G0_LABEL, round_poly.g0)
        transcript.append_field(G1_LABEL, round_poly.g1)
        round_polys.append(round_poly)

        r = transcript.challenge_scalar(CHALLENGE_LABEL, poly.field)

        # f'(x_2, ..., x_n) = f(r, x_2, ..., x_n)
        prover.fold_challenge(r)

    return SumcheckProof(round_polys)
