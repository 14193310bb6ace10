"""Sumcheck proof verification.

The verifier replays the prover's transcript to re-derive every challenge,
checks g(0) + g(1) against the running claim in each round, and finally
compares the reduced claim with a single oracle query at the challenge point.

Outcomes:
- DimensionMismatchError: proof has the wrong number of rounds
- InvalidProofError: a round sum check failed (no further rounds examined)
- False: every round passed but the final oracle check did not
- True: proof accepted
"""

from sumcheck_spec.errors import DimensionMismatchError
from sumcheck_spec.primitives.transcript import Transcript
from sumcheck_spec.protocol.iop import VerifierState
from sumcheck_spec.protocol.oracle import Oracle
from sumcheck_spec.protocol.proof import (
    CHALLENGE_LABEL,
    G0_LABEL,
    G1_LABEL,
    Statement,
    SumcheckProof,
)


def verify(stmt: Statement, proof: SumcheckProof, oracle: Oracle, transcript: Transcript) -> bool:
    """Verify a sumcheck proof.

    Args:
        stmt: Public statement, shared with the prover
        proof: Proof to check
        oracle: Answers the final query f(r_1, ..., r_n)
        transcript: Fresh transcript with the prover's domain label

    Returns:
        True if the proof is valid, False if the final oracle check fails

    Raises:
        DimensionMismatchError: If the number of round polynomials != n_vars
        InvalidProofError: If a round sum check fails
    """
    if proof.num_rounds() != stmt.n_vars:
        raise DimensionMismatchError(
            f"wrong number of round polynomials: {proof.num_rounds()} for {stmt.n_vars} variables"
        )

    state = VerifierState(stmt)
    field = stmt.field

    for round_poly in proof.round_polys:
        state.check_round(round_poly)

        # Replay transcript (must match prover)
        transcript.append_field(G0_LABEL, round_poly.g0)
        transcript.append_field(G1_LABEL, round_poly.g1)

        r = transcript.challenge_scalar(CHALLENGE_LABEL, field)
        state.bind(round_poly, r)

    if not state.finalize_with_oracle(oracle):
        print("ERROR: Final oracle evaluation does not match reduced claim")
        return False
    return True
