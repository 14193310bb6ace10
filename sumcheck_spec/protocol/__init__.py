"""Protocol - Sumcheck prover, verifier and proof types."""

from sumcheck_spec.protocol.iop import SumcheckProver, VerifierState, run_interactive
from sumcheck_spec.protocol.oracle import Oracle, PolyOracle
from sumcheck_spec.protocol.proof import (
    RoundPoly,
    Statement,
    SumcheckProof,
    load_proof_from_json,
    proof_from_json,
    proof_to_json,
)
from sumcheck_spec.protocol.prover import prove
from sumcheck_spec.protocol.verifier import verify

__all__ = [
    # Proof types
    "Statement",
    "RoundPoly",
    "SumcheckProof",
    "proof_to_json",
    "proof_from_json",
    "load_proof_from_json",
    # Oracle
    "Oracle",
    "PolyOracle",
    # Round state
    "SumcheckProver",
    "VerifierState",
    "run_interactive",
    # Protocol
    "prove",
    "verify",
]
