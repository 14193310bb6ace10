"""
Sumcheck Protocol Python Specification

A Python implementation of the non-interactive sumcheck protocol for
multilinear polynomials in evaluation form.

This package provides:
- Prime field arithmetic (via galois)
- Multilinear polynomials (fold, evaluate, round sums)
- Fiat-Shamir transcript over BLAKE2s
- Sumcheck prover and verifier
- Proof serialization (binary and JSON)

Usage:
    from sumcheck_spec import FF, MLPoly, PolyOracle, Statement, Transcript, prove, verify

    poly = MLPoly.from_evals(FF.Random(16))
    stmt = Statement(poly.n_vars, poly.sum_all())

    proof = prove(stmt, poly, Transcript(b"my-protocol"))
    assert verify(stmt, proof, PolyOracle(poly), Transcript(b"my-protocol"))
"""

# Field arithmetic (via galois)
from .primitives.field import (
    FF,
    FR,
    FIELDS,
    GOLDILOCKS_PRIME,
    BN254_SCALAR_PRIME,
    get_field,
)

# Multilinear polynomials
from .primitives.mlpoly import MLPoly

# Fiat-Shamir transcript
from .primitives.transcript import Transcript

# Errors
from .errors import (
    SumcheckError,
    InvalidProofError,
    TranscriptMismatchError,
    DimensionMismatchError,
)

# Proof types
from .protocol.proof import (
    Statement,
    RoundPoly,
    SumcheckProof,
    proof_to_json,
    proof_from_json,
    load_proof_from_json,
)

# Oracle
from .protocol.oracle import Oracle, PolyOracle

# Protocol
from .protocol.iop import SumcheckProver, VerifierState, run_interactive
from .protocol.prover import prove
from .protocol.verifier import verify

# Configuration
from .config import SumcheckConfig

__version__ = "0.1.0"
__all__ = [
    # Field
    "FF",
    "FR",
    "FIELDS",
    "GOLDILOCKS_PRIME",
    "BN254_SCALAR_PRIME",
    "get_field",
    # Polynomials
    "MLPoly",
    # Transcript
    "Transcript",
    # Errors
    "SumcheckError",
    "InvalidProofError",
    "TranscriptMismatchError",
    "DimensionMismatchError",
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
    # Protocol
    "SumcheckProver",
    "VerifierState",
    "run_interactive",
    "prove",
    "verify",
    # Configuration
    "SumcheckConfig",
]
