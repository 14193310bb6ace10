"""Sumcheck statement, round polynomial and proof data structures and serialization."""

import json
import struct
from dataclasses import dataclass, field
from typing import Any, Type

import galois

from sumcheck_spec.primitives.field import (
    FF,
    field_byte_size,
    field_name,
    field_of,
    from_bytes,
    get_field,
    to_bytes,
)

# --- Transcript Labels ---
# Prover and verifier must absorb and squeeze under the same labels.

G0_LABEL = b"g0"
G1_LABEL = b"g1"
CHALLENGE_LABEL = b"r"


# --- Proof Data Structures ---

@dataclass(frozen=True)
class Statement:
    """Public claim: sum of f over {0,1}^n_vars equals claim_sum."""
    n_vars: int
    claim_sum: galois.FieldArray

    def __hash__(self):
        return hash((self.n_vars, int(self.claim_sum)))

    @property
    def field(self) -> Type[galois.FieldArray]:
        return field_of(self.claim_sum)


@dataclass(frozen=True)
class RoundPoly:
    """Degree-1 round polynomial g, stored as [g(0), g(1)]."""
    g0: galois.FieldArray
    g1: galois.FieldArray

    def __hash__(self):
        return hash((int(self.g0), int(self.g1)))

    def eval_0(self):
        return self.g0

    def eval_1(self):
        return self.g1

    def coeffs(self):
        """Return (c0, c1) with g(x) = c0 + c1 * x."""
        return self.g0, self.g1 - self.g0

    def eval(self, x):
        """g(x) = g(0) + (g(1) - g(0)) * x."""
        return self.g0 + (self.g1 - self.g0) * x


@dataclass
class SumcheckProof:
    """Sumcheck proof: one round polynomial per variable, in binding order.

    round_polys[i] is the round-i polynomial, whose variable is the first one
    still unbound after rounds 0..i-1.
    """
    round_polys: list[RoundPoly] = field(default_factory=list)

    def num_rounds(self) -> int:
        return len(self.round_polys)

    # --- Binary Serialization ---

    def to_bytes(self) -> bytes:
        """Serialize as u64le(num_rounds) followed by g0 || g1 per round."""
        parts = [struct.pack("<Q", len(self.round_polys))]
        for rp in self.round_polys:
            parts.append(to_bytes(rp.g0))
            parts.append(to_bytes(rp.g1))
        return b"".join(parts)

    @classmethod
    def from_bytes(cls, data: bytes, field: Type[galois.FieldArray] = FF) -> "SumcheckProof":
        """Deserialize binary proof.

        The round count is not checked against any statement here; verify()
        rejects a proof with the wrong number of rounds.
        """
        if len(data) < 8:
            raise ValueError("truncated proof header")
        n_rounds = struct.unpack("<Q", data[:8])[0]
        size = field_byte_size(field)
        expected = 8 + n_rounds * 2 * size
        if len(data) != expected:
            raise ValueError(f"expected {expected} bytes for {n_rounds} rounds, got {len(data)}")

        round_polys = []
        idx = 8
        for _ in range(n_rounds):
            g0 = from_bytes(field, data[idx:idx + size])
            g1 = from_bytes(field, data[idx + size:idx + 2 * size])
            round_polys.append(RoundPoly(g0, g1))
            idx += 2 * size
        return cls(round_polys)


# --- JSON Serialization ---

def proof_to_json(proof: SumcheckProof, stmt: Statement, domain: bytes = b"sumcheck") -> dict[str, Any]:
    """Convert statement and proof to a JSON-serializable dictionary."""
    j: dict[str, Any] = {}
    j["metadata"] = {
        "field": field_name(stmt.field),
        "domain": bytes(domain).hex(),
    }
    j["n_vars"] = stmt.n_vars
    j["claim_sum"] = str(int(stmt.claim_sum))
    j["round_polys"] = [[str(int(rp.g0)), str(int(rp.g1))] for rp in proof.round_polys]
    return j


def proof_from_json(data: dict[str, Any]) -> tuple[Statement, SumcheckProof, dict[str, Any]]:
    """Rebuild statement and proof from a proof_to_json() dictionary."""
    metadata = data.get("metadata", {})
    field = get_field(metadata.get("field", "goldilocks"))

    stmt = Statement(int(data["n_vars"]), field(int(data["claim_sum"])))
    proof = SumcheckProof([
        RoundPoly(field(int(g0)), field(int(g1)))
        for g0, g1 in data.get("round_polys", [])
    ])
    return stmt, proof, metadata


def load_proof_from_json(path: str) -> tuple[Statement, SumcheckProof, dict[str, Any]]:
    """Load statement and proof from JSON file."""
    with open(path) as f:
        data = json.load(f)
    return proof_from_json(data)
