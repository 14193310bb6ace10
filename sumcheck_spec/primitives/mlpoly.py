"""Multilinear polynomials in evaluation form.

A multilinear polynomial f(x_1, ..., x_n) is stored as its 2^n evaluations
over the boolean hypercube {0,1}^n:

    evals[i] = f(b_1, ..., b_n)  where (b_1, ..., b_n) are the bits of i

with x_1 the least significant bit. Fixing x_1 therefore pairs up adjacent
entries (2i, 2i + 1), and every operation below works on the strided slices
evals[0::2] and evals[1::2] as whole galois arrays.
"""

import struct
from dataclasses import dataclass
from typing import Optional, Sequence, Type

import galois
import numpy as np

from sumcheck_spec.errors import DimensionMismatchError
from sumcheck_spec.primitives.field import FF, field_byte_size, from_bytes, to_bytes


@dataclass(eq=False)
class MLPoly:
    """Multilinear polynomial over n_vars variables.

    Attributes:
        n_vars: Number of variables
        evals: Evaluations over {0,1}^n_vars, length 2^n_vars
    """
    n_vars: int
    evals: galois.FieldArray

    def __post_init__(self):
        if len(self.evals) != 1 << self.n_vars:
            raise ValueError(
                f"evals length must be 2^n_vars = {1 << self.n_vars}, got {len(self.evals)}"
            )

    # --- Construction ---

    @classmethod
    def zero(cls, n_vars: int, field: Type[galois.FieldArray] = FF) -> "MLPoly":
        """Zero polynomial over n_vars variables."""
        return cls(n_vars, field.Zeros(1 << n_vars))

    @classmethod
    def from_evals(cls, evals, field: Optional[Type[galois.FieldArray]] = None) -> "MLPoly":
        """Build from evaluations, inferring n_vars from the length.

        Args:
            evals: galois array, list of field elements, or list of ints
            field: Field for plain ints (default FF); ignored for field inputs

        Raises:
            ValueError: If len(evals) is not a power of two
        """
        n = len(evals)
        if n == 0 or n & (n - 1):
            raise ValueError(f"evals length must be a power of 2, got {n}")
        if isinstance(evals, galois.FieldArray):
            arr = evals.copy()
        else:
            if isinstance(evals[0], galois.FieldArray):
                field = type(evals[0])
            field = field or FF
            arr = field([int(e) for e in evals])
        return cls(n.bit_length() - 1, arr)

    # --- Accessors ---

    @property
    def field(self) -> Type[galois.FieldArray]:
        return type(self.evals)

    def __len__(self) -> int:
        return len(self.evals)

    def is_constant(self) -> bool:
        return self.n_vars == 0

    def get(self, index: int):
        """Evaluation at index, or None when out of range."""
        if 0 <= index < len(self.evals):
            return self.evals[index]
        return None

    def __eq__(self, other) -> bool:
        if not isinstance(other, MLPoly):
            return NotImplemented
        return (
            self.field is other.field
            and self.n_vars == other.n_vars
            and np.array_equal(self.evals, other.evals)
        )

    # --- Algorithms ---

    def _coerce(self, r):
        if isinstance(r, galois.FieldArray):
            if type(r) is not self.field:
                raise TypeError(
                    f"challenge is in {type(r).name}, polynomial is over {self.field.name}"
                )
            return r
        return self.field(int(r))

    def sum_all(self):
        """Sum of f over the whole hypercube."""
        return np.sum(self.evals)

    def fold_first_var(self, r) -> "MLPoly":
        """Fix x_1 = r, returning f(r, x_2, ..., x_n).

        out[i] = evals[2i] * (1 - r) + evals[2i + 1] * r, so r = 0 keeps the
        even-indexed entries and r = 1 the odd-indexed ones.
        """
        if self.n_vars == 0:
            raise DimensionMismatchError("cannot fold a constant polynomial")
        r = self._coerce(r)
        lo = self.evals[0::2]
        hi = self.evals[1::2]
        return MLPoly(self.n_vars - 1, lo * (self.field(1) - r) + hi * r)

    def fold_many(self, r_vec: Sequence) -> "MLPoly":
        """Fix x_1 = r_vec[0], ..., x_k = r_vec[k - 1] in order."""
        if len(r_vec) > self.n_vars:
            raise DimensionMismatchError(
                f"too many r values: given {len(r_vec)}, but n_vars is {self.n_vars}"
            )
        cur = MLPoly(self.n_vars, self.evals.copy())
        for r in r_vec:
            cur = cur.fold_first_var(r)
        return cur

    def eval_at(self, x: Sequence):
        """Evaluate the multilinear extension at an arbitrary point x in F^n."""
        if len(x) != self.n_vars:
            raise DimensionMismatchError(
                f"wrong number of evaluation points: given {len(x)}, expected {self.n_vars}"
            )
        return self.fold_many(x).evals[0]

    def round_sum_g0_g1(self):
        """Return (g(0), g(1)) for the current sumcheck round.

        g(0) = sum of f(0, x_2, ..., x_n), g(1) = sum of f(1, x_2, ..., x_n),
        computed directly from the table without folding.
        """
        if self.n_vars == 0:
            raise DimensionMismatchError("round sum needs at least one variable")
        return np.sum(self.evals[0::2]), np.sum(self.evals[1::2])

    # --- Serialization ---

    def to_bytes(self) -> bytes:
        """Encode as u64le(n_vars) || u64le(len) || evals."""
        parts = [struct.pack("<QQ", self.n_vars, len(self.evals))]
        parts.extend(to_bytes(e) for e in self.evals)
        return b"".join(parts)

    @classmethod
    def from_bytes(cls, data: bytes, field: Type[galois.FieldArray] = FF) -> "MLPoly":
        """Decode the output of to_bytes()."""
        if len(data) < 16:
            raise ValueError("truncated polynomial header")
        n_vars, n_evals = struct.unpack("<QQ", data[:16])
        if n_vars >= 64 or n_evals != 1 << n_vars:
            raise ValueError(f"evals length {n_evals} does not match n_vars {n_vars}")
        size = field_byte_size(field)
        if len(data) != 16 + n_evals * size:
            raise ValueError(f"expected {16 + n_evals * size} bytes, got {len(data)}")
        evals = [
            int(from_bytes(field, data[16 + i * size:16 + (i + 1) * size]))
            for i in range(n_evals)
        ]
        return cls(n_vars, field(evals))

    def __repr__(self) -> str:
        return f"MLPoly(n_vars={self.n_vars}, evals={[int(e) for e in self.evals]})"
