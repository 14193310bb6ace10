"""Primitives - Field arithmetic, multilinear polynomials and the transcript."""

from sumcheck_spec.primitives.field import (
    BN254_SCALAR_PRIME,
    FF,
    FIELDS,
    FR,
    GOLDILOCKS_PRIME,
    field_byte_size,
    field_name,
    field_of,
    from_bytes,
    from_le_bytes_mod_order,
    get_field,
    to_bytes,
)
from sumcheck_spec.primitives.mlpoly import MLPoly
from sumcheck_spec.primitives.transcript import Transcript

__all__ = [
    # Field
    "FF",
    "FR",
    "FIELDS",
    "GOLDILOCKS_PRIME",
    "BN254_SCALAR_PRIME",
    "get_field",
    "field_name",
    "field_of",
    "field_byte_size",
    "to_bytes",
    "from_bytes",
    "from_le_bytes_mod_order",
    # Polynomials
    "MLPoly",
    # Transcript
    "Transcript",
]
