"""Prime fields for the sumcheck protocol.

Uses galois library for all field arithmetic. FF (Goldilocks) is the default
field; FR (BN254 scalar field) is available for 254-bit soundness.

The protocol never hard-codes a modulus: it reads the field class from its
inputs, so any galois prime field works. This module adds the pieces galois
does not provide directly: a canonical fixed-width byte encoding and the
"reduce arbitrary bytes modulo p" map used by the transcript.
"""

from typing import Dict, Type

import galois

# --- Field Construction ---

GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

FF = galois.GF(GOLDILOCKS_PRIME)
"""Base field GF(p) - Goldilocks prime field."""

BN254_SCALAR_PRIME = 21888242871839275222246405745257275088548364400416034343698204186575808495617

# Generator 5 is supplied so galois does not have to factor p - 1 on import.
FR = galois.GF(BN254_SCALAR_PRIME, primitive_element=5, verify=False)
"""BN254 scalar field GF(r)."""

FIELDS: Dict[str, Type[galois.FieldArray]] = {
    "goldilocks": FF,
    "bn254": FR,
}


def get_field(name: str) -> Type[galois.FieldArray]:
    """Look up a registered field by name."""
    try:
        return FIELDS[name]
    except KeyError:
        raise ValueError(f"unknown field {name!r}, expected one of {sorted(FIELDS)}") from None


def field_name(field: Type[galois.FieldArray]) -> str:
    """Inverse of get_field()."""
    for name, f in FIELDS.items():
        if f is field:
            return name
    raise ValueError(f"field {field.name} is not registered")


def field_of(x) -> Type[galois.FieldArray]:
    """Return the galois field class of an element or array."""
    if not isinstance(x, galois.FieldArray):
        raise TypeError(f"expected a galois field element, got {type(x).__name__}")
    return type(x)


# --- Canonical Encoding ---
# Elements are encoded little-endian on ceil(log2(p) / 8) bytes, the same
# width for every element of a field.


def field_byte_size(field: Type[galois.FieldArray]) -> int:
    """Number of bytes in the canonical encoding of one element."""
    return (field.characteristic.bit_length() + 7) // 8


def to_bytes(x) -> bytes:
    """Canonical little-endian encoding of a single field element."""
    field = field_of(x)
    return int(x).to_bytes(field_byte_size(field), "little")


def from_bytes(field: Type[galois.FieldArray], data: bytes):
    """Decode a canonical encoding produced by to_bytes().

    Raises:
        ValueError: If the length is wrong or the value is not reduced.
    """
    size = field_byte_size(field)
    if len(data) != size:
        raise ValueError(f"expected {size} bytes, got {len(data)}")
    value = int.from_bytes(data, "little")
    if value >= field.characteristic:
        raise ValueError("non-canonical field element encoding")
    return field(value)


def from_le_bytes_mod_order(field: Type[galois.FieldArray], data: bytes):
    """Interpret arbitrary bytes as a little-endian integer reduced mod p."""
    return field(int.from_bytes(data, "little") % field.characteristic)
