"""
Fiat-Shamir transcript implementation using BLAKE2s.

This module implements challenge generation for non-interactive proofs.

Every absorbed item is length-prefixed (u64 little-endian) so that
variable-length labels and messages cannot be re-split into a colliding
sequence. Challenges are squeezed from a fork of the running hash; the live
state is then ratcheted with the squeezed bytes so that everything absorbed
afterwards depends on every challenge already issued.
"""
import hashlib
import struct
from typing import Type, Union

import galois

from sumcheck_spec.primitives.field import FF, from_le_bytes_mod_order, to_bytes

Label = Union[bytes, str]

APPEND_TAG = b"APPEND_MESSAGE"
CHALLENGE_TAG = b"chal"
RATCHET_TAG = b"ratchet"


def _as_bytes(label: Label) -> bytes:
    return label.encode() if isinstance(label, str) else bytes(label)


def _u64(n: int) -> bytes:
    return struct.pack("<Q", n)


class Transcript:
    """
    Fiat-Shamir transcript over a running BLAKE2s-256 state.

    Two transcripts created with the same domain and fed the same appends in
    the same order produce the same challenges; this is what lets the
    verifier replay the prover's challenges.

    Attributes:
        counter: Number of challenges drawn so far
    """

    def __init__(self, domain: Label):
        """
        Initialize transcript with a domain separation label.

        Args:
            domain: Protocol domain label (bytes or UTF-8 str)
        """
        domain_b = _as_bytes(domain)
        self._h = hashlib.blake2s()
        self._h.update(domain_b)
        self._h.update(_u64(len(domain_b)))
        self._h.update(domain_b)
        self.counter = 0

    @classmethod
    def new(cls, domain: Label) -> "Transcript":
        """Fresh transcript for domain; same as Transcript(domain)."""
        return cls(domain)

    def copy(self) -> "Transcript":
        """Independent clone sharing no state with this transcript."""
        t = object.__new__(type(self))
        t._h = self._h.copy()
        t.counter = self.counter
        return t

    def state_hex(self) -> str:
        """Digest of the live state as hex, without mutating it."""
        return self._h.copy().hexdigest()

    def append_message(self, label: Label, data: bytes) -> None:
        """
        Absorb a labeled message.

        Args:
            label: Message label
            data: Message bytes
        """
        label_b = _as_bytes(label)
        data_b = bytes(data)
        self._h.update(APPEND_TAG)
        self._h.update(_u64(len(label_b)))
        self._h.update(label_b)
        self._h.update(_u64(len(data_b)))
        self._h.update(data_b)

    def append_field(self, label: Label, x) -> None:
        """Absorb a field element in its canonical encoding."""
        self.append_message(label, to_bytes(x))

    def challenge_scalar(self, label: Label, field: Type[galois.FieldArray] = FF):
        """
        Derive a field element challenge.

        Args:
            label: Challenge label
            field: Field to reduce the challenge into

        Returns:
            Challenge in `field`, 32 hash bytes reduced little-endian mod p
        """
        label_b = _as_bytes(label)
        fork = self._h.copy()
        fork.update(CHALLENGE_TAG)
        fork.update(_u64(len(label_b)))
        fork.update(label_b)
        fork.update(_u64(self.counter))
        out = fork.digest()

        self._h.update(RATCHET_TAG)
        self._h.update(out)
        self.counter += 1
        return from_le_bytes_mod_order(field, out)
