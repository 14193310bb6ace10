"""Sumcheck protocol configuration."""

from dataclasses import dataclass
from typing import Type

import galois

from sumcheck_spec.primitives.field import get_field
from sumcheck_spec.primitives.transcript import Transcript


@dataclass
class SumcheckConfig:
    """
    Protocol parameters that prover and verifier must agree on out-of-band.
    """
    domain: bytes = b"sumcheck"  # Transcript domain separation label
    field_name: str = "goldilocks"  # Key into primitives.field.FIELDS

    def __post_init__(self):
        if isinstance(self.domain, str):
            self.domain = self.domain.encode()
        get_field(self.field_name)

    @property
    def field(self) -> Type[galois.FieldArray]:
        return get_field(self.field_name)

    def new_transcript(self) -> Transcript:
        """Fresh transcript for one prove or verify run."""
        return Transcript(self.domain)
