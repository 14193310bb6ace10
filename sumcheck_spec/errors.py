"""Sumcheck verification errors.

Malformed input and a disproved claim are reported differently: errors are
raised, while a proof that passes every round but fails the final oracle
check makes `verify` return False.
"""


class SumcheckError(Exception):
    """Base class for sumcheck failures."""


class InvalidProofError(SumcheckError):
    """A round polynomial does not sum to the running claim."""


class TranscriptMismatchError(SumcheckError):
    """Replayed transcript state diverged from the prover's.

    Not raised by the base protocol: divergence shows up as a failed final
    oracle check instead.
    """


class DimensionMismatchError(SumcheckError, ValueError):
    """Wrong number of rounds, variables, or evaluation points."""
