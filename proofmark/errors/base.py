class ProofmarkError(Exception):
    """Base class for errors raised by proofmark."""
