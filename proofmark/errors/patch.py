from .base import ProofmarkError


class PatchFailedError(ProofmarkError):
    """A patch could not be parsed or did not apply cleanly to the given text."""
