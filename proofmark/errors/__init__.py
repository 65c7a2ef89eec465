from .base import ProofmarkError
from .patch import PatchFailedError

__all__ = ["ProofmarkError", "PatchFailedError"]
