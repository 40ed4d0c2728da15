# ==============================================
# Errors
# ==============================================
#
# PURPOSE:
#   Exception types raised by the model store and its collaborators.
#
# NOTES:
# ------
# - A cache miss is NOT an error; stores return None for it.
# - File system failures propagate as the built-in OSError family.
#
# ==============================================

from typing import Optional


class ModelStoreError(Exception):
    """Base exception for model store operations."""
    pass


class ModelValidationError(ModelStoreError):
    """A model descriptor is structurally invalid and cannot be compiled."""
    pass


class ModelDeserializationError(ModelStoreError):
    """
    A persisted model exists but cannot be read back into a compiled model.

    Attributes:
        source: Where the bad content came from (file path or key), if known
    """

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{message} (source: {source})"
        super().__init__(message)
