class MutationError(Exception):
    """Raised when the host rejects a replace/select issued for a match."""
