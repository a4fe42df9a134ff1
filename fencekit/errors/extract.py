class ExtractionError(Exception):
    """Raised when a match no longer fits the document it is read from."""
