class ConversionFailure(Exception):
    """Raised when a candidate file cannot be normalized into a document."""
