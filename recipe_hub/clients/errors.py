class SourceNotConfigured(RuntimeError):
    """Raised when a source needs an API key that is not set."""
