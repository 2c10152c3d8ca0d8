class PipelineError(Exception):
    """Base exception for import pipeline failures."""


class ImportFileError(PipelineError):
    """Raised when a GEDCOM input file is missing or cannot be read."""


class SosaPersistenceError(PipelineError):
    """Raised when writing Sosa numbers fails and the transaction is rolled back."""
