from gedcom_importer.core.context import ImportContext
from gedcom_importer.core.exceptions import (
    ImportFileError,
    PipelineError,
    SosaPersistenceError,
)

__all__ = [
    "ImportContext",
    "ImportFileError",
    "PipelineError",
    "SosaPersistenceError",
]
