"""Link records: the catalog entries."""

from .ExternalLinkRecord import ExternalLinkRecord
from .RecordValidationError import RecordValidationError
from .validate_record import validate_record

__all__ = ["ExternalLinkRecord", "RecordValidationError", "validate_record"]
