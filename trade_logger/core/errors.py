from enum import Enum


class JournalError(Exception):
    """Base class for recoverable journal errors."""


class ValidationReason(str, Enum):
    MISSING_FIELD = "missing_field"
    NOT_A_NUMBER = "not_a_number"
    NOT_AN_INTEGER = "not_an_integer"
    NON_POSITIVE = "non_positive"
    INVALID_DATE = "invalid_date"
    OUT_OF_RANGE = "out_of_range"


class TradeValidationError(JournalError):
    def __init__(self, field: str, reason: ValidationReason):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason.value.replace('_', ' ')}")


class ImportFailure(JournalError):
    """Import payload could not be parsed. The ledger is left untouched."""


class StorageUnavailable(JournalError):
    """The trade store could not be read or written."""
