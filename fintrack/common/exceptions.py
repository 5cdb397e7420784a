"""
Domain exceptions for the finance tracker.

Row-level defects inside a CSV never raise; these cover the failures that do
reach the caller.
"""

class FinanceTrackerError(Exception):
    """Base class for all finance tracker errors."""


class UnreadableInputError(FinanceTrackerError):
    """
    Raised when an uploaded statement cannot be read at all.

    This exception should include:
    - The filename that failed (if known)
    - The reason the payload was rejected
    """

    def __init__(self, message: str, filename: str = None, reason: str = None):
        self.filename = filename
        self.reason = reason

        details = []
        if filename:
            details.append(f"File: {filename}")
        if reason:
            details.append(f"Reason: {reason}")

        full_message = f"{message}\n" + "\n".join(details) if details else message
        super().__init__(full_message)


class InvalidReceiptError(FinanceTrackerError):
    """Raised when an uploaded receipt is not an acceptable image."""


class InvalidTransactionError(FinanceTrackerError):
    """Raised when a manually submitted transaction fails validation."""


class TransactionNotFoundError(FinanceTrackerError):
    """Raised when a transaction id is not present in the store."""

    def __init__(self, transaction_id: str):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction not found: {transaction_id}")
