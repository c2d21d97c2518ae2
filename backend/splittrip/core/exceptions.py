"""
Exception taxonomy for ledger computation and trip services.
"""


class SplitTripError(Exception):
    """Base class for all application errors."""


class LedgerError(SplitTripError):
    """Malformed ledger input or an aggregation defect."""


class InvalidAmount(LedgerError):
    """Expense amount is not a positive integer number of minor units."""


class InvalidSplit(LedgerError):
    """Split list is empty, has duplicates or references a non-member."""


class UnbalancedLedger(LedgerError):
    """Balances do not sum to exactly zero."""


class NotFound(SplitTripError):
    pass


class PermissionDenied(SplitTripError):
    pass


class Conflict(SplitTripError):
    pass


class TripNotActive(SplitTripError):
    """Trip has been completed and is read-only."""
