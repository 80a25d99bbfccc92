"""Domain-level exceptions.

Business rule violations are not raised; the product service returns them
as tagged errors (see ``stockroom.domain.errors``). Exceptions are kept for
failures that come from outside the domain, chiefly the record store.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class RecordStoreError(DomainException):
    """The record store could not complete an operation.

    Store implementations wrap their driver's own exceptions in this so the
    service only has to know about one failure type.
    """
