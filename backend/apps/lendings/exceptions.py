"""
Errors raised by the lending core.

Each error carries the HTTP status an adapter should answer with.
"""


class LendingError(Exception):
    """Base class for every error surfaced by the lending core."""

    status_code = 400
    default_detail = 'Lending operation failed.'

    def __init__(self, detail=None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFound(LendingError):
    """A referenced book, reader or lending record does not exist."""

    status_code = 404

    def __init__(self, entity, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity.capitalize()} {entity_id} not found.")


class OutOfStock(LendingError):
    """No copy of the book is available for lending."""

    status_code = 409

    def __init__(self, book_id):
        self.book_id = book_id
        super().__init__(f"No available copies of book {book_id}.")


class AlreadyReturned(LendingError):
    """The lending record has already been closed by a return."""

    status_code = 409

    def __init__(self, lending_id):
        self.lending_id = lending_id
        super().__init__(f"Lending record {lending_id} has already been returned.")


class InvalidLoanPeriod(LendingError):
    """The requested loan period is outside the accepted range."""

    status_code = 400

    def __init__(self, loan_days, reason='must be a positive number of days'):
        self.loan_days = loan_days
        super().__init__(f"Invalid loan period {loan_days!r}: {reason}.")


class PersistenceFailure(LendingError):
    """The database rejected a mutation; the caller may retry."""

    status_code = 503
    default_detail = 'The lending store is temporarily unavailable.'
