"""Domain errors raised by accessors and services.

Routes translate these into HTTP responses; database failures surface as
`alumni_admin.db.DatabaseError`.
"""


class NotFoundError(Exception):
    """Raised when an entity or association does not exist."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
