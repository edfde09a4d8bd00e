# crm/errors.py


class DataSourceError(Exception):
    """Raised when the rent-roll source file cannot be read or parsed."""

    def __init__(self, message, source=None):
        super().__init__(message)
        self.message = message
        self.source = source
