"""Error taxonomy shared by the services and the HTTP layer."""


class SalesForecastError(Exception):
    """Base class for every domain error raised by the services."""


class InsufficientDataError(SalesForecastError):
    """Raised when a series is too short for the requested operation."""

    def __init__(self, required: int, found: int):
        self.required = required
        self.found = found
        super().__init__(
            f"At least {required} months of sales data are required. Found: {found}"
        )


class AdvisoryServiceError(SalesForecastError):
    """Any failure of the hosted advisory model: transport, auth or a malformed reply."""


class AdvisoryBusyError(SalesForecastError):
    """Raised when an advisory request is triggered while another is still running."""
