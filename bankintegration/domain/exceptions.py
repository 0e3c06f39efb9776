"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class MissingConfigurationError(DomainException):
    """Required identity values (erp_id, erp_name) are not configured"""

    pass


class InvalidConfigurationError(DomainException):
    """A configured value cannot be parsed"""

    pass


class InvalidDateFormatError(DomainException):
    """Caller-supplied date cannot be parsed as a calendar date"""

    pass


class MalformedKeyMaterialError(DomainException):
    """erp_id is not a valid 128-bit identifier"""

    pass


class ReportAPIError(DomainException):
    """Report API call failed"""

    pass


class NetworkError(ReportAPIError):
    """Connection or transport failure talking to the report API"""

    pass


class HttpStatusError(ReportAPIError):
    """Report API answered with a non-2xx status"""

    def __init__(self, status_code: int):
        super().__init__(f"Report API error: {status_code}")
        self.status_code = status_code
