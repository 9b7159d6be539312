"""
Custom exceptions for the ASCE reference ET package.

Provides a hierarchical exception system so callers can tell malformed
input apart from insufficient data and from genuine computation defects.
"""


class RefETError(Exception):
    """
    Base exception for reference ET errors.

    All custom exceptions in the package inherit from this class.
    Carries a message plus a details dictionary describing the
    offending values.
    """

    def __init__(self, message: str, details: dict = None, *args):
        super().__init__(message, *args)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def add_detail(self, key: str, value) -> None:
        """
        Add detail information to the exception.

        Args:
            key: Detail key
            value: Detail value
        """
        self.details[key] = value


class InputError(RefETError):
    """
    Exception raised when a weather record cannot be turned into ET.

    This includes:
    - Out-of-range temperatures, latitude or day of year
    - Missing required fields
    - Requests the supplied data cannot satisfy
    """

    def __init__(self, message: str, field: str = None, value=None, *args):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details, *args)


class InvalidTemperatureRange(InputError):
    """
    Exception raised when temperature_max < temperature_min.
    """

    def __init__(self, temperature_max: float, temperature_min: float, *args):
        super().__init__(
            f"temperature_max ({temperature_max}) must be greater than or equal "
            f"to temperature_min ({temperature_min})",
            field="temperature_max",
            value=temperature_max,
            *args
        )
        self.details["temperature_min"] = temperature_min


class InvalidLatitude(InputError):
    """
    Exception raised for a latitude outside [-90, 90] degrees.
    """

    def __init__(self, latitude: float, *args):
        super().__init__(
            f"latitude must be within [-90, 90] degrees, got {latitude}",
            field="latitude",
            value=latitude,
            *args
        )


class InvalidDayOfYear(InputError):
    """
    Exception raised for a day of year outside [1, 366].
    """

    def __init__(self, day_of_year, *args):
        super().__init__(
            f"day_of_year must be an integer within [1, 366], got {day_of_year}",
            field="day_of_year",
            value=day_of_year,
            *args
        )


class MissingRequiredField(InputError):
    """
    Exception raised when neither method's minimum data is available.
    """

    def __init__(self, missing: list, *args):
        super().__init__(
            f"Missing required fields: {', '.join(missing)}",
            field=missing[0] if missing else None,
            *args
        )
        self.details["missing"] = list(missing)


class InsufficientDataForTallReference(InputError):
    """
    Exception raised when tall reference ET is requested but only the
    temperature-based method could run.
    """

    def __init__(self, message: str = None, *args):
        super().__init__(
            message or (
                "Tall reference ET requires solar radiation, wind speed, "
                "humidity and elevation; only the Hargreaves short "
                "reference estimate is available"
            ),
            field="et_tall",
            *args
        )


class DataInputError(RefETError):
    """
    Exception raised for unreadable or incomplete weather tables.
    """

    def __init__(self, message: str, file_path: str = None, missing_columns: list = None, *args):
        details = {}
        if file_path:
            details["file_path"] = file_path
        if missing_columns:
            details["missing_columns"] = sorted(missing_columns)
        super().__init__(message, details, *args)


class ConfigurationError(RefETError):
    """
    Exception raised for configuration errors.

    This includes:
    - Unknown configuration parameters
    - Invalid configuration values
    - Unsupported configuration file formats
    """

    def __init__(self, message: str, config_param: str = None, *args):
        details = {}
        if config_param:
            details["parameter"] = config_param
        super().__init__(message, details, *args)


class ComputationError(RefETError):
    """
    Exception raised when valid inputs produce a non-finite result.

    This signals a defect in the formula chain, not bad input.
    """

    def __init__(self, message: str, computation_step: str = None, *args):
        details = {}
        if computation_step:
            details["step"] = computation_step
        super().__init__(message, details, *args)


def create_error_context(error: Exception, context: dict) -> dict:
    """
    Create a comprehensive error context dictionary.

    Args:
        error: The exception that occurred
        context: Additional context information

    Returns:
        Dictionary with error details
    """
    context_data = {
        "error_type": type(error).__name__,
        "error_message": getattr(error, "message", str(error)),
    }

    if hasattr(error, 'details'):
        context_data["error_details"] = error.details

    if context:
        context_data["additional_context"] = context

    return context_data
