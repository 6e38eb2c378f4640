"""Errors raised by the catalog and workout generation code."""


class EmptyCategoryError(RuntimeError):
    """Raised when selecting from a category that has no exercises."""


class TemplateNotFoundError(RuntimeError):
    """Raised when no daily template is configured for the requested day."""


class EmptyCardioPoolError(RuntimeError):
    """Raised when a metcon is requested but the metcon pool is empty."""


class CatalogUnavailableError(RuntimeError):
    """Raised when the exercise catalog could not be built or is empty."""


class WorkbookError(RuntimeError):
    """Raised when the exercise workbook or its sheet cannot be read."""


class ConfigNotFoundError(RuntimeError):
    """Raised when the workout configuration file does not exist."""


class ConfigInvalidError(RuntimeError):
    """Raised when the workout configuration file is not valid JSON or fails validation."""
