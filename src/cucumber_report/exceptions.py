"""
Custom exceptions for the cucumber report generator.
"""


class ReportError(Exception):
    """Base exception for report generation errors."""

    pass


class ReportParseError(ReportError):
    """Raised when the cucumber JSON document cannot be parsed."""

    def __init__(self, source: str, original_error: Exception):
        self.source = source
        self.original_error = original_error
        super().__init__(f"Unable to parse cucumber results from {source}: {original_error}")


class ArtifactDecodeError(ReportParseError):
    """Raised when an embedded artifact payload is not valid base64."""

    def __init__(self, mime_type: str, element_name: str, original_error: Exception):
        self.mime_type = mime_type
        self.element_name = element_name
        super().__init__(f"{mime_type} embedding in '{element_name}'", original_error)


class ReportWriteError(ReportError):
    """Raised when a report or artifact file cannot be written."""

    def __init__(self, path: str, original_error: Exception):
        self.path = path
        self.original_error = original_error
        super().__init__(f"Failed to write {path}: {original_error}")


class ReportRenderError(ReportError):
    """Raised when the report template fails to render."""

    def __init__(self, template: str, original_error: Exception):
        self.template = template
        self.original_error = original_error
        super().__init__(f"Failed to render template {template}: {original_error}")
