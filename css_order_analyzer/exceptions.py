"""Custom exceptions for css-order-analyzer."""


class CssOrderAnalyzerError(Exception):
    """Base exception for all css-order-analyzer errors."""

    pass


class MalformedSelectorError(CssOrderAnalyzerError):
    """Exception raised when a selector does not yield exactly one specificity."""

    pass


class CollaboratorUnavailableError(CssOrderAnalyzerError):
    """Exception raised when the browser engine cannot be reached or a call fails."""

    pass


class ConfigurationError(CssOrderAnalyzerError):
    """Exception raised when configuration is invalid."""

    pass
