"""
Exceptions raised by the portfolio analyzer.
"""


class AnalyzerError(Exception):
    """Base class for analyzer failures."""


class NavigationError(AnalyzerError):
    """The browser could not load the target page."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Could not load {url}: {reason}")
        self.url = url
        self.reason = reason


class TargetUnreachableError(NavigationError):
    """The target server did not answer the preflight request."""
