"""Exceptions raised while building a report."""

from typing import Dict, Optional


class MetricsReportError(Exception):
    """Base exception for all report errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ConfigError(MetricsReportError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class MetricsLoadError(MetricsReportError):
    """Raised when the measurement set cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to load metrics from {path}", details={"reason": reason})
        self.path = path


class ReportError(MetricsReportError):
    """Raised when the output directory cannot be used."""

    def __init__(self, path: str, reason: str = "not writable"):
        super().__init__(f'Unable to write in the directory "{path}"', details={"reason": reason})
        self.path = path


class HistoryError(MetricsReportError):
    """Raised when a persisted history record is malformed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Malformed history record {path}", details={"reason": reason})
        self.path = path


class RenderError(MetricsReportError):
    """Raised when a page template is missing or fails to render."""

    def __init__(self, page: str, reason: str):
        super().__init__(f"Unable to render page {page}", details={"reason": reason})
        self.page = page


class AssetError(MetricsReportError):
    """Raised when a static bundle cannot be published."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to publish assets {path}", details={"reason": reason})
        self.path = path
