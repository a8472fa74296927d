"""Custom exceptions for the CNAME finder."""


class CnameFinderError(Exception):
    """Base exception for this project."""


class ConfigError(CnameFinderError):
    """Raised when runtime configuration is invalid."""


class InputError(CnameFinderError):
    """Raised when the list of names cannot be read."""


class OutputError(CnameFinderError):
    """Raised when the output file cannot be opened."""


class PipelineError(CnameFinderError):
    """Raised when the resolution pipeline is driven incorrectly."""


class QueueClosedError(CnameFinderError):
    """Raised when putting an item on a closed queue."""


class ResolverConfigError(CnameFinderError):
    """Raised when no system DNS resolver configuration is available."""
