class LoadError(Exception):
    """Raised when a country's release dataset cannot be loaded."""


class DatasetNotFound(LoadError):
    """Raised when no dataset exists for the requested country key."""


class InvalidCountryKey(DatasetNotFound):
    """Raised when a country key fails validation before any lookup happens."""


class MalformedDataset(LoadError):
    """Raised when a dataset exists but cannot be read as a release table."""
