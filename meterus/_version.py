"""Version information for the Meterus Python SDK."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the installed SDK version string."""
    return __version__
