"""Version information."""

__version__ = "0.1.0"


def get_version():
    """Return the version string."""
    return __version__
