"""Version information for kamino."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("kamino")
except PackageNotFoundError:
    # Fallback when running from a source checkout that isn't installed
    __version__ = "0.0.0+unknown"
