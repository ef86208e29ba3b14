from importlib.metadata import PackageNotFoundError, version

from servosphere.utils.logging import logger

try:
    __version__ = version("servosphere")
except PackageNotFoundError:  # pragma: no cover
    # package is not installed
    pass

# Configure logging to stderr and a file
logger.configure()
