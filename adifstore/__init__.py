from importlib.metadata import PackageNotFoundError, version

from .errors import AdifError
from .models import Field, Record, chronological_order
from .storage import AdifFile

__all__ = ["__version__", "AdifError", "AdifFile", "Field", "Record", "chronological_order"]

try:
    __version__ = version("adifstore")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
