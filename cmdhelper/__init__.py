"""cmdhelper — everyday developer conveniences behind one command."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cmdhelper")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"
