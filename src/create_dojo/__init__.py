"""create-dojo: scaffolding tool for Dojo projects."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("create-dojo")
except PackageNotFoundError:
    __version__ = "0.0.0"
