"""modinstall — resolve the command that installs a module via pip."""

__version__ = "0.1.0"
