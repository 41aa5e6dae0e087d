"""An ls-style directory lister with the -A, -l and -R options: helpers and listing."""

__version__ = "0.1.0"
__all__ = ["helpers", "listing"]