"""Collection file parsing."""

from .collection import CollectionFileError, LoadedCollection, load_collection

__all__ = ["CollectionFileError", "LoadedCollection", "load_collection"]
