"""Errors raised while building a search index."""


class ConstructionError(ValueError):
    """The collection or configuration cannot produce an index."""


class EmptyCollectionError(ConstructionError):
    def __init__(self):
        super().__init__("Empty collection!")


class NoIndexedKeysError(ConstructionError):
    def __init__(self):
        super().__init__("No indexed keys defined!")


class FieldMissingError(ConstructionError):
    """A record lacks an indexed field, or the field is not a string."""

    def __init__(self, key: str, record_index: int):
        self.key = key
        self.record_index = record_index
        super().__init__(
            f"Record {record_index} has no string value for indexed key '{key}'"
        )
