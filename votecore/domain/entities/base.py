"""Base entity for the domain layer."""


class BaseEntity:
    """Common base for entities identified by a surrogate integer ID."""

    def __init__(self, id: int | None = None) -> None:
        self.id = id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash((self.__class__.__name__, self.id))
