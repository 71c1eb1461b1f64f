"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class BeatAlreadySoldError(Exception):
    """Raised when buying a beat that has already been sold."""

    def __init__(self, beat_id: str):
        self.beat_id = beat_id
        super().__init__(f"Beat with id '{beat_id}' is already sold")
