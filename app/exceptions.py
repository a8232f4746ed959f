"""Domain exceptions raised by the models"""


class LunchlyError(Exception):
    """Base class for all model errors"""


class EntityValidationError(LunchlyError, ValueError):
    """A field was assigned a value it cannot hold"""


class InvalidStartAt(EntityValidationError):
    def __init__(self, value):
        super().__init__(f"Not a valid startAt: {value!r}")
        self.value = value


class InvalidGuestCount(EntityValidationError):
    def __init__(self, value):
        super().__init__("Reservations must have at least 1 guest.")
        self.value = value


class IdImmutable(EntityValidationError):
    def __init__(self, entity, current, requested):
        super().__init__(f"Cannot change {entity} ID from {current} to {requested}")
        self.current = current
        self.requested = requested


class CustomerIdImmutable(EntityValidationError):
    def __init__(self, current, requested):
        super().__init__(f"Cannot change customer ID from {current} to {requested}")
        self.current = current
        self.requested = requested


class EntityNotFound(LunchlyError):
    """No row matched the requested id"""

    entity = "Entity"

    def __init__(self, entity_id):
        super().__init__(f"{self.entity} {entity_id} not found")
        self.entity_id = entity_id


class CustomerNotFound(EntityNotFound):
    entity = "Customer"


class ReservationNotFound(EntityNotFound):
    entity = "Reservation"


class EntityStateError(LunchlyError):
    """Operation is not valid for the entity's lifecycle state"""


class EntityAlreadyPersisted(EntityStateError):
    def __init__(self, entity, entity_id):
        super().__init__(f"{entity} {entity_id} is already saved; use update()")
        self.entity_id = entity_id


class EntityNotPersisted(EntityStateError):
    def __init__(self, entity):
        super().__init__(f"{entity} has no id yet; use create()")
