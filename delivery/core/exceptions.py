"""Engine error types"""


class DeliveryError(Exception):
    """Base class for delivery engine faults."""


class DatasetIntegrityError(DeliveryError):
    """The reference dataset violates one of its own invariants.

    This is a data bug, not a user error: requests hitting it get a 500.
    """


class InvalidParcelError(DeliveryError):
    """Parcel dimensions the engine cannot price. Reported to the client as a 400."""
