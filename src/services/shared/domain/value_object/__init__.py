from .currency import Currency
from .email_address import EmailAddress
from .identifier import UuidIdentifier
from .iso_date_time import IsoDateTime
from .money import Money
from .trip_id import TripId
from .user_id import UserId

__all__ = [
    "UuidIdentifier",
    "TripId",
    "UserId",
    "EmailAddress",
    "Currency",
    "Money",
    "IsoDateTime",
]
