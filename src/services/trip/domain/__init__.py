from .entity import Invite as Invite
from .entity import ItineraryItem as ItineraryItem
from .entity import Membership as Membership
from .entity import Trip as Trip
from .enum import InviteStatus as InviteStatus
from .enum import TripRole as TripRole
from .enum import TripVisibility as TripVisibility
from .factory import ItineraryItemFactory as ItineraryItemFactory
from .factory import TripFactory as TripFactory
from .repository import TripRepository as TripRepository
from .service import ItineraryDay as ItineraryDay
from .service import authorize as authorize
from .value_object import InviteId as InviteId
from .value_object import ItemId as ItemId
