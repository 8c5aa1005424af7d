from .invite import Invite as Invite
from .itinerary_item import ItineraryItem as ItineraryItem
from .membership import Membership as Membership
from .trip import Trip as Trip
