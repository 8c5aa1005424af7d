from .itinerary_item_factory import ItineraryItemDetails as ItineraryItemDetails
from .itinerary_item_factory import ItineraryItemFactory as ItineraryItemFactory
from .trip_factory import TripDetails as TripDetails
from .trip_factory import TripFactory as TripFactory
