from .access_control import authorize as authorize
from .itinerary_generator import ItineraryDay as ItineraryDay
from .itinerary_generator import generated_days as generated_days
from .itinerary_generator import places_to_visit_items as places_to_visit_items
