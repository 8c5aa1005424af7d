from .trip_repository import TripRepository as TripRepository
