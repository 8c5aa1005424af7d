from services.shared.domain.exception import BusinessRuleViolationException
from services.trip.domain.entity import Trip
from services.trip.domain.factory.itinerary_item_factory import ItineraryItemDetails


def resolve_item_date(
    trip: Trip, item_details: ItineraryItemDetails, day_number: int | None
) -> ItineraryItemDetails:
    """日番号で指定された場合は旅行日程から日付を求める"""
    if day_number is None:
        return item_details
    if item_details["date"] is not None:
        raise BusinessRuleViolationException("Specify either date or day number, not both")
    return {**item_details, "date": trip.date_for_day(day_number)}
