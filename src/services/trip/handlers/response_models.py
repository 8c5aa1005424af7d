from __future__ import annotations

from pydantic import BaseModel

from services.shared.domain import UserId
from services.trip.applications import Itinerary
from services.trip.domain.entity import Invite, ItineraryItem, Membership, Trip
from services.trip.domain.service import ItineraryDay


class MembershipData(BaseModel):
    user_id: str
    role: str


class InviteData(BaseModel):
    invite_id: str
    email: str
    role: str
    status: str
    created_at: str


class ItineraryItemData(BaseModel):
    item_id: str
    place_name: str
    date: str | None
    notes: str
    latitude: float
    longitude: float


class TripData(BaseModel):
    """旅行データのレスポンスモデル"""

    trip_id: str
    name: str
    start_date: str
    end_date: str
    visibility: str
    status: str
    role: str | None
    created_at: str
    version: int


class ItineraryDayData(BaseModel):
    day_number: int
    date: str
    items: list[ItineraryItemData]


class ItineraryData(BaseModel):
    """旅程ビューのレスポンスモデル"""

    trip_id: str
    days: list[ItineraryDayData]
    places_to_visit: list[ItineraryItemData]


class CollaboratorsData(BaseModel):
    trip_id: str
    memberships: list[MembershipData]
    invites: list[InviteData]


class TripResponse(BaseModel):
    status: str = "success"
    data: TripData


class TripListResponse(BaseModel):
    status: str = "success"
    data: list[TripData]


class ItineraryResponse(BaseModel):
    status: str = "success"
    data: ItineraryData


class CollaboratorsResponse(BaseModel):
    status: str = "success"
    data: CollaboratorsData


def to_trip_response(trip: Trip, viewer_role: str | None = None) -> dict:
    """Trip 集約をレスポンス辞書に変換する"""
    return TripResponse(data=_trip_data(trip, viewer_role)).model_dump()


def to_trip_list_response(trips: list[Trip], viewer_id: UserId) -> dict:
    return TripListResponse(
        data=[_trip_data(trip, _role_value(trip, viewer_id)) for trip in trips]
    ).model_dump()


def to_itinerary_response(itinerary: Itinerary) -> dict:
    return ItineraryResponse(
        data=ItineraryData(
            trip_id=str(itinerary.trip.id),
            days=[_day_data(day) for day in itinerary.days],
            places_to_visit=[_item_data(item) for item in itinerary.places_to_visit],
        )
    ).model_dump()


def to_collaborators_response(trip: Trip) -> dict:
    return CollaboratorsResponse(
        data=CollaboratorsData(
            trip_id=str(trip.id),
            memberships=[_membership_data(m) for m in trip.memberships],
            invites=[_invite_data(i) for i in trip.invites],
        )
    ).model_dump()


def _role_value(trip: Trip, viewer_id: UserId | None) -> str | None:
    role = trip.role_of(viewer_id)
    return role.value if role else None


def _trip_data(trip: Trip, viewer_role: str | None) -> TripData:
    return TripData(
        trip_id=str(trip.id),
        name=trip.name,
        start_date=trip.start_date.isoformat(),
        end_date=trip.end_date.isoformat(),
        visibility=trip.visibility.value,
        status=trip.status.value,
        role=viewer_role,
        created_at=str(trip.created_at),
        version=trip.version,
    )


def _membership_data(membership: Membership) -> MembershipData:
    return MembershipData(user_id=str(membership.user_id), role=membership.role.value)


def _invite_data(invite: Invite) -> InviteData:
    return InviteData(
        invite_id=str(invite.id),
        email=str(invite.email),
        role=invite.role.value,
        status=invite.status.value,
        created_at=str(invite.created_at),
    )


def _item_data(item: ItineraryItem) -> ItineraryItemData:
    return ItineraryItemData(
        item_id=str(item.id),
        place_name=item.place_name,
        date=item.date.isoformat() if item.date else None,
        notes=item.notes,
        latitude=item.latitude,
        longitude=item.longitude,
    )


def _day_data(day: ItineraryDay) -> ItineraryDayData:
    return ItineraryDayData(
        day_number=day.day_number,
        date=day.date.isoformat(),
        items=[_item_data(item) for item in day.items],
    )
