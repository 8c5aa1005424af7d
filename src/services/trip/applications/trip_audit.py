from services.audit.applications import AuditTrail
from services.shared.domain import UserId
from services.trip.domain.entity import Trip
from services.trip.domain.service import generated_days, places_to_visit_items

PLACES_TO_VISIT_LIST_NAME = "Places To Visit"


class TripAuditRecorder:
    """旅行の変更を監査ログに記録する

    集約全体の記録に加えて、変化したサブコレクションごとの派生レコードを残す。
    """

    def __init__(self, audit_trail: AuditTrail) -> None:
        self._audit_trail = audit_trail

    def trip_created(self, trip: Trip, actor_id: UserId | None) -> None:
        self._record_trip("TRIP_CREATED", trip, actor_id, before=None, after=trip)

    def trip_updated(self, before: Trip, after: Trip, actor_id: UserId | None) -> None:
        self._record_trip("TRIP_UPDATED", after, actor_id, before=before, after=after)
        self._record_derived(before, after, actor_id)

    def trip_deleted(self, trip: Trip, actor_id: UserId | None) -> None:
        self._record_trip("TRIP_DELETED", trip, actor_id, before=trip, after=None)

    def _record_trip(
        self,
        action: str,
        trip: Trip,
        actor_id: UserId | None,
        before: Trip | None,
        after: Trip | None,
    ) -> None:
        self._audit_trail.record(
            action=action,
            entity_type="TRIP",
            entity_id=str(trip.id),
            actor_id=actor_id,
            before_state=before,
            after_state=after,
            metadata={"aggregate": "trip", "itineraryItemCount": len(trip.items)},
        )

    def _record_derived(self, before: Trip, after: Trip, actor_id: UserId | None) -> None:
        trip_id = str(after.id)
        metadata = {"tripId": trip_id}

        if set(before.memberships) != set(after.memberships):
            self._audit_trail.record(
                action="MEMBER_WRITE",
                entity_type="MEMBER",
                entity_id=trip_id,
                actor_id=actor_id,
                before_state=before.memberships,
                after_state=after.memberships,
                metadata=metadata,
            )

        if set(before.invites) != set(after.invites):
            self._audit_trail.record(
                action="INVITE_WRITE",
                entity_type="INVITE",
                entity_id=trip_id,
                actor_id=actor_id,
                before_state=before.invites,
                after_state=after.invites,
                metadata=metadata,
            )

        if before.items != after.items:
            self._audit_trail.record(
                action="ITEM_WRITE",
                entity_type="ITEM",
                entity_id=f"{trip_id}:itinerary",
                actor_id=actor_id,
                before_state=before.items,
                after_state=after.items,
                metadata=metadata,
            )

        before_days, after_days = _day_buckets(before), _day_buckets(after)
        if before_days != after_days:
            self._audit_trail.record(
                action="DAY_WRITE",
                entity_type="DAY",
                entity_id=trip_id,
                actor_id=actor_id,
                before_state=before_days,
                after_state=after_days,
                metadata=metadata,
            )

        before_places, after_places = places_to_visit_items(before), places_to_visit_items(after)
        if before_places != after_places:
            self._audit_trail.record(
                action="LIST_WRITE",
                entity_type="LIST",
                entity_id=f"{trip_id}:places_to_visit",
                actor_id=actor_id,
                before_state=before_places,
                after_state=after_places,
                metadata={**metadata, "listName": PLACES_TO_VISIT_LIST_NAME},
            )


def _day_buckets(trip: Trip) -> dict[str, list]:
    return {day.date.isoformat(): list(day.items) for day in generated_days(trip)}
