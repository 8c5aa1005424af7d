from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta
from typing import Any

from services.shared.domain import (
    AggregateRoot,
    EmailAddress,
    Invalid,
    IsoDateTime,
    TripId,
    UserId,
    Valid,
    ValidationResult,
)
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    ResourceNotFoundException,
)
from services.trip.domain.entity.invite import Invite
from services.trip.domain.entity.itinerary_item import ItineraryItem
from services.trip.domain.entity.membership import Membership
from services.trip.domain.enum import TripRole, TripStatus, TripVisibility
from services.trip.domain.service.itinerary_generator import (
    ItineraryDay,
    generated_days,
    places_to_visit_items,
)
from services.trip.domain.value_object import ItemId

MIN_LATITUDE, MAX_LATITUDE = -90.0, 90.0
MIN_LONGITUDE, MAX_LONGITUDE = -180.0, 180.0


class Trip(AggregateRoot[TripId]):
    """旅行集約

    日程・旅程アイテム・メンバーシップ・招待・公開範囲をひとまとまりで検証する。
    変更メソッドは自身を書き換えず、不変条件をすべて検証した新しい集約を返す。
    生成は必ず Trip.validate（または Trip.build）を経由させ、不正な状態のインスタンスを作らない。

    不変条件:
    - 名前が空でない / start_date <= end_date
    - メンバーシップが1件以上あり、OWNER が少なくとも1人いる
    - メンバーシップはユーザーごと、招待はメールアドレスごとに1件
    - 日付付きアイテムはすべて [start_date, end_date] に収まる
    """

    def __init__(
        self,
        id: TripId,
        name: str,
        start_date: date,
        end_date: date,
        visibility: TripVisibility,
        memberships: tuple[Membership, ...],
        invites: tuple[Invite, ...],
        items: tuple[ItineraryItem, ...],
        created_at: IsoDateTime,
        status: TripStatus = TripStatus.ACTIVE,
        version: int = 0,
    ) -> None:
        super().__init__(id, version)
        self._name = name
        self._start_date = start_date
        self._end_date = end_date
        self._visibility = visibility
        self._memberships = {m.user_id: m for m in memberships}
        self._invites = {i.email: i for i in invites}
        self._items = items
        self._created_at = created_at
        self._status = status

    @classmethod
    def validate(
        cls,
        *,
        id: TripId,
        name: str,
        start_date: date,
        end_date: date,
        visibility: TripVisibility,
        memberships: Iterable[Membership],
        invites: Iterable[Invite],
        items: Iterable[ItineraryItem],
        created_at: IsoDateTime,
        status: TripStatus = TripStatus.ACTIVE,
        version: int = 0,
    ) -> ValidationResult[Trip]:
        """不変条件を検証し、満たす場合のみ集約を生成する

        違反があればインスタンスは作らず Invalid を返す。
        """
        memberships = tuple(memberships)
        invites = tuple(invites)
        items = tuple(items)
        violation = _invariant_violation(name, start_date, end_date, memberships, invites, items)
        if violation is not None:
            return Invalid(violation)
        return Valid(
            cls(
                id=id,
                name=name,
                start_date=start_date,
                end_date=end_date,
                visibility=visibility,
                memberships=memberships,
                invites=invites,
                items=items,
                created_at=created_at,
                status=status,
                version=version,
            )
        )

    @classmethod
    def build(cls, **state: Any) -> Trip:
        """Trip.validate の結果を取り出す。違反時は BusinessRuleViolationException"""
        match cls.validate(**state):
            case Valid(value=trip):
                return trip
            case Invalid(reason=reason):
                raise BusinessRuleViolationException(reason)

    @property
    def name(self) -> str:
        return self._name

    @property
    def start_date(self) -> date:
        return self._start_date

    @property
    def end_date(self) -> date:
        return self._end_date

    @property
    def visibility(self) -> TripVisibility:
        return self._visibility

    @property
    def memberships(self) -> tuple[Membership, ...]:
        return tuple(self._memberships.values())

    @property
    def invites(self) -> tuple[Invite, ...]:
        return tuple(self._invites.values())

    @property
    def items(self) -> tuple[ItineraryItem, ...]:
        return self._items

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def status(self) -> TripStatus:
        return self._status

    @property
    def is_archived(self) -> bool:
        return self._status is TripStatus.ARCHIVED

    @property
    def day_count(self) -> int:
        return (self._end_date - self._start_date).days + 1

    def role_of(self, user_id: UserId | None) -> TripRole | None:
        if user_id is None:
            return None
        membership = self._memberships.get(user_id)
        return membership.role if membership else None

    def is_member(self, user_id: UserId | None) -> bool:
        return self.role_of(user_id) is not None

    def owner_ids(self) -> tuple[UserId, ...]:
        return tuple(
            m.user_id for m in self._memberships.values() if m.role is TripRole.OWNER
        )

    def invite_for(self, email: EmailAddress) -> Invite | None:
        return self._invites.get(email)

    def pending_invite_for(self, email: EmailAddress) -> Invite | None:
        invite = self.invite_for(email)
        return invite if invite is not None and invite.is_pending else None

    def find_item(self, item_id: ItemId) -> ItineraryItem | None:
        return next((item for item in self._items if item.id == item_id), None)

    def date_for_day(self, day_number: int) -> date:
        """1始まりの日番号を日付に変換する"""
        if not 1 <= day_number <= self.day_count:
            raise BusinessRuleViolationException(
                f"Day number must be between 1 and {self.day_count}"
            )
        return self._start_date + timedelta(days=day_number - 1)

    def generated_days(self) -> list[ItineraryDay]:
        return generated_days(self)

    def places_to_visit_items(self) -> list[ItineraryItem]:
        return places_to_visit_items(self)

    def update_details(
        self,
        name: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> Trip:
        """名前・日程を更新する（日程を縮めて範囲外のアイテムが出る場合は不正）"""
        return self._evolve(
            name=name.strip() if name is not None else self._name,
            start_date=start_date or self._start_date,
            end_date=end_date or self._end_date,
        )

    def change_visibility(self, visibility: TripVisibility) -> Trip:
        return self._evolve(visibility=visibility)

    def archive(self) -> Trip:
        """アーカイブする（すでにアーカイブ済みなら自身をそのまま返す）"""
        if self.is_archived:
            return self
        return self._evolve(status=TripStatus.ARCHIVED)

    def restore(self) -> Trip:
        """アーカイブを解除する（すでに ACTIVE なら自身をそのまま返す）"""
        if not self.is_archived:
            return self
        return self._evolve(status=TripStatus.ACTIVE)

    def add_itinerary_item(self, item: ItineraryItem) -> Trip:
        if self.find_item(item.id) is not None:
            raise BusinessRuleViolationException(
                f"Itinerary item already exists: {item.id}"
            )
        return self._evolve(items=(*self._items, item))

    def update_itinerary_item(self, item: ItineraryItem) -> Trip:
        """同じ ID のアイテムを置き換える（並び順は維持）"""
        self._require_item(item.id)
        return self._evolve(
            items=tuple(item if current.id == item.id else current for current in self._items)
        )

    def remove_itinerary_item(self, item_id: ItemId) -> Trip:
        self._require_item(item_id)
        return self._evolve(items=tuple(i for i in self._items if i.id != item_id))

    def move_itinerary_item(
        self,
        item_id: ItemId,
        target_date: date | None,
        before_item_id: ItemId | None = None,
    ) -> Trip:
        """アイテムの日付を付け替え、before_item_id の直前（指定なしなら末尾）へ移動する"""
        item = self._require_item(item_id)
        if before_item_id == item_id:
            raise BusinessRuleViolationException("Cannot move an item before itself")

        remaining = [i for i in self._items if i.id != item_id]
        moved = item.reschedule(target_date)
        if before_item_id is None:
            remaining.append(moved)
        else:
            index = next(
                (n for n, i in enumerate(remaining) if i.id == before_item_id), None
            )
            if index is None:
                raise ResourceNotFoundException(
                    f"Itinerary item not found: {before_item_id}"
                )
            remaining.insert(index, moved)
        return self._evolve(items=remaining)

    def invite_collaborator(
        self,
        email: EmailAddress,
        role: TripRole,
        registered_user_id: UserId | None = None,
        now: IsoDateTime | None = None,
    ) -> Trip:
        """招待を作成する

        - registered_user_id がすでにメンバーなら重複エラー
        - PENDING の招待があればロールだけ更新（再送）
        - それ以外（招待なし / 終端状態の招待）は新しい PENDING 招待で置き換える
        """
        if registered_user_id is not None and self.is_member(registered_user_id):
            raise DuplicateResourceException(
                f"{email} is already a member of this trip"
            )

        current = self.pending_invite_for(email)
        invite = current.reissue(role) if current else Invite.issue(email, role, now)
        return self._evolve(invites=self._with_invite(invite))

    def accept_invite(self, email: EmailAddress, user_id: UserId) -> Trip:
        """PENDING の招待を承諾済みにし、招待のロールでメンバーに加える

        すでにメンバーの場合は既存のメンバーシップを維持する。
        """
        invite = self.pending_invite_for(email)
        if invite is None:
            raise ResourceNotFoundException(f"No pending invite for {email}")

        memberships = dict(self._memberships)
        memberships.setdefault(user_id, Membership(user_id=user_id, role=invite.role))
        return self._evolve(
            memberships=memberships.values(),
            invites=self._with_invite(invite.accept()),
        )

    def revoke_invite(self, email: EmailAddress) -> Trip:
        invite = self.pending_invite_for(email)
        if invite is None:
            raise ResourceNotFoundException(f"No pending invite for {email}")
        return self._evolve(invites=self._with_invite(invite.revoke()))

    def change_member_role(
        self, actor_id: UserId, target_id: UserId, role: TripRole
    ) -> Trip:
        target = self._require_member(target_id)
        if target.role is TripRole.OWNER and target_id != actor_id:
            raise BusinessRuleViolationException(
                "Owners cannot change other owners roles"
            )
        memberships = dict(self._memberships)
        memberships[target_id] = target.with_role(role)
        return self._evolve(memberships=memberships.values())

    def remove_member(self, actor_id: UserId, target_id: UserId) -> Trip:
        target = self._require_member(target_id)
        if target.role is TripRole.OWNER and target_id != actor_id:
            raise BusinessRuleViolationException("Owners cannot remove other owners")
        return self._without_member(target_id)

    def leave(self, member_id: UserId) -> Trip:
        self._require_member(member_id)
        return self._without_member(member_id)

    def snapshot(self) -> dict[str, Any]:
        """監査ログ用のスナップショット元データ"""
        return {
            "id": self.id,
            "name": self._name,
            "start_date": self._start_date,
            "end_date": self._end_date,
            "visibility": self._visibility,
            "memberships": self.memberships,
            "invites": self.invites,
            "items": self._items,
            "created_at": self._created_at,
            "status": self._status,
            "version": self.version,
        }

    def with_version(self, version: int) -> Trip:
        """永続化後のバージョンを反映した集約を返す"""
        return self._evolve(version=version)

    def _require_item(self, item_id: ItemId) -> ItineraryItem:
        item = self.find_item(item_id)
        if item is None:
            raise ResourceNotFoundException(f"Itinerary item not found: {item_id}")
        return item

    def _require_member(self, user_id: UserId) -> Membership:
        membership = self._memberships.get(user_id)
        if membership is None:
            raise ResourceNotFoundException(f"User is not a member: {user_id}")
        return membership

    def _without_member(self, user_id: UserId) -> Trip:
        if self.owner_ids() == (user_id,):
            raise BusinessRuleViolationException("Trip must have at least one owner")
        return self._evolve(
            memberships=(m for m in self._memberships.values() if m.user_id != user_id)
        )

    def _with_invite(self, invite: Invite) -> tuple[Invite, ...]:
        invites = dict(self._invites)
        invites[invite.email] = invite
        return tuple(invites.values())

    def _evolve(self, **changes: Any) -> Trip:
        state: dict[str, Any] = {
            "id": self.id,
            "name": self._name,
            "start_date": self._start_date,
            "end_date": self._end_date,
            "visibility": self._visibility,
            "memberships": self.memberships,
            "invites": self.invites,
            "items": self._items,
            "created_at": self._created_at,
            "status": self._status,
            "version": self.version,
        }
        state.update(changes)
        return Trip.build(**state)


def _invariant_violation(
    name: str,
    start_date: date,
    end_date: date,
    memberships: tuple[Membership, ...],
    invites: tuple[Invite, ...],
    items: tuple[ItineraryItem, ...],
) -> str | None:
    if not name or not name.strip():
        return "Trip name cannot be blank"
    if start_date > end_date:
        return "End date cannot be before start date"

    if not memberships:
        return "Trip must have at least one member"
    if len({m.user_id for m in memberships}) != len(memberships):
        return "A user can only have one membership"
    if not any(m.role is TripRole.OWNER for m in memberships):
        return "Trip must have at least one owner"

    if len({i.email for i in invites}) != len(invites):
        return "An email can only have one invite"

    if len({i.id for i in items}) != len(items):
        return "Itinerary item ids must be unique"
    for item in items:
        violation = _item_violation(item, start_date, end_date)
        if violation is not None:
            return violation
    return None


def _item_violation(item: ItineraryItem, start_date: date, end_date: date) -> str | None:
    if not item.place_name or not item.place_name.strip():
        return "Place name cannot be blank"
    if not MIN_LATITUDE <= item.latitude <= MAX_LATITUDE:
        return "Latitude must be between -90 and 90"
    if not MIN_LONGITUDE <= item.longitude <= MAX_LONGITUDE:
        return "Longitude must be between -180 and 180"
    if item.date is not None and not start_date <= item.date <= end_date:
        return (
            "Itinerary item date must be within trip date range "
            f"({start_date} - {end_date})"
        )
    return None
