from .add_itinerary_item import AddItineraryItemService as AddItineraryItemService
from .archive_trip import ArchiveTripService as ArchiveTripService
from .create_trip import CreateTripService as CreateTripService
from .delete_trip import DeleteTripService as DeleteTripService
from .get_itinerary import GetItineraryService as GetItineraryService
from .get_itinerary import Itinerary as Itinerary
from .get_trip import GetTripService as GetTripService
from .invite_collaborator import InviteCollaboratorService as InviteCollaboratorService
from .link_pending_invites import (
    LinkPendingInvitesOnRegistrationService as LinkPendingInvitesOnRegistrationService,
)
from .list_trips import ListTripsService as ListTripsService
from .list_trips import TripListStatusFilter as TripListStatusFilter
from .manage_trip_membership import (
    ManageTripMembershipService as ManageTripMembershipService,
)
from .move_itinerary_item import MoveItineraryItemService as MoveItineraryItemService
from .remove_itinerary_item import RemoveItineraryItemService as RemoveItineraryItemService
from .revoke_invite import RevokeInviteService as RevokeInviteService
from .trip_audit import TripAuditRecorder as TripAuditRecorder
from .trip_command import TripCommandExecutor as TripCommandExecutor
from .update_itinerary_item import UpdateItineraryItemService as UpdateItineraryItemService
from .update_trip import UpdateTripService as UpdateTripService
