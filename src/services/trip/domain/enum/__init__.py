from .invite_status import InviteStatus as InviteStatus
from .trip_role import TripRole as TripRole
from .trip_status import TripStatus as TripStatus
from .trip_visibility import TripVisibility as TripVisibility
