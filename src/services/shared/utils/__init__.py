from .error_handler import handle_errors as handle_errors
from .http_response import access_denied_response as access_denied_response
from .http_response import api_response as api_response
from .http_response import error_response as error_response
from .http_response import unauthorized_response as unauthorized_response
from .logger import get_logger as get_logger
from .request import path_identifier as path_identifier
from .request import request_body as request_body
from .request import resolve_actor_id as resolve_actor_id
from .snapshot import SnapshotValue as SnapshotValue
from .snapshot import to_snapshot as to_snapshot
from .validators import blank_to_none as blank_to_none
from .validators import to_decimal as to_decimal
