from .invite_id import InviteId as InviteId
from .item_id import ItemId as ItemId
