from .entity import AuditEvent as AuditEvent
from .repository import AuditEventRepository as AuditEventRepository
from .value_object import AuditEventId as AuditEventId
from .value_object import AuditSearchCriteria as AuditSearchCriteria
