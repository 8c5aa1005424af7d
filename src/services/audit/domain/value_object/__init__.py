from .audit_event_id import AuditEventId as AuditEventId
from .audit_search_criteria import AuditSearchCriteria as AuditSearchCriteria
