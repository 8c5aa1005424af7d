from .audit_trail import AuditTrail as AuditTrail
from .search_audit_events import SearchAuditEventsService as SearchAuditEventsService
