from .audit_event_repository import AuditEventRepository as AuditEventRepository
