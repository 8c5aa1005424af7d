from .audit_event import AuditEvent as AuditEvent
