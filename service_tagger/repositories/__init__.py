from .audit_log_repository import AuditLogRepository
from .service_repository import ServiceRepository

__all__ = [
    'AuditLogRepository',
    'ServiceRepository'
]
