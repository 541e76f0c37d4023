from travel_booking.shared.logging.audit_logger import AuditAction, AuditLogger
from travel_booking.shared.logging.setup import configure_logging

__all__ = ["AuditAction", "AuditLogger", "configure_logging"]
