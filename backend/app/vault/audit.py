"""
Audit Logger - Logs all vault calls for compliance
"""
from collections import deque
from datetime import datetime
from typing import Optional
import hashlib
import logging

from ..core.config import settings

logger = logging.getLogger(__name__)


def _hash(value: str) -> str:
    return hashlib.sha256(value.encode()).hexdigest()[:16]


class AuditLogger:
    """
    Audit logger for vault calls
    Records counts only, never record ids, tokens or values
    """

    def __init__(self, max_entries: int = None):
        """Initialize audit logger"""
        self.logs = deque(maxlen=max_entries or settings.AUDIT_MAX_ENTRIES)

    def log_get(self, table: str, id_count: int, tokens: bool):
        """Log a bulk-get"""
        self._log('GET', table, id_count, detail='tokens' if tokens else 'plain_text')

    def log_detokenize(self, token_count: int):
        """Log a detokenize call"""
        self._log('DETOKENIZE', None, token_count)

    def log_insert(self, table: str, record_count: int):
        """Log an insert"""
        self._log('INSERT', table, record_count)

    def log_failure(self, operation: str, table: Optional[str], code: Optional[str]):
        """Log a failed vault call"""
        self._log('FAILURE', table, 0, detail=f"{operation}:{code or 'UNKNOWN'}")

    def _log(self, action: str, table: Optional[str], count: int, detail: Optional[str] = None):
        """Internal logging method"""
        entry = {
            'action': action,
            'table_hash': _hash(table) if table else None,
            'count': count,
            'detail': detail,
            'timestamp': datetime.utcnow().isoformat(),
        }

        self.logs.append(entry)
        logger.info(f"Audit: {action} - table={entry['table_hash']}, count={count}")

    def get_recent_logs(self, limit: int = 100):
        """Get recent audit logs"""
        if limit <= 0:
            return []
        return list(self.logs)[-limit:]


# Singleton
_audit_logger = None

def get_audit_logger() -> AuditLogger:
    global _audit_logger
    if _audit_logger is None:
        _audit_logger = AuditLogger()
    return _audit_logger
