import threading
import logging
from collections import Counter
from typing import Dict, Any, Optional
from datetime import datetime, timezone

logger = logging.getLogger("monitoring")

class StoreMonitoring:
    """In-process request metrics for the health endpoint"""

    def __init__(self):
        self._lock = threading.Lock()
        self.reset()

    def reset(self):
        with self._lock:
            self.requests_total = 0
            self.requests_failed = 0
            self.client_errors = 0
            self.average_response_time = 0.0
            self.status_codes: Counter = Counter()
            self.last_error: Optional[Dict[str, Any]] = None

    def record_request(self, status_code: int, response_time_ms: float):
        with self._lock:
            self.requests_total += 1
            self.status_codes[status_code] += 1
            if status_code >= 500:
                self.requests_failed += 1
            elif status_code >= 400:
                self.client_errors += 1

            # running mean
            self.average_response_time += (
                (response_time_ms - self.average_response_time) / self.requests_total
            )

    def record_error(self, error: str, path: str):
        with self._lock:
            self.last_error = {
                "error": error,
                "path": path,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        logger.error(f"Unhandled error on {path}: {error}")

    def get_health_status(self) -> Dict[str, Any]:
        with self._lock:
            total = self.requests_total
            success_rate = 100.0 if total == 0 else ((total - self.requests_failed) / total) * 100

            if success_rate >= 99:
                status = "healthy"
            elif success_rate >= 90:
                status = "degraded"
            else:
                status = "unhealthy"

            return {
                "status": status,
                "success_rate": round(success_rate, 2),
                "average_response_time_ms": round(self.average_response_time, 2),
                "total_requests": total,
                "client_errors": self.client_errors,
                "server_errors": self.requests_failed,
                "last_error": self.last_error,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }

# Global monitoring instance
monitoring = StoreMonitoring()
