import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from config import Settings

STATUS_ACTIVE = 'active'
STATUS_MAINTENANCE = 'maintenance'
STATUS_OUTSIDE_HOURS = 'outside_hours'

# Paths that stay reachable while the portal is closed
EXEMPT_PATHS = ('/', '/api/status')


class AvailabilityGate:
    """
    Decides whether the portal accepts normal requests right now.

    Maintenance mode always wins; otherwise the current hour must fall
    inside the configured active range, both bounds inclusive.
    """

    def __init__(self, settings: Settings, clock: Optional[Callable[[], datetime]] = None):
        self.logger = logging.getLogger(__name__)
        self.settings = settings
        self.clock = clock or datetime.now

    def is_within_active_hours(self, hour: int) -> bool:
        return self.settings.active_start_hour <= hour <= self.settings.active_end_hour

    def current_status(self, hour: int) -> str:
        if self.settings.maintenance_mode:
            return STATUS_MAINTENANCE
        if self.is_within_active_hours(hour):
            return STATUS_ACTIVE
        return STATUS_OUTSIDE_HOURS

    @staticmethod
    def is_exempt(path: str) -> bool:
        # Static assets (anything with a file extension) and the admin panel
        return '.' in path or '/admin' in path or path in EXEMPT_PATHS

    def check(self, path: str) -> Optional[Dict]:
        """
        Return the 503 payload for a blocked request, or None to let it through.
        """
        if self.is_exempt(path):
            return None

        if self.settings.maintenance_mode:
            self.logger.info(f"Rejected {path}: maintenance mode")
            return {
                'success': False,
                'message': self.settings.maintenance_message,
                'maintenanceMode': True,
                'status': STATUS_MAINTENANCE
            }

        hour = self.clock().hour
        if not self.is_within_active_hours(hour):
            self.logger.info(f"Rejected {path}: outside active hours (hour={hour})")
            return {
                'success': False,
                'message': self.settings.active_message,
                'maintenanceMode': False,
                'status': STATUS_OUTSIDE_HOURS,
                'currentHour': hour,
                'activeHours': self.settings.active_hours_label
            }

        return None

    def status_payload(self) -> Dict:
        now = self.clock()
        hour = now.hour
        timestamp = now.astimezone(timezone.utc).isoformat(timespec='milliseconds')
        return {
            'success': True,
            'maintenanceMode': self.settings.maintenance_mode,
            'withinActiveHours': self.is_within_active_hours(hour),
            'currentHour': hour,
            'activeHours': {
                'start': self.settings.active_start_hour,
                'end': self.settings.active_end_hour
            },
            'status': self.current_status(hour),
            'timestamp': timestamp.replace('+00:00', 'Z')
        }
