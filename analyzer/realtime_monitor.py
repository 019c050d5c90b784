import numpy as np

from liftsim.infrastructure.status_publisher import REQUEST_CLEARED_TOPIC, REQUEST_TOPIC

from .statistics import Statistics


class RealtimePerformanceMonitor(Statistics):
    """
    Request service times using button data only.

    A request's service time runs from the moment its floor button lights
    up to the stop that clears it. Compatible with real hardware: no
    passenger objects are needed.
    """
    def __init__(self, env, broker):
        super().__init__(env, broker)
        self.open_requests = {}  # {(floor, kind): registration_time}
        self.service_times = {}  # {(floor, kind): [service_time, ...]}

    def _record(self, topic, message):
        super()._record(topic, message)

        if topic == REQUEST_TOPIC:
            key = (message['floor'], message['kind'])
            if message['new'] and key not in self.open_requests:
                self.open_requests[key] = message['timestamp']

        elif topic == REQUEST_CLEARED_TOPIC:
            timestamp = message['timestamp']
            floor = message['floor']
            for kind, present in (("CALL", message['was_call']), ("DESTINATION", message['was_destination'])):
                if not present:
                    continue
                registered_at = self.open_requests.pop((floor, kind), None)
                if registered_at is not None:
                    self.service_times.setdefault((floor, kind), []).append(timestamp - registered_at)

    def average_service_time(self, kind=None):
        """Mean service time over all floors, optionally for one request kind."""
        values = [t for (floor, k), times in self.service_times.items()
                  if kind is None or k == kind for t in times]
        if not values:
            return None
        return float(np.mean(values))

    def print_service_summary(self):
        print("\n" + "=" * 60)
        print("   REQUEST SERVICE TIMES")
        print("=" * 60)
        for kind in ("CALL", "DESTINATION"):
            average = self.average_service_time(kind)
            if average is not None:
                print(f"  {kind.title():<12} average: {average:>6.2f} seconds")
        if self.open_requests:
            print(f"  Unserved requests: {len(self.open_requests)}")
        print("=" * 60)
