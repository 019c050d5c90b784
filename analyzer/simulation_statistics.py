import numpy as np

from .statistics import Statistics


class SimulationStatistics(Statistics):
    """
    Simulator-only statistics with "God's view" access.

    Adds per-passenger metrics (waiting, riding and total journey time)
    read straight from the Passenger objects. A real installation cannot
    observe these.
    """
    def __init__(self, env, broker):
        super().__init__(env, broker)
        self.passengers = []

    def register_passenger(self, passenger):
        if passenger not in self.passengers:
            self.passengers.append(passenger)

    def register_passengers(self, passengers):
        for passenger in passengers:
            self.register_passenger(passenger)

    @staticmethod
    def _describe(values):
        if not values:
            return None
        data = np.asarray(values, dtype=float)
        return {
            'count': int(data.size),
            'mean': float(np.mean(data)),
            'min': float(np.min(data)),
            'max': float(np.max(data)),
            'p95': float(np.percentile(data, 95)),
        }

    def passenger_metrics(self):
        """
        Returns:
            dict with 'waiting', 'riding' and 'total' summaries (None when no
            passenger has reached that point yet).
        """
        waiting = [p.get_waiting_time() for p in self.passengers if p.get_waiting_time() is not None]
        riding = [p.get_riding_time() for p in self.passengers if p.get_riding_time() is not None]
        total = [p.get_total_journey_time() for p in self.passengers if p.get_total_journey_time() is not None]
        return {
            'waiting': self._describe(waiting),
            'riding': self._describe(riding),
            'total': self._describe(total),
        }

    def print_passenger_metrics_summary(self):
        print("\n" + "=" * 60)
        print("   PASSENGER METRICS SUMMARY (SIMULATION ONLY)")
        print("=" * 60)
        labels = {
            'waiting': "Waiting Time (Hall to Boarding)",
            'riding': "Riding Time",
            'total': "Total Journey Time",
        }
        for key, stats in self.passenger_metrics().items():
            if stats is None:
                continue
            print(f"\n{labels[key]}:")
            print(f"  Count:   {stats['count']:>6} passengers")
            print(f"  Average: {stats['mean']:>6.2f} seconds")
            print(f"  Min:     {stats['min']:>6.2f} seconds")
            print(f"  Max:     {stats['max']:>6.2f} seconds")
            print(f"  P95:     {stats['p95']:>6.2f} seconds")
        print("=" * 60)
