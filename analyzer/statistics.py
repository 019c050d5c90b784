import json
import re
from datetime import datetime

import matplotlib.pyplot as plt

from liftsim.infrastructure.status_publisher import (
    DIRECTION_TOPIC,
    DOOR_PHASE_TOPIC,
    DOORS_TOPIC,
    IDLE_TOPIC,
    JOURNEY_TOPIC,
    PASSENGERS_TOPIC,
    POSITION_TOPIC,
    REQUEST_CLEARED_TOPIC,
    REQUEST_TOPIC,
)


class Statistics:
    """
    Receives all communications and records them as an independent
    "recorder", using only what a real installation could observe
    (position, doors, load, button presses).
    Also collects all events in JSON Lines format for offline playback.
    """
    def __init__(self, env, broker):
        self.env = env
        self.broadcast_pipe = broker.subscribe()
        self.trajectory = []  # [(timestamp, floor)]
        self.door_events = []  # [(timestamp, floor, is_open)]
        self.door_phases = []  # [(timestamp, floor, phase)]
        self.passenger_count_history = []  # [(timestamp, count, capacity)]
        self.request_history = []  # [(timestamp, floor, kind, is_new)]
        self.request_cleared_history = []  # [(timestamp, floor, was_call, was_destination)]
        self.waiting_counts = {}  # {floor: count}
        self.completed_journeys = 0
        self.stops = 0

        self.event_log = []
        self.simulation_metadata = {}

    def _add_event_log(self, event_type, event_data):
        self.event_log.append({
            "time": self.env.now,
            "type": event_type,
            "data": event_data
        })

    def set_simulation_metadata(self, metadata):
        """
        Args:
            metadata (dict): Simulation configuration (num_floors, capacity, etc.)
        """
        self.simulation_metadata = {
            "format_version": "1.0",
            "timestamp": datetime.now().isoformat(),
            "config": metadata
        }

    def start_listening(self):
        """
        Main process to start intercepting global broadcasts.
        """
        while True:
            data = yield self.broadcast_pipe.get()
            self._record(data.get('topic', ''), data.get('message', {}))

    def _record(self, topic, message):
        timestamp = message.get('timestamp')

        if topic == POSITION_TOPIC:
            floor = message['floor']
            if not self.trajectory or self.trajectory[-1] != (timestamp, floor):
                self.trajectory.append((timestamp, floor))
            self._add_event_log('position', {'floor': floor})

        elif topic == DOORS_TOPIC:
            self.door_events.append((timestamp, message['floor'], message['open']))
            if message['open']:
                self.stops += 1
            self._add_event_log('doors', {'floor': message['floor'], 'open': message['open']})

        elif topic == DOOR_PHASE_TOPIC:
            self.door_phases.append((timestamp, message['floor'], message['phase']))

        elif topic == PASSENGERS_TOPIC:
            self.passenger_count_history.append((timestamp, message['count'], message['capacity']))
            self._add_event_log('passengers', {
                'floor': message['floor'],
                'passengers': [p.id for p in message['passengers']],
            })

        elif topic == DIRECTION_TOPIC:
            self._add_event_log('direction', {'direction': message['direction'].value})

        elif topic == IDLE_TOPIC:
            self._add_event_log('idle', {'floor': message['floor']})

        elif topic == REQUEST_TOPIC:
            self.request_history.append((timestamp, message['floor'], message['kind'], message['new']))
            self._add_event_log('request', {'floor': message['floor'], 'kind': message['kind'], 'new': message['new']})

        elif topic == REQUEST_CLEARED_TOPIC:
            self.request_cleared_history.append(
                (timestamp, message['floor'], message['was_call'], message['was_destination']))
            self._add_event_log('request_cleared', {
                'floor': message['floor'],
                'was_call': message['was_call'],
                'was_destination': message['was_destination'],
            })

        elif topic == JOURNEY_TOPIC:
            self.completed_journeys += 1
            self._add_event_log('journey_completed', {
                'passenger_id': message['passenger_id'],
                'origin_floor': message['origin_floor'],
                'destination_floor': message['destination_floor'],
            })

        else:
            waiting_match = re.fullmatch(r'floor/(\d+)/waiting', topic)
            if waiting_match:
                floor = int(waiting_match.group(1))
                self.waiting_counts[floor] = message['count']
                self._add_event_log('waiting', {'floor': floor, 'count': message['count']})

    def print_summary(self):
        print("\n" + "=" * 60)
        print("   SIMULATION SUMMARY")
        print("=" * 60)
        floors_travelled = sum(abs(b[1] - a[1]) for a, b in zip(self.trajectory, self.trajectory[1:]))
        print(f"  Stops:               {self.stops:>6}")
        print(f"  Floors travelled:    {floors_travelled:>6}")
        print(f"  Requests registered: {sum(1 for r in self.request_history if r[3]):>6}")
        print(f"  Completed journeys:  {self.completed_journeys:>6}")
        print(f"  Still waiting:       {sum(self.waiting_counts.values()):>6}")
        print("=" * 60)

    def plot_trajectory_diagram(self, output_filename='trajectory_diagram.png', show=False):
        """
        Plot car position over time, with door openings marked.

        Returns:
            The output file name, or None when nothing was recorded.
        """
        if not self.trajectory:
            print("No trajectory recorded - nothing to plot.")
            return None

        times = [t for t, _ in self.trajectory] + [self.env.now]
        floors = [f for _, f in self.trajectory] + [self.trajectory[-1][1]]

        plt.figure(figsize=(14, 8))
        plt.step(times, floors, where='post', label='Car', linewidth=2.5, alpha=0.8)

        open_events = [(t, f) for t, f, is_open in self.door_events if is_open]
        if open_events:
            plt.scatter([t for t, _ in open_events], [f for _, f in open_events],
                        marker='s', s=60, color='green', label='Door open', zorder=3)

        plt.title("Elevator Trajectory Diagram")
        plt.xlabel("Time (s)")
        plt.ylabel("Floor")
        plt.grid(True, which='both', linestyle='--', alpha=0.7)
        plt.yticks(range(min(floors), max(floors) + 1))
        plt.legend(loc='upper right', fontsize=10)
        plt.tight_layout()

        plt.savefig(output_filename, dpi=150, bbox_inches='tight')
        print(f"Trajectory diagram saved to {output_filename}")
        if show:
            plt.show()
        plt.close()
        return output_filename

    def save_event_log(self, filename='simulation_log.jsonl'):
        """
        Save the event log to a JSON Lines file.
        """
        print(f"\nSaving event log to {filename}...")

        with open(filename, 'w', encoding='utf-8') as f:
            if self.simulation_metadata:
                f.write(json.dumps({
                    "type": "metadata",
                    "data": self.simulation_metadata
                }) + '\n')

            for event in self.event_log:
                f.write(json.dumps(event, ensure_ascii=False) + '\n')

        print(f"Event log saved: {len(self.event_log)} events written to {filename}")
        return filename
