import sys

import simpy
import yaml

# Configuration
from config import ConfigLoader, SimulationConfig, load_simulation_config

# Simulator components
from liftsim.simulation import ElevatorSimulation
from liftsim.implementations.console_display import ConsoleDisplay

# Analyzer
from analyzer.simulation_statistics import SimulationStatistics
from analyzer.realtime_monitor import RealtimePerformanceMonitor


def create_environment(realtime_factor: float) -> simpy.Environment:
    """
    Plain environment for fastest-possible runs, real-time pacing otherwise.

    Args:
        realtime_factor: 0.0 = no delay, 1.0 = real time, 2.0 = double speed
    """
    if realtime_factor > 0:
        return simpy.RealtimeEnvironment(factor=1.0 / realtime_factor, strict=False)
    return simpy.Environment()


def run_simulation(sim_config_path=None, save_outputs=True, overrides=None):
    """
    Set up and run the entire simulation

    Args:
        sim_config_path: Path to simulation configuration YAML file
            (built-in defaults when None)
        save_outputs: Write the JSON Lines event log and the trajectory diagram
        overrides: Dotted-key overrides, e.g. {"elevator.max_capacity": 8}
    """
    print("--- Loading Configuration ---")
    if sim_config_path is not None:
        sim_config = load_simulation_config(sim_config_path, overrides)
        print(f"Simulation Config: {sim_config_path}")
    else:
        sim_config = SimulationConfig.from_dict(ConfigLoader.apply_overrides({}, overrides or {}))
        sim_config.validate()
        print("Simulation Config: built-in defaults")
    if overrides:
        print(f"Overrides: {overrides}")

    if sim_config.random_seed is not None:
        print(f"Random seed fixed to {sim_config.random_seed} for reproducible results")
    else:
        print("Random seed not set - results will vary")

    print("\n--- Simulation Setup ---")
    env = create_environment(sim_config.realtime_factor)
    display = ConsoleDisplay(env)
    simulation = ElevatorSimulation(sim_config, env=env, display=display)

    sim_stats = SimulationStatistics(env, simulation.broker)
    env.process(sim_stats.start_listening())
    monitor = RealtimePerformanceMonitor(env, simulation.broker)
    env.process(monitor.start_listening())

    sim_stats.set_simulation_metadata({
        'num_floors': sim_config.building.num_floors,
        'elevator_capacity': sim_config.elevator.max_capacity,
        'home_floor': sim_config.elevator.home_floor,
        'floor_to_floor_time': sim_config.elevator.floor_to_floor_time,
        'door_operation_time': sim_config.door.operation_time,
        'tick_interval': sim_config.tick_interval,
        'sim_duration': sim_config.traffic.simulation_duration,
        'random_seed': sim_config.random_seed,
        'config_file': sim_config_path,
    })

    if sim_config.traffic.seed_passengers:
        simulation.generate_random_passengers(sim_config.traffic.max_passengers_per_floor)
        for floor in simulation.building.floors:
            sim_stats.register_passengers(floor.waiting_passengers)

    print("\n--- Simulation Start ---")
    simulation.start()
    simulation.run(until=sim_config.traffic.simulation_duration)
    simulation.stop()
    print("--- Simulation End ---")

    sim_stats.print_summary()
    sim_stats.print_passenger_metrics_summary()
    monitor.print_service_summary()

    if save_outputs:
        sim_stats.save_event_log('simulation_log.jsonl')
        sim_stats.plot_trajectory_diagram()

    return simulation, sim_stats


def parse_overrides(args):
    """["elevator.max_capacity=8", "random_seed=3"] -> {"elevator.max_capacity": 8, "random_seed": 3}"""
    overrides = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep or not key:
            raise ValueError(f"Override must look like key=value, got '{arg}'")
        overrides[key] = yaml.safe_load(value)
    return overrides


def main():
    # Usage: python main.py [simulation_config.yaml] [key=value ...]
    args = sys.argv[1:]
    config_path = None
    if args and "=" not in args[0]:
        config_path = args.pop(0)
    run_simulation(config_path, overrides=parse_overrides(args))


if __name__ == '__main__':
    main()
