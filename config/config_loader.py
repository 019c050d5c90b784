"""
YAML front end for SimulationConfig.

Scenario files hold a single ``simulation:`` mapping (see scenarios/).
Individual values can be overridden on load with dotted keys, e.g.
``{"elevator.max_capacity": 8, "random_seed": 3}``.
"""

import copy
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .simulation import SimulationConfig

PathLike = Union[str, Path]


class ConfigLoader:
    """Reads and writes simulation scenarios"""

    @staticmethod
    def _read_mapping(file_path: Path) -> Dict[str, Any]:
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{file_path}: expected a mapping at top level, got {type(data).__name__}")
        return data

    @staticmethod
    def apply_overrides(data: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
        """
        Return a copy of ``data`` with dotted-key overrides applied below the
        ``simulation`` section.
        """
        result = copy.deepcopy(data)
        if 'simulation' in result:
            if result['simulation'] is None:
                result['simulation'] = {}
            section = result['simulation']
        else:
            section = result
        for dotted_key, value in overrides.items():
            *parents, leaf = dotted_key.split('.')
            node = section
            for key in parents:
                child = node.setdefault(key, {})
                if not isinstance(child, dict):
                    raise ValueError(f"Cannot override '{dotted_key}': '{key}' is not a section")
                node = child
            node[leaf] = value
        return result

    @staticmethod
    def load_simulation(file_path: PathLike, overrides: Optional[Dict[str, Any]] = None) -> SimulationConfig:
        """
        Load SimulationConfig from YAML file

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the file is malformed or validation fails
        """
        data = ConfigLoader._read_mapping(Path(file_path))
        if overrides:
            data = ConfigLoader.apply_overrides(data, overrides)

        config = SimulationConfig.from_dict(data)
        config.validate()
        return config

    @staticmethod
    def save_simulation(config: SimulationConfig, file_path: PathLike):
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    @staticmethod
    def list_scenarios(directory: PathLike) -> List[Path]:
        """Scenario files (*.yaml, *.yml) in ``directory``, sorted by name."""
        directory = Path(directory)
        if not directory.is_dir():
            raise FileNotFoundError(f"Scenario directory not found: {directory}")
        return sorted(p for p in directory.iterdir() if p.suffix in ('.yaml', '.yml'))


def load_simulation_config(file_path: PathLike, overrides: Optional[Dict[str, Any]] = None) -> SimulationConfig:
    return ConfigLoader.load_simulation(file_path, overrides)


def save_simulation_config(config: SimulationConfig, file_path: PathLike):
    ConfigLoader.save_simulation(config, file_path)
