"""YAML loader for strategy parameters."""

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .strategy import StrategyParameters


def load_strategy_parameters(file_path: Union[str, Path]) -> StrategyParameters:
    """Load strategy parameters from a YAML file.

    The file holds a flat mapping of the recognized parameter keys, either at
    the top level or nested under a ``sampling`` key::

        sampling:
          distance-metric: manhattan
          numConfigs: 25
          seed: 7

    Args:
        file_path: Path to the YAML file

    Returns:
        Validated StrategyParameters

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not a YAML mapping
        yaml.YAMLError: If the YAML is invalid
        ConfigurationError: If the mapping contains unrecognized keys
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(
            f"Strategy parameter file not found: {path}. "
            f"Suggestion: Check the path or create the file."
        )

    if path.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError(
            f"Invalid file extension: {path.suffix}. "
            f"Suggestion: Use .yaml or .yml extension for parameter files."
        )

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return StrategyParameters.from_mapping(_extract_parameters(data, path))


def _extract_parameters(data: Any, path: Path) -> Dict[str, Any]:
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a mapping in {path}, got {type(data).__name__}. "
            f"Suggestion: Write the parameters as 'key: value' pairs."
        )

    if "sampling" in data:
        nested = data["sampling"]
        if not isinstance(nested, dict):
            raise ValueError(
                f"The 'sampling' section of {path} must be a mapping, "
                f"got {type(nested).__name__}."
            )
        return nested

    return data
