"""
Runner configuration.

RunnerConfig collects every tuneable of the challenge runner.  Values come
from (lowest to highest priority) the dataclass defaults, an optional YAML
file and the command-line flags.

Example YAML:
    order: desc
    report_volumes: false
    validate: true
    results_dir: results
"""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Union

import yaml

from cubepack.runner.cubes import SortOrder, get_sort_order


@dataclass
class RunnerConfig:
    """
    All tuneable parameters of the challenge runner.

    Attributes:
        order:          Size order the cubes are fed to the packer in.
        report_volumes: Always print count and volumes instead of count / -1.
        validate:       Run the voxel validator after every packing.
        verbose:        Print per-pass progress of the packer.
        prompt:         Text printed when the interactive loop starts.
        results_dir:    Where batch runs export their metrics.
    """
    order: SortOrder = SortOrder.DESC
    report_volumes: bool = False
    validate: bool = False
    verbose: bool = False
    prompt: str = "Give me a box challenge"
    results_dir: str = "results"

    def to_dict(self) -> dict:
        d = asdict(self)
        d["order"] = self.order.value
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "RunnerConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}. Available: {sorted(known)}")
        values = dict(d)
        for f in fields(cls):
            if f.type in (bool, "bool") and f.name in values and not isinstance(values[f.name], bool):
                raise ValueError(f"Config key {f.name!r} must be true or false, got {values[f.name]!r}")
        if "order" in values:
            values["order"] = get_sort_order(values["order"])
        return cls(**values)


def load_config(path: Union[str, Path]) -> RunnerConfig:
    """
    Load a RunnerConfig from a YAML file.

    An empty file yields the defaults.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError:        If the file is not a mapping or has unknown keys.
    """
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    return RunnerConfig.from_dict(data)
