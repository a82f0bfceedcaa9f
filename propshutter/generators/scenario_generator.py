"""Scenario Generator: sample propeller/shutter scenarios from a YAML spec into CSV."""

import yaml
import csv
import logging
import numpy as np
from pathlib import Path
from dataclasses import dataclass
from typing import Dict, Any, List, Optional, Union
import hashlib

logger = logging.getLogger(__name__)


@dataclass
class SamplingSpec:
    """Specification for parameter sampling."""
    distribution: str = "uniform"  # "uniform" | "normal" | "fixed"
    min_val: float = 0.0
    max_val: float = 1.0
    mean: float = 0.5
    std: float = 0.1
    value: Optional[float] = None  # for "fixed"

    def sample(self, rng: np.random.Generator) -> float:
        if self.distribution == "fixed":
            return self.value if self.value is not None else self.mean
        elif self.distribution == "uniform":
            return float(rng.uniform(self.min_val, self.max_val))
        elif self.distribution == "normal":
            val = float(rng.normal(self.mean, self.std))
            return float(np.clip(val, self.min_val, self.max_val))
        else:
            raise ValueError(f"Unknown distribution: {self.distribution}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SamplingSpec":
        return cls(
            distribution=d.get("distribution", "uniform"),
            min_val=d.get("min", 0.0),
            max_val=d.get("max", 1.0),
            mean=d.get("mean", (d.get("min", 0.0) + d.get("max", 1.0)) / 2),
            std=d.get("std", 0.1),
            value=d.get("value"),
        )


@dataclass
class OutputSpec:
    """Subdirectories, under the gallery output root, for rendered files."""
    photo_subdir: str = "photos"
    points_subdir: str = "points"


class ScenarioGenerator:
    """Generate a CSV of propeller scenarios for batch rendering.

    YAML config format:
    ```yaml
    name: sweep

    output:
      photo_subdir: photos
      points_subdir: points

    params:
      frequency_hz:
        distribution: uniform
        min: 0.5
        max: 3.0
      shutter_duration:
        distribution: normal
        mean: 1.0
        std: 0.2
        min: 0.2
        max: 2.0
      num_blades:
        distribution: fixed
        value: 3

    generation:
      seed: 42
      samples: 100
    ```
    """

    PARAM_COLUMNS = [
        "step_count",
        "shutter_duration",
        "frequency_hz",
        "num_blades",
        "phase_shift",
    ]

    INTEGER_PARAMS = {"step_count", "num_blades"}

    DEFAULT_SPECS = {
        "step_count": {"distribution": "fixed", "value": 1000},
        "shutter_duration": {"distribution": "fixed", "value": 1.0},
        "frequency_hz": {"distribution": "uniform", "min": 0.5, "max": 3.0},
        "num_blades": {"distribution": "fixed", "value": 3},
        "phase_shift": {"distribution": "fixed", "value": 0.0},
    }

    def __init__(self, config_path: Union[str, Path]):
        """Initialize generator from YAML config."""
        self.config_path = Path(config_path)
        with open(config_path) as f:
            self.config = yaml.safe_load(f)

        self.name = self.config.get("name", self.config_path.stem)

        output_cfg = self.config.get("output", {})
        self.output = OutputSpec(
            photo_subdir=output_cfg.get("photo_subdir", "photos"),
            points_subdir=output_cfg.get("points_subdir", "points"),
        )

        self.param_specs = {}
        for param in self.PARAM_COLUMNS:
            if "params" in self.config and param in self.config["params"]:
                self.param_specs[param] = SamplingSpec.from_dict(self.config["params"][param])
            else:
                self.param_specs[param] = SamplingSpec.from_dict(self.DEFAULT_SPECS[param])

        gen_cfg = self.config.get("generation", {})
        self.seed = gen_cfg.get("seed", 42)
        self.samples = gen_cfg.get("samples", 10)

    def _sample_row(self, rng: np.random.Generator) -> Dict[str, Any]:
        row = {}
        for param in self.PARAM_COLUMNS:
            value = self.param_specs[param].sample(rng)
            if param in self.INTEGER_PARAMS:
                value = int(round(value))
            row[param] = value
        return row

    def _generate_output_paths(self, sample_id: str) -> Dict[str, str]:
        """Generate output paths for a scenario."""
        return {
            "output_photo": f"{self.output.photo_subdir}/{sample_id}.png",
            "output_points": f"{self.output.points_subdir}/{sample_id}.npy",
        }

    def scenarios(self) -> List[Dict[str, Any]]:
        """Sample all scenario rows (deterministic for a given seed)."""
        rng = np.random.default_rng(self.seed)
        rows = []
        for i in range(self.samples):
            params = self._sample_row(rng)
            key = f"{self.name}_{i}_" + "_".join(f"{params[p]}" for p in self.PARAM_COLUMNS)
            sample_id = hashlib.md5(key.encode()).hexdigest()[:12]
            rows.append({"sample_id": sample_id, **self._generate_output_paths(sample_id), **params})
        return rows

    def generate(self, output_csv: Union[str, Path]) -> int:
        """Generate CSV configuration file.

        Args:
            output_csv: path to output CSV

        Returns:
            number of scenarios generated
        """
        rows = self.scenarios()

        output_csv = Path(output_csv)
        output_csv.parent.mkdir(parents=True, exist_ok=True)

        columns = ["sample_id", "output_photo", "output_points"] + self.PARAM_COLUMNS

        with open(output_csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=columns)
            writer.writeheader()
            for row in rows:
                writer.writerow(row)

        logger.info("Wrote %d scenarios to %s", len(rows), output_csv)
        return len(rows)
