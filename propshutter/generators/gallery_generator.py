"""Gallery Generator: parallel photograph rendering from scenario CSV."""

import csv
import logging
from pathlib import Path
from typing import Dict, Any, List
from dataclasses import dataclass
from concurrent.futures import ProcessPoolExecutor, as_completed
from tqdm import tqdm
import traceback

from ..core import PropellerParams, PhotographEngine, blade_phases
from ..codecs import PhotographCodec
from ..render import save_photograph

logger = logging.getLogger(__name__)


@dataclass
class ScenarioSpec:
    """Specification for a single scenario."""
    sample_id: str
    output_photo: str
    output_points: str
    params: Dict[str, Any]


def scenario_params(params: Dict[str, Any], device: str = "cpu") -> PropellerParams:
    """PropellerParams from a CSV row's parameter columns."""
    shift = float(params.get("phase_shift", 0.0))
    phases = tuple(p + shift for p in blade_phases(int(params.get("num_blades", 3))))
    return PropellerParams(
        step_count=int(params.get("step_count", 1000)),
        shutter_duration=float(params.get("shutter_duration", 1.0)),
        frequency_hz=float(params.get("frequency_hz", 1.0)),
        phase_offsets=phases,
        device=device,
    )


def _process_scenario(
    spec: ScenarioSpec,
    output_root: Path,
    device: str = "cpu",
    save_photo: bool = True,
) -> Dict[str, Any]:
    """Process a single scenario (worker function)."""
    try:
        params = scenario_params(spec.params, device)
        engine = PhotographEngine(params)
        photographs, _ = engine.synthesize()

        if save_photo:
            title = f"{params.frequency_hz:.2f} Hz, {params.num_blades} blades"
            save_photograph(output_root / spec.output_photo, photographs, title=title)

        points_path = output_root / spec.output_points
        points_path.parent.mkdir(parents=True, exist_ok=True)
        PhotographCodec.save(
            points_path,
            photographs=photographs,
            params=params.to_dict(),
            meta={"sample_id": spec.sample_id},
            compress=False,
        )

        return {"sample_id": spec.sample_id, "status": "success",
                "points": [len(p) for p in photographs]}

    except Exception as e:
        return {
            "sample_id": spec.sample_id,
            "status": "error",
            "error": str(e),
            "traceback": traceback.format_exc(),
        }


class GalleryGenerator:
    """Render a gallery of photographs from a scenario CSV.

    Reads CSV with scenario specs and renders them in parallel.
    """

    META_COLUMNS = ["sample_id", "output_photo", "output_points"]

    def __init__(self, csv_path: Path, output_root: Path):
        """Initialize generator.

        Args:
            csv_path: path to scenario CSV
            output_root: root directory for rendered outputs
        """
        self.csv_path = Path(csv_path)
        self.output_root = Path(output_root)

        self.scenarios = self._load_csv()

    def _load_csv(self) -> List[ScenarioSpec]:
        """Load scenarios from CSV."""
        scenarios = []
        with open(self.csv_path) as f:
            reader = csv.DictReader(f)
            for row in reader:
                params = {}
                for key in row:
                    if key not in self.META_COLUMNS:
                        try:
                            params[key] = float(row[key])
                        except (ValueError, TypeError):
                            params[key] = row[key]

                scenarios.append(ScenarioSpec(
                    sample_id=row["sample_id"],
                    output_photo=row["output_photo"],
                    output_points=row["output_points"],
                    params=params,
                ))
        return scenarios

    def generate(
        self,
        num_workers: int = 4,
        device: str = "cpu",
        skip_existing: bool = True,
        progress: bool = True,
        save_photo: bool = True,
    ) -> Dict[str, Any]:
        """Render the gallery.

        Args:
            num_workers: number of parallel workers
            device: torch device for the engine
            skip_existing: skip scenarios whose points file exists
            progress: show progress bar
            save_photo: also render PNG photographs

        Returns:
            dict with generation statistics
        """
        to_process = []
        for spec in self.scenarios:
            if skip_existing and (self.output_root / spec.output_points).exists():
                continue
            to_process.append(spec)

        results = {"total": len(self.scenarios), "processed": 0,
                   "skipped": len(self.scenarios) - len(to_process), "errors": []}

        if not to_process:
            return results

        if num_workers <= 1:
            iterator = tqdm(to_process, desc="Rendering") if progress else to_process
            for spec in iterator:
                self._collect(results, _process_scenario(spec, self.output_root, device, save_photo))
        else:
            # Parallel processing (CPU only for multiprocessing)
            with ProcessPoolExecutor(max_workers=num_workers) as executor:
                futures = {
                    executor.submit(_process_scenario, spec, self.output_root, "cpu", save_photo): spec
                    for spec in to_process
                }
                iterator = tqdm(as_completed(futures), total=len(futures), desc="Rendering") if progress else as_completed(futures)
                for future in iterator:
                    self._collect(results, future.result())

        logger.info("Rendered %d/%d scenarios (%d skipped, %d errors)",
                    results["processed"], results["total"], results["skipped"], len(results["errors"]))
        return results

    def generate_single(self, sample_id: str, device: str = "cpu", save_photo: bool = True) -> Dict[str, Any]:
        """Render a single scenario by ID."""
        spec = next((s for s in self.scenarios if s.sample_id == sample_id), None)
        if spec is None:
            return {"status": "error", "error": f"Scenario {sample_id} not found"}

        return _process_scenario(spec, self.output_root, device, save_photo)

    @staticmethod
    def _collect(results: Dict[str, Any], result: Dict[str, Any]) -> None:
        if result["status"] == "success":
            results["processed"] += 1
        else:
            logger.warning("Scenario %s failed: %s", result["sample_id"], result["error"])
            results["errors"].append(result)
