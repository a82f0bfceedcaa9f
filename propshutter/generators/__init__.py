"""PropShutter Generators: scenario sampling and gallery rendering."""

from .scenario_generator import ScenarioGenerator
from .gallery_generator import GalleryGenerator

__all__ = ["ScenarioGenerator", "GalleryGenerator"]
