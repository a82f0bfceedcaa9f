"""Photograph encoding/decoding for storage."""

import numpy as np
from pathlib import Path
from typing import Dict, Any, Union, Optional, List

from ..core.photograph import Photograph


class PhotographCodec:
    """Encode/decode photographs and metadata to/from .npy files.

    Format: Single .npy file containing a dict with:
        - blades: list of per-blade dicts
            - phase_offset: float
            - coordinates: [M] recorded coordinates (image x)
            - positions: [M] shutter positions (image y)
            - times: [M] elapsed times
            - sample_indices: [M] timeline indices
        - params: dict of PropellerParams
        - meta: additional metadata
    """

    VERSION = 1

    @classmethod
    def encode(
        cls,
        photographs: List[Photograph],
        params: Optional[Dict[str, Any]] = None,
        meta: Optional[Dict[str, Any]] = None,
        compress: bool = True,
    ) -> Dict[str, Any]:
        """Encode photographs to a dict for saving.

        Args:
            photographs: one Photograph per blade
            params: generation parameters
            meta: additional metadata
            compress: use float16 for coordinates/positions/times

        Returns:
            dict ready for np.save
        """
        dtype = np.float16 if compress else np.float64

        blades = []
        for photo in photographs:
            arrays = photo.to_numpy()
            blades.append({
                "phase_offset": float(photo.blade.phase_offset),
                "coordinates": arrays["coordinates"].astype(dtype),
                "positions": arrays["positions"].astype(dtype),
                "times": arrays["times"].astype(dtype),
                "sample_indices": arrays["sample_indices"].astype(np.int64),
            })

        data = {
            "version": cls.VERSION,
            "blades": blades,
        }

        if params is not None:
            data["params"] = cls._serialize_params(params)

        if meta is not None:
            data["meta"] = meta

        return data

    @classmethod
    def decode(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Decode photographs from loaded dict.

        Args:
            data: dict loaded from .npy

        Returns:
            dict with per-blade numpy arrays, params and meta
        """
        version = data.get("version", 0)
        if version > cls.VERSION:
            raise ValueError(f"Unsupported photograph format version {version} (max {cls.VERSION})")

        result = {
            "blades": [
                {
                    "phase_offset": float(b["phase_offset"]),
                    "coordinates": b["coordinates"].astype(np.float64),
                    "positions": b["positions"].astype(np.float64),
                    "times": b["times"].astype(np.float64),
                    "sample_indices": b["sample_indices"].astype(np.int64),
                }
                for b in data["blades"]
            ],
        }

        if "params" in data:
            result["params"] = dict(data["params"])

        if "meta" in data:
            result["meta"] = data["meta"]

        result["version"] = version

        return result

    @classmethod
    def save(cls, path: Union[str, Path], **kwargs) -> None:
        """Save photographs to .npy file."""
        data = cls.encode(**kwargs)
        np.save(path, data, allow_pickle=True)

    @classmethod
    def load(cls, path: Union[str, Path]) -> Dict[str, Any]:
        """Load photographs from .npy file."""
        data = np.load(path, allow_pickle=True).item()
        return cls.decode(data)

    @staticmethod
    def _serialize_params(params: Dict[str, Any]) -> Dict[str, Any]:
        """Serialize params to JSON-safe types."""
        serialized = {}
        for k, v in params.items():
            if isinstance(v, np.ndarray):
                serialized[k] = v.tolist()
            elif isinstance(v, (np.floating, np.integer)):
                serialized[k] = float(v) if isinstance(v, np.floating) else int(v)
            elif isinstance(v, tuple):
                serialized[k] = list(v)
            elif hasattr(v, "item"):
                serialized[k] = v.item()
            else:
                serialized[k] = v
        return serialized
