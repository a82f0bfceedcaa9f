"""PropShutter Codecs: photograph storage."""

from .photograph import PhotographCodec

__all__ = ["PhotographCodec"]
