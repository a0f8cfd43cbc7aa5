"""Export pipeline, its observable state and loaders."""

from .export_pipeline import ExportPipeline
from .generation_state import GenerationState
from .loaders import load_from_disk, load_from_network, load_from_string

__all__ = [
    "ExportPipeline",
    "GenerationState",
    "load_from_disk",
    "load_from_network",
    "load_from_string",
]
