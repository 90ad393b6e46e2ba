"""Simulation engine components."""

from .controller import MissionController, plan_path
from .map_generator import GeneratedMap, generate_map, near_psr

__all__ = [
    "MissionController",
    "plan_path",
    "GeneratedMap",
    "generate_map",
    "near_psr",
]
