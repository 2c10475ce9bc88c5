"""Simulation package: the day cycle and the engine that drives it."""

from zoo.simulation.day_context import DayContext, DayReport, DeathNotice
from zoo.simulation.day_cycle import DayPipeline, DayStep, advance_day, default_pipeline
from zoo.simulation.engine import ZooEngine

__all__ = [
    "DayContext",
    "DayPipeline",
    "DayReport",
    "DayStep",
    "DeathNotice",
    "ZooEngine",
    "advance_day",
    "default_pipeline",
]
