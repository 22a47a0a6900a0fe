"""Runtime services (logging and profiling) shared by the buffers."""

from . import telemetry

__all__ = ["telemetry"]
