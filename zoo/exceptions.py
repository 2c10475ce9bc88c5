"""Zoo simulation exception hierarchy.

Exceptions are reserved for programming errors (calling the engine after the
session has ended, broken configuration, malformed genetic input). Expected
player-facing failures such as insufficient funds are returned as
``Err(ZooError)`` values instead; see :mod:`zoo.errors`.
"""


class ZooSimError(Exception):
    """Root of all zoo-simulation exceptions."""


class SimulationError(ZooSimError):
    """Errors during simulation execution (engine, day cycle, entities)."""


class SessionEndedError(SimulationError):
    """The session is over (bankrupt or final day completed)."""


class GeneticsError(SimulationError):
    """Malformed input to the breeding procedure."""


class ConfigurationError(ZooSimError):
    """Invalid or missing configuration."""
