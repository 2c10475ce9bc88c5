"""Configuration package for the zoo simulation.

Constants are grouped by concern (economy, biology, market, random events).
Runtime options for a single session live in
:class:`zoo.config.simulation_config.ZooConfig`.
"""
