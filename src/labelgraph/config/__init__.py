"""
Configuration layer for labelgraph.

Configuration is explicit: a ``GraphConfig`` is passed to the graph it
governs and read by every cursor created from that graph. ``load_config``
assembles one from defaults and ``LABELGRAPH_*`` environment variables.
"""

from labelgraph.config.settings import (
    GraphConfig,
    load_settings,
    load_config,
    configure_logging,
)

__all__ = [
    "GraphConfig",
    "load_settings",
    "load_config",
    "configure_logging",
]
