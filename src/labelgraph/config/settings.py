from __future__ import annotations

import logging
from dataclasses import dataclass

from dynaconf import Dynaconf

from labelgraph.config.constants import DEFAULTS
from labelgraph.errors import InvalidArgumentError

# ---------------------------------------------------------------------
# Graph & traversal policy
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls traversal bookkeeping and library logging.

    Validated at construction time.
    """

    visited_initial_capacity: int = DEFAULTS["VISITED_INITIAL_CAPACITY"]
    visited_growth_factor: float = DEFAULTS["VISITED_GROWTH_FACTOR"]
    log_level: str = DEFAULTS["LOG_LEVEL"]

    def __post_init__(self) -> None:
        if int(self.visited_initial_capacity) < 1:
            raise InvalidArgumentError("visited_initial_capacity must be at least 1")
        if float(self.visited_growth_factor) <= 1.0:
            raise InvalidArgumentError("visited_growth_factor must be greater than 1")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise InvalidArgumentError(f"unknown log level: {self.log_level!r}")


# ---------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------


def load_settings(**overrides) -> Dynaconf:
    """
    Builds the settings object from ``LABELGRAPH_*`` environment variables
    and ``.env`` entries, then explicit overrides. Missing keys fall back to
    ``DEFAULTS`` in ``load_config``.
    """
    settings = Dynaconf(
        envvar_prefix="LABELGRAPH",
        load_dotenv=True,
        settings_files=[],
    )
    if overrides:
        settings.update({k.upper(): v for k, v in overrides.items()})
    return settings


def load_config(**overrides) -> GraphConfig:
    settings = load_settings(**overrides)
    return GraphConfig(
        visited_initial_capacity=int(
            settings.get(
                "VISITED_INITIAL_CAPACITY", DEFAULTS["VISITED_INITIAL_CAPACITY"]
            )
        ),
        visited_growth_factor=float(
            settings.get("VISITED_GROWTH_FACTOR", DEFAULTS["VISITED_GROWTH_FACTOR"])
        ),
        log_level=str(settings.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"])),
    )


def configure_logging(config: GraphConfig | None = None) -> None:
    """
    Installs a root handler for applications and scripts.

    The library itself never calls this.
    """
    config = config or GraphConfig()
    logging.basicConfig(
        level=str(config.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
