from __future__ import annotations

import logging
from typing import Any, Optional

from dynaconf import Dynaconf

from ppinet.config.constants import DEFAULTS
from ppinet.config.settings import (
    AnalysisConfig,
    CliqueConfig,
    CommunityConfig,
    PageRankConfig,
    RenderConfig,
)
from ppinet.errors import ConfigurationError

logger = logging.getLogger("ppinet.config")


def _parse_csv(value):
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    if isinstance(value, str):
        return [v.strip() for v in value.split(",") if v.strip()]
    return None


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def make_settings() -> Dynaconf:
    """
    Settings source: PPINET_* environment variables, with .env support.
    """
    return Dynaconf(
        envvar_prefix="PPINET",
        load_dotenv=True,
        settings_files=[],
    )


def load_config(settings: Optional[Dynaconf] = None, **overrides: Any) -> AnalysisConfig:
    """
    Build an AnalysisConfig from settings layered over DEFAULTS.

    Keyword overrides use the DEFAULTS key names and win over both.
    """
    if settings is None:
        settings = make_settings()

    unknown = set(overrides) - set(DEFAULTS)
    if unknown:
        raise ConfigurationError(f"unknown settings: {sorted(unknown)}")

    def value(key: str) -> Any:
        if key in overrides:
            return overrides[key]
        return settings.get(key, DEFAULTS[key])

    seed = value("COMMUNITY_SEED")
    try:
        config = AnalysisConfig(
            page_rank=PageRankConfig(
                damping=float(value("PAGERANK_DAMPING")),
                tolerance=float(value("PAGERANK_TOLERANCE")),
            ),
            community=CommunityConfig(
                resolution=float(value("COMMUNITY_RESOLUTION")),
                seed=None if seed in (None, "") else int(seed),
            ),
            clique=CliqueConfig(
                min_size=int(value("CLIQUE_MIN_SIZE")),
                reset=_as_bool(value("CLIQUE_RESET")),
            ),
            render=RenderConfig(
                engine=str(value("RENDER_ENGINE")),
                output_format=str(value("RENDER_FORMAT")),
                size=str(value("RENDER_SIZE")),
            ),
            passes=tuple(_parse_csv(value("PASSES")) or ()),
        )
    except ConfigurationError:
        raise
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"invalid setting: {exc}") from exc

    logger.debug("loaded config %s", config)
    return config
