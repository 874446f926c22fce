"""
Configuration layer for ppinet.

Configuration in ppinet is:
- Explicit (passed, not global)
- Typed (validated at construction time)
- Overridable from PPINET_* environment variables
"""

from ppinet.config.settings import (
    PageRankConfig,
    CommunityConfig,
    CliqueConfig,
    RenderConfig,
    AnalysisConfig,
    RENDER_ENGINES,
    validate_engine,
)
from ppinet.config.loader import load_config, make_settings

__all__ = [
    "PageRankConfig",
    "CommunityConfig",
    "CliqueConfig",
    "RenderConfig",
    "AnalysisConfig",
    "RENDER_ENGINES",
    "validate_engine",
    "load_config",
    "make_settings",
]
