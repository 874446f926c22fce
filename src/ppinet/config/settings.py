from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from ppinet.errors import ConfigurationError

RENDER_ENGINES: FrozenSet[str] = frozenset({"dot", "neato", "fdp", "sfdp"})


def validate_engine(name: str) -> str:
    """
    Return name if it is a known renderer engine.
    """
    if name not in RENDER_ENGINES:
        raise ConfigurationError(
            f"invalid render engine: {name!r} (expected one of {sorted(RENDER_ENGINES)})"
        )
    return name


# ---------------------------------------------------------------------
# Link analysis
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class PageRankConfig:
    """
    Damping and convergence tolerance for PageRank.
    """

    damping: float = 0.85
    tolerance: float = 1e-6

    def __post_init__(self) -> None:
        if not 0.0 < self.damping < 1.0:
            raise ConfigurationError(f"damping must be in (0, 1), got {self.damping}")
        if self.tolerance <= 0.0:
            raise ConfigurationError(f"tolerance must be positive, got {self.tolerance}")


# ---------------------------------------------------------------------
# Community detection
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class CommunityConfig:
    """
    Controls modularity-based community detection.

    Higher resolution favours smaller communities. A fixed seed makes
    community labels reproducible between runs.
    """

    resolution: float = 1.0
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.resolution <= 0.0:
            raise ConfigurationError(f"resolution must be positive, got {self.resolution}")


# ---------------------------------------------------------------------
# Clique aggregation
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class CliqueConfig:
    min_size: int = 3
    reset: bool = True

    def __post_init__(self) -> None:
        if self.min_size < 1:
            raise ConfigurationError(f"min_size must be at least 1, got {self.min_size}")


# ---------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class RenderConfig:
    """
    Settings handed to an external Graphviz renderer.
    """

    engine: str = "dot"
    output_format: str = "svg"
    size: str = "10!"

    def __post_init__(self) -> None:
        validate_engine(self.engine)


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Root configuration object for ppinet.

    passes lists the analysis passes AnalysisRunner executes, in order.
    """

    page_rank: PageRankConfig = field(default_factory=PageRankConfig)
    community: CommunityConfig = field(default_factory=CommunityConfig)
    clique: CliqueConfig = field(default_factory=CliqueConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    passes: Tuple[str, ...] = ()
