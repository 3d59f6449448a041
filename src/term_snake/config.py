"""Game configuration."""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from term_snake.grid import WallMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Settings for a single game session.

    Supports JSON serialization so a setup can be saved and replayed.
    """

    # Field
    width: int = 168
    height: int = 15
    header_rows: int = 1
    wall_mode: str = "wrap"

    # Randomness
    seed: int | None = None
    spawn_attempts: int = 32

    # Scoring
    max_score: int = 255

    # Glyphs
    head_glyph: str = "X"
    body_glyph: str = "X"
    food_glyph: str = "@"

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must each be at least 1.")
        if not 0 <= self.header_rows < self.height:
            raise ValueError(
                "header_rows must be non-negative and smaller than height."
            )
        try:
            WallMode(self.wall_mode)
        except ValueError:
            raise ValueError(
                f"Unknown wall_mode {self.wall_mode!r}; "
                f"expected one of {[m.value for m in WallMode]}."
            ) from None
        if self.spawn_attempts < 1:
            raise ValueError("spawn_attempts must be at least 1.")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be non-negative.")
        if self.max_score < 1:
            raise ValueError("max_score must be at least 1.")
        for name in ("head_glyph", "body_glyph", "food_glyph"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty.")

    @property
    def wall(self) -> WallMode:
        return WallMode(self.wall_mode)

    def with_overrides(self, **overrides) -> GameConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
