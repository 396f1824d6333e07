"""
SkinPalette Configuration
Manages environment variables and defaults for the palette engine.
"""
import os
from typing import Literal

from dotenv import load_dotenv

# Load variables from a local .env file, if present
load_dotenv()


class Config:
    """Configuration class for SkinPalette services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("SKINPALETTE_LOG_LEVEL", "INFO")

    # Matching strategy
    MATCH_STRATEGY: Literal["diversity", "nearest"] = os.environ.get("SKINPALETTE_MATCH_STRATEGY", "diversity")
    PALETTE_SIZE: int = 5
    DEBUG_TOP_N: int = 10

    # Skin sample aggregation
    MIN_SAMPLES: int = int(os.environ.get("SKINPALETTE_MIN_SAMPLES", "1"))
    ENABLE_GRAYWORLD_WB: bool = bool(int(os.environ.get("SKINPALETTE_ENABLE_GRAYWORLD_WB", "0")))

    # Luminance gates for usable skin samples (mean channel, 0-255)
    SAMPLE_LUM_MIN: float = 28.0
    SAMPLE_LUM_MAX: float = 240.0
    WB_LUM_MIN: float = 45.0
    WB_LUM_MAX: float = 210.0

    # Feature flags
    INCLUDE_DEBUG: bool = bool(int(os.environ.get("SKINPALETTE_INCLUDE_DEBUG", "0")))

    # Links
    SHOP_URL: str = os.environ.get("SKINPALETTE_SHOP_URL", "https://beorganich.vercel.app/shop")

    SUPPORTED_STRATEGIES = ["diversity", "nearest"]

    @classmethod
    def validate_strategy(cls, strategy: str) -> bool:
        """Validate matching strategy name."""
        return strategy in cls.SUPPORTED_STRATEGIES

    @classmethod
    def validate_min_samples(cls, min_samples: int) -> bool:
        """Validate minimum sample count."""
        return min_samples >= 1


# Global config instance
config = Config()
