"""
Skin Sample Aggregation

Reduces the raw skin samples produced by a face sampler (hex strings or RGB
triples) to one stable skin color: shadow/specular gating, optional
gray-world white balance and a per-channel median.
"""

from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from skinpalette.config import config
from skinpalette.errors import InsufficientSamples, InvalidColorFormat
from skinpalette.services.colors.colorspace import hex_to_rgb, rgb_to_hex
from skinpalette.utils.logging import get_logger

logger = get_logger()

Sample = Union[str, Sequence[int]]


def parse_sample(sample: Sample) -> Tuple[int, int, int]:
    """
    Parse one skin sample into an (R, G, B) tuple.

    Args:
        sample: '#RRGGBB' string or a sequence of three 0-255 ints

    Raises:
        InvalidColorFormat: If the sample cannot be read as a color
    """
    if isinstance(sample, str):
        return hex_to_rgb(sample)

    try:
        channels = tuple(sample)
    except TypeError:
        raise InvalidColorFormat(sample, "expected hex string or RGB triple")

    if len(channels) != 3:
        raise InvalidColorFormat(sample, "expected 3 channels")

    for channel in channels:
        if isinstance(channel, bool) or not isinstance(channel, (int, np.integer)):
            raise InvalidColorFormat(sample, "channels must be integers")
        if not 0 <= channel <= 255:
            raise InvalidColorFormat(sample, "channels must be in 0..255")

    return tuple(int(c) for c in channels)


def samples_to_array(samples: Iterable[Sample]) -> np.ndarray:
    """Convert samples to a float32 array of shape (N, 3)."""
    rows = [parse_sample(s) for s in samples]
    if not rows:
        return np.zeros((0, 3), dtype=np.float32)
    return np.asarray(rows, dtype=np.float32)


def filter_by_luminance(rgb: np.ndarray, lum_min: float, lum_max: float,
                        inclusive: bool = True) -> np.ndarray:
    """
    Keep samples whose mean channel value lies between lum_min and lum_max.

    Bounds are kept when inclusive is True and dropped otherwise.
    """
    lum = rgb.mean(axis=1)
    if inclusive:
        return rgb[(lum >= lum_min) & (lum <= lum_max)]
    return rgb[(lum > lum_min) & (lum < lum_max)]


def estimate_grayworld_multipliers(rgb: np.ndarray) -> np.ndarray:
    """
    Estimate gray-world white balance multipliers.

    Each channel is scaled so its mean matches the mean of all channels.
    Channels with a zero mean keep a multiplier of 1.
    """
    means = rgb.mean(axis=0)
    gray = means.mean()
    multipliers = np.ones(3, dtype=np.float32)
    nonzero = means > 0
    multipliers[nonzero] = gray / means[nonzero]
    return multipliers


def apply_white_balance(rgb: np.ndarray, multipliers: np.ndarray) -> np.ndarray:
    """Scale channels by the multipliers and clamp to [0, 255]."""
    return np.clip(rgb * multipliers[None, :], 0, 255)


def estimate_skin_hex(samples: Iterable[Sample],
                      min_samples: Optional[int] = None,
                      white_balance: Optional[bool] = None) -> str:
    """
    Aggregate skin samples into a single skin color.

    Args:
        samples: Hex strings or RGB triples from the skin sampler
        min_samples: Minimum usable samples required (defaults to config)
        white_balance: Apply gray-world white balance (defaults to config)

    Returns:
        Uppercase '#RRGGBB' skin color

    Raises:
        InvalidColorFormat: If any sample is malformed
        InsufficientSamples: If too few samples survive luminance gating
    """
    if min_samples is None:
        min_samples = config.MIN_SAMPLES
    if white_balance is None:
        white_balance = config.ENABLE_GRAYWORLD_WB

    rgb = samples_to_array(samples)
    total = len(rgb)

    usable = filter_by_luminance(rgb, config.SAMPLE_LUM_MIN, config.SAMPLE_LUM_MAX)
    if len(usable) < max(1, min_samples):
        logger.warning("Too few usable skin samples", extra={
            "usable": len(usable),
            "total": total,
            "required": max(1, min_samples)
        })
        raise InsufficientSamples(len(usable), max(1, min_samples))

    if white_balance:
        mids = filter_by_luminance(usable, config.WB_LUM_MIN, config.WB_LUM_MAX, inclusive=False)
        multipliers = estimate_grayworld_multipliers(mids if len(mids) else usable)
        usable = apply_white_balance(usable, multipliers)
        logger.debug("Applied gray-world white balance", extra={
            "multipliers": multipliers.round(3).tolist(),
            "mids": len(mids)
        })

    r, g, b = np.median(usable, axis=0)
    skin_hex = rgb_to_hex(float(r), float(g), float(b))

    logger.debug(f"Aggregated {len(usable)}/{total} skin samples into {skin_hex}")

    return skin_hex


def count_usable_samples(samples: Iterable[Sample]) -> int:
    """Number of samples passing the luminance gates."""
    rgb = samples_to_array(samples)
    return len(filter_by_luminance(rgb, config.SAMPLE_LUM_MIN, config.SAMPLE_LUM_MAX))
