#
# Copyright (c) 2024–2025, Daily
#
# SPDX-License-Identifier: BSD 2-Clause License
#

"""Audio utility functions.

Conversions between 16-bit signed integer PCM and normalized float64
samples, using the same divisor as the spline resampler.
"""

import numpy as np

# Largest positive 16-bit sample. Used as the normalization divisor in both
# directions, so -32768 maps slightly below -1.0.
PCM_16_MAX = 0x7FFF


def int16_to_float64(samples) -> np.ndarray:
    """Normalize 16-bit signed integer samples to float64.

    Args:
        samples: 16-bit signed integer samples (any array-like).

    Returns:
        The samples divided by ``PCM_16_MAX``.
    """
    return np.asarray(samples, dtype=np.int16).astype(np.float64) / float(PCM_16_MAX)


def float64_to_int16(samples) -> np.ndarray:
    """Scale normalized float samples back to 16-bit signed integers.

    Values are multiplied by ``PCM_16_MAX`` and truncated toward zero. There
    is no rounding and no clamping, values outside the 16-bit range are not
    guarded against.

    Args:
        samples: Normalized float samples (any array-like).

    Returns:
        The scaled samples as an ``int16`` array.
    """
    return (np.asarray(samples, dtype=np.float64) * float(PCM_16_MAX)).astype(np.int16)
