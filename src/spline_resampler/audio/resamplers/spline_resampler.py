#
# Copyright (c) 2024–2025, Daily
#
# SPDX-License-Identifier: BSD 2-Clause License
#

"""Cubic spline sample rate conversion for interleaved PCM buffers.

The whole buffer must be available up front. Each channel is pulled out of
the interleaved buffer, walked at the channel rate ratio with a 4-sample
natural spline, and written back interleaved into a buffer sized for the
output rate.
"""

import math

import numpy as np
from loguru import logger

from spline_resampler.audio.resamplers.resampler_params import ResamplerParams
from spline_resampler.audio.spline import spline
from spline_resampler.audio.utils import PCM_16_MAX, float64_to_int16, int16_to_float64

# Samples held back at the end of every channel. Channels with this many
# samples or fewer are not resampled at all.
CHANNEL_MARGIN = 16

SPLINE_WINDOW = 4


def resample_channel(samples, channel_in_rate: float, channel_out_rate: float) -> np.ndarray:
    """Resample the samples of a single channel.

    The query cursor starts at one step and advances by repeated addition
    while it stays below ``len(samples) - CHANNEL_MARGIN``. Each output is
    the spline value at the cursor divided by ``PCM_16_MAX``. That divisor
    is applied on every path, including float input that was never scaled
    to the 16-bit range.

    Args:
        samples: The channel samples, in emission order.
        channel_in_rate: Input sample rate for this channel.
        channel_out_rate: Output sample rate for this channel.

    Returns:
        The resampled channel. If there are not more than ``CHANNEL_MARGIN``
        samples the result is an all-zero array of the same length.
    """
    samples = np.asarray(samples, dtype=np.float64)
    if samples.size <= CHANNEL_MARGIN:
        logger.trace(f"Channel has only {samples.size} samples, zero-filling")
        return np.zeros(samples.size, dtype=np.float64)

    available = samples.size - CHANNEL_MARGIN
    step = channel_in_rate / channel_out_rate
    capacity = math.ceil(available / step)

    # Sequential accumulation, same rounding as `x += step` one sample at a time.
    # Holds capacity + 1 float64 positions, large for tiny steps on long buffers.
    positions = np.add.accumulate(np.full(capacity + 1, step, dtype=np.float64))
    positions = positions[positions < available][:capacity]

    base = positions.astype(np.int64)
    windows = samples[base[np.newaxis, :] + np.arange(SPLINE_WINDOW)[:, np.newaxis]]
    values = spline(base.astype(np.float64), windows, positions)

    return values / float(PCM_16_MAX)


def resample_float64(data, params: ResamplerParams) -> np.ndarray:
    """Resample an interleaved float64 buffer.

    When the input and output rates are equal the input is returned as is.
    For a float64 ndarray that is the very same object, so callers must not
    assume the result is a fresh allocation.

    The buffer length does not need to be a multiple of the channel count.
    Output slot ``i`` takes sample ``i // channels`` of channel
    ``i % channels``, clamped to that channel's last resampled sample.
    Slots of channels with nothing resampled stay at zero.

    Args:
        data: Interleaved samples.
        params: The resampler configuration.

    Returns:
        The interleaved resampled buffer.
    """
    samples = np.asarray(data, dtype=np.float64)
    if samples.size == 0:
        return np.zeros(0, dtype=np.float64)
    if params.in_rate == params.out_rate:
        return samples

    logger.debug(
        f"Resampling {samples.size} samples ({params.channels} channels) "
        f"from {params.in_rate} to {params.out_rate}"
    )

    channels = params.channels
    resampled_channels = [
        resample_channel(samples[c::channels], params.channel_in_rate, params.channel_out_rate)
        for c in range(channels)
    ]

    resampled = np.zeros(int((samples.size / params.in_rate) * params.out_rate), dtype=np.float64)

    for c, channel_data in enumerate(resampled_channels):
        if channel_data.size == 0:
            continue
        # View over every output slot that belongs to channel `c`.
        slots = resampled[c::channels]
        indices = np.minimum(np.arange(slots.size), channel_data.size - 1)
        slots[:] = channel_data[indices]

    return resampled


def resample_int16(data, params: ResamplerParams) -> np.ndarray:
    """Resample an interleaved 16-bit signed integer buffer.

    Samples are normalized with ``int16_to_float64``, resampled with
    ``resample_float64`` and scaled back with ``float64_to_int16`` (truncated
    toward zero, not clamped).

    Args:
        data: Interleaved 16-bit samples.
        params: The resampler configuration.

    Returns:
        The interleaved resampled buffer as ``int16``.
    """
    resampled = resample_float64(int16_to_float64(data), params)
    return float64_to_int16(resampled)
