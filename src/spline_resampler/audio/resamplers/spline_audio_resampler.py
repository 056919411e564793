#
# Copyright (c) 2024–2025, Daily
#
# SPDX-License-Identifier: BSD 2-Clause License
#

"""Spline-based audio resampler implementation.

This module provides a byte-level audio resampler backed by the 4-sample
cubic spline resampler.

When to use the SplineAudioResampler:
1. For batch processing of complete buffers
2. When you have all the audio data available at once

"""

import numpy as np
from loguru import logger

from spline_resampler.audio.resamplers.base_audio_resampler import BaseAudioResampler
from spline_resampler.audio.resamplers.spline_resampler import resample_int16


class SplineAudioResampler(BaseAudioResampler):
    """Audio resampler implementation using cubic spline interpolation.

    Audio is interleaved 16-bit signed PCM with a fixed number of channels.
    Each chunk is resampled on its own, there is no state carried between
    calls.
    """

    def __init__(self, *, channels: int = 1, **kwargs):
        """Initialize the spline audio resampler.

        Args:
            channels: Number of interleaved channels in the audio.
            **kwargs: Additional keyword arguments (currently unused).
        """
        self._channels = channels
        logger.debug(f"{self}: created with {channels} channel(s)")

    def __str__(self):
        return f"{self.__class__.__name__}#{id(self):x}"

    @property
    def channels(self) -> int:
        """Number of interleaved channels."""
        return self._channels

    async def resample(self, audio: bytes, in_rate: int, out_rate: int) -> bytes:
        """Resample audio data using the spline resampler.

        Args:
            audio: Input audio data as raw bytes (16-bit signed integers).
            in_rate: Original sample rate in Hz.
            out_rate: Target sample rate in Hz.

        Returns:
            Resampled audio data as raw bytes (16-bit signed integers).

        Raises:
            ResamplerParamsError: If the channel count or a rate is invalid.
        """
        params = self.create_params(in_rate, out_rate)
        if in_rate == out_rate:
            return audio
        audio_data = np.frombuffer(audio, dtype=np.int16)
        resampled_audio = resample_int16(audio_data, params)
        result = resampled_audio.astype(np.int16).tobytes()
        return result
