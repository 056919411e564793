#
# Copyright (c) 2024–2025, Daily
#
# SPDX-License-Identifier: BSD 2-Clause License
#

"""Base audio resampler interface.

This module defines the abstract base class for byte-level resamplers of
interleaved multi-channel PCM audio.
"""

from abc import ABC, abstractmethod

from spline_resampler.audio.resamplers.resampler_params import ResamplerParams


class BaseAudioResampler(ABC):
    """Abstract base class for byte-level resamplers.

    A resampler is bound to a fixed channel count, while rates are given
    with every call. Audio is interleaved 16-bit signed PCM.
    """

    @property
    @abstractmethod
    def channels(self) -> int:
        """Number of interleaved channels in the audio this resampler handles."""
        pass

    def create_params(self, in_rate: int, out_rate: int) -> ResamplerParams:
        """Build validated parameters for one resample call.

        Args:
            in_rate: Sample rate of the input audio in Hz.
            out_rate: Sample rate of the output audio in Hz.

        Returns:
            The parameters for this resampler's channel count and the given rates.

        Raises:
            ResamplerParamsError: If the channel count or a rate is invalid.
        """
        return ResamplerParams(self.channels, in_rate, out_rate)

    @abstractmethod
    async def resample(self, audio: bytes, in_rate: int, out_rate: int) -> bytes:
        """Convert a chunk of PCM audio from one sample rate to another.

        Args:
            audio: Interleaved 16-bit signed PCM samples as raw bytes.
            in_rate: Sample rate of ``audio`` in Hz.
            out_rate: Sample rate of the returned audio in Hz.

        Returns:
            The converted audio as raw bytes, in the same sample format.
        """
        pass
