#
# Copyright (c) 2024–2025, Daily
#
# SPDX-License-Identifier: BSD 2-Clause License
#

"""Resampler configuration.

This module defines the immutable parameter object shared by every spline
resampling call, together with the errors raised when it is built with
invalid values.
"""

from pydantic import BaseModel, ConfigDict


class ResamplerParamsError(ValueError):
    """Base class for invalid resampler configuration values."""

    def __init__(self, message: str, value: int):
        super().__init__(message)
        self.value = value


class InvalidChannelCountError(ResamplerParamsError):
    """Raised when fewer than one channel is requested."""

    def __init__(self, channels: int):
        super().__init__(f"at least 1 channel is required (have {channels})", channels)


class InvalidSourceRateError(ResamplerParamsError):
    """Raised when the input sample rate is not positive."""

    def __init__(self, in_rate: int):
        super().__init__(f"input sample rate must be bigger than 0 (got {in_rate})", in_rate)


class InvalidTargetRateError(ResamplerParamsError):
    """Raised when the output sample rate is not positive."""

    def __init__(self, out_rate: int):
        super().__init__(f"output sample rate must be bigger than 0 (got {out_rate})", out_rate)


class ResamplerParams(BaseModel):
    """Validated configuration for spline resampling.

    Instances are frozen, so a single configuration can be shared by any
    number of resample calls.

    Parameters:
        channels: Number of interleaved channels in the buffers.
        in_rate: Sample rate of the input buffers.
        out_rate: Sample rate of the produced buffers.
    """

    model_config = ConfigDict(frozen=True)

    channels: int
    in_rate: int
    out_rate: int

    def __init__(self, channels: int, in_rate: int, out_rate: int, **kwargs):
        """Validate and build the configuration.

        Checks run in argument order and the first failing one raises.

        Args:
            channels: Number of interleaved channels, at least 1.
            in_rate: Input sample rate, at least 1.
            out_rate: Output sample rate, at least 1.

        Raises:
            InvalidChannelCountError: If ``channels`` is below 1.
            InvalidSourceRateError: If ``in_rate`` is below 1.
            InvalidTargetRateError: If ``out_rate`` is below 1.
        """
        if channels < 1:
            raise InvalidChannelCountError(channels)
        if in_rate < 1:
            raise InvalidSourceRateError(in_rate)
        if out_rate < 1:
            raise InvalidTargetRateError(out_rate)
        super().__init__(channels=channels, in_rate=in_rate, out_rate=out_rate, **kwargs)

    @property
    def channel_in_rate(self) -> float:
        """Input rate divided evenly across channels."""
        return self.in_rate / self.channels

    @property
    def channel_out_rate(self) -> float:
        """Output rate divided evenly across channels."""
        return self.out_rate / self.channels

    @property
    def step(self) -> float:
        """Distance in input samples between two consecutive output samples."""
        return self.channel_in_rate / self.channel_out_rate
