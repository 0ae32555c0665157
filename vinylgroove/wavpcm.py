"""
Canonical RIFF/WAVE PCM container, written with scipy.

Layout (all little-endian):

    RIFF header   "RIFF" <remaining length> "WAVE"              12 bytes
    fmt  chunk    "fmt " 16 tag=1 channels rate byte_rate
                  block_align bits                               24 bytes
    data chunk    "data" <payload length> payload                 8 bytes + payload
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

import numpy as np
import scipy.io.wavfile as wav

HEADER_SIZE = 44
SAMPLE_RATE = 44100

# scipy picks the sample width from the array dtype
SAMPLE_DTYPES = {
	8: np.dtype(np.uint8),
	16: np.dtype('<i2'),
	32: np.dtype('<i4'),
}


@dataclass(frozen=True)
class PcmFormat:
	channels: int = 1
	sample_rate: int = SAMPLE_RATE
	bits_per_sample: int = 8

	@property
	def block_align(self) -> int:
		return self.channels * (self.bits_per_sample // 8)

	@property
	def byte_rate(self) -> int:
		return self.sample_rate * self.block_align


def _frames(data: bytes, fmt: PcmFormat) -> np.ndarray:
	if fmt.bits_per_sample not in SAMPLE_DTYPES:
		raise ValueError(f'unsupported bits per sample: {fmt.bits_per_sample}')
	if len(data) % fmt.block_align:
		raise ValueError(f'{len(data)} bytes is not a whole number of {fmt.block_align}-byte frames')

	samples = np.frombuffer(bytes(data), dtype=SAMPLE_DTYPES[fmt.bits_per_sample])
	if fmt.channels > 1:
		samples = samples.reshape(-1, fmt.channels)
	return samples


def encode_wav(data: bytes, fmt: PcmFormat = PcmFormat()) -> bytes:
	buffer = io.BytesIO()
	wav.write(buffer, fmt.sample_rate, _frames(data, fmt))
	return buffer.getvalue()


def write_wav(path: str | Path, data: bytes, fmt: PcmFormat = PcmFormat()) -> None:
	wav.write(path, fmt.sample_rate, _frames(data, fmt))


def read_wav(source: str | Path | BinaryIO) -> tuple[int, np.ndarray]:
	"""Parse a WAV file back into (sample_rate, samples)."""
	return wav.read(source)
