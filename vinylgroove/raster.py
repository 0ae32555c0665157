"""Pixel raster: RGB image plus its per-pixel lightness."""

from __future__ import annotations

from pathlib import Path

import imageio.v3 as iio
import numpy as np


def _as_uint8(values) -> np.ndarray:
	values = np.asarray(values)
	if values.dtype == np.uint8:
		return values
	if not np.issubdtype(values.dtype, np.integer):
		raise ValueError(f'expected integer pixel values, got {values.dtype}')
	if values.size and (values.min() < 0 or values.max() > 255):
		raise ValueError(f'pixel values outside 0..255 in {values.dtype} array')
	return values.astype(np.uint8)


def _scale_to_8bit(image: np.ndarray) -> np.ndarray:
	# Scanners often save 16-bit; keep the high byte
	if image.dtype == np.uint8:
		return image
	if not np.issubdtype(image.dtype, np.unsignedinteger):
		raise ValueError(f'unsupported image sample type {image.dtype}')
	shift = np.iinfo(image.dtype).bits - 8
	return (image >> shift).astype(np.uint8)


class Raster:
	def __init__(self, rgb: np.ndarray):
		rgb = _as_uint8(rgb)
		if rgb.ndim != 3 or rgb.shape[2] != 3:
			raise ValueError(f'expected (height, width, 3) RGB array, got shape {rgb.shape}')

		self._rgb = rgb.copy()
		self._rgb.flags.writeable = False

		# HSL lightness, computed once
		wide = self._rgb.astype(np.uint16)
		lightness = (wide.max(axis=2) + wide.min(axis=2)) // 2
		self._lightness = lightness.astype(np.uint8)
		self._lightness.flags.writeable = False

	@classmethod
	def from_file(cls, path: str | Path) -> Raster:
		image = _scale_to_8bit(iio.imread(path))
		if image.ndim == 2:
			image = np.stack([image] * 3, axis=-1)
		elif image.shape[2] == 4:
			image = image[:, :, :3]		# drop alpha
		elif image.shape[2] == 2:
			image = np.stack([image[:, :, 0]] * 3, axis=-1)
		return cls(image)

	@classmethod
	def from_lightness(cls, lightness: np.ndarray) -> Raster:
		gray = _as_uint8(lightness)
		return cls(np.stack([gray] * 3, axis=-1))

	@property
	def width(self) -> int:
		return self._rgb.shape[1]

	@property
	def height(self) -> int:
		return self._rgb.shape[0]

	@property
	def lightness_map(self) -> np.ndarray:
		return self._lightness

	@property
	def rgb(self) -> np.ndarray:
		return self._rgb

	def contains(self, x: int, y: int) -> bool:
		return 0 <= x < self.width and 0 <= y < self.height

	def lightness(self, x: int, y: int) -> int:
		if not self.contains(x, y):
			raise IndexError(f'pixel ({x};{y}) outside {self.width}x{self.height} raster')
		return int(self._lightness[y, x])

	def row(self, y: int) -> np.ndarray:
		if not 0 <= y < self.height:
			raise IndexError(f'row {y} outside {self.width}x{self.height} raster')
		return self._lightness[y]

	def copy_rgb(self) -> np.ndarray:
		return self._rgb.copy()

	def __repr__(self) -> str:
		return f'Raster({self.width}x{self.height})'
