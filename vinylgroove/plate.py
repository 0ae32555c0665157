from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path

from . import geometry
from .geometry import Point
from .raster import Raster
from .spiral import Extraction, ExtractionParameters, extract_audio

log = logging.getLogger(__name__)


class VinylPlate:
	"""
	Groove geometry of one scanned plate.

	All estimates are made once on construction, in dependency order: center
	first (the other estimators read the scanline through it), then track
	width, which gap width and spin count are both derived from.
	"""

	RPM = 120

	def __init__(self, raster: Raster, rpm: float = RPM):
		self.raster = raster
		self.rpm = rpm

		# Find center
		self.center = geometry.compute_center(raster)

		self.track_width = geometry.average_track_width(raster, self.center)
		self.gap_width = geometry.average_gap_width(raster, self.track_width, self.center)

		crossings = geometry.possible_spin_count(raster, self.track_width, self.center)
		self.spin_count = geometry.spin_count(crossings)

		self.duration = timedelta(minutes=self.spin_count / rpm)

		log.debug('plate %r: center=%s track=%.3f gap=%.3f spins=%d',
			raster, self.center, self.track_width, self.gap_width, self.spin_count)

	@classmethod
	def from_file(cls, path: str | Path, rpm: float = RPM) -> VinylPlate:
		return cls(Raster.from_file(path), rpm=rpm)

	def parameters(self) -> ExtractionParameters:
		return ExtractionParameters(
			center=self.center,
			track_width=self.track_width,
			gap_width=self.gap_width,
		)

	def extract(self, parameters: ExtractionParameters | None = None, track: bool = False) -> Extraction:
		"""
		Sample the groove into 8-bit audio.

		`parameters` overrides center and pitch for this call only. Set `track`
		to get an overlay of the visited pixels back with the samples.
		"""
		if parameters is None:
			parameters = self.parameters()
		return extract_audio(self.raster, self.track_width, self.spin_count, parameters, track=track)

	def __repr__(self) -> str:
		return (f'VinylPlate(center={self.center}, track_width={self.track_width:.2f}, '
			f'gap_width={self.gap_width:.2f}, spin_count={self.spin_count})')


def override(plate: VinylPlate, center: Point | None = None,
		track_width: float | None = None, gap_width: float | None = None) -> ExtractionParameters:
	"""Plate estimates with any given values substituted."""
	parameters = plate.parameters()
	if center is not None:
		parameters.center = center
	if track_width is not None:
		parameters.track_width = track_width
	if gap_width is not None:
		parameters.gap_width = gap_width
	return parameters
