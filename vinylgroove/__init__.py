"""
Recover audio from a scanned image of a spiral-groove plate.

The groove geometry is estimated from the image, then the pixels along an
Archimedean spiral are read out as unsigned 8-bit samples.
"""

from .errors import NotTrackedError, SpiralNotFoundError, VinylError
from .geometry import Point, compute_center, find_start_x
from .plate import VinylPlate, override
from .raster import Raster
from .spiral import Extraction, ExtractionParameters, SpiralStep, extract_audio, samples_count, walk_spiral
from .wavpcm import PcmFormat, encode_wav, read_wav, write_wav

__version__ = '0.1.0'

__all__ = [
	'__version__',
	'Raster',
	'Point',
	'VinylPlate',
	'ExtractionParameters',
	'Extraction',
	'SpiralStep',
	'compute_center',
	'find_start_x',
	'extract_audio',
	'samples_count',
	'walk_spiral',
	'override',
	'PcmFormat',
	'encode_wav',
	'write_wav',
	'read_wav',
	'VinylError',
	'SpiralNotFoundError',
	'NotTrackedError',
]
