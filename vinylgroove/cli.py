from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import imageio.v3 as iio
import matplotlib.pyplot as plt

from .errors import VinylError
from .geometry import Point
from .plate import VinylPlate, override
from .wavpcm import SAMPLE_RATE, PcmFormat, write_wav

OUTPUT_FILE = 'Result.wav'


def build_parser() -> argparse.ArgumentParser:
	ap = argparse.ArgumentParser(prog='vinylgroove', description='Play back a scanned vinyl plate image as 8-bit WAV.')
	ap.add_argument('input', type=Path, help='plate image')
	ap.add_argument('-o', '--output', type=Path, default=Path(OUTPUT_FILE))
	ap.add_argument('--rpm', type=float, default=VinylPlate.RPM, help='plate rotation speed (default: %(default)s)')
	ap.add_argument('--sample-rate', type=int, default=SAMPLE_RATE, help='WAV sample rate (default: %(default)s)')
	ap.add_argument('--center', type=int, nargs=2, metavar=('X', 'Y'), help='override estimated center')
	ap.add_argument('--track-width', type=float, help='override estimated track width')
	ap.add_argument('--gap-width', type=float, help='override estimated gap width')
	ap.add_argument('--track-out', type=Path, help='save the visited-pixel overlay to this image')
	ap.add_argument('--show-track', action='store_true', help='plot the visited-pixel overlay')
	ap.add_argument('-v', '--verbose', action='store_true')
	return ap


def main(argv: list[str] | None = None) -> int:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format='%(asctime)s %(levelname)s %(name)s: %(message)s',
	)

	plate = VinylPlate.from_file(args.input, rpm=args.rpm)
	print(f'Center: {plate.center}')
	print(f'Track width: {plate.track_width:.2f} px, gap width: {plate.gap_width:.2f} px')
	print(f'Spins: {plate.spin_count}, duration: {plate.duration}')

	parameters = override(
		plate,
		center=Point(*args.center) if args.center else None,
		track_width=args.track_width,
		gap_width=args.gap_width,
	)

	track = args.show_track or args.track_out is not None
	try:
		extraction = plate.extract(parameters, track=track)
	except VinylError as e:
		print(f'error: {e}', file=sys.stderr)
		return 1

	write_wav(args.output, extraction.samples, PcmFormat(sample_rate=args.sample_rate))
	print(f'Wrote {len(extraction)} samples to {args.output}')

	if args.track_out is not None:
		iio.imwrite(args.track_out, extraction.track)

	if args.show_track:
		plt.figure()
		plt.imshow(extraction.track)
		plt.title(f'{args.input.name}: spiral track')
		plt.show()

	return 0


if __name__ == '__main__':
	raise SystemExit(main())
