"""
Converts the GLB files of an assets directory to
KTX2/ETC1S compressed variants with gltf-transform.
Each model.glb is written to model-ktx.glb next to it.
Files that already carry the -ktx marker are skipped.
"""

import argparse
import logging
import pathlib

import glbktx
from glbktx import convert


logger = logging.getLogger(__name__)


def main(argv=None):

	parser = argparse.ArgumentParser(
		description=__doc__,
		formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument(
		'--version',
		action='version',
		version=glbktx.__version__)
	parser.add_argument(
		'--log',
		type=str,
		metavar='STR',
		choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
		default='WARNING',
		help='set log level to DEBUG,INFO,WARNING,ERROR,OFF (default: WARNING)')
	parser.add_argument(
		'--quality',
		type=int,
		metavar='INT',
		default=convert.QUALITY,
		help=f'ETC1S quality 1-255, lower = smaller files (default: {convert.QUALITY})')
	parser.add_argument(
		'--compression',
		type=int,
		metavar='INT',
		default=convert.COMPRESSION,
		help=f'compression level 0-5, higher = smaller and slower (default: {convert.COMPRESSION})')
	parser.add_argument(
		'--tool',
		type=str,
		metavar='STR',
		default=convert.TOOL,
		help=f'gltf-transform command (default: {convert.TOOL})')
	parser.add_argument('DIR', nargs='?', default='assets', help='assets directory (default: assets)')
	args = parser.parse_args(argv)

	if args.log != 'OFF':
		logging.basicConfig(format='%(levelname)s: %(message)s', level=args.log)

	try:
		directory = pathlib.Path(args.DIR).resolve()
		converter = glbktx.Converter(
			quality=args.quality,
			compression=args.compression,
			tool=args.tool,
			workDir=directory.parent)
		glbktx.Batch(directory, converter).run()
	except Exception as e:
		logger.error(e)
		raise SystemExit(1)


if __name__ == '__main__':
	main()
