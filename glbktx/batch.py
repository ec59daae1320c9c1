import logging
import pathlib
import sys

from glbktx import sizes
from glbktx.convert import ConversionError


logger = logging.getLogger(__name__)


SUFFIX = '.glb'
MARKER = '-ktx'
RULE   = '=' * 50


def isCandidate(name):
	return name.endswith(SUFFIX) and MARKER not in name


def findCandidates(directory):
	# Raises if the directory does not exist
	names = [entry.name for entry in pathlib.Path(directory).iterdir()]
	return sorted(name for name in names if isCandidate(name))


def ktxPath(path):
	path = pathlib.Path(path)
	return path.with_name(f'{path.stem}{MARKER}{path.suffix}')


class Batch:
	"""
	Converts every candidate GLB file in a directory, one after another.

	Progress and summary are written to stream, per-file
	failures to errorStream. A failed file is reported and
	skipped; any other error propagates out of run().
	"""

	def __init__(self, directory, converter, stream=None, errorStream=None):
		self.directory           = pathlib.Path(directory)
		self.converter           = converter
		self.stream              = stream if stream is not None else sys.stdout
		self.errorStream         = errorStream if errorStream is not None else sys.stderr
		self.files               = []
		self.successCount        = 0
		self.totalOriginalSize   = 0
		self.totalCompressedSize = 0

	def run(self):
		self.printSettings()

		self.successCount        = 0
		self.totalOriginalSize   = 0
		self.totalCompressedSize = 0
		self.files = findCandidates(self.directory)
		if not self.files:
			self.write('No GLB files found to convert.')
			return True

		self.write(f'Found {len(self.files)} GLB file(s) to convert')
		self.write(RULE)

		for name in self.files:
			self.convertFile(name)

		self.printSummary()
		return self.successCount == len(self.files)

	def convertFile(self, name):
		inPath = self.directory / name
		outPath = ktxPath(inPath)
		inSize = sizes.fileSize(inPath)

		self.write(f'\nConverting: {inPath}')
		self.write(f'  Original size: {sizes.formatBytes(inSize)}')

		try:
			self.converter.convert(inPath, outPath)
		except ConversionError as e:
			logger.debug('Conversion of %s failed', name)
			print(f'  ✗ Error: {e}', file=self.errorStream)
			return False

		outSize = sizes.fileSize(outPath)
		self.write(f'  ✓ Compressed size: {sizes.formatBytes(outSize)}')
		self.write(f'  ✓ Savings: {sizes.savings(inSize, outSize):.1f}% smaller')

		self.successCount += 1
		self.totalOriginalSize += inSize
		self.totalCompressedSize += outSize
		return True

	def printSettings(self):
		converter = self.converter
		self.write('GLB to KTX2 Converter')
		self.write('=====================\n')
		self.write('Settings:')
		self.write(f'  - Quality: {converter.quality}/255 (lower = smaller files)')
		self.write(f'  - Compression: {converter.compression}/5 (higher = better compression)')
		self.write(f'  - Max texture size: {converter.maxTextureSize}px\n')
		logger.info('Max texture size is displayed only, it is not passed to the converter')

	def printSummary(self):
		self.write('\n' + RULE)
		self.write('Conversion Summary')
		self.write(RULE)
		self.write(f'Successfully converted: {self.successCount}/{len(self.files)} files')

		if self.successCount > 0:
			original = self.totalOriginalSize
			compressed = self.totalCompressedSize
			self.write(f'Total original size: {sizes.formatBytes(original)}')
			self.write(f'Total compressed size: {sizes.formatBytes(compressed)}')
			self.write(
				f'Total savings: {sizes.savings(original, compressed):.1f}% '
				f'({sizes.formatBytes(original - compressed)} saved)')

		self.write('\nConversion complete!')

	def write(self, text):
		print(text, file=self.stream)
