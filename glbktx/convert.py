import logging
import shlex
import subprocess


logger = logging.getLogger(__name__)


QUALITY          = 128   # 1-255, lower = smaller files
COMPRESSION      = 5     # 0-5, higher = better compression (slower)
MAX_TEXTURE_SIZE = 4096  # Maximum texture dimension
TOOL             = 'npx gltf-transform'


class ConversionError(Exception):
	pass


class Converter:
	"""
	Runs the gltf-transform ETC1S command on a single GLB file.
	The tool is opaque: only its exit status matters here.
	"""

	def __init__(self, quality=QUALITY, compression=COMPRESSION,
			maxTextureSize=MAX_TEXTURE_SIZE, tool=TOOL, workDir=None):

		if not 1 <= quality <= 255:
			raise ValueError(f'Quality must be within 1-255: {quality}')
		if not 0 <= compression <= 5:
			raise ValueError(f'Compression must be within 0-5: {compression}')

		self.quality        = quality
		self.compression    = compression
		self.maxTextureSize = maxTextureSize
		self.tool           = shlex.split(tool)
		self.workDir        = workDir

		if not self.tool:
			raise ValueError('Tool command must not be empty')

	def command(self, inPath, outPath):
		# NOTE: maxTextureSize is not part of the command
		return self.tool + [
			'etc1s', str(inPath), str(outPath),
			'--quality', str(self.quality),
			'--compression', str(self.compression)]

	def convert(self, inPath, outPath):
		command = self.command(inPath, outPath)
		logger.debug('Running: %s', shlex.join(command))

		try:
			result = subprocess.run(
				command,
				cwd=self.workDir,
				capture_output=True,
				text=True,
				errors='replace',
				check=True)
		except subprocess.CalledProcessError as e:
			logger.debug('Tool output:\n%s%s', e.stdout or '', e.stderr or '')
			message = f'Command failed with exit code {e.returncode}: {shlex.join(command)}'
			stderr = (e.stderr or '').strip()
			if stderr:
				message += '\n' + stderr
			raise ConversionError(message) from e
		except OSError as e:
			raise ConversionError(f'Could not run {command[0]}: {e}') from e

		if result.stdout:
			logger.debug('Tool output:\n%s', result.stdout)
