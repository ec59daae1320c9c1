import pathlib


UNITS = ['Bytes', 'KB', 'MB', 'GB']


def fileSize(path):
	try:
		return pathlib.Path(path).stat().st_size
	except OSError:
		return 0


def formatBytes(size):
	if size == 0:
		return '0 Bytes'
	if size < 0:
		return '-' + formatBytes(-size)

	# floor(log1024(size)), capped at the largest unit
	index = 0
	while index < len(UNITS) - 1 and size >= 1024**(index + 1):
		index += 1

	value = f'{size / 1024**index:.2f}'.rstrip('0').rstrip('.')
	return f'{value} {UNITS[index]}'


def savings(original, compressed):
	if original == 0:
		return 0.0
	return round((1 - compressed / original) * 100, 1)
