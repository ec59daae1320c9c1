import subprocess

import pytest


class FakeTool:
	"""Stands in for subprocess.run, writing outputs of a fixed size."""

	def __init__(self, outputSize=200, failing=()):
		self.outputSize = outputSize
		self.failing    = set(failing)
		self.commands   = []

	def __call__(self, command, **kwargs):
		self.commands.append(command)
		inPath, outPath = command[-6], command[-5]
		if inPath.endswith(tuple(self.failing)):
			raise subprocess.CalledProcessError(1, command, output='', stderr='Error: bad texture')
		with open(outPath, 'wb') as stream:
			stream.write(b'\0' * self.outputSize)
		return subprocess.CompletedProcess(command, 0, stdout='', stderr='')


@pytest.fixture
def assets(tmp_path):
	directory = tmp_path / 'assets'
	directory.mkdir()
	return directory


@pytest.fixture
def fakeTool():
	return FakeTool
