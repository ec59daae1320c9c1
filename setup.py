import pathlib
import setuptools


def readVersion(relativePath):
	path = pathlib.Path(__file__).parent / relativePath
	with open(path) as stream:
		for line in stream:
			if line.startswith('__version__'):
				return line.replace('"', "'").split("'")[1]
		raise RuntimeError('Could not find version string')


setuptools.setup(
	name='glbktx',
	version=readVersion('glbktx/__init__.py'),
	description='Compresses GLB model textures to KTX2/ETC1S with gltf-transform',

	packages=['glbktx'],
	entry_points={'console_scripts': ['glbktx=glbktx.__main__:main']},
	extras_require={'test': ['pytest']},
	python_requires='>=3.8',
)
