__version__ = '1.0.0'

from glbktx.batch import Batch
from glbktx.convert import ConversionError, Converter
