"""Output writers called once per completed time step."""

from .base_writer import OutputWriter
from .hdf5_writer import OutputWriterHDF5
from .text_writer import OutputWriterText

__all__ = ["OutputWriter", "OutputWriterHDF5", "OutputWriterText"]
