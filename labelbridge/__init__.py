"""
LP-50 Label Bridge

Prints labels on a DATECS LP-50 thermal printer from forms stored in printer
memory, filling the form variables from a CSV record.
"""

from .version import VERSION

__version__ = VERSION
