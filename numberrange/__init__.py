"""Tools for describing sets of integers with strings such as '1..2,3..4,-10..-5'"""

__version__ = '0.1'

from numberrange.exceptions import NumberRangeError, RangeFormatError, StoreSizeError
from numberrange.numberrange import NumberRange
