import logging
import numbers

import numpy as np

from numberrange import parser
from numberrange.exceptions import RangeFormatError, StoreSizeError
from numberrange.store import MemberStore, IntervalStore


class NumberRange(object):
    '''
    NumberRange takes a description of a range of integers and then lets you test if a number
    falls within it. You can also add to and delete from the range.

    >>> nr = NumberRange('!1..2,3..4,-10..-5')
    >>> print(nr.to_compact_string())
    !-10..-5,1..4
    >>> nr.is_negated()
    True
    >>> nr.in_range(4), nr.in_range(-5), nr.in_range(0)
    (True, True, False)

    Sections are separated by ',' or whitespace and spans are written with '..', much like Perl's
    own range operator. A span may also be written with a single dash, '1-10'.

    Spans wider than :attr:`max_store_size` are kept as bounds rather than enumerated:

    >>> nr = NumberRange('1..9999')
    >>> nr.in_range(99)
    True
    >>> len(nr.to_array())
    9999
    '''

    default_max_store_size = 1000

    def __init__(self, *ranges_inputs, max_store_size=default_max_store_size):
        '''
        Create a NumberRange from zero or more ranges inputs.

        :param ranges_inputs: strings such as '1..2,3..4', integers, or iterables of either
        :param max_store_size: optional, spans wider than this are stored as intervals rather than
            one integer at a time. Default 1000.
        :type max_store_size: number

        Only the very first input decides whether the range is negated:

        >>> NumberRange('N5', '!7').is_negated()
        Traceback (most recent call last):
        ...
        numberrange.exceptions.RangeFormatError: The string is not well-formed. '!7' has an unexpected character '!' (column 0)
        >>> print(NumberRange(['10..20', '25..30']))
        NumberRange('10..20,25..30')
        '''
        self._members = MemberStore()
        self._intervals = IntervalStore()
        self._max_store_size = NumberRange.default_max_store_size
        if self.set_max_store_size(max_store_size) is False:
            raise StoreSizeError("Expect max_store_size to be a positive number, not '{0}'".format(max_store_size))

        items = list(parser.iter_items(ranges_inputs))
        self._negated = False
        if items and isinstance(items[0], str):
            self._negated, items[0] = parser.split_negation(items[0])
        self._apply("add", items)

    @property
    def max_store_size(self):
        return self._max_store_size

    def set_max_store_size(self, size):
        '''
        Set the widest span that will be stored one integer at a time. Wider spans are stored as intervals.

        :param size: a positive number, or a string holding one
        :rtype: the new max_store_size, or False (and nothing changed) if *size* is not usable

        >>> nr = NumberRange('1')
        >>> nr.set_max_store_size('abc')
        False
        >>> nr.set_max_store_size('50')
        50
        '''
        value = size
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError:
                value = None
        if isinstance(value, bool) or not isinstance(value, numbers.Real) or not value > 0:
            logging.warning("Expect max_store_size to be a positive number, not '{0}', so leaving it at {1}".format(size, self._max_store_size))
            return False
        self._max_store_size = value
        return self._max_store_size

    def add_range(self, *ranges_inputs):
        '''
        Add zero or more ranges inputs.

        >>> nr = NumberRange('1..3')
        >>> nr.add_range('4-6', 10)
        >>> print(nr)
        NumberRange('1..6,10')
        '''
        self._apply("add", parser.iter_items(ranges_inputs))

    def del_range(self, *ranges_inputs):
        '''
        Delete zero or more ranges inputs.

        A value that is only covered by a span stored as an interval is not removed; an interval
        is only removed by deleting exactly the same span.

        >>> nr = NumberRange('1..10,5000..9000')
        >>> nr.del_range('2..4', 6000)
        >>> nr.in_range(3), nr.in_range(6000)
        (False, True)
        >>> nr.del_range('5000..9000')
        >>> print(nr)
        NumberRange('1,5..10')
        '''
        self._apply("del", parser.iter_items(ranges_inputs))

    def _apply(self, kind, items):
        if kind not in ("add", "del"):
            raise Exception("Neither 'add' nor 'del' was passed to _apply(), but '{0}'".format(kind))

        for start, last in parser.parse(items):
            if last - start > self._max_store_size:
                if kind == "add":
                    self._intervals.add(start, last)
                else:
                    self._intervals.discard(start, last)
            else:
                if kind == "add":
                    self._members.add(range(start, last + 1))
                else:
                    self._members.discard(range(start, last + 1))

    @staticmethod
    def _as_number(value):
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        raise RangeFormatError("Expect an integer or a string holding one, not '{0}'".format(value))

    def _contains(self, value):
        value = NumberRange._as_number(value)
        return value in self._members or self._intervals.covers(value)

    def in_range(self, *values):
        '''
        Test if numbers are in the range.

        With one number, returns True or False. With one list (or tuple or numpy array) of numbers,
        returns a list of results, one per number. With several numbers, returns True exactly when
        all of them are in the range. Numbers may be given as strings such as '3'; anything that is
        not an integer raises :class:`.RangeFormatError`.

        >>> nr = NumberRange('1..5')
        >>> nr.in_range(3)
        True
        >>> nr.in_range([0, 3, 6])
        [False, True, False]
        >>> nr.in_range(1, 2, 3), nr.in_range(1, 2, 30)
        (True, False)
        >>> nr.in_range('4')
        True
        '''
        if len(values) == 0:
            raise TypeError("in_range() expects at least one number")
        if len(values) == 1:
            value = values[0]
            if isinstance(value, (list, tuple, np.ndarray)):
                return [self._contains(each) for each in value]
            return self._contains(value)
        return all([self._contains(value) for value in values])

    def __contains__(self, value):
        return self._contains(value)

    def to_array(self):
        '''
        The integers in the range as a sorted numpy array without duplicates.

        If any value or span would not fit in a 64-bit integer, logs a warning and returns an empty array.

        >>> NumberRange('5,1..3,2').to_array().tolist()
        [1, 2, 3, 5]
        '''
        limits = np.iinfo(np.int64)
        if len(self._members) > 0 and (min(self._members) < limits.min or max(self._members) > limits.max):
            logging.warning("Range too large to return")
            return np.array([], dtype=np.int64)
        for start, last in self._intervals:
            if start < limits.min or last > limits.max or last - start >= limits.max:
                logging.warning("Range {0}..{1} too large to return".format(start, last))
                return np.array([], dtype=np.int64)

        arrays = [np.fromiter(self._members, dtype=np.int64, count=len(self._members))]
        for start, last in self._intervals:
            arrays.append(start + np.arange(last - start + 1, dtype=np.int64))
        return np.unique(np.concatenate(arrays))

    def to_compact_string(self):
        '''
        The range as a string, with runs of consecutive integers written 'first..last' and prefixed
        with '!' if the range is negated.

        >>> NumberRange('!7,1,2,3,5').to_compact_string()
        '!1..3,5,7'
        '''
        array = self.to_array()
        sections = []
        if len(array) > 0:
            breaks = np.flatnonzero(np.diff(array) != 1) + 1
            for run in np.split(array, breaks):
                if len(run) == 1:
                    sections.append(str(run[0]))
                else:
                    sections.append("{0}..{1}".format(run[0], run[-1]))
        negated = "!" if self._negated else ""
        return negated + ",".join(sections)

    def range(self, want_array=False):
        '''
        The range as an array (if *want_array*) or as a compact string.
        '''
        if want_array:
            return self.to_array()
        return self.to_compact_string()

    def size(self):
        '''
        The number of integers in the range.

        Spans stored as intervals are counted by their width, so this works even when
        :meth:`to_array` would be too large.

        >>> NumberRange('10..20', '25..30').size()
        17
        >>> NumberRange('1..9999', '5', '20000').size()
        10000
        '''
        return self._intervals.width() + self._intervals.count_uncovered(self._members)

    def __len__(self):
        return self.size()

    def __iter__(self):
        for value in self.to_array():
            yield int(value)

    def is_negated(self):
        return self._negated

    @property
    def negated(self):
        return self._negated

    def __str__(self):
        return repr(self)

    def __repr__(self):
        return "NumberRange('{0}')".format(self.to_compact_string())
