from bisect import bisect_right


class MemberStore(object):
    '''
    The small-set store: integers held one by one.

    >>> store = MemberStore()
    >>> store.add(range(3, 6))
    >>> store.discard([4, 100])
    >>> sorted(store)
    [3, 5]
    '''
    def __init__(self):
        self._members = set()

    def add(self, numbers):
        self._members.update(numbers)

    def discard(self, numbers):
        self._members.difference_update(numbers)

    def __contains__(self, value):
        return value in self._members

    def __iter__(self):
        return iter(self._members)

    def __len__(self):
        return len(self._members)


class IntervalStore(object):
    '''
    The large-interval store: spans too wide to enumerate, kept as (start, last) bounds
    keyed by "start..last". Intervals may overlap each other and may overlap a :class:`MemberStore`.

    Removal only ever drops an interval with exactly the same bounds.

    >>> store = IntervalStore()
    >>> store.add(1, 5000)
    >>> store.add(4000, 9000)
    >>> store.covers(8999), store.covers(9001)
    (True, False)
    >>> store.merged()
    [(1, 9000)]
    >>> store.discard(1, 4999) #not stored, so nothing happens
    >>> len(store)
    2
    '''
    def __init__(self):
        self._intervals = {}

    @staticmethod
    def interval_id(start, last):
        return "{0}..{1}".format(start, last)

    def add(self, start, last):
        assert start <= last, "Invalid range. Start " + str(start) + " must be no greater than last " + str(last) + "."
        self._intervals[IntervalStore.interval_id(start, last)] = (start, last)

    def discard(self, start, last):
        self._intervals.pop(IntervalStore.interval_id(start, last), None)

    def covers(self, value):
        for start, last in self._intervals.values():
            if start <= value <= last:
                return True
        return False

    def __iter__(self):
        '''
        Iterate the stored (start, last) tuples in order of start.
        '''
        return iter(sorted(self._intervals.values()))

    def __len__(self):
        return len(self._intervals)

    def merged(self):
        '''
        The stored intervals, sorted, with overlapping and adjacent ones gathered together.
        '''
        result = []
        for start, last in self:
            if result and start <= result[-1][1] + 1:
                if last > result[-1][1]:
                    result[-1] = (result[-1][0], last)
            else:
                result.append((start, last))
        return result

    def width(self):
        '''
        The number of distinct integers covered by the intervals, computed without expanding them.
        '''
        return sum(last - start + 1 for start, last in self.merged())

    def count_uncovered(self, values):
        '''
        How many of *values* fall outside every interval.

        >>> store = IntervalStore()
        >>> store.add(10, 20)
        >>> store.count_uncovered([9, 10, 20, 21])
        2
        '''
        merged = self.merged()
        starts = [start for start, _ in merged]
        count = 0
        for value in values:
            index = bisect_right(starts, value) - 1
            if index < 0 or value > merged[index][1]:
                count += 1
        return count
