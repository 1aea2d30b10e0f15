'''
Turns ranges inputs such as ``'1..2,3..4,-10..-5'`` into ``(start, last)`` sections.

A string is first dash-normalized, then tokenized, then run through a small state
machine that enforces the grammar::

    ranges   := section (sectsep section)*
    section  := value | value ".." value
    value    := ["-"] digit+
    sectsep  := ("," | whitespace)+

>>> list(sections('1..2,3..4 -10..-5'))
[(1, 2), (3, 4), (-10, -5)]
'''

import re
import string
import logging
import numbers

from numberrange.exceptions import RangeFormatError

NUMBER = "number"
RANGESEP = "rangesep"
SECTSEP = "sectsep"

_dashed_range = re.compile(r"(-?\d+)-(-?\d+)")
_digits = "0123456789"
_sectseps = "," + string.whitespace
_negation_markers = "!Nn"

# state machine over tokens: (state, token kind) -> next state
_transitions = {
    ("begin", NUMBER): "start",
    ("start", RANGESEP): "rangesep",
    ("start", SECTSEP): "sectsep",
    ("rangesep", NUMBER): "last",
    ("last", SECTSEP): "sectsep",
    ("sectsep", NUMBER): "start",
}
_complaints = {
    ("begin", SECTSEP): "starts with a separator",
    ("begin", RANGESEP): "starts with '..'",
    ("sectsep", RANGESEP): "has '..' right after a separator",
    ("rangesep", SECTSEP): "has a separator right after '..'",
    ("last", RANGESEP): "has more than one '..' in a section",
}
_final_complaints = {
    "rangesep": "ends with '..'",
    "sectsep": "ends with a separator",
}


def clean_dashed_range(text):
    '''
    Convert the range format "1-10" to "1..10". Either end may be negative.

    >>> clean_dashed_range('1-10,-5--3,20')
    '1..10,-5..-3,20'
    '''
    return _dashed_range.sub(r"\1..\2", text)


def split_negation(text):
    '''
    Strip a leading negation marker ('!', 'N' or 'n') from a string.

    :rtype: tuple of (negated, text without the marker)

    >>> split_negation('!1..2')
    (True, '1..2')
    >>> split_negation('1..2')
    (False, '1..2')
    '''
    if text[:1] and text[0] in _negation_markers:
        return True, text[1:]
    return False, text


def iter_items(ranges_inputs):
    '''
    Flatten ranges inputs, in order, into strings and ints.

    Strings are dash-normalized, numpy integers become ints and None is skipped.

    >>> list(iter_items(['1-3', (5, None, ['7..9'])]))
    ['1..3', 5, '7..9']
    '''
    for ranges_input in ranges_inputs:
        if ranges_input is None:
            pass
        elif isinstance(ranges_input, str):
            yield clean_dashed_range(ranges_input)
        elif isinstance(ranges_input, numbers.Integral):
            yield int(ranges_input)
        elif hasattr(ranges_input, '__iter__'):
            for item in iter_items(ranges_input):
                yield item
        else:
            raise RangeFormatError("Don't know how to read a range from '{0}'".format(ranges_input))


def tokenize(text):
    '''
    Split a dash-normalized string into (kind, token, column) tuples.

    >>> for token in tokenize('-3..4, 7'):
    ...     print(token)
    ('number', '-3', 0)
    ('rangesep', '..', 2)
    ('number', '4', 4)
    ('sectsep', ', ', 5)
    ('number', '7', 7)
    '''
    column = 0
    length = len(text)
    while column < length:
        char = text[column]
        begin = column
        if char in _sectseps:
            while column < length and text[column] in _sectseps:
                column += 1
            yield SECTSEP, text[begin:column], begin
        elif char == ".":
            if text.startswith("...", column) or not text.startswith("..", column):
                raise RangeFormatError("has a '.' that is not part of '..'", text, column)
            column += 2
            yield RANGESEP, "..", begin
        elif char == "-" or char in _digits:
            if char == "-":
                if column > 0 and text[column - 1] in _digits:
                    raise RangeFormatError("has a '-' between digits", text, column)
                column += 1
                if column == length or text[column] not in _digits:
                    raise RangeFormatError("has a '-' that is not followed by a digit", text, begin)
            while column < length and text[column] in _digits:
                column += 1
            yield NUMBER, text[begin:column], begin
        else:
            raise RangeFormatError("has an unexpected character '{0}'".format(char), text, column)


def sections(text):
    '''
    Validate a dash-normalized string and yield its sections as (start, last) tuples.

    A single value yields (value, value). A span written backwards is swapped and a
    span whose ends are equal becomes a single value; both are logged, neither is an error.

    >>> list(sections('5,9..7,3..3'))
    [(5, 5), (7, 9), (3, 3)]
    >>> list(sections('1..'))
    Traceback (most recent call last):
    ...
    numberrange.exceptions.RangeFormatError: The string is not well-formed. '1..' ends with '..' (column 3)
    '''
    state = "begin"
    start = last = None
    for kind, token, column in tokenize(text):
        next_state = _transitions.get((state, kind))
        if next_state is None:
            raise RangeFormatError(_complaints.get((state, kind), "is not well-formed"), text, column)
        if next_state == "start":
            start = int(token)
        elif next_state == "last":
            last = int(token)
        elif next_state == "sectsep":
            yield _section(start, last)
            start = last = None
        state = next_state

    if state in _final_complaints:
        raise RangeFormatError(_final_complaints[state], text, len(text))
    if state != "begin":
        yield _section(start, last)


def _section(start, last):
    if last is None:
        return start, start
    if start > last:
        logging.warning("{0} is > {1}, so swapping them".format(start, last))
        start, last = last, start
    elif start == last:
        logging.info("{0}..{1} is pointless, so treating it as {0}".format(start, last))
    return start, last


def parse(items):
    '''
    Turn flattened items (see :func:`iter_items`) into a list of (start, last) sections.

    The whole input is validated before anything is returned.

    >>> parse(['10..20', 25, '30 31'])
    [(10, 20), (25, 25), (30, 30), (31, 31)]
    '''
    result = []
    for item in items:
        if isinstance(item, str):
            result.extend(sections(item))
        else:
            result.append((item, item))
    return result
