class NumberRangeError(Exception):
    """Base class for the errors raised by numberrange."""
    pass


class RangeFormatError(NumberRangeError):
    '''
    Raised when a ranges input is not well-formed.

    :param message: what is wrong with the input
    :type message: string
    :param text: optional, the (already dash-normalized) item being parsed
    :type text: string
    :param column: optional, zero-based position of the problem within *text*
    :type column: int
    '''
    def __init__(self, message, text=None, column=None):
        self.text = text
        self.column = column
        if text is not None:
            message = "The string is not well-formed. '{0}' {1} (column {2})".format(text, message, column)
        super(RangeFormatError, self).__init__(message)


class StoreSizeError(NumberRangeError):
    """Raised when a NumberRange is constructed with an unusable max_store_size."""
    pass
