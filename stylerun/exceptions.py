# exceptions.py

class StyleRunError(Exception):
    """Base class for errors raised by stylerun."""


class InvariantError(StyleRunError):
    """
    An internal offset computation produced an impossible range.

    Raised when a result is assembled with a range that starts after it ends
    or reaches outside the content buffer. This is never caused by caller
    input; treat it as a bug.
    """
