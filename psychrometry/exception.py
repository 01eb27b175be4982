"""
Exceptions raised by psychrometric calculations.  All derive from
`PsychroError` so that callers can trap the whole family at once, and
also from the matching built-in exception (`ValueError` or
`RuntimeError`) so that generic handlers still work.
"""

# ======================================================================

class PsychroError(Exception):
    """
    Base class for errors raised by ``psychrometry``.  Additional
    information (optional) is included to allow the reason for the
    failure to be determined.
    """

    def __init__(self, *args, details: str = None, **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `Exception`.
        details : str, default = None
            Additional text relating to the specific failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments, e.g. the offending input value.
        """
        super().__init__(*args)
        self.details = details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


class InvalidInputError(PsychroError, ValueError):
    """
    Raised when an input violates a physical precondition, e.g. relative
    humidity outside [0, 1] or vapor pressure not below ambient pressure.
    """
    pass


class OutOfRangeError(PsychroError, ValueError):
    """
    Raised when an input lies outside the validated domain of an
    empirical correlation (e.g. saturation vapor pressure).
    """
    pass


class ConvergenceError(PsychroError, RuntimeError):
    """
    Raised when an iterative solver fails to converge.

    Notes
    -----
    Typical extra attributes are `flag` (a non-zero status code),
    `iterations` and `x` (the last trial point).
    """

    def __init__(self, *args, flag: int = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.flag = flag
