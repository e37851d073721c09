"""
Exception hierarchy for rcbdstats.

All exceptions inherit from RCBDStatsError to allow catching any
library-specific error. Domain-specific exceptions inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class RCBDStatsError(Exception):
    """Base exception for all rcbdstats errors."""
    pass


class ValidationError(RCBDStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class EmptyPartitionError(ValidationError):
    """
    A requested grouping has zero observations.

    Attributes:
        partition: Label of the empty block, treatment, or cell
    """

    def __init__(self, message: str, partition: object = None):
        super().__init__(message)
        self.partition = partition


class InsufficientDataError(ValidationError):
    """
    Too few observations for the requested statistic.

    Attributes:
        n: Number of observations available
        required: Minimum number of observations needed
    """

    def __init__(self, message: str, n: int | None = None, required: int | None = None):
        super().__init__(message)
        self.n = n
        self.required = required


class UnbalancedDesignError(ValidationError):
    """
    Replication counts differ across block x treatment cells.

    Attributes:
        expected_r: Replication count taken from the first cell
        cell_counts: {(block, treatment): count} for every cell
    """

    def __init__(
        self,
        message: str,
        expected_r: int | None = None,
        cell_counts: dict | None = None,
    ):
        super().__init__(message)
        self.expected_r = expected_r
        self.cell_counts = cell_counts


class InvalidDegreesOfFreedomError(ValidationError):
    """
    Degrees of freedom passed to an F distribution are not positive.

    Attributes:
        df1: Numerator degrees of freedom
        df2: Denominator degrees of freedom
    """

    def __init__(self, message: str, df1: float | None = None, df2: float | None = None):
        super().__init__(message)
        self.df1 = df1
        self.df2 = df2


class NumericalError(RCBDStatsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateDesignError(NumericalError):
    """
    Error mean square is zero, so F ratios are undefined.

    Raised when the design has no replication (df_error == 0) or every
    replicate equals its cell mean (ss_error == 0).

    Attributes:
        df_error: Error degrees of freedom
        ms_error: Error mean square, if it could be computed
    """

    def __init__(
        self,
        message: str,
        df_error: int | None = None,
        ms_error: float | None = None,
    ):
        super().__init__(message)
        self.df_error = df_error
        self.ms_error = ms_error


class PrerequisiteMissingError(RCBDStatsError):
    """
    A pipeline stage was invoked before the output it depends on exists.

    Attributes:
        missing: Name of the missing input (e.g. 'sums_of_squares')
    """

    def __init__(self, message: str, missing: str | None = None):
        super().__init__(message)
        self.missing = missing
