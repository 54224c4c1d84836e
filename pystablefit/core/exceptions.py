"""
Exception hierarchy for PyStableFit.

Two families hang off PyStableFitError: ValidationError for bad inputs
or estimator configuration, caught before any computation, and
NumericalError for failures inside a kernel (singular systems, linear
programs without an optimum). Diagnostic values travel as attributes.
"""


class PyStableFitError(Exception):
    """Base exception for all PyStableFit errors."""
    pass


class ValidationError(PyStableFitError):
    """Inputs or tuning parameters rejected at the API boundary."""
    pass


class DimensionError(ValidationError):
    """Array shapes are wrong or disagree with each other."""
    pass


class ConfigurationError(ValidationError):
    """
    Estimator configuration is invalid.

    Raised at construction time when policy flags or hyperparameters
    violate an estimator's contract (e.g. normalizing without an
    intercept, a non-negative penalty exponent).

    Attributes:
        estimator: Name of the estimator being configured
        parameter: Name of the offending field, if a single one
    """

    def __init__(
        self,
        message: str,
        estimator: str | None = None,
        parameter: str | None = None
    ):
        super().__init__(message)
        self.estimator = estimator
        self.parameter = parameter


class NumericalError(PyStableFitError):
    """A kernel could not produce coefficients for valid inputs."""
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised by kernels that need an inverse (S⁻¹ in LSSVD, LU in LSLdiv)
    when none exists.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(n, p))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class LinearProgramError(NumericalError):
    """
    Linear program solver did not return an optimal solution.

    Raised when the external LP solver reports infeasibility,
    unboundedness, an iteration limit or numerical trouble. The solver's
    own status code and message are carried through unchanged.

    Attributes:
        status: Solver status code (scipy.optimize.linprog convention:
                1 iteration limit, 2 infeasible, 3 unbounded, 4 numerical)
        solver_message: The solver's message, verbatim
    """

    def __init__(
        self,
        message: str,
        status: int | None = None,
        solver_message: str | None = None
    ):
        super().__init__(message)
        self.status = status
        self.solver_message = solver_message

    @property
    def is_infeasible(self) -> bool:
        return self.status == 2

    @property
    def is_unbounded(self) -> bool:
        return self.status == 3
