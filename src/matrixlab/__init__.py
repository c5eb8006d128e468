"""Dense row-major matrices with statistics, inversion and magic squares."""

from importlib import metadata

from .arithmetic import (
    add,
    divide,
    divide_scalar,
    equal_to,
    greater_equal,
    greater_than,
    less_equal,
    less_than,
    matmul,
    negate,
    not_equal_to,
    scale,
    subtract,
)
from .config import ParallelSettings, load_parallel_settings
from .elementwise import (
    element_abs,
    element_add,
    element_divide,
    element_exp,
    element_log,
    element_map,
    element_multiply,
    element_operation,
    element_power,
    element_sqrt,
    element_subtract,
)
from .errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    MatrixError,
    NonInvertibleError,
    NotSquareError,
    NullOperandError,
)
from .interop import from_numpy, to_frame, to_numpy
from .inversion import inverse
from .magic import is_magic, magic, magic_constant
from .matrix import Dimension, Matrix
from .reduction import (
    iqr,
    max_index,
    maximum,
    mean,
    mean_square,
    median,
    min_index,
    minimum,
    mode,
    quartile1,
    quartile3,
    reduce_dimension,
    standard_deviation,
    statistical_reduce,
    total,
    value_range,
    variance,
)
from .regression import (
    FeatureScaling,
    compute_cost,
    feature_normalization,
    gradient_descent,
    normal_equation,
    sigmoid,
)
from .structural import (
    add_identity_column,
    expand_polynomials,
    get_column,
    get_row,
    join,
    remove_column,
    reshape,
    set_row,
    swap_rows,
)
from .transpose import multiply_by_transpose, multiply_transpose_by, transpose, unrolled

__all__ = [
    "Dimension",
    "DimensionMismatchError",
    "FeatureScaling",
    "IndexOutOfRangeError",
    "InvalidDimensionError",
    "Matrix",
    "MatrixError",
    "NonInvertibleError",
    "NotSquareError",
    "NullOperandError",
    "ParallelSettings",
    "__version__",
    "add",
    "add_identity_column",
    "compute_cost",
    "divide",
    "divide_scalar",
    "element_abs",
    "element_add",
    "element_divide",
    "element_exp",
    "element_log",
    "element_map",
    "element_multiply",
    "element_operation",
    "element_power",
    "element_sqrt",
    "element_subtract",
    "equal_to",
    "expand_polynomials",
    "feature_normalization",
    "from_numpy",
    "get_column",
    "get_row",
    "gradient_descent",
    "greater_equal",
    "greater_than",
    "inverse",
    "iqr",
    "is_magic",
    "join",
    "less_equal",
    "less_than",
    "load_parallel_settings",
    "magic",
    "magic_constant",
    "matmul",
    "max_index",
    "maximum",
    "mean",
    "mean_square",
    "median",
    "min_index",
    "minimum",
    "mode",
    "multiply_by_transpose",
    "multiply_transpose_by",
    "negate",
    "normal_equation",
    "not_equal_to",
    "quartile1",
    "quartile3",
    "reduce_dimension",
    "remove_column",
    "reshape",
    "scale",
    "set_row",
    "sigmoid",
    "standard_deviation",
    "statistical_reduce",
    "subtract",
    "swap_rows",
    "to_frame",
    "to_numpy",
    "total",
    "transpose",
    "unrolled",
    "value_range",
    "variance",
]


def __getattr__(name: str):
    if name == "__version__":
        try:
            return metadata.version("matrixlab")
        except metadata.PackageNotFoundError:  # pragma: no cover - best effort
            return "0"
    raise AttributeError(name)
