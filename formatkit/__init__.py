"""
Formatkit - small data-formatting helpers for tabular and scalar values.
"""

import sys
from typing import Any, Optional
from pathlib import Path
from dotenv import load_dotenv

from .shared import (
    DuplicateFieldError,
    EmptyHeaderError,
    EmptyInputError,
    InconsistentSchemaError,
    Matrix,
    RecordSet,
    SchemaMismatchError,
    ShapeMismatchError,
    TabularError,
)
from .transformers import (
    TabularTransformer,
    arrays_to_data,
    data_to_arrays,
    dataframe_to_records,
    records_to_dataframe,
)
from .formatters import (
    ColumnFormatter,
    CsvOptions,
    apply_formatters,
    camel_case,
    capitalize,
    data_as_csv,
    format_date,
    format_number,
    matrix_as_csv,
    pretty_duration,
    records_as_csv,
    round_number,
)

__version__ = "0.1.0"

# Global configuration state
_config = {
    "verbose": False,
}


def _exception_handler(
    exc_type: type, exc_value: BaseException, exc_traceback: Any
) -> None:
    """
    Custom exception handler that prints only the error message when verbose=False.

    Args:
        exc_type: The exception class.
        exc_value: The exception instance.
        exc_traceback: The traceback object.
    """
    if _config["verbose"]:
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
    else:
        print(f"{exc_type.__name__}: {exc_value}")


def configure(
    env_file_path: Optional[str] = None,
    verbose: bool = False,
) -> bool:
    """
    Configure the Formatkit library.

    Loads environment variables from a .env file, so that
    CsvOptions.from_env() can pick up FORMATKIT_CSV_* settings, and sets how
    uncaught exceptions are reported.

    Args:
        env_file_path (str, optional): Path to the .env file. If None, searches for
            .env in the current directory and parent directories.
        verbose (bool): If True, show full exception tracebacks. If False (default),
            show only the error message for cleaner output.

    Returns:
        bool: True if a .env file was found and loaded, False otherwise.
    """
    _config["verbose"] = verbose
    sys.excepthook = _exception_handler

    if env_file_path:
        env_file = Path(env_file_path)
        if not env_file.exists():
            return False
        return load_dotenv(dotenv_path=env_file)

    return load_dotenv()


__all__ = [
    "configure",
    "__version__",
    # Tabular conversion
    "arrays_to_data",
    "data_to_arrays",
    "dataframe_to_records",
    "records_to_dataframe",
    "TabularTransformer",
    # CSV
    "CsvOptions",
    "data_as_csv",
    "matrix_as_csv",
    "records_as_csv",
    "Matrix",
    "RecordSet",
    # Scalar formatting
    "format_date",
    "format_number",
    "round_number",
    "pretty_duration",
    "capitalize",
    "camel_case",
    "ColumnFormatter",
    "apply_formatters",
    # Errors
    "TabularError",
    "EmptyHeaderError",
    "ShapeMismatchError",
    "DuplicateFieldError",
    "InconsistentSchemaError",
    "SchemaMismatchError",
    "EmptyInputError",
]
