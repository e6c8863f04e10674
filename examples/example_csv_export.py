"""
Example: Converting tabular data and exporting it as CSV text
"""

import pandas as pd

import formatkit
from formatkit import (
    ColumnFormatter,
    CsvOptions,
    Matrix,
    RecordSet,
    apply_formatters,
    arrays_to_data,
    data_as_csv,
)


def main():
    # Step 1: Load settings (FORMATKIT_CSV_* from .env, if present)
    formatkit.configure()
    options = CsvOptions.from_env()

    # Step 2: Convert a matrix into records
    matrix = [
        ["id", "name", "comment"],
        [1, "Ann", 'said "hi", then left'],
        [2, "Bo"],
    ]
    records = arrays_to_data(matrix)
    print(records)

    # Step 3: Serialize records and the matrix itself
    print(data_as_csv(RecordSet(records), options))
    print(data_as_csv(Matrix(matrix), options, delimiter=";"))

    # Step 4: Format DataFrame columns, then export
    df = pd.DataFrame({
        "started_at": pd.to_datetime(["2024-01-15 10:30", "2024-02-20 08:00"]),
        "revenue": [1234.5, 98765.4321],
        "elapsed_ms": [250, 3723000],
    })
    formatted = apply_formatters(df, [
        ColumnFormatter.number("revenue", decimals=2),
        ColumnFormatter.date("started_at", "%d.%m.%Y"),
        ColumnFormatter.duration("elapsed_ms"),
    ])
    print(data_as_csv(formatted, options))


if __name__ == "__main__":
    main()
