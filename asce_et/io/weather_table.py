"""Weather table reader and result writer.

This module reads daily weather records from CSV files that use the
package's canonical column names (the WeatherInput fields, optionally
with a ``date`` column in place of ``day_of_year``) and writes batch
results back to CSV.
"""

from pathlib import Path
from typing import Iterator, Optional, Union

import pandas as pd

from ..config.settings import COLUMNS
from ..core.models import WeatherInput
from ..utils.exceptions import DataInputError
from ..utils.logger import Logger


class WeatherTable:
    """
    Reader for daily weather tables.

    Attributes:
        df: pandas DataFrame containing weather data
        source: Path of the loaded file, if any

    Example:
        >>> table = WeatherTable()
        >>> table.load("data/greeley_2000.csv")
        >>> for weather in table.records():
        ...     print(weather.day_of_year)
    """

    REQUIRED_COLUMNS = COLUMNS["required"]
    DAY_COLUMNS = COLUMNS["day"]

    def __init__(self, df: Optional[pd.DataFrame] = None):
        """
        Initialize the WeatherTable.

        Args:
            df: Optional DataFrame already holding canonical columns
        """
        self.df: Optional[pd.DataFrame] = None
        self.source: Optional[Path] = None
        if df is not None:
            self._validate(df)
            self.df = df

    def _validate(self, df: pd.DataFrame, csv_path: Optional[Path] = None) -> None:
        missing_cols = set(self.REQUIRED_COLUMNS) - set(df.columns)
        if not any(col in df.columns for col in self.DAY_COLUMNS):
            missing_cols.add(self.DAY_COLUMNS[0])
        if missing_cols:
            raise DataInputError(
                f"Missing required columns: {sorted(missing_cols)}",
                file_path=str(csv_path) if csv_path else None,
                missing_columns=missing_cols
            )

    def load(self, csv_path: Union[str, Path]) -> 'WeatherTable':
        """
        Load weather data from CSV file.

        Args:
            csv_path: Path to the weather data CSV file

        Returns:
            self for method chaining

        Raises:
            DataInputError: If file doesn't exist, parsing fails or
                required columns are missing
        """
        csv_path = Path(csv_path)

        if not csv_path.exists():
            raise DataInputError(f"Weather data file not found: {csv_path}", file_path=str(csv_path))

        try:
            df = pd.read_csv(csv_path)
        except pd.errors.EmptyDataError:
            raise DataInputError(f"Weather data file is empty: {csv_path}", file_path=str(csv_path))
        except pd.errors.ParserError as e:
            raise DataInputError(f"Failed to parse weather data: {e}", file_path=str(csv_path))

        self._validate(df, csv_path)

        unknown = sorted(
            set(df.columns)
            - set(self.REQUIRED_COLUMNS) - set(self.DAY_COLUMNS) - set(COLUMNS["optional"])
        )
        if unknown:
            Logger.debug(f"Ignoring unknown columns in {csv_path.name}: {unknown}")

        self.df = df
        self.source = csv_path
        Logger.info(f"Loaded {len(df)} weather records from {csv_path}")
        return self

    def to_frame(self) -> pd.DataFrame:
        """
        Loaded weather data.

        Raises:
            DataInputError: If no data is loaded
        """
        if self.df is None:
            raise DataInputError("No data loaded. Call load() first.")
        return self.df

    def records(self) -> Iterator[WeatherInput]:
        """Yield one WeatherInput per row."""
        for _, row in self.to_frame().iterrows():
            yield WeatherInput.from_mapping(row.to_dict())

    def __len__(self) -> int:
        return 0 if self.df is None else len(self.df)

    @staticmethod
    def write_results(df: pd.DataFrame, output_path: Union[str, Path]) -> Path:
        """
        Write a results table to CSV.

        Args:
            df: Results DataFrame, usually weather columns joined with
                the batch output columns
            output_path: Destination CSV path; parent directories are created

        Returns:
            Path of the written file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False)
        Logger.info(f"Wrote {len(df)} records to {output_path}")
        return output_path


def read_weather_table(csv_path: Union[str, Path]) -> pd.DataFrame:
    """
    Convenience function to read a weather table.

    Args:
        csv_path: Path to weather data CSV

    Returns:
        DataFrame with canonical columns
    """
    return WeatherTable().load(csv_path).to_frame()
