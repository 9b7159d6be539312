"""
Batch reference ET for tables of daily weather records.

Each row of the input DataFrame is an independent WeatherInput with
canonical column names. Rows that fail validation are reported in the
``error`` column instead of stopping the run, unless raise_errors is set.
"""

from collections import Counter
from typing import Optional

import numpy as np
import pandas as pd

from ..config.settings import COLUMNS, VALIDATION_RANGES
from ..core.models import WeatherInput
from ..utils.exceptions import InputError
from ..utils.logger import Logger, log_step
from ..utils.validation import check_et_range
from .calculator import CalculatorConfig, ReferenceETCalculator


def calculate_frame(
    df: pd.DataFrame,
    config: Optional[CalculatorConfig] = None,
    raise_errors: bool = False
) -> pd.DataFrame:
    """
    Calculate reference ET for every row of a weather table.

    Args:
        df: Weather records, one per row, with WeatherInput field names
            (a ``date`` column may stand in for ``day_of_year``)
        config: Optional calculator configuration
        raise_errors: Re-raise the first InputError instead of recording it

    Returns:
        DataFrame with the index of ``df`` and the columns et_short, et_tall,
        method, humidity_method, radiation_estimated and error
    """
    calculator = ReferenceETCalculator(config)
    rows = []
    methods = Counter()
    failures = 0

    with log_step(f"Computing reference ET for {len(df)} records"):
        for position, (index, row) in enumerate(df.iterrows(), start=1):
            try:
                weather = WeatherInput.from_mapping(row.to_dict())
                result = calculator.calculate(weather)
            except InputError as e:
                if raise_errors:
                    raise
                failures += 1
                Logger.debug(f"Row {index}: {type(e).__name__}: {e}")
                rows.append({
                    "et_short": np.nan,
                    "et_tall": np.nan,
                    "method": None,
                    "humidity_method": None,
                    "radiation_estimated": False,
                    "error": f"{type(e).__name__}: {e}",
                })
                continue

            methods[result.method_used.value] += 1
            rows.append({
                "et_short": result.et_short,
                "et_tall": np.nan if result.et_tall is None else result.et_tall,
                "method": result.method_used.value,
                "humidity_method": result.humidity_method.value if result.humidity_method else None,
                "radiation_estimated": result.radiation_estimated,
                "error": None,
            })

            if position % 1000 == 0:
                Logger.log_progress(position, len(df), "Reference ET")

    output = pd.DataFrame(rows, index=df.index, columns=COLUMNS["output"])

    Logger.info(f"Processed {len(df)} records: {dict(methods)}, {failures} failed")

    if len(df) > failures:
        _, max_et = VALIDATION_RANGES["et_daily"]
        is_valid, message = check_et_range(output["et_short"].to_numpy(dtype=float), max_et=max_et)
        if not is_valid:
            Logger.warning(message)

    return output
