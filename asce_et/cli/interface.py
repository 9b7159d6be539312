"""
ASCE Reference ET CLI Interface

Command-line interface for daily reference evapotranspiration.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
import pandas as pd

from ..config.settings import LOGGING, load_config as load_calculator_config
from ..core.models import Method, ReferenceSurface, WeatherInput
from ..et.batch import calculate_frame
from ..et.calculator import ReferenceETCalculator
from ..io.weather_table import WeatherTable
from ..utils.conversions import (
    day_of_year,
    fahrenheit_to_celsius,
    feet_to_meters,
    langley_to_mj,
    mph_to_mps,
)
from ..utils.exceptions import ConfigurationError, DataInputError, InputError
from ..utils.logger import Logger
from .. import __version__

# Exit status for invalid weather input
INPUT_ERROR_EXIT_CODE = 2


# ============================================================================
# Utility Functions
# ============================================================================

def validate_date(ctx, param, value):
    """Validate date format YYYY-MM-DD."""
    if value is None:
        return None
    try:
        return datetime.strptime(value, '%Y-%m-%d')
    except ValueError:
        raise click.BadParameter(
            f'Invalid date format: {value}. Use YYYY-MM-DD format.',
            ctx=ctx,
            param=param
        )


def load_config(config_path: Optional[Path] = None):
    """Load calculator configuration from YAML or JSON file."""
    if config_path is None:
        return None

    try:
        return load_calculator_config(config_path)
    except ConfigurationError as e:
        raise click.ClickException(f'Error loading config: {e}')


def fail_on_input_error(ctx, error: InputError) -> None:
    """Report an invalid weather input and exit with status 2."""
    click.secho(f'Error: {error}', fg='red', err=True)
    ctx.exit(INPUT_ERROR_EXIT_CODE)


def _convert(value, converter):
    return None if value is None else converter(value)


# ============================================================================
# Main Command Group
# ============================================================================

@click.group()
@click.option('--verbose', '-v', is_flag=True, default=False, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(path_type=Path), help='Custom log file path')
@click.option('--config', type=click.Path(exists=True, path_type=Path), help='Configuration file path (YAML or JSON)')
@click.version_option(version=__version__, prog_name='ASCE Reference ET')
@click.pass_context
def cli(ctx, verbose, log_file, config):
    """
    ASCE Reference ET - daily reference evapotranspiration.

    Computes short (grass, ETos) and tall (alfalfa, ETrs) reference ET
    with the ASCE-EWRI Standardized equation, falling back to
    Hargreaves-Samani when only temperatures are available.

    \b
    Common commands:
      \b
      asce-et compute   Reference ET for one day
      asce-et batch     Reference ET for every row of a CSV file

    For help on a specific command, run: asce-et COMMAND --help
    """
    ctx.ensure_object(dict)

    Logger.setup(
        name="asce_et",
        log_file=str(log_file) if log_file else None,
        level=LOGGING["verbose_level"] if verbose else LOGGING["level"]
    )
    if verbose:
        Logger.debug('Verbose logging enabled')

    ctx.obj['config'] = load_config(config)
    if config:
        Logger.debug(f'Loaded configuration from: {config}')

    ctx.obj['verbose'] = verbose
    ctx.obj['log_file'] = log_file


# ============================================================================
# Compute Command
# ============================================================================

@cli.command()
@click.option('--tmax', type=float, required=True, help='Maximum air temperature')
@click.option('--tmin', type=float, required=True, help='Minimum air temperature')
@click.option('--latitude', type=float, required=True, help='Latitude in decimal degrees (north positive)')
@click.option('--doy', type=int, help='Day of year (1-366)')
@click.option('--date', 'date_', type=str, callback=validate_date, help='Date (YYYY-MM-DD), instead of --doy')
@click.option('--elevation', type=float, help='Station elevation')
@click.option('--rs', type=float, help='Incoming solar radiation')
@click.option('--wind', type=float, help='Wind speed')
@click.option('--wind-height', type=float, help='Wind measurement height (default 2 m)')
@click.option('--rh-max', type=float, help='Maximum relative humidity (%)')
@click.option('--rh-min', type=float, help='Minimum relative humidity (%)')
@click.option('--dew-point', type=float, help='Dew point temperature')
@click.option('--ea', type=float, help='Actual vapor pressure (kPa)')
@click.option('--units', type=click.Choice(['metric', 'imperial'], case_sensitive=False), default='metric', show_default=True,
              help='metric: °C, m, MJ/m²/day, m/s. imperial: °F, ft, langley/day, mph')
@click.option('--surface', type=click.Choice(['short', 'tall', 'both'], case_sensitive=False), default='both', show_default=True,
              help='Reference surface to report')
@click.option('--json', 'as_json', is_flag=True, default=False, help='Print the result as JSON')
@click.pass_context
def compute(ctx, tmax, tmin, latitude, doy, date_, elevation, rs, wind, wind_height,
            rh_max, rh_min, dew_point, ea, units, surface, as_json):
    """
    Compute reference ET for a single day.

    \b
    Examples:
      \b
      asce-et compute --tmax 32.4 --tmin 10.9 --latitude 40.41 --doy 183 \\
          --elevation 1462.4 --rs 22.4 --wind 1.94 --wind-height 3 --ea 1.27
      asce-et compute --tmax 30 --tmin 15 --latitude 36 --date 2024-06-28 --surface short
      asce-et compute --tmax 90 --tmin 60 --latitude 36 --doy 180 --units imperial --json

    ET is always reported in mm/day.
    """
    if doy is None and date_ is None:
        raise click.UsageError('Either --doy or --date is required', ctx=ctx)
    if doy is not None and date_ is not None:
        raise click.UsageError('Use only one of --doy and --date', ctx=ctx)

    if units.lower() == 'imperial':
        tmax = fahrenheit_to_celsius(tmax)
        tmin = fahrenheit_to_celsius(tmin)
        dew_point = _convert(dew_point, fahrenheit_to_celsius)
        elevation = _convert(elevation, feet_to_meters)
        rs = _convert(rs, langley_to_mj)
        wind = _convert(wind, mph_to_mps)
        wind_height = _convert(wind_height, feet_to_meters)

    weather = WeatherInput(
        temperature_max=tmax,
        temperature_min=tmin,
        latitude=latitude,
        day_of_year=doy if doy is not None else day_of_year(date_),
        elevation=elevation,
        solar_radiation=rs,
        wind_speed=wind,
        wind_height=2.0 if wind_height is None else wind_height,
        relative_humidity_max=rh_max,
        relative_humidity_min=rh_min,
        dew_point=dew_point,
        actual_vapor_pressure=ea,
    )

    calculator = ReferenceETCalculator(ctx.obj.get('config'))
    surface = surface.lower()

    try:
        result = calculator.calculate(weather)
        if surface != 'both':
            result.get(ReferenceSurface(surface))
    except InputError as e:
        Logger.debug(f'Invalid input: {e}')
        fail_on_input_error(ctx, e)
        return

    Logger.debug(f'Computed {result.method_used.value} reference ET for day {weather.day_of_year}')

    data = result.to_dict()
    if surface == 'short':
        data.pop('et_tall')
    elif surface == 'tall':
        data.pop('et_short')

    if as_json:
        click.echo(json.dumps(data, indent=2))
        return

    click.secho(f'Method: {result.method_used.value}', fg='green', bold=True)
    if result.humidity_method is not None:
        click.echo(f'Humidity: {result.humidity_method.value}')
    if result.radiation_estimated:
        click.secho('Solar radiation estimated from temperature range', fg='yellow')
    if 'et_short' in data:
        click.echo(f'ETos (short): {result.et_short:.2f} mm/day')
    if 'et_tall' in data:
        if result.et_tall is None:
            click.echo('ETrs (tall): n/a (requires solar radiation, wind, elevation and humidity)')
        else:
            click.echo(f'ETrs (tall): {result.et_tall:.2f} mm/day')


# ============================================================================
# Batch Command
# ============================================================================

@cli.command()
@click.argument('input-csv', type=click.Path(exists=True, path_type=Path))
@click.argument('output-csv', type=click.Path(path_type=Path))
@click.option('--raise-errors', is_flag=True, default=False, help='Stop at the first invalid record')
@click.pass_context
def batch(ctx, input_csv, output_csv, raise_errors):
    """
    Compute reference ET for every row of a weather CSV.

    \b
    Examples:
      \b
      asce-et batch weather.csv results.csv
      asce-et --config calculator.yaml batch weather.csv results.csv --raise-errors

    Input columns use the WeatherInput field names (temperature_max,
    temperature_min, latitude, day_of_year or date, ...). The output holds
    the input columns followed by et_short, et_tall, method,
    humidity_method, radiation_estimated and error.
    """
    try:
        table = WeatherTable().load(input_csv)
    except DataInputError as e:
        raise click.ClickException(str(e))

    df = table.to_frame()

    try:
        results = calculate_frame(df, config=ctx.obj.get('config'), raise_errors=raise_errors)
    except InputError as e:
        fail_on_input_error(ctx, e)
        return

    output = pd.concat([df.drop(columns=results.columns, errors='ignore'), results], axis=1)
    WeatherTable.write_results(output, output_csv)

    failed = int(results['error'].notna().sum())
    counts = results['method'].value_counts()

    click.echo(f'Processed {len(results)} record(s)')
    for method in Method:
        click.echo(f'  {method.value}: {int(counts.get(method.value, 0))}')
    if failed:
        click.secho(f'  failed: {failed}', fg='yellow')
    click.echo(f'Results saved to: {output_csv}')


# ============================================================================
# Entry Point
# ============================================================================

if __name__ == '__main__':
    cli()
