"""Build the season outlook - the forecast for every round of a game.

Usage:
    python -m src.game_manager.run_outlook [config_file] [output_dir]

Examples:
    python -m src.game_manager.run_outlook
    python -m src.game_manager.run_outlook config/game.ini /tmp/outlook
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import pandas as pd

from src.configuration.config_source import ConfigSource
from src.configuration.series_loader import load_total_rounds
from src.game_manager.config import DEFAULT_CONFIG_FILE, OUTLOOK_CSV, OUTLOOK_DIR, OUTLOOK_JSON
from src.logging_config import setup_logging
from src.rules_engine.forecasters import SimpleEconomicForecaster, SimpleWaterForecaster
from src.rules_engine.models import GameContext

logger = logging.getLogger(__name__)


def _economic_column(asset_type, level: int) -> str:
    return f"{asset_type.value}_{level}"


def build_outlook(config_source: ConfigSource) -> pd.DataFrame:
    """Forecast every round from 1 to ``rounds_per_game``.

    Returns:
        DataFrame with one row per round and columns ``round``,
        ``water_deviation``, ``water_forecast`` and one ``<type>_<level>``
        economic forecast column per asset type and level.
    """
    total_rounds = load_total_rounds(config_source)

    water_forecaster = SimpleWaterForecaster()
    water_forecaster.update_configuration(config_source)
    economic_forecaster = SimpleEconomicForecaster()
    economic_forecaster.update_configuration(config_source)

    context = GameContext(game_id="outlook", total_rounds=total_rounds)

    rows = []
    for round_number in range(1, total_rounds + 1):
        context.current_round = round_number
        row = {
            "round": round_number,
            "water_deviation": water_forecaster.deviations.lookup(round_number),
            "water_forecast": water_forecaster.forecast(context),
        }
        for asset_type, levels in economic_forecaster.forecast(context).items():
            for level, label in levels.items():
                row[_economic_column(asset_type, level)] = label
        rows.append(row)

    return pd.DataFrame(rows)


def write_outlook(outlook: pd.DataFrame, output_dir: Optional[Path] = None) -> Tuple[Path, Path]:
    """Write *outlook* as CSV and JSON records.

    Returns:
        ``(csv_path, json_path)``.
    """
    if output_dir is None:
        output_dir = OUTLOOK_DIR

    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / OUTLOOK_CSV
    json_path = output_dir / OUTLOOK_JSON

    outlook.to_csv(csv_path, index=False)
    outlook.to_json(json_path, orient="records", indent=2)

    return csv_path, json_path


def run_outlook(config_file: Optional[Path] = None, output_dir: Optional[Path] = None) -> Path:
    """Load *config_file*, build the outlook and write it out.

    Returns:
        Path to the generated CSV file.

    Raises:
        ConfigurationError: If the configuration is missing or malformed.
    """
    if config_file is None:
        config_file = DEFAULT_CONFIG_FILE

    logger.info("Building season outlook from %s", config_file)
    config_source = ConfigSource.from_file(config_file)
    outlook = build_outlook(config_source)

    csv_path, json_path = write_outlook(outlook, output_dir)

    water_counts = outlook["water_forecast"].value_counts()
    logger.info("Outlook complete! Output: %s, %s", csv_path, json_path)
    logger.info("  Total rounds: %d", len(outlook))
    logger.info(
        "  Water: %s",
        ", ".join(f"{label}={count}" for label, count in sorted(water_counts.items())),
    )

    return csv_path


if __name__ == "__main__":
    setup_logging()

    config_file = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    output_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        output = run_outlook(config_file, output_dir)
        print(f"Outlook complete: {output}")
    except Exception:
        logger.exception("Outlook failed")
        sys.exit(1)
