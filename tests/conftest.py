"""Shared fixtures for the round engine test suite."""

import textwrap

import pytest

from src.configuration.config_source import ConfigSource
from src.rules_engine.models import BuyPoint, Crops, Factory, GameContext, Houses, Player

# Three rounds of data after the unused build round 0.
GAME_CONFIG = textwrap.dedent(
    """\
    [General]
    rounds_per_game = 3
    water_delivery_series = 0, 0.9, 1.2

    [Factories]
    factories_revenue_series = 0, 0.5, 2

    [Condos]
    condos_2_revenue_series = 1, 1.5, 0.5
    """
)


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def config_source():
    return ConfigSource.from_string(GAME_CONFIG)


@pytest.fixture
def context():
    """Two players (500 + 300 entitlement) and one buy point (200 rights).

    Baseline water is therefore 1000.
    """
    ctx = GameContext(game_id="g1", current_round=1, total_rounds=3)
    ctx.add_player(Player(player_id="p1", name="Alfred", water_entitlement=500))
    ctx.add_player(Player(player_id="p2", name="Betty", water_entitlement=300))
    ctx.add_buy_point(BuyPoint(buy_point_id="bp1", name="Riverside", initial_water_rights=200))
    return ctx


@pytest.fixture
def assets():
    return [
        Factory(asset_id="f1", name="Mill", level=1, normal_revenues=[0, 50, 80, 120]),
        Houses(asset_id="h1", name="Condos", level=2, normal_revenues=[0, 100, 200, 300]),
        Crops(asset_id="c1", name="Rice", level=1, normal_revenues=[0, 40]),
    ]


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "game.ini"
    path.write_text(GAME_CONFIG)
    return path
