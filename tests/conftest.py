import pytest

from fractionator.core.properties import PROPANE, BUTANE
from fractionator.distillation.specification import ColumnSpec


@pytest.fixture
def light():
    return PROPANE


@pytest.fixture
def heavy():
    return BUTANE


@pytest.fixture
def pressure():
    # 100 psig
    return 114.7


@pytest.fixture
def spec(pressure):
    return ColumnSpec(
        feed_rate=1000.0,
        x_feed=0.5,
        x_distillate=0.95,
        x_bottoms=0.05,
        pressure=pressure,
        feed_tray=5,
        total_trays=10,
    )
