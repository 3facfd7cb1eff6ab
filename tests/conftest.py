import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inputs.form import TimeCostForm  # noqa: E402


@pytest.fixture
def app_path():
    return str(ROOT / "app" / "streamlit_app.py")


@pytest.fixture
def sample_form():
    """50k income, 8-hour days, a 100 purchase."""
    return TimeCostForm(yearly_income="50000", daily_hours="8", item_price="100")
