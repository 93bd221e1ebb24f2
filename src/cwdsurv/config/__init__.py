"""Public configuration API."""

from .loader import DEFAULT_CONFIG_FILENAME, load_config
from .models import DashboardConfig, MapMetric

__all__ = ["DEFAULT_CONFIG_FILENAME", "DashboardConfig", "MapMetric", "load_config"]
