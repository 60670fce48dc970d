"""City weather lookup widget backed by the OpenWeatherMap API."""

__version__ = "0.1.0"
