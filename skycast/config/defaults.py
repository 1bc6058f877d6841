"""Provider endpoints and fixed constants shared across the app."""

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
ICON_BASE_URL = "https://openweathermap.org/img/wn"

DEFAULT_DB_PATH = "data/skycast.db"
DEFAULT_FAVORITES_KEY = "favorites"

# The forecast endpoint returns 3-hourly readings, so 8 entries span one day.
FORECAST_STRIDE = 8
MAX_FORECAST_DAYS = 5

FETCH_ERROR_MESSAGE = "Could not fetch weather data. Please try again."
