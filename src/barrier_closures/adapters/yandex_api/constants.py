"""Constants for the Yandex.Rasp API adapter.

API Documentation: https://yandex.ru/dev/rasp/doc/ru/reference/schedule-on-station
"""

YANDEX_SCHEDULE_URL = "https://api.rasp.yandex.net/v3.0/schedule/"

# Fixed query parameters: suburban trains arriving at the station
TRANSPORT_TYPES = "suburban"
EVENT = "arrival"

API_KEY_SETTING = "YANDEX_RASP_API_KEY"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}
