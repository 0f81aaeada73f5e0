"""Trading 212 public API base URLs and paths."""

from app.schemas.common import BrokerEnv

BASE_URLS = {
    BrokerEnv.LIVE: "https://live.trading212.com",
    BrokerEnv.DEMO: "https://demo.trading212.com",
}

POSITIONS_PATH = "/api/v0/equity/positions"
