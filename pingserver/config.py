import os
from functools import lru_cache


class Settings:
    def __init__(self):
        self.HOST: str = os.getenv("PINGSERVER_HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PINGSERVER_PORT", "8090"))
        self.LOG_LEVEL: str = os.getenv("PINGSERVER_LOG_LEVEL", "INFO").upper()


@lru_cache
def get_settings():
    return Settings()
