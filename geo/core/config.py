from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "service.geo"
    service_name: str = Field("service.geo", description="Name reported to the tracer")
    host: str = "0.0.0.0"
    port: int = Field(10002, description="The server port")
    json_db_file: str = Field(
        "data/locations.json", description="A json file containing hotel locations"
    )
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="GEO_", case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()
