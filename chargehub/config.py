from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    api_token: str
    api_url: str = "http://10.0.2.2:8080"
    google_maps_api_key: str = ""
    language_store_path: str = ".chargehub/language.json"
    default_language: str = "en"
    request_timeout: float = 30.0
    log_level: str = "INFO"
