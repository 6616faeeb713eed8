from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    consumer_key: str = ""
    consumer_secret: str = ""
    access_token: str = ""
    access_token_secret: str = ""
    username: str = ""
    callback_url: str = ""
    api_base_uri: str = "https://api.twitter.com/1.1/"
    oauth_base_uri: str = "https://api.twitter.com/oauth"
    upload_base_uri: str = "https://upload.twitter.com/1.1/media/upload.json"
    status_max_characters: int = 280
    direct_message_max_characters: int = 10000
    media_chunk_size: int = 4 * 1024 * 1024
    http_timeout: float = 30.0
    log_format: str = "text"
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "TWITTER_",
    }


settings = Settings()
