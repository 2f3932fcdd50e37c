from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Github API"
    debug: bool = False

    server_host: str = "0.0.0.0"
    # SERVER_PORT takes precedence over PORT
    server_port: int = Field(3000, validation_alias=AliasChoices("SERVER_PORT", "PORT"))

    github_api_url: str = "https://api.github.com"
    github_api_version: str = "2022-11-28"
    github_user_agent: str = "github-users-proxy"

    cors_origins: str = ""
    cors_methods: str = "GET"

    log_level: str = "INFO"
    log_format: str = "text"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "env_ignore_empty": True,
    }

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def cors_method_list(self) -> list[str]:
        return [m.strip().upper() for m in self.cors_methods.split(",") if m.strip()]


settings = Settings()
