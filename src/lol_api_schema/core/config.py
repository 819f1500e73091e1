from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOL_SCHEMA_",
        extra="ignore",
    )

    # Hosts. `{region}` is filled from the bound operation arguments.
    regional_host: str = "https://{region}.api.pvp.net"
    global_host: str = "https://global.api.pvp.net"
    status_host: str = "http://status.leagueoflegends.com"

    default_region: str = Field(default="na")

    log_level: str = "WARNING"

    def host_for(self, kind: str, *, region: str | None = None) -> str:
        """Return the base URL for a host kind (`regional`, `global`, `status`)."""

        if kind == "regional":
            return self.regional_host.format(region=(region or self.default_region).lower())
        if kind == "global":
            return self.global_host
        if kind == "status":
            return self.status_host
        raise ValueError(f"Unknown host kind: {kind!r}")


settings = Settings()
