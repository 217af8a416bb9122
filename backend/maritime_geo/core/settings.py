"""Library configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from MARITIME_GEO_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix='MARITIME_GEO_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    log_level: str = 'info'

    # Default precision used when rounding coordinates
    coordinate_decimals: int = 5

    # Folder scanned by parsers.wkt.read_wkt_folder when none is given
    wkt_folder: str | None = None


settings = Settings()
