from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DEFAULT_LANG: str = "en"
    LOCALES_DIR: str = "locales"  # root folder holding one subfolder per language
    MISSING_PLACEHOLDER: str = "none"  # rendered for ${key} with no usable value
    RAISE_ON_LOAD_ERROR: bool = False
    LOG_LEVEL: str = "INFO"
    DEFAULT_REPLACEMENTS: dict = {}

    model_config = SettingsConfigDict(env_prefix="MSG_")

settings = Settings()
