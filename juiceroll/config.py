from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    environment: str = "local"
    debug: bool = True
    log_level: str = "INFO"

    # Fixed seed for every request's dice engine. Leave unset for true randomness.
    rng_seed: int | None = None

    # Upper bound on exchanges generated by a single bulk dialog request.
    dialog_max_exchanges: int = 10

    # Fallbacks applied when a request omits (or garbles) an oracle setting.
    default_likelihood: str = "even_odds"
    default_chaos_level: str = "normal"


settings = Settings()
