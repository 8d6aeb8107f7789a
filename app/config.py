from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Scraping Normalizer API"

    # API de scraping (colaborador externo)
    API_BASE_URL: str = "http://localhost:3000/api/v1"
    SCRAPE_PATH: str = "/scrape"
    DEFAULT_URL: str = "https://www.tony.com.mx/escolar/cuadernos-y-libretas?initialMap=c&initialQuery=escolar&map=category-1,category-2&page=3"
    DEFAULT_SELECTOR: str = ".vtex-product-summary-2-x-element"

    # Normalización
    NOISE_MARKER: str = "*Color No Seleccionable"
    EXPORT_PREFIX: str = "scraping-results"

    # HTTP
    USER_AGENT: str = "ScrapingNormalizer/1.0"
    HTTP2: bool = True
    TIMEOUT_CONNECT: float = 5.0
    TIMEOUT_READ: float = 60.0
    TIMEOUT_WRITE: float = 10.0
    TIMEOUT_POOL: float = 10.0
    MAX_KEEPALIVE: int = 20
    MAX_CONNECTIONS: int = 50
    FOLLOW_REDIRECTS: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="SCRAPER_")

settings = Settings()
