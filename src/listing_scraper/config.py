from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    # Upstream search page
    search_url: str = "https://www.amazon.com.br/s"
    search_param: str = "k"

    # Scraper
    scraper_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/91.0.4472.124 Safari/537.36"
    )
    scraper_accept_language: str = "pt-BR,pt;q=0.9,en-US;q=0.7,en;q=0.3"
    scraper_request_timeout: int = 30

    # CORS (front-end dev server)
    cors_origins: list[str] = ["http://localhost:5173"]
    cors_methods: list[str] = ["GET", "POST", "OPTIONS"]

    # Log
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
