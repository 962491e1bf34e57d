"""
Configuration management for Vault Gateway
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    
    # App
    APP_ENV: str = "development"
    PORT: int = 4000
    CORS_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"
    
    # Skyflow vault
    VAULT_ID: str = ""
    VAULT_URL: str = ""
    
    # Bearer token source: service account file wins over a static token.
    # The SDK only accepts a JWT bearer token, not a plain API key.
    VAULT_API_KEY: str = ""
    VAULT_CREDENTIALS_PATH: str = ""
    
    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_PER_MINUTE: int = 60
    
    # Audit buffer
    AUDIT_MAX_ENTRIES: int = 1000
    
    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]
    
    @property
    def vault_configured(self) -> bool:
        return bool(self.VAULT_ID and self.VAULT_URL)
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "allow"


settings = Settings()
