from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    BASEDASH_URL: str = "http://localhost:3000"
    HOST: str = "127.0.0.1"
    PORT: int = 3001
    JWT_EXPIRES_MINUTES: int = 10
    EMBED_USER_EMAIL: str = "embed-test@example.com"
    EMBED_USER_FIRST_NAME: str = "Embed"
    EMBED_USER_LAST_NAME: str = "Tester"
    HTTP_TIMEOUT_S: float = 30.0
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def basedash_url(self) -> str:
        return self.BASEDASH_URL.rstrip("/")

    @property
    def dummy_user(self) -> dict:
        return {
            "email": self.EMBED_USER_EMAIL,
            "firstName": self.EMBED_USER_FIRST_NAME,
            "lastName": self.EMBED_USER_LAST_NAME,
        }


settings = Settings()
