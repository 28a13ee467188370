from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	# Database
	database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")
	sql_echo: bool = Field(default=False, validation_alias="SQL_ECHO")

	# CORS: comma separated origins, plus the deployed frontend if set
	cors_allow_origins: str = Field(
		default="http://localhost:3000,http://localhost:5173",
		validation_alias="CORS_ALLOW_ORIGINS",
	)
	frontend_url: str | None = Field(default=None, validation_alias="FRONTEND_URL")

	# League table row cap when the client does not send one
	league_table_default_limit: int = Field(default=50, ge=1, validation_alias="LEAGUE_TABLE_DEFAULT_LIMIT")

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

	def allowed_origins(self) -> list[str]:
		origins = [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]
		if self.frontend_url and self.frontend_url not in origins:
			origins.append(self.frontend_url)
		return origins

settings = Settings()
