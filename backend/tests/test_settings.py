from accountability.settings import Settings


def test_allowed_origins_defaults(monkeypatch):
	monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
	monkeypatch.delenv("FRONTEND_URL", raising=False)
	s = Settings(_env_file=None)
	assert s.allowed_origins() == ["http://localhost:3000", "http://localhost:5173"]


def test_allowed_origins_appends_frontend_url(monkeypatch):
	monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, ,https://b.example")
	monkeypatch.setenv("FRONTEND_URL", "https://app.example")
	s = Settings(_env_file=None)
	assert s.allowed_origins() == ["https://a.example", "https://b.example", "https://app.example"]


def test_league_table_limit_from_env(monkeypatch):
	monkeypatch.setenv("LEAGUE_TABLE_DEFAULT_LIMIT", "10")
	assert Settings(_env_file=None).league_table_default_limit == 10
