from shopreviews import main
from shopreviews.core.config import get_settings


def test_run_serves_app_with_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    main.run()
    settings = get_settings()
    assert calls == [("shopreviews.main:app", {"host": settings.HOST, "port": settings.PORT, "log_config": None})]
