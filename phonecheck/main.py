from phonecheck.api.main import app

__all__ = ["app"]
