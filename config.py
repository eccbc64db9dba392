from dotenv import load_dotenv
import os

load_dotenv()


def _engine_options(uri: str) -> dict:
    # Pooling and SSL only make sense for a managed PostgreSQL instance
    if not uri.startswith("postgresql"):
        return {}
    return {
        'pool_pre_ping': True,  # Test connection before handing it out
        'pool_recycle': 300,    # Recycle connections every 5 minutes
        'pool_size': 5,
        'max_overflow': 10,
        'pool_timeout': 30,
        'connect_args': {
            'sslmode': os.getenv("DATABASE_SSLMODE", "require"),
            'connect_timeout': 10,
        }
    }


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///fittrack.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI)

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "12"))


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_LEVEL = "WARNING"
