import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))

SECRET_KEY = os.getenv("SECRET_KEY", "hrms-secret-key")

# SQLite by default, point DATABASE_URL at PostgreSQL for production
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{os.path.join(BASE_DIR, 'hrms.db')}")


def _flag(name, default="false"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = SECRET_KEY
    JWT_ALGORITHM = "HS256"

    # "memory" keeps sessions in-process, "database" shares them across workers
    SESSION_STORE = os.getenv("SESSION_STORE", "memory")
    SESSION_TTL_MINUTES = int(os.getenv("SESSION_TTL_MINUTES", "720"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    SEED_DEMO_DATA = _flag("SEED_DEMO_DATA")
    SUPER_ADMIN_EMAIL = os.getenv("SUPER_ADMIN_EMAIL", "superadmin@hrmsworld.com")
    SUPER_ADMIN_PASSWORD = os.getenv("SUPER_ADMIN_PASSWORD", "123456")

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SECRET_KEY = "test-secret-key"
    SESSION_STORE = "memory"
    SESSION_TTL_MINUTES = 60
    SEED_DEMO_DATA = False
    LOG_LEVEL = "WARNING"
