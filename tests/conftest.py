import os

from dotenv import load_dotenv

load_dotenv(".env.test", override=True)


def _apply_test_env() -> None:
    os.environ.setdefault("POSTGRES_DB", "access_control_test")
    os.environ.setdefault("POSTGRES_USER", "postgres")
    os.environ.setdefault("POSTGRES_PASSWORD", "postgres")
    os.environ.setdefault("POSTGRES_HOST", "127.0.0.1")
    os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")


_apply_test_env()
