from os import environ

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    db_host: str
    db_port: int
    db_name: str
    db_user: str
    db_password: str
    db_secret_arn: str | None = None
    db_connect_timeout: int = 5
    environment: str
    alembic_config: str = "/var/task/alembic.ini"


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        db_host=environ.get("DB_HOST", "localhost"),
        db_port=int(environ.get("DB_PORT", "5432")),
        db_name=environ.get("DB_NAME", "logistics"),
        db_user=environ.get("DB_USER", "logistics"),
        db_password=environ.get("DB_PASSWORD", "localdev"),
        db_secret_arn=environ.get("DB_SECRET_ARN") or None,
        db_connect_timeout=int(environ.get("DB_CONNECT_TIMEOUT", "5")),
        environment=environ.get("ENVIRONMENT", "local"),
        alembic_config=environ.get("ALEMBIC_CONFIG", "/var/task/alembic.ini"),
    )
    return _cached_config
