"""Database credentials, from Config or an AWS Secrets Manager secret.

Shared by PostgresStore, the Alembic environment and the local bootstrap
script so every entry point connects the same way.
"""

import json
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ConfigDict
from sqlalchemy.engine import URL

from logicon.config import Config
from logicon.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

_secret_cache: dict[str, dict[str, object]] = {}


class DbCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str
    port: int
    dbname: str
    user: str
    password: str

    @property
    def sqlalchemy_url(self) -> URL:
        return URL.create(
            "postgresql+psycopg",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.dbname,
        )


def _reset_credentials_cache() -> None:
    """Forget fetched secrets — for testing only."""
    _secret_cache.clear()


def _fetch_secret(secret_arn: str, region: str) -> dict[str, object]:
    if secret_arn not in _secret_cache:
        client = boto3.client("secretsmanager", region_name=region)
        secret = client.get_secret_value(SecretId=secret_arn)
        _secret_cache[secret_arn] = json.loads(secret["SecretString"])
    return _secret_cache[secret_arn]


def resolve_db_credentials(config: Config) -> DbCredentials:
    """Credentials from the configured secret, falling back to Config values.

    Raises StoreUnavailableError when the secret cannot be fetched or parsed.
    """
    if not config.db_secret_arn:
        return DbCredentials(
            host=config.db_host,
            port=config.db_port,
            dbname=config.db_name,
            user=config.db_user,
            password=config.db_password,
        )

    try:
        secret = _fetch_secret(config.db_secret_arn, config.aws_region)
        return DbCredentials(
            host=secret.get("host", config.db_host),
            port=secret.get("port", config.db_port),
            dbname=secret.get("dbname", config.db_name),
            user=secret.get("username", secret.get("user", config.db_user)),
            password=secret.get("password", config.db_password),
        )
    except (BotoCoreError, ClientError, KeyError, ValueError) as e:
        logger.exception("Could not load database secret %s", config.db_secret_arn)
        raise StoreUnavailableError(f"Could not load database credentials: {e}") from e
