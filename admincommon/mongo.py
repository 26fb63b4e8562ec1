"""MongoDB connection configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pymongo

AUTH_MECHANISMS = ("SCRAM-SHA-256", "SCRAM-SHA-1", "MONGODB-X509", "MONGODB-AWS", "None")
_CREDENTIAL_MECHANISMS = ("SCRAM-SHA-256", "SCRAM-SHA-1", "MONGODB-AWS")
_CONNECT_TIMEOUT_MS = 20_000
_PING_TIMEOUT = 2.0


@dataclass
class MongoConf:
    """MongoDB host, credentials and authentication mechanism."""

    host: str = "localhost"
    username: str = ""
    password: str = ""
    port: int = 27017
    db_name: str = ""
    option: str = ""
    auth_mechanism: str = "None"
    auth_source: str = ""
    tls_ca_file: str = ""
    tls_certificate_key_file: str = ""

    def __post_init__(self) -> None:
        if self.auth_mechanism not in AUTH_MECHANISMS:
            raise ValueError(
                f"auth mechanism must be one of {AUTH_MECHANISMS}: {self.auth_mechanism!r}"
            )

    def get_dsn(self) -> str:
        """Return the connection string built from host, port and option."""
        if not self.option:
            return f"mongodb://{self.host}:{self.port}"
        return f"mongodb://{self.host}:{self.port}/{self.option}"

    def client_uri(self) -> str:
        """Return the URI used to connect, with TLS files for X.509 authentication."""
        dsn = self.get_dsn()
        if self.auth_mechanism == "MONGODB-X509":
            separator = "/?" if not self.option else "&"
            return (
                f"{dsn}{separator}tlsCAFile={self.tls_ca_file}"
                f"&tlsCertificateKeyFile={self.tls_certificate_key_file}"
            )
        return dsn

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "connectTimeoutMS": _CONNECT_TIMEOUT_MS,
            "serverSelectionTimeoutMS": _CONNECT_TIMEOUT_MS,
        }
        if self.auth_mechanism in _CREDENTIAL_MECHANISMS:
            kwargs["authMechanism"] = self.auth_mechanism
            kwargs["username"] = self.username
            kwargs["password"] = self.password
            if self.auth_source:
                kwargs["authSource"] = self.auth_source
        return kwargs

    def must_new_client(self) -> pymongo.MongoClient:
        """Connect, ping the primary and return the client; raise on any failure."""
        if self.auth_mechanism not in AUTH_MECHANISMS:
            raise ValueError(f"unsupported auth mechanism: {self.auth_mechanism!r}")
        client = pymongo.MongoClient(self.client_uri(), **self._client_kwargs())
        try:
            with pymongo.timeout(_PING_TIMEOUT):
                client.admin.command("ping")
        except Exception:
            client.close()
            raise
        return client

    def must_new_database(self):
        """Return the configured database of a newly connected client."""
        return self.must_new_client()[self.db_name]