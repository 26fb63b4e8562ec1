# admincommon

Shared building blocks for admin-style back-end services: the small pieces of
configuration, identity, permission and message handling that every service in
such a system needs.

| Module | What it holds |
| --- | --- |
| `admincommon.enums` | `Status`, `ErrorCode`, `DataPerm`, default ids such as `TENANT_DEFAULT_ID` |
| `admincommon.messages` | error and log message texts, i18n message ids, redis key prefixes |
| `admincommon.errors` | `StatusError`, `CodeError`, `ApiError`, `InvalidArgumentError`, `code_from_grpc_error`, `is_grpc_error` |
| `admincommon.encrypt` | `bcrypt_encrypt`, `bcrypt_check` |
| `admincommon.tokens` | `new_jwt_token`, `strip_bearer_prefix` |
| `admincommon.langtags` | `parse_tags` for `Accept-Language` values |
| `admincommon.pointy` | `to_status`, `time_from_unix`, `time_from_unix_milli`, `unix_milli_or_none` |
| `admincommon.uuidx` | `new_uuid` (version 7), `parse_uuid`, `parse_uuid_list`, `parse_optional_uuid` |
| `admincommon.config` | `CorsConf`, `DatabaseConf`, `RedisConf` |
| `admincommon.gormconf` | `GormConf`, `LogLevel`, `get_log_level` |
| `admincommon.reqctx` | `Context` and the user, role, department and tenant lookups |
| `admincommon.dataperm` | data permission values in a context and their redis keys |
| `admincommon.i18n` | `I18nConf`, `Translator`, `new_translator` |
| `admincommon.captcha` | `CaptchaConf`, `RedisStore`, `new_redis_store` |
| `admincommon.mongo` | `MongoConf` |
| `admincommon.rocketmq` | `ProducerConf`, `ConsumerConf`, `AllocateStrategy` |
| `admincommon.asynq` | `AsynqConf` |

## Installation

```
pip install admincommon
```

Python 3.10 or later is required. The package depends on `bcrypt`, `pyjwt`,
`redis` and `pymongo`.

## Passwords

```python
from admincommon.encrypt import bcrypt_encrypt, bcrypt_check

hashed = bcrypt_encrypt("password")     # "$2a$10$..."
bcrypt_check("password", hashed)        # True
bcrypt_check("placeholder", hashed)     # False
```

Hashes use the `$2a$` prefix at cost 10. A password longer than 72 bytes
raises `ValueError`; a malformed hash makes `bcrypt_check` return `False`.

## Tokens

```python
import time

from admincommon.tokens import new_jwt_token, strip_bearer_prefix

now = int(time.time())
jwt_value = new_jwt_token("secret", now, 3600, userId="42", roleId="admin")

strip_bearer_prefix("Bearer token")   # -> "token"
strip_bearer_prefix("bearer token")   # -> "token"
strip_bearer_prefix("token")          # -> "token"
```

The token is signed with HS256 and carries `iat`, `exp` (`iat + seconds`) and
every extra keyword argument as a claim.

## Errors

`StatusError(code, message)` is an RPC error; its text reads
`rpc error: code = NotFound desc = ...`. `CodeError` and `ApiError` carry a
code and a message; `InvalidArgumentError(msg)` is a `CodeError` with code
`ErrorCode.INVALID_ARGUMENT`.

```python
from admincommon.enums import ErrorCode
from admincommon.errors import StatusError, code_from_grpc_error, is_grpc_error

code_from_grpc_error(StatusError(ErrorCode.NOT_FOUND, "missing"))   # HTTPStatus.NOT_FOUND
code_from_grpc_error(StatusError(ErrorCode.UNAVAILABLE, "down"))    # HTTPStatus.SERVICE_UNAVAILABLE
code_from_grpc_error(ValueError("other"))                           # HTTPStatus.INTERNAL_SERVER_ERROR
is_grpc_error(StatusError(ErrorCode.UNKNOWN, "x"))                  # True
is_grpc_error(None)                                                 # False
```

## Language tags

```python
from admincommon.langtags import parse_tags

parse_tags("zh")                 # ["zh"]
parse_tags("en-US,en;q=0.8")     # ["en-US", "en"]
parse_tags("one two")            # malformed: ["zh"]
```

Tags are ordered by weight; entries with weight zero are dropped.

## Value helpers

```python
from admincommon.pointy import to_status, time_from_unix_milli, unix_milli_or_none
from admincommon.uuidx import new_uuid, parse_uuid, parse_uuid_list

to_status(1)                          # 1 (narrowed to a byte); None stays None
time_from_unix_milli(0)               # 1970-01-01 00:00:00+00:00
unix_milli_or_none(-62135596800000)   # None, the zero time

new_uuid().version                    # 7
parse_uuid("123456")                  # the nil UUID
parse_uuid_list(["123"])              # None
```

## Configuration

```python
from admincommon.config import DatabaseConf, RedisConf

password = "password"
db = DatabaseConf(host="localhost", port=3306, username="user", password=password)
db.get_dsn()   # "user:password@tcp(localhost:3306)/simple_admin?parseTime=True"
```

`DatabaseConf.get_dsn()` builds the DSN for `type` `"mysql"`, `"postgres"` or
`"sqlite3"`. For SQLite, `db_path` must be set; a missing file is created with
mode 0600 and an existing one is set to 0660.

`RedisConf(host="localhost:6379").new_universal_redis()` returns a pinged
`redis` client: a sentinel master when `master` is set, a cluster when `host`
lists several comma-separated addresses, otherwise a single node. An empty
`host` raises `ValueError`.

`GormConf` builds MySQL and PostgreSQL DSNs and maps its `log_mode`
(`info`, `warn`, `error`, `silent`) to a `LogLevel`; unknown modes give
`LogLevel.ERROR`.

`MongoConf` builds connection strings and connects:

```python
from admincommon.mongo import MongoConf

MongoConf(host="127.0.0.1").get_dsn()   # "mongodb://127.0.0.1:27017"
MongoConf(
    host="127.0.0.1",
    auth_mechanism="MONGODB-X509",
    tls_ca_file="/home/ca-certificate.crt",
    tls_certificate_key_file="/home/client.pem",
).client_uri()
# "mongodb://127.0.0.1:27017/?tlsCAFile=/home/ca-certificate.crt&tlsCertificateKeyFile=/home/client.pem"
```

`must_new_client()` connects and pings the server, raising on failure;
`must_new_database()` returns the database named by `db_name`.

`ProducerConf.validate()` and `ConsumerConf.validate()` fill unset fields with
defaults (for example group `DEFAULT_PRODUCER`, timeout 3, retry 2) and raise
`ValueError` when `ns_resolver` is `None`. `AsynqConf.with_redis_conf(conf)`
copies a `RedisConf`'s connection settings and `redis_options()` returns them
as a dictionary.

## Request context

`Context` is immutable: it holds plain values, the metadata received with a
request and the metadata to send with outgoing calls.

```python
from admincommon.reqctx import Context, admin_ctx, get_role_ids, get_tenant_id, get_user_id, is_tenant_admin

ctx = Context().with_value("userId", "user-1")
get_user_id(ctx)                                                     # "user-1"
get_role_ids(Context().with_incoming_metadata({"roleid": "002,001"}))  # ["001", "002"]
get_tenant_id(Context())                                             # 1, the default tenant
is_tenant_admin(admin_ctx(Context()))                                # True
```

Values are looked up in the context first and then in the incoming metadata.
A missing or malformed value raises `InvalidArgumentError`, except for the
tenant id, which falls back to the default tenant.

## Data permissions

```python
from admincommon.dataperm import get_custom_dept, get_scope, role_scope_key, with_custom_dept, with_scope
from admincommon.reqctx import Context

ctx = with_custom_dept(with_scope(Context(), "1"), "1,3,20,8")
get_scope(ctx)          # 1
get_custom_dept(ctx)    # [1, 3, 20, 8]

role_scope_key(["admin"])   # "DATAPERM:ROLE:admin:Scope"
```

## Translation

The package ships no locale files; point the translator at a directory of
JSON files named after their language (`zh.json`, `en.json`, ...). Nested
objects become dotted message ids.

```python
from admincommon.i18n import I18nConf, new_translator
from admincommon.reqctx import Context

# locales/en.json: {"common": {"success": "Successfully"}}
trans = new_translator(I18nConf(), "locales")
trans.trans(Context().with_value("lang", "en"), "common.success")   # "Successfully"
trans.trans(Context().with_value("lang", "en"), "common.unknown")   # "common.unknown"
```

`I18nConf(dir=...)` overrides the default directory. Languages without a
localizer fall back to Chinese. `trans_error(ctx, err)` returns a copy of a
`StatusError`, `CodeError` or `ApiError` with its message translated; any
other error becomes an `ApiError` with status 500.

## Captcha storage

```python
import redis

from admincommon.captcha import new_redis_store

store = new_redis_store(redis.Redis())
store.set("abc", "1234")              # stored under "CAPTCHA:abc" for 5 minutes
store.verify("abc", "1234", True)     # True, and the answer is deleted
```

`CaptchaConf` holds the answer length, image size and driver name (`digit`,
`string`, `math` or `chinese`).

## What the package does not do

- It draws no captcha images; `CaptchaConf` only holds settings and
  `RedisStore` only stores answers.
- It opens no SQL connections: `DatabaseConf` and `GormConf` build DSNs and
  log levels, and connecting is left to the database driver of your choice.
- It provides no message queue or task queue clients: `ProducerConf`,
  `ConsumerConf` and `AsynqConf` only validate and hold settings.
- It has no access-control policy engine and no schema definitions.

## Running the tests

```
pip install "admincommon[test]"
pytest
```