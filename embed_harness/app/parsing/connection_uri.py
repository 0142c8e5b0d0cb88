import re
from enum import Enum
from typing import Optional, TypedDict
from urllib.parse import parse_qsl, quote, unquote, urlencode

from pydantic import BaseModel

# dialect://[username[:password]@]host[:port][/database][?params][#fragment]
CONNECTION_URI_RE = re.compile(
    r"(?P<dialect>[\w:]+)"  # dialect (supports jdbc:clickhouse)
    r"://"
    r"(?:"
    r"(?P<username>[^:@]*)"
    r"(?::(?P<password>[^@]*))?"
    r"@"
    r")?"
    r"(?P<host>\[[^\]]+\]|[^:/]*)"  # bracketed (IPv6) or plain; may be empty
    r"(?::(?P<port>\d+))?"
    r"(?:/(?P<database>[\w.-]*))?"
    r"(?:\?(?P<params>[^#]*)?)?"
    r"(?:#.*)?",
    re.ASCII,
)

# a "%" not followed by two hex digits
BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
PATH_DATABASE_RE = re.compile(r"[\w.-]+", re.ASCII)

SUPABASE_PASSWORD_PLACEHOLDER = "[YOUR-PASSWORD]"

# first present key wins
SSL_PARAM_KEYS = ("sslmode", "ssl-mode", "ssl")
SSL_DISABLED_VALUES = {"disable", "false"}


class DatabaseDialect(str, Enum):
    POSTGRES = "POSTGRES"
    SUPABASE = "SUPABASE"
    MYSQL = "MYSQL"
    PLANETSCALE = "PLANETSCALE"
    CLICKHOUSE = "CLICKHOUSE"
    SQL_SERVER = "SQL_SERVER"


class ParsedComponents(TypedDict):
    dialect: str
    username: Optional[str]
    password: Optional[str]
    host: str
    port: Optional[str]
    database: Optional[str]
    params: Optional[str]


class Credentials(BaseModel):
    username: str = ""
    password: str = ""
    host: str
    port: Optional[int] = None
    database_name: str = ""
    ssl_enabled: bool = True


def match_connection_uri(value: str) -> Optional[ParsedComponents]:
    m = CONNECTION_URI_RE.fullmatch(value)
    if not m:
        return None
    g = m.groupdict()
    return {
        "dialect": g["dialect"],
        "username": g["username"],
        "password": g["password"],
        "host": g["host"] or "",
        "port": g["port"],
        "database": g["database"],
        "params": g["params"],
    }


def safe_unquote(value: str) -> str:
    """
    Percent-decode, returning the raw value untouched if any escape is
    malformed or the decoded bytes are not valid UTF-8.
    """
    if BAD_ESCAPE_RE.search(value):
        return value
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        return value


def classify(value: str) -> Optional[DatabaseDialect]:
    """
    Map the dialect token of a connection URI to a DatabaseDialect.
    Provider refinements (Supabase, PlanetScale) are detected anywhere in the
    full string. Returns None for non-matching input or an unknown token.
    """
    parts = match_connection_uri(value)
    if parts is None:
        return None
    token = parts["dialect"].lower()
    low = value.lower()

    if token in ("postgres", "postgresql"):
        if "supabase" in low:
            return DatabaseDialect.SUPABASE
        return DatabaseDialect.POSTGRES
    if token == "mysql":
        if any(marker in low for marker in ("planetscale", "pscale", "psdb")):
            return DatabaseDialect.PLANETSCALE
        return DatabaseDialect.MYSQL
    if token in ("clickhouse", "jdbc:clickhouse"):
        return DatabaseDialect.CLICKHOUSE
    if token in ("sqlserver", "mssql", "sql_server"):
        return DatabaseDialect.SQL_SERVER
    return None


def _ssl_enabled(params: dict) -> bool:
    for key in SSL_PARAM_KEYS:
        if key in params:
            mode = params[key].lower()
            return mode not in SSL_DISABLED_VALUES
    return True


def extract_credentials(value: str) -> Optional[Credentials]:
    """
    Pull connection credentials out of a connection URI.

    Never raises on malformed input: a non-matching string gives None, an
    empty host is returned as-is for the caller to reject, and an unparseable
    query string leaves SSL enabled.
    """
    parts = match_connection_uri(value)
    if parts is None:
        return None

    username = safe_unquote(parts["username"]) if parts["username"] else ""
    password = safe_unquote(parts["password"]) if parts["password"] else ""
    if password == SUPABASE_PASSWORD_PLACEHOLDER:
        password = ""

    port = int(parts["port"], 10) if parts["port"] else None
    database_name = parts["database"] or ""

    ssl_enabled = True
    if parts["params"]:
        try:
            pairs = parse_qsl(parts["params"], keep_blank_values=True, errors="replace")
        except ValueError:
            pairs = None
        if pairs is not None:
            # keep the first occurrence of each key
            params: dict = {}
            for k, v in pairs:
                params.setdefault(k, v)
            # SQL Server puts the database in the query string
            if not database_name and params.get("database"):
                database_name = params["database"]
            ssl_enabled = _ssl_enabled(params)

    return Credentials(
        username=username,
        password=password,
        host=parts["host"],
        port=port,
        database_name=safe_unquote(database_name) if database_name else "",
        ssl_enabled=ssl_enabled,
    )


def build_connection_uri(dialect_token: str, creds: Credentials) -> str:
    """Canonical URI for a parsed result; parsing it gives the same Credentials."""
    uri = f"{dialect_token}://"
    if creds.username or creds.password:
        uri += quote(creds.username, safe="")
        if creds.password:
            uri += ":" + quote(creds.password, safe="")
        uri += "@"
    uri += creds.host
    if creds.port is not None:
        uri += f":{creds.port}"
    query = {}
    path_db = ""
    if PATH_DATABASE_RE.fullmatch(creds.database_name):
        path_db = creds.database_name
    elif creds.database_name:
        # query values are decoded twice on the way back in
        query["database"] = quote(creds.database_name, safe="")
    if not creds.ssl_enabled:
        query["sslmode"] = "disable"
    # a "/" is needed before "?" or the host would absorb the query
    if path_db or query:
        uri += f"/{path_db}"
    if query:
        uri += "?" + urlencode(query)
    return uri
