"""MongoDB URI Normalizer — credential encoding and SRV port stripping.

Invariants:
    - normalize_mongo_uri is pure and idempotent: normalize(normalize(x)) == normalize(x)
    - Non-MongoDB URIs pass through unchanged
    - Username and password are encoded independently; a part containing any %XX
      sequence is treated as already encoded and left alone
    - mongodb+srv:// URIs never carry a port; mongodb:// URIs keep theirs

Design Decisions:
    - Separator is the LAST '@' after the scheme, ignoring any '@' in the query
      string: raw passwords may contain '@', host lists never do
    - "Already encoded" is a heuristic (any %XX substring). A raw credential with a
      literal %XX-shaped run is misclassified — known limitation, not corrected here
    - Encoding matches JavaScript encodeURIComponent so URIs copied from Atlas
      dashboards and Node tooling normalize identically
"""

import re
from urllib.parse import quote

MONGODB_SCHEME = "mongodb://"
MONGODB_SRV_SCHEME = "mongodb+srv://"

# encodeURIComponent leaves A-Z a-z 0-9 - _ . ! ~ * ' ( ) unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"

_ENCODED_BYTE = re.compile(r"%[0-9A-Fa-f]{2}")
_SRV_PORT = re.compile(
    r"^(mongodb\+srv://(?:[^@/]+@)?[^:/?]+):\d+(?=/|\?|$)",
)
_PASSWORD = re.compile(r"^(mongodb(?:\+srv)?://[^:@/]*):[^@/?]+@")
_DATABASE_PATH = re.compile(r"^mongodb(?:\+srv)?://(?:[^@/]+@)?[^/]+/([^?]+)")


def _scheme_of(uri: str) -> str | None:
    for scheme in (MONGODB_SRV_SCHEME, MONGODB_SCHEME):
        if uri.startswith(scheme):
            return scheme
    return None


def is_already_encoded(value: str) -> bool:
    """True if value contains a percent-encoded byte (%XX)."""
    return bool(_ENCODED_BYTE.search(value))


def encode_credential(value: str) -> str:
    """Percent-encode one credential part unless it already looks encoded."""
    if is_already_encoded(value):
        return value
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _credentials_separator(rest: str) -> int:
    """Index of the credentials/host '@' in the part after the scheme, or -1.

    The last '@' wins, except that an '@' inside the query string
    (after the first '?' that follows the path) is never a separator.
    """
    first_at = rest.find("@")
    if first_at == -1:
        return -1
    path = rest.find("/", first_at)
    query = rest.find("?", path if path != -1 else first_at)
    end = query if query != -1 else len(rest)
    return rest.rfind("@", 0, end)


def encode_uri_credentials(uri: str) -> str:
    """Encode username/password of a MongoDB URI; other URIs are returned as-is."""
    scheme = _scheme_of(uri)
    if scheme is None:
        return uri

    rest = uri[len(scheme):]
    at = _credentials_separator(rest)
    if at == -1:
        return uri

    credentials, host_and_path = rest[:at], rest[at + 1:]
    username, colon, password = credentials.partition(":")

    encoded = encode_credential(username)
    if colon:
        encoded = f"{encoded}:{encode_credential(password)}"
    return f"{scheme}{encoded}@{host_and_path}"


def strip_srv_port(uri: str) -> str:
    """Remove :<port> after the host of a mongodb+srv:// URI (SRV records carry ports)."""
    if not uri.startswith(MONGODB_SRV_SCHEME):
        return uri
    return _SRV_PORT.sub(r"\1", uri, count=1)


def normalize_mongo_uri(uri: str) -> str:
    """Encode credentials, then strip the port from SRV URIs."""
    return strip_srv_port(encode_uri_credentials(uri))


def mask_credentials(uri: str) -> str:
    """Replace the password with **** for logging."""
    return _PASSWORD.sub(r"\1:****@", uri, count=1)


def has_database_name(uri: str) -> bool:
    """True if the URI carries a /<database> path segment."""
    return bool(_DATABASE_PATH.match(uri))
