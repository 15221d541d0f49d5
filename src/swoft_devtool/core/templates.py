"""Template registry and source-reference predicates.

The registry is a closed mapping from a short type key to the name of an
upstream demo repository under the swoft-cloud organization.
"""

GITHUB_URL = "https://github.com"

SWOFT_CLOUD_URL = "https://github.com/swoft-cloud"

# https://github.com/swoft-cloud/swoft-http-project.git
# git@github.com:swoft-cloud/swoft-http-project.git
DEMO_GITHUB_REPOS: dict[str, str] = {
    "http": "swoft-http-project",
    "tcp": "swoft-tcp-project",
    "rpc": "swoft-rpc-project",
    "ws": "swoft-ws-project",
    "full": "swoft",
}

_FULL_URL_PREFIXES = ("http:", "https:", "git@")


def is_full_url(value: str) -> bool:
    """Return True if value is a complete repository reference.

    Complete references start with ``http:``, ``https:`` or ``git@`` and are
    used verbatim when cloning.
    """
    return value.startswith(_FULL_URL_PREFIXES)


def is_valid_type(type_name: str) -> bool:
    """Return True if type_name is a key of the template registry."""
    return type_name in DEMO_GITHUB_REPOS


def allowed_types() -> list[str]:
    """Registry keys in declaration order."""
    return list(DEMO_GITHUB_REPOS)


def repo_url_for_type(type_name: str) -> str:
    """Build the clone URL for a registered template type.

    Raises:
        KeyError: If type_name is not registered
    """
    return f"{SWOFT_CLOUD_URL}/{DEMO_GITHUB_REPOS[type_name]}.git"


def repo_url_for_short_ref(short_ref: str) -> str:
    """Expand an ``owner/name`` reference to a GitHub clone URL."""
    return f"{GITHUB_URL}/{short_ref}.git"


def cache_entry_name(repo_url: str) -> str:
    """Name of the cache directory for a repository URL.

    This is the last path component of the URL with a trailing ``.git``
    removed, e.g. ``swoft-rpc-project`` for
    ``https://github.com/swoft-cloud/swoft-rpc-project.git``. SSH references
    such as ``git@host:repo.git`` are split on ``:`` as well.
    """
    base = repo_url.rstrip("/").rsplit("/", 1)[-1]
    base = base.rsplit(":", 1)[-1]
    if base.endswith(".git"):
        base = base[: -len(".git")]
    return base
