"""Version information for phpformat."""

PHPFORMAT_VERSION_MAJOR = 0
PHPFORMAT_VERSION_MINOR = 1
PHPFORMAT_VERSION_PATCH = 0
PHPFORMAT_VERSION = f"{PHPFORMAT_VERSION_MAJOR}.{PHPFORMAT_VERSION_MINOR}.{PHPFORMAT_VERSION_PATCH}"

# Newest PHP syntax the node set covers
PHP_SYNTAX_VERSION = "5.4"


def get_version_string() -> str:
    """Get full version string."""
    return f"phpformat {PHPFORMAT_VERSION} (PHP {PHP_SYNTAX_VERSION} syntax)"


def get_version_info() -> dict:
    """Get version information as dictionary."""
    return {
        "phpformat": {
            "major": PHPFORMAT_VERSION_MAJOR,
            "minor": PHPFORMAT_VERSION_MINOR,
            "patch": PHPFORMAT_VERSION_PATCH,
            "version": PHPFORMAT_VERSION,
        },
        "php": {"version": PHP_SYNTAX_VERSION},
    }
