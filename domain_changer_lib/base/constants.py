"""
Constants and configuration for the domain‑changer library.

Runtime settings are loaded from environment variables, so a deployment can
control behaviour without code changes.  The built‑in domain pairs used when
no configuration is supplied are kept here as an immutable tuple.
"""

import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "DOMAIN_CHANGER_"


# Path to a JSON file with the ``{"domains": [...]}`` configuration,
# empty means: use the built-in default pairs
CONFIG_FILE = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}CONFIG", ""
).strip()

# Logging levels accepted by the CLI
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Default logging level
LOG_LEVEL = (
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "WARNING")
    .upper()
    .strip()
)

# Schemes accepted for both sides of a domain pair
ALLOWED_SCHEMES = ("http", "https")

# Prefix ignored on candidate hosts before comparison
WWW_PREFIX = "www."

# (old, new) pairs of the default configuration
DEFAULT_DOMAIN_PAIRS = (
    # Youtube domains
    ("https://youtube.com/", "https://piped.kavin.rocks/"),
    ("https://youtu.be/", "https://piped.kavin.rocks/"),
    # Twitter domains
    ("https://t.co/", "https://nitter.net/"),
    ("https://twitter.com/", "https://nitter.net/"),
    # Reddit domains
    ("https://reddit.com/", "https://libredd.it/"),
)
