"""Local configuration for kssdoc."""

from __future__ import annotations

import os


DEFAULT_PARAM_PREFIX = "sg-"
DEFAULT_MAX_CONCURRENCY = 32
DEFAULT_EXCLUDED_LINKS = ""

# Prefix marking non-standard key/value parameters inside KSS comments.
KSSDOC_PARAM_PREFIX = os.getenv("KSSDOC_PARAM_PREFIX", DEFAULT_PARAM_PREFIX)
# At least one block must be allowed to build at a time.
KSSDOC_MAX_CONCURRENCY = max(1, int(os.getenv("KSSDOC_MAX_CONCURRENCY", str(DEFAULT_MAX_CONCURRENCY))))
# Comma-separated URL prefixes of links dropped from style-guide HTML.
KSSDOC_EXCLUDED_LINKS = tuple(
    link.strip()
    for link in os.getenv("KSSDOC_EXCLUDED_LINKS", DEFAULT_EXCLUDED_LINKS).split(",")
    if link.strip()
)
