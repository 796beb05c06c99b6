"""Load settings for process entrypoints, exiting with a readable report on failure."""

from __future__ import annotations

import sys

from verifier.core.errors import InvalidSettingsError

# Import settings - this may raise InvalidSettingsError
try:
    from verifier.core.config import settings
except InvalidSettingsError as e:
    print("ERROR: Invalid environment variable values:", file=sys.stderr)
    for field, message in e.invalid_fields:
        print(f"  - {field}: {message}", file=sys.stderr)
    print(
        "\nPlease update these in your .env file (see env.example for reference)",
        file=sys.stderr,
    )
    sys.exit(1)

__all__ = ["settings"]
