"""Simple runtime configuration for smartdate.

Defaults are read from environment variables so a deployment can change
them without code changes. Callers can always pass explicit values; these
only apply when an argument is omitted.
"""
import os


def _trueish(v: str | None) -> bool:
    if not v:
        return False
    return v.lower() in ('1', 'true', 'yes', 'on')


# Numeric date ordering: 'mdy' (12/15 is Dec 15) or 'dmy' (15/12 is Dec 15).
# Read from DATE_FORMAT; lowercase is canonical but any case is accepted.
DATE_FORMAT = os.getenv('DATE_FORMAT', 'mdy').lower()

# Clock style used by format_relative_date when none is given: '12hr' or '24hr'.
TIME_FORMAT = os.getenv('TIME_FORMAT', '12hr').lower()

# The parser runs on every keystroke; the HTTP layer refuses anything longer
# than this many characters.
try:
    MAX_INPUT_LENGTH = int(os.getenv('MAX_INPUT_LENGTH', '1000'))
except ValueError:
    MAX_INPUT_LENGTH = 1000

# When true, the web module logs at DEBUG so candidate selection is visible.
DEV_MODE = _trueish(os.getenv('DEV_MODE', '0'))

# Optional local overrides: define variables in smartdate/local_config.py to
# override the defaults above without touching versioned config.
try:
    from .local_config import *  # type: ignore  # noqa: F401,F403
except ImportError:
    # No local overrides present; proceed with defaults.
    pass
