"""Escaping of values embedded in TeamCity service messages."""

_REPLACEMENTS = {
    "|": "||",
    "'": "|'",
    "\n": "|n",
    "\r": "|r",
    "[": "|[",
    "]": "|]",
    "\u0085": "|x",
    "\u2028": "|l",
    "\u2029": "|p",
}

_TABLE = str.maketrans(_REPLACEMENTS)


def escape(value: object) -> str:
    """Escape ``value`` for use inside a quoted service-message attribute."""
    if value is None:
        return ""
    return str(value).translate(_TABLE)
