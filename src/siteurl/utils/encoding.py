"""src/siteurl/utils/encoding.py

Percent-encoding helpers for query and fragment values.
"""

import logging
import urllib.parse

logger = logging.getLogger(__name__)

# Left untouched besides letters, digits and "_.-". quote_plus never
# escapes "~", form encoding does.
_FORM_SAFE = "*"


def encode(value: str, charset: str = "UTF-8") -> str:
    """
    Percent-encode a value in application/x-www-form-urlencoded style.

    Spaces become ``+``. Only letters, digits and ``.-_*`` are kept as they
    are. Non-ASCII characters are encoded with ``charset``; characters the
    charset cannot represent are encoded as ``?``.

    Args:
        value: Text to encode.
        charset: Name of a codec known to Python's codec registry.

    Returns:
        The encoded value, or ``value`` unchanged if ``charset`` is not a
        known codec.
    """
    try:
        encoded = urllib.parse.quote_plus(
            value, safe=_FORM_SAFE, encoding=charset, errors="replace"
        )
    except LookupError:
        logger.debug("Unknown charset %r, leaving %r unencoded", charset, value)
        return value
    return encoded.replace("~", "%7E")
