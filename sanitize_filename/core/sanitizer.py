"""Turn arbitrary text into a single safe filesystem name component."""

from __future__ import annotations

import logging
from typing import Optional

from .charfilter import filter_characters
from .options import Options
from .reserved import is_all_dots, is_windows_reserved
from .rules import get_rules
from .trailing import strip_trailing, trim_trailing
from .truncate import exceeds_limit, truncate

logger = logging.getLogger(__name__)


def _truncate_name(name: str, options: Options) -> str:
    limit = get_rules().max_encoded_length
    if not exceeds_limit(name, limit):
        return name
    cut = truncate(name, limit)
    logger.debug("Truncated name from %d to %d code points", len(name), len(cut))
    if not options.windows:
        if is_all_dots(cut):
            return truncate(options.replacement, limit)
        return cut
    # The cut point may expose trailing dots/spaces or leave a bare device stem.
    stripped = strip_trailing(cut)
    if stripped and not is_windows_reserved(stripped):
        return stripped
    return truncate(options.replacement, limit)


def sanitize_with_options(name: str, options: Options) -> str:
    """Sanitize ``name`` according to ``options``.

    Steps, in order:
        1. replace illegal and control characters
        2. replace all-dot names as a whole
        3. (windows) trim trailing dots/spaces, then replace reserved device names
        4. (truncate) cap the UTF-8 length at 255 bytes on a code point boundary

    Never raises for any ``str`` input.
    """
    replacement = options.replacement
    result = filter_characters(name, replacement)

    if is_all_dots(result):
        logger.debug("Collapsed all-dot name %r", result)
        result = replacement

    if options.windows:
        result = trim_trailing(result, replacement)
        if is_windows_reserved(result):
            logger.debug("Collapsed reserved device name %r", result)
            result = replacement

    if options.truncate:
        result = _truncate_name(result, options)

    return result


def sanitize(name: str, options: Optional[Options] = None) -> str:
    """Sanitize ``name`` with ``options``, or the platform defaults."""
    return sanitize_with_options(name, options if options is not None else Options())
