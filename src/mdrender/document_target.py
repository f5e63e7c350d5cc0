"""Resolution of link and image targets."""

from urllib.parse import urlsplit

from mdrender.document_error import InvalidTargetError


def resolve_target(url: str) -> str:
    """
    Resolve a link or image URL to an absolute reference.

    Args:
        url: The URL as written in the markdown source

    Returns:
        The URL with surrounding whitespace removed

    Raises:
        InvalidTargetError: If the URL is not a well-formed absolute reference
    """
    target = url.strip()
    try:
        parts = urlsplit(target)

    except ValueError as e:
        raise InvalidTargetError(url, str(e)) from e

    if not parts.scheme:
        raise InvalidTargetError(url, "no scheme")

    if not parts.netloc and not parts.path:
        raise InvalidTargetError(url, "no location")

    return target
