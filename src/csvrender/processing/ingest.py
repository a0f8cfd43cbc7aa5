"""Read raw delimited text from local files or network URLs.

Bytes are decoded trying UTF-8, UTF-16, UTF-32 and ASCII in that order.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

import httpx

from ..errors import SourceAccessError

logger = logging.getLogger(__name__)

ENCODINGS = ("utf-8", "utf-16", "utf-32", "ascii")


def decode_bytes(data: bytes, source: str) -> str:
    """Decode ``data`` with the first encoding that accepts it."""
    for encoding in ENCODINGS:
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError:
            continue
        logger.debug(f"Decoded {source} as {encoding}")
        return text
    raise SourceAccessError("No usable encoding", source=source, data=data)


def read_local(path: Union[Path, str], check_access: bool = False) -> str:
    """Read and decode a local file.

    Args:
        path: File path.
        check_access: Verify read permission before opening.

    Raises:
        SourceAccessError: If the file cannot be accessed or decoded.
    """
    file_path = Path(path)
    source = str(file_path)

    if check_access and not os.access(file_path, os.R_OK):
        raise SourceAccessError("Cannot access file", source=source)

    try:
        data = file_path.read_bytes()
    except OSError as exc:
        raise SourceAccessError("Cannot access file", source=source) from exc

    return decode_bytes(data, source)


def read_network(
    url: str,
    client: Optional[httpx.Client] = None,
    timeout: float = 30.0,
) -> str:
    """Download and decode a network resource.

    Raises:
        SourceAccessError: On HTTP/transport errors or undecodable content.
    """
    owns_client = client is None
    http = client or httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        response = http.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SourceAccessError(
            f"HTTP {exc.response.status_code}", source=url, data=exc.response.content
        ) from exc
    except httpx.HTTPError as exc:
        raise SourceAccessError("Cannot access resource", source=url) from exc
    finally:
        if owns_client:
            http.close()

    logger.info(f"Downloaded {len(response.content)} bytes from {url}")
    return decode_bytes(response.content, url)
