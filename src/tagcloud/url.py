"""Text sources streamed over HTTP(S)."""

import codecs
from collections.abc import Iterator

import requests

# Timeout for HTTP requests (in seconds)
DEFAULT_TIMEOUT = 30

CHUNK_SIZE = 8192

DEFAULT_HEADERS = {
    "User-Agent": "tagcloud/1.0 (word frequency tag cloud generator)",
}


def is_url(path: str) -> bool:
    """Check if a path is an HTTP/HTTPS URL."""
    return path.startswith("http://") or path.startswith("https://")


def response_encoding(response: requests.Response) -> str:
    """Pick the text encoding of a response.

    Only a charset declared in the Content-Type header is trusted; anything
    else, including an unknown codec name, falls back to UTF-8.
    """
    content_type = response.headers.get("Content-Type", "")
    if "charset=" not in content_type.lower() or not response.encoding:
        return "utf-8"
    try:
        return codecs.lookup(response.encoding).name
    except LookupError:
        return "utf-8"


class RemoteLines:
    """Lines of a text document read from an open HTTP response.

    Iterating yields lines with their ``\\n`` terminator, like a text file.
    Undecodable bytes raise ``UnicodeDecodeError`` and transport failures
    raise ``requests.RequestException`` (an ``OSError``).
    """

    def __init__(self, response: requests.Response, encoding: str) -> None:
        self._response = response
        self.encoding = encoding

    def __iter__(self) -> Iterator[str]:
        decoder = codecs.getincrementaldecoder(self.encoding)()
        pending = ""
        for chunk in self._response.iter_content(chunk_size=CHUNK_SIZE):
            pending += decoder.decode(chunk)
            *lines, pending = pending.split("\n")
            for line in lines:
                yield line + "\n"
        pending += decoder.decode(b"", final=True)
        if pending:
            yield pending

    def close(self) -> None:
        self._response.close()


def open_url(url: str, timeout: int = DEFAULT_TIMEOUT) -> RemoteLines:
    """Start streaming a URL as text lines.

    Args:
        url: The URL to read.
        timeout: Request timeout in seconds.

    Returns:
        RemoteLines over the response body; the caller closes it.

    Raises:
        requests.RequestException: If the request fails or the server
            answers with an error status.
    """
    response = requests.get(url, timeout=timeout, stream=True, headers=DEFAULT_HEADERS)
    try:
        response.raise_for_status()
    except requests.HTTPError:
        response.close()
        raise
    return RemoteLines(response, response_encoding(response))
