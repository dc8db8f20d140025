"""Configuration constants for the response toolkit."""

HTTP_VERSION: str = "HTTP/1.1"
HEAD_ENCODING: str = "iso-8859-1"
BODY_ENCODING: str = "utf-8"
CONTENT_TYPE_HEADER: str = "Content-Type"
CONTENT_LENGTH_HEADER: str = "Content-Length"
LOG_LEVEL: str = "WARNING"
