"""API version this library is pinned to."""

# Model classes are shaped by this version; override per request only for
# responses that are passed through unparsed.
API_VERSION = "2020-08-27"
