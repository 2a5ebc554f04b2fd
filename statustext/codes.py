"""HTTP status codes as registered with IANA, and their reason phrases.

See https://www.iana.org/assignments/http-status-codes/http-status-codes.xhtml
"""

from types import MappingProxyType
from typing import Mapping

CONTINUE = 100  # RFC 7231, 6.2.1
SWITCHING_PROTOCOLS = 101  # RFC 7231, 6.2.2
PROCESSING = 102  # RFC 2518, 10.1
EARLY_HINTS = 103  # RFC 8297

OK = 200  # RFC 7231, 6.3.1
CREATED = 201  # RFC 7231, 6.3.2
ACCEPTED = 202  # RFC 7231, 6.3.3
NON_AUTHORITATIVE_INFO = 203  # RFC 7231, 6.3.4
NO_CONTENT = 204  # RFC 7231, 6.3.5
RESET_CONTENT = 205  # RFC 7231, 6.3.6
PARTIAL_CONTENT = 206  # RFC 7233, 4.1
MULTI_STATUS = 207  # RFC 4918, 11.1
ALREADY_REPORTED = 208  # RFC 5842, 7.1
IM_USED = 226  # RFC 3229, 10.4.1

MULTIPLE_CHOICES = 300  # RFC 7231, 6.4.1
MOVED_PERMANENTLY = 301  # RFC 7231, 6.4.2
FOUND = 302  # RFC 7231, 6.4.3
SEE_OTHER = 303  # RFC 7231, 6.4.4
NOT_MODIFIED = 304  # RFC 7232, 4.1
USE_PROXY = 305  # RFC 7231, 6.4.5
# 306 is reserved (RFC 7231, 6.4.6) and has no phrase.
TEMPORARY_REDIRECT = 307  # RFC 7231, 6.4.7
PERMANENT_REDIRECT = 308  # RFC 7538, 3

BAD_REQUEST = 400  # RFC 7231, 6.5.1
UNAUTHORIZED = 401  # RFC 7235, 3.1
PAYMENT_REQUIRED = 402  # RFC 7231, 6.5.2
FORBIDDEN = 403  # RFC 7231, 6.5.3
NOT_FOUND = 404  # RFC 7231, 6.5.4
METHOD_NOT_ALLOWED = 405  # RFC 7231, 6.5.5
NOT_ACCEPTABLE = 406  # RFC 7231, 6.5.6
PROXY_AUTH_REQUIRED = 407  # RFC 7235, 3.2
REQUEST_TIMEOUT = 408  # RFC 7231, 6.5.7
CONFLICT = 409  # RFC 7231, 6.5.8
GONE = 410  # RFC 7231, 6.5.9
LENGTH_REQUIRED = 411  # RFC 7231, 6.5.10
PRECONDITION_FAILED = 412  # RFC 7232, 4.2
REQUEST_ENTITY_TOO_LARGE = 413  # RFC 7231, 6.5.11
REQUEST_URI_TOO_LONG = 414  # RFC 7231, 6.5.12
UNSUPPORTED_MEDIA_TYPE = 415  # RFC 7231, 6.5.13
REQUESTED_RANGE_NOT_SATISFIABLE = 416  # RFC 7233, 4.4
EXPECTATION_FAILED = 417  # RFC 7231, 6.5.14
TEAPOT = 418  # RFC 7168, 2.3.3
MISDIRECTED_REQUEST = 421  # RFC 7540, 9.1.2
UNPROCESSABLE_ENTITY = 422  # RFC 4918, 11.2
LOCKED = 423  # RFC 4918, 11.3
FAILED_DEPENDENCY = 424  # RFC 4918, 11.4
TOO_EARLY = 425  # RFC 8470, 5.2
UPGRADE_REQUIRED = 426  # RFC 7231, 6.5.15
PRECONDITION_REQUIRED = 428  # RFC 6585, 3
TOO_MANY_REQUESTS = 429  # RFC 6585, 4
REQUEST_HEADER_FIELDS_TOO_LARGE = 431  # RFC 6585, 5
UNAVAILABLE_FOR_LEGAL_REASONS = 451  # RFC 7725, 3

INTERNAL_SERVER_ERROR = 500  # RFC 7231, 6.6.1
NOT_IMPLEMENTED = 501  # RFC 7231, 6.6.2
BAD_GATEWAY = 502  # RFC 7231, 6.6.3
SERVICE_UNAVAILABLE = 503  # RFC 7231, 6.6.4
GATEWAY_TIMEOUT = 504  # RFC 7231, 6.6.5
HTTP_VERSION_NOT_SUPPORTED = 505  # RFC 7231, 6.6.6
VARIANT_ALSO_NEGOTIATES = 506  # RFC 2295, 8.1
INSUFFICIENT_STORAGE = 507  # RFC 4918, 11.5
LOOP_DETECTED = 508  # RFC 5842, 7.2
NOT_EXTENDED = 510  # RFC 2774, 7
NETWORK_AUTHENTICATION_REQUIRED = 511  # RFC 6585, 6


STATUS_TEXT: Mapping[int, str] = MappingProxyType(
    {
        CONTINUE: "Continue",
        SWITCHING_PROTOCOLS: "Switching Protocols",
        PROCESSING: "Processing",
        EARLY_HINTS: "Early Hints",
        OK: "OK",
        CREATED: "Created",
        ACCEPTED: "Accepted",
        NON_AUTHORITATIVE_INFO: "Non-Authoritative Information",
        NO_CONTENT: "No Content",
        RESET_CONTENT: "Reset Content",
        PARTIAL_CONTENT: "Partial Content",
        MULTI_STATUS: "Multi-Status",
        ALREADY_REPORTED: "Already Reported",
        IM_USED: "IM Used",
        MULTIPLE_CHOICES: "Multiple Choices",
        MOVED_PERMANENTLY: "Moved Permanently",
        FOUND: "Found",
        SEE_OTHER: "See Other",
        NOT_MODIFIED: "Not Modified",
        USE_PROXY: "Use Proxy",
        TEMPORARY_REDIRECT: "Temporary Redirect",
        PERMANENT_REDIRECT: "Permanent Redirect",
        BAD_REQUEST: "Bad Request",
        UNAUTHORIZED: "Unauthorized",
        PAYMENT_REQUIRED: "Payment Required",
        FORBIDDEN: "Forbidden",
        NOT_FOUND: "Not Found",
        METHOD_NOT_ALLOWED: "Method Not Allowed",
        NOT_ACCEPTABLE: "Not Acceptable",
        PROXY_AUTH_REQUIRED: "Proxy Authentication Required",
        REQUEST_TIMEOUT: "Request Timeout",
        CONFLICT: "Conflict",
        GONE: "Gone",
        LENGTH_REQUIRED: "Length Required",
        PRECONDITION_FAILED: "Precondition Failed",
        REQUEST_ENTITY_TOO_LARGE: "Request Entity Too Large",
        REQUEST_URI_TOO_LONG: "Request URI Too Long",
        UNSUPPORTED_MEDIA_TYPE: "Unsupported Media Type",
        REQUESTED_RANGE_NOT_SATISFIABLE: "Requested Range Not Satisfiable",
        EXPECTATION_FAILED: "Expectation Failed",
        TEAPOT: "I'm a teapot",
        MISDIRECTED_REQUEST: "Misdirected Request",
        UNPROCESSABLE_ENTITY: "Unprocessable Entity",
        LOCKED: "Locked",
        FAILED_DEPENDENCY: "Failed Dependency",
        TOO_EARLY: "Too Early",
        UPGRADE_REQUIRED: "Upgrade Required",
        PRECONDITION_REQUIRED: "Precondition Required",
        TOO_MANY_REQUESTS: "Too Many Requests",
        REQUEST_HEADER_FIELDS_TOO_LARGE: "Request Header Fields Too Large",
        UNAVAILABLE_FOR_LEGAL_REASONS: "Unavailable For Legal Reasons",
        INTERNAL_SERVER_ERROR: "Internal Server Error",
        NOT_IMPLEMENTED: "Not Implemented",
        BAD_GATEWAY: "Bad Gateway",
        SERVICE_UNAVAILABLE: "Service Unavailable",
        GATEWAY_TIMEOUT: "Gateway Timeout",
        HTTP_VERSION_NOT_SUPPORTED: "HTTP Version Not Supported",
        VARIANT_ALSO_NEGOTIATES: "Variant Also Negotiates",
        INSUFFICIENT_STORAGE: "Insufficient Storage",
        LOOP_DETECTED: "Loop Detected",
        NOT_EXTENDED: "Not Extended",
        NETWORK_AUTHENTICATION_REQUIRED: "Network Authentication Required",
    }
)
