"""HTTP protocol versions, request methods, header fields and status reasons."""

from __future__ import annotations

from enum import IntEnum, auto
from types import MappingProxyType
from typing import Mapping

__all__ = [
    "Protocol",
    "Method",
    "HeaderField",
    "STATUS_REASONS",
    "protocol_from_string",
    "protocol_to_string",
    "method_from_string",
    "method_to_string",
    "field_from_string",
    "field_to_string",
    "status_reason",
]


class Protocol(IntEnum):
    """HTTP protocol version."""

    UNKNOWN_TYPE = 0
    HTTP_1_0 = auto()
    HTTP_1_1 = auto()
    HTTP_2 = auto()


class Method(IntEnum):
    """HTTP request method, including the WebDAV extensions."""

    UNKNOWN_TYPE = 0
    CONNECT = auto()
    DELETE = auto()
    GET = auto()
    HEAD = auto()
    OPTIONS = auto()
    PATCH = auto()
    POST = auto()
    PUT = auto()
    TRACE = auto()
    COPY = auto()
    LOCK = auto()
    MKCOL = auto()
    MOVE = auto()
    PROPFIND = auto()
    PROPPATCH = auto()
    UNLOCK = auto()


class HeaderField(IntEnum):
    """Well-known HTTP header field; the value order fixes serialisation order."""

    UNKNOWN_TYPE = 0
    A_IM = auto()
    ACCEPT = auto()
    ACCEPT_CH = auto()
    ACCEPT_CHARSET = auto()
    ACCEPT_DATETIME = auto()
    ACCEPT_ENCODING = auto()
    ACCEPT_LANGUAGE = auto()
    ACCEPT_PATCH = auto()
    ACCEPT_RANGES = auto()
    ACCESS_CONTROL_ALLOW_CREDENTIALS = auto()
    ACCESS_CONTROL_ALLOW_HEADERS = auto()
    ACCESS_CONTROL_ALLOW_METHODS = auto()
    ACCESS_CONTROL_ALLOW_ORIGIN = auto()
    ACCESS_CONTROL_EXPOSE_HEADERS = auto()
    ACCESS_CONTROL_MAX_AGE = auto()
    ACCESS_CONTROL_REQUEST_HEADERS = auto()
    ACCESS_CONTROL_REQUEST_METHOD = auto()
    AGE = auto()
    ALLOW = auto()
    ALT_SVC = auto()
    AUTHORIZATION = auto()
    CACHE_CONTROL = auto()
    CONNECTION = auto()
    CONTENT_DISPOSITION = auto()
    CONTENT_ENCODING = auto()
    CONTENT_LANGUAGE = auto()
    CONTENT_LENGTH = auto()
    CONTENT_LOCATION = auto()
    CONTENT_MD5 = auto()
    CONTENT_RANGE = auto()
    CONTENT_SECURITY_POLICY = auto()
    CONTENT_TYPE = auto()
    COOKIE = auto()
    DATE = auto()
    DELTA_BASE = auto()
    DNT = auto()
    ETAG = auto()
    EXPECT = auto()
    EXPECT_CT = auto()
    EXPIRES = auto()
    FORWARDED = auto()
    FROM = auto()
    FRONT_END_HTTPS = auto()
    HOST = auto()
    HTTP2_SETTINGS = auto()
    IF_MATCH = auto()
    IF_MODIFIED_SINCE = auto()
    IF_NONE_MATCH = auto()
    IF_RANGE = auto()
    IF_UNMODIFIED_SINCE = auto()
    IM = auto()
    LAST_MODIFIED = auto()
    LINK = auto()
    LOCATION = auto()
    MAX_FORWARDS = auto()
    NEL = auto()
    ORIGIN = auto()
    P3P = auto()
    PERMISSIONS_POLICY = auto()
    PRAGMA = auto()
    PREFER = auto()
    PREFERENCE_APPLIED = auto()
    PROXY_AUTHENTICATE = auto()
    PROXY_AUTHORIZATION = auto()
    PROXY_CONNECTION = auto()
    PUBLIC_KEY_PINS = auto()
    RANGE = auto()
    REFERER = auto()
    REFRESH = auto()
    REPORT_TO = auto()
    RETRY_AFTER = auto()
    SAVE_DATA = auto()
    SEC_CH_UA_ARCH = auto()
    SEC_CH_UA_BITNESS = auto()
    SEC_CH_UA_FULL_VERSION_LIST = auto()
    SEC_CH_UA_FULL_VERSION = auto()
    SEC_CH_UA_MOBILE = auto()
    SEC_CH_UA_MODEL = auto()
    SEC_CH_UA_PLATFORM_VERSION = auto()
    SEC_CH_UA_PLATFORM = auto()
    SEC_CH_UA = auto()
    SEC_FETCH_DEST = auto()
    SEC_FETCH_MODE = auto()
    SEC_FETCH_SITE = auto()
    SEC_FETCH_USER = auto()
    SEC_GPC = auto()
    SEC_WEBSOCKET_ACCEPT = auto()
    SEC_WEBSOCKET_EXTENSIONS = auto()
    SEC_WEBSOCKET_KEY = auto()
    SEC_WEBSOCKET_PROTOCOL = auto()
    SEC_WEBSOCKET_VERSION = auto()
    SERVER = auto()
    SET_COOKIE = auto()
    STATUS = auto()
    STRICT_TRANSPORT_SECURITY = auto()
    TE = auto()
    TIMING_ALLOW_ORIGIN = auto()
    TK = auto()
    TRAILER = auto()
    TRANSFER_ENCODING = auto()
    UPGRADE = auto()
    UPGRADE_INSECURE_REQUESTS = auto()
    USER_AGENT = auto()
    VARY = auto()
    VIA = auto()
    WARNING = auto()
    WWW_AUTHENTICATE = auto()
    X_ATT_DEVICEID = auto()
    X_CONTENT_DURATION = auto()
    X_CONTENT_SECURITY_POLICY = auto()
    X_CONTENT_TYPE_OPTIONS = auto()
    X_CORRELATION_ID = auto()
    X_CSRF_TOKEN = auto()
    X_FORWARDED_FOR = auto()
    X_FORWARDED_HOST = auto()
    X_FORWARDED_PROTO = auto()
    X_FRAME_OPTIONS = auto()
    X_HTTP_METHOD_OVERRIDE = auto()
    X_POWERED_BY = auto()
    X_REDIRECT_BY = auto()
    X_REQUEST_ID = auto()
    X_REQUESTED_WITH = auto()
    X_UA_COMPATIBLE = auto()
    X_UIDH = auto()
    X_WAP_PROFILE = auto()
    X_WEBKIT_CSP = auto()
    X_XSS_PROTECTION = auto()


_PROTOCOL_BY_LOWER: Mapping[str, Protocol] = MappingProxyType({
    "http/1.0": Protocol.HTTP_1_0,
    "http/1.1": Protocol.HTTP_1_1,
    "http/2": Protocol.HTTP_2,
})

# HTTP/1.0 is deliberately written out as "HTTP/2" on the wire.
_PROTOCOL_NAMES: Mapping[Protocol, str] = MappingProxyType({
    Protocol.HTTP_1_0: "HTTP/2",
    Protocol.HTTP_1_1: "HTTP/1.1",
    Protocol.HTTP_2: "HTTP/2",
})

_METHOD_BY_LOWER: Mapping[str, Method] = MappingProxyType({
    method.name.lower(): method for method in Method if method is not Method.UNKNOWN_TYPE
})

_FIELD_NAMES: Mapping[HeaderField, str] = MappingProxyType({
    HeaderField.A_IM: "A-IM",
    HeaderField.ACCEPT: "Accept",
    HeaderField.ACCEPT_CH: "Accept-CH",
    HeaderField.ACCEPT_CHARSET: "Accept-Charset",
    HeaderField.ACCEPT_DATETIME: "Accept-Datetime",
    HeaderField.ACCEPT_ENCODING: "Accept-Encoding",
    HeaderField.ACCEPT_LANGUAGE: "Accept-Language",
    HeaderField.ACCEPT_PATCH: "Accept-Patch",
    HeaderField.ACCEPT_RANGES: "Accept-Ranges",
    HeaderField.ACCESS_CONTROL_ALLOW_CREDENTIALS: "Access-Control-Allow-Credentials",
    HeaderField.ACCESS_CONTROL_ALLOW_HEADERS: "Access-Control-Allow-Headers",
    HeaderField.ACCESS_CONTROL_ALLOW_METHODS: "Access-Control-Allow-Methods",
    HeaderField.ACCESS_CONTROL_ALLOW_ORIGIN: "Access-Control-Allow-Origin",
    HeaderField.ACCESS_CONTROL_EXPOSE_HEADERS: "Access-Control-Expose-Headers",
    HeaderField.ACCESS_CONTROL_MAX_AGE: "Access-Control-Max-Age",
    HeaderField.ACCESS_CONTROL_REQUEST_HEADERS: "Access-Control-Request-Headers",
    HeaderField.ACCESS_CONTROL_REQUEST_METHOD: "Access-Control-Request-Method",
    HeaderField.AGE: "Age",
    HeaderField.ALLOW: "Allow",
    HeaderField.ALT_SVC: "Alt-Svc",
    HeaderField.AUTHORIZATION: "Authorization",
    HeaderField.CACHE_CONTROL: "Cache-Control",
    HeaderField.CONNECTION: "Connection",
    HeaderField.CONTENT_DISPOSITION: "Content-Disposition",
    HeaderField.CONTENT_ENCODING: "Content-Encoding",
    HeaderField.CONTENT_LANGUAGE: "Content-Language",
    HeaderField.CONTENT_LENGTH: "Content-Length",
    HeaderField.CONTENT_LOCATION: "Content-Location",
    HeaderField.CONTENT_MD5: "Content-MD5",
    HeaderField.CONTENT_RANGE: "Content-Range",
    HeaderField.CONTENT_SECURITY_POLICY: "Content-Security-Policy",
    HeaderField.CONTENT_TYPE: "Content-Type",
    HeaderField.COOKIE: "Cookie",
    HeaderField.DATE: "Date",
    HeaderField.DELTA_BASE: "Delta-Base",
    HeaderField.DNT: "DNT",
    HeaderField.ETAG: "ETag",
    HeaderField.EXPECT: "Expect",
    HeaderField.EXPECT_CT: "Expect-CT",
    HeaderField.EXPIRES: "Expires",
    HeaderField.FORWARDED: "Forwarded",
    HeaderField.FROM: "From",
    HeaderField.FRONT_END_HTTPS: "Front-End-Https",
    HeaderField.HOST: "Host",
    HeaderField.HTTP2_SETTINGS: "HTTP2-Settings",
    HeaderField.IF_MATCH: "If-Match",
    HeaderField.IF_MODIFIED_SINCE: "If-Modified-Since",
    HeaderField.IF_NONE_MATCH: "If-None-Match",
    HeaderField.IF_RANGE: "If-Range",
    HeaderField.IF_UNMODIFIED_SINCE: "If-Unmodified-Since",
    HeaderField.IM: "IM",
    HeaderField.LAST_MODIFIED: "Last-Modified",
    HeaderField.LINK: "Link",
    HeaderField.LOCATION: "Location",
    HeaderField.MAX_FORWARDS: "Max-Forwards",
    HeaderField.NEL: "NEL",
    HeaderField.ORIGIN: "Origin",
    HeaderField.P3P: "P3P",
    HeaderField.PERMISSIONS_POLICY: "Permissions-Policy",
    HeaderField.PRAGMA: "Pragma",
    HeaderField.PREFER: "Prefer",
    HeaderField.PREFERENCE_APPLIED: "Preference-Applied",
    HeaderField.PROXY_AUTHENTICATE: "Proxy-Authenticate",
    HeaderField.PROXY_AUTHORIZATION: "Proxy-Authorization",
    HeaderField.PROXY_CONNECTION: "Proxy-Connection",
    HeaderField.PUBLIC_KEY_PINS: "Public-Key-Pins",
    HeaderField.RANGE: "Range",
    HeaderField.REFERER: "Referer",
    HeaderField.REFRESH: "Refresh",
    HeaderField.REPORT_TO: "Report-To",
    HeaderField.RETRY_AFTER: "Retry-After",
    HeaderField.SAVE_DATA: "Save-Data",
    HeaderField.SEC_CH_UA_ARCH: "Sec-CH-UA-Arch",
    HeaderField.SEC_CH_UA_BITNESS: "Sec-CH-UA-Bitness",
    HeaderField.SEC_CH_UA_FULL_VERSION_LIST: "Sec-CH-UA-Full-Version-List",
    HeaderField.SEC_CH_UA_FULL_VERSION: "Sec-CH-UA-Full-Version",
    HeaderField.SEC_CH_UA_MOBILE: "Sec-CH-UA-Mobile",
    HeaderField.SEC_CH_UA_MODEL: "Sec-CH-UA-Model",
    HeaderField.SEC_CH_UA_PLATFORM_VERSION: "Sec-CH-UA-Platform-Version",
    HeaderField.SEC_CH_UA_PLATFORM: "Sec-CH-UA-Platform",
    HeaderField.SEC_CH_UA: "Sec-CH-UA",
    HeaderField.SEC_FETCH_DEST: "Sec-Fetch-Dest",
    HeaderField.SEC_FETCH_MODE: "Sec-Fetch-Mode",
    HeaderField.SEC_FETCH_SITE: "Sec-Fetch-Site",
    HeaderField.SEC_FETCH_USER: "Sec-Fetch-User",
    HeaderField.SEC_GPC: "Sec-GPC",
    HeaderField.SEC_WEBSOCKET_ACCEPT: "Sec-WebSocket-Accept",
    HeaderField.SEC_WEBSOCKET_EXTENSIONS: "Sec-WebSocket-Extensions",
    HeaderField.SEC_WEBSOCKET_KEY: "Sec-WebSocket-Key",
    HeaderField.SEC_WEBSOCKET_PROTOCOL: "Sec-WebSocket-Protocol",
    HeaderField.SEC_WEBSOCKET_VERSION: "Sec-WebSocket-Version",
    HeaderField.SERVER: "Server",
    HeaderField.SET_COOKIE: "Set-Cookie",
    HeaderField.STATUS: "Status",
    HeaderField.STRICT_TRANSPORT_SECURITY: "Strict-Transport-Security",
    HeaderField.TE: "TE",
    HeaderField.TIMING_ALLOW_ORIGIN: "Timing-Allow-Origin",
    HeaderField.TK: "Tk",
    HeaderField.TRAILER: "Trailer",
    HeaderField.TRANSFER_ENCODING: "Transfer-Encoding",
    HeaderField.UPGRADE: "Upgrade",
    HeaderField.UPGRADE_INSECURE_REQUESTS: "Upgrade-Insecure-Requests",
    HeaderField.USER_AGENT: "User-Agent",
    HeaderField.VARY: "Vary",
    HeaderField.VIA: "Via",
    HeaderField.WARNING: "Warning",
    HeaderField.WWW_AUTHENTICATE: "WWW-Authenticate",
    HeaderField.X_ATT_DEVICEID: "X-ATT-DeviceId",
    HeaderField.X_CONTENT_DURATION: "X-Content-Duration",
    HeaderField.X_CONTENT_SECURITY_POLICY: "X-Content-Security-Policy",
    HeaderField.X_CONTENT_TYPE_OPTIONS: "X-Content-Type-Options",
    HeaderField.X_CORRELATION_ID: "X-Correlation-ID",
    HeaderField.X_CSRF_TOKEN: "X-Csrf-Token",
    HeaderField.X_FORWARDED_FOR: "X-Forwarded-For",
    HeaderField.X_FORWARDED_HOST: "X-Forwarded-Host",
    HeaderField.X_FORWARDED_PROTO: "X-Forwarded-Proto",
    HeaderField.X_FRAME_OPTIONS: "X-Frame-Options",
    HeaderField.X_HTTP_METHOD_OVERRIDE: "X-Http-Method-Override",
    HeaderField.X_POWERED_BY: "X-Powered-By",
    HeaderField.X_REDIRECT_BY: "X-Redirect-By",
    HeaderField.X_REQUEST_ID: "X-Request-ID",
    HeaderField.X_REQUESTED_WITH: "X-Requested-With",
    HeaderField.X_UA_COMPATIBLE: "X-UA-Compatible",
    HeaderField.X_UIDH: "X-UIDH",
    HeaderField.X_WAP_PROFILE: "X-Wap-Profile",
    HeaderField.X_WEBKIT_CSP: "X-WebKit-CSP",
    HeaderField.X_XSS_PROTECTION: "X-XSS-Protection",
})

_FIELD_BY_LOWER: Mapping[str, HeaderField] = MappingProxyType({
    name.lower(): field for field, name in _FIELD_NAMES.items()
})

STATUS_REASONS: Mapping[int, str] = MappingProxyType({
    100: "Continue",
    101: "Switching Protocols",
    103: "Early Hints",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    207: "Multi-Status",
    208: "Already Reported",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Payload Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    416: "Range Not Satisfiable",
    417: "Expectation Failed",
    418: "I'm a teapot",
    422: "Unprocessable Entity",
    425: "Too Early",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    451: "Unavailable For Legal Reasons",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",
    508: "Loop Detected",
    510: "Not Extended",
    511: "Network Authentication Required",
})


def protocol_from_string(text: str) -> Protocol:
    """Return the protocol named by ``text`` (case-insensitive); raise ValueError if unknown."""
    try:
        return _PROTOCOL_BY_LOWER[text.lower()]
    except KeyError:
        raise ValueError(f"unknown protocol: {text!r}") from None


def protocol_to_string(protocol: Protocol) -> str:
    """Return the wire form of ``protocol``; raise ValueError for UNKNOWN_TYPE."""
    try:
        return _PROTOCOL_NAMES[Protocol(protocol)]
    except (KeyError, ValueError):
        raise ValueError(f"protocol has no string form: {protocol!r}") from None


def method_from_string(text: str) -> Method:
    """Return the method named by ``text`` (case-insensitive); raise ValueError if unknown."""
    try:
        return _METHOD_BY_LOWER[text.lower()]
    except KeyError:
        raise ValueError(f"unknown method: {text!r}") from None


def method_to_string(method: Method) -> str:
    """Return the upper-case name of ``method``; raise ValueError for UNKNOWN_TYPE."""
    try:
        method = Method(method)
    except ValueError:
        raise ValueError(f"method has no string form: {method!r}") from None
    if method is Method.UNKNOWN_TYPE:
        raise ValueError("method has no string form: UNKNOWN_TYPE")
    return method.name


def field_from_string(text: str) -> HeaderField:
    """Return the header field named by ``text`` (case-insensitive); raise ValueError if unknown."""
    try:
        return _FIELD_BY_LOWER[text.lower()]
    except KeyError:
        raise ValueError(f"unknown header field: {text!r}") from None


def field_to_string(field: HeaderField) -> str:
    """Return the canonical spelling of ``field``; raise ValueError for UNKNOWN_TYPE."""
    try:
        return _FIELD_NAMES[HeaderField(field)]
    except (KeyError, ValueError):
        raise ValueError(f"header field has no string form: {field!r}") from None


def status_reason(code: int) -> str:
    """Return the reason phrase for status ``code``; raise ValueError if it is not known."""
    try:
        return STATUS_REASONS[code]
    except KeyError:
        raise ValueError(f"unknown status code: {code}") from None