"""Keyed hashing of submitter IPs; the raw address is never stored."""
import hashlib
import hmac

from starlette.requests import Request


def ip_hash(ip: str, secret: str) -> str:
    """Hex HMAC-SHA256 of ip keyed by secret."""
    return hmac.new(secret.encode("utf-8"), ip.encode("utf-8"), hashlib.sha256).hexdigest()


def _peer(request: Request) -> str:
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def client_ip(request: Request, trusted_hops: int = 0) -> str:
    """Submitter address as seen by the outermost trusted proxy.

    With trusted_hops=0 X-Forwarded-For is ignored (clients can set it freely)
    and the socket peer is used. With N trusted proxies the entry N from the
    right end of the header is taken; only those entries were written by
    proxies we control. A header shorter than that falls back to the peer.
    """
    if trusted_hops <= 0:
        return _peer(request)
    forwarded = request.headers.get("x-forwarded-for", "")
    hops = [h.strip() for h in forwarded.split(",") if h.strip()]
    if len(hops) < trusted_hops:
        return _peer(request)
    return hops[-trusted_hops]
