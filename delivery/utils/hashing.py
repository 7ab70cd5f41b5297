import hashlib, json

def payload_hash(payload: dict, length: int = 12) -> str:
    """Short stable fingerprint of a request body, used to correlate log lines."""
    s = json.dumps(payload, sort_keys=True, default=str, ensure_ascii=False)
    return hashlib.sha256(s.encode("utf-8")).hexdigest()[:length]
