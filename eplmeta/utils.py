from hashlib import sha1


def hash_bytes(data: bytes) -> str:
    return sha1(data).hexdigest()


__all__ = ['hash_bytes']
