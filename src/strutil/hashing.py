import hashlib

__all__ = ("password_hash",)


def password_hash(*values: str) -> str:
    """
    Returns the uppercase hex SHA-1 digest of the concatenated values.

    No salt is applied here. Pass it explicitly as one of the values, e.g.
    ``password_hash(settings.password_salt, password)``.

    Strings decoded with ``surrogateescape``, such as command-line arguments that
    are not valid UTF-8, hash as their original bytes.
    """
    digest = hashlib.sha1()
    for value in values:
        digest.update(value.encode("utf-8", "surrogateescape"))
    return digest.hexdigest().upper()
