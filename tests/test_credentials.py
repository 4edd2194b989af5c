from twodo.application.services.credentials import PasslibHasher


def test_hash_is_one_way_and_verifiable():
    hasher = PasslibHasher(["pbkdf2_sha256"])
    hashed = hasher.hash("Valid123!")

    assert hashed != "Valid123!"
    assert hashed.startswith("$pbkdf2-sha256$")
    assert hasher.verify("Valid123!", hashed) is True
    assert hasher.verify("Wrong123!", hashed) is False


def test_unknown_hash_format_is_a_mismatch():
    hasher = PasslibHasher(["pbkdf2_sha256"])
    assert hasher.verify("Valid123!", "plain-text") is False


def test_default_schemes_come_from_settings():
    hasher = PasslibHasher()
    assert hasher.pwd_context.default_scheme() == "pbkdf2_sha256"
