from services.user.infrastructure.bcrypt_password_hasher import BcryptPasswordHasher


class TestBcryptPasswordHasher:
    def test_hash_is_not_plaintext_and_verifies(self):
        hasher = BcryptPasswordHasher(rounds=4)

        password_hash = hasher.hash("correct horse")

        assert password_hash != "correct horse"
        assert password_hash.startswith("$2b$04$")
        assert hasher.verify("correct horse", password_hash)
        assert not hasher.verify("wrong horse", password_hash)

    def test_same_password_gets_distinct_salts(self):
        hasher = BcryptPasswordHasher(rounds=4)
        assert hasher.hash("correct horse") != hasher.hash("correct horse")

    def test_malformed_hash_does_not_verify(self):
        assert BcryptPasswordHasher(rounds=4).verify("correct horse", "not-a-bcrypt-hash") is False
