"""Unit tests for password hashing and token signing/verification."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import jwt

from helpers import SIGNING_KEY, make_settings
from maintenance.core.security import (
    SigningKeyError,
    create_access_token,
    decode_access_token,
    hash_password,
    read_signing_key,
    verify_password,
)


@patch("maintenance.core.security.BCRYPT_ROUNDS", 4)
class TestPasswordHashing(unittest.TestCase):
    def test_hash_is_salted_and_verifies(self) -> None:
        first = hash_password("hunter2")
        second = hash_password("hunter2")
        self.assertNotEqual(first, second)
        self.assertTrue(verify_password("hunter2", first))
        self.assertTrue(verify_password("hunter2", second))
        self.assertFalse(verify_password("hunter3", first))

    def test_long_password_is_accepted(self) -> None:
        hashed = hash_password("x" * 200)
        self.assertTrue(verify_password("x" * 200, hashed))

    def test_unencodable_password_does_not_verify(self) -> None:
        self.assertFalse(verify_password("\ud800", hash_password("hunter2")))

    def test_garbage_hash_does_not_verify(self) -> None:
        self.assertFalse(verify_password("anything", "not-a-bcrypt-hash"))


class TestTokens(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.key_path = Path(tmp.name) / "private.key"
        self.key_path.write_bytes(SIGNING_KEY)
        self.settings = make_settings(self.key_path)

    def test_round_trip(self) -> None:
        token = create_access_token("alice", self.settings)
        claims = decode_access_token(token, self.settings)
        self.assertEqual(claims["username"], "alice")
        self.assertEqual(claims["iss"], "maintenance-master")

    def test_key_is_read_on_every_call(self) -> None:
        token = create_access_token("alice", self.settings)
        self.key_path.write_bytes(b"rotated-key-0123456789abcdef0123456789abcdef")
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(token, self.settings)

    def test_wrong_issuer_is_rejected(self) -> None:
        other = make_settings(self.key_path, JWT_ISSUER="someone-else")
        token = create_access_token("alice", other)
        with self.assertRaises(jwt.InvalidIssuerError):
            decode_access_token(token, self.settings)

    def test_other_hmac_variant_is_accepted(self) -> None:
        hs512 = make_settings(self.key_path, JWT_ALGORITHM="HS512")
        token = create_access_token("alice", hs512)
        self.assertEqual(decode_access_token(token, self.settings)["username"], "alice")

    def test_missing_key_file(self) -> None:
        with self.assertRaises(SigningKeyError):
            read_signing_key(self.key_path.with_name("absent.key"))

    def test_empty_key_file(self) -> None:
        self.key_path.write_bytes(b"")
        with self.assertRaises(SigningKeyError):
            create_access_token("alice", self.settings)


if __name__ == "__main__":
    unittest.main()
