import unittest

from support import fast_hasher


class TestPasswordHasher(unittest.TestCase):

    def setUp(self):
        self.hasher = fast_hasher()

    def test_hash_is_not_plaintext(self):
        hashed = self.hasher.hash("Secret123")
        self.assertNotEqual(hashed, "Secret123")
        self.assertNotIn("Secret123", hashed)
        self.assertTrue(hashed.startswith("$argon2"))

    def test_hash_is_salted(self):
        self.assertNotEqual(self.hasher.hash("Secret123"), self.hasher.hash("Secret123"))

    def test_verify(self):
        hashed = self.hasher.hash("Secret123")
        self.assertTrue(self.hasher.verify("Secret123", hashed))
        self.assertFalse(self.hasher.verify("wrongpass", hashed))

    def test_verify_unrecognized_hash_returns_false(self):
        self.assertFalse(self.hasher.verify("Secret123", "not-a-hash"))
        self.assertFalse(self.hasher.verify("Secret123", ""))
        self.assertFalse(self.hasher.verify("Secret123", None))

    def test_pepper_is_part_of_the_hash(self):
        peppered = fast_hasher("pepper")
        hashed = peppered.hash("Secret123")
        self.assertTrue(peppered.verify("Secret123", hashed))
        self.assertFalse(self.hasher.verify("Secret123", hashed))


if __name__ == "__main__":
    unittest.main()
