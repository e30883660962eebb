import hashlib
import unittest

from puresig.sha256 import sha256, sha256_hex


class TestSha256Vectors(unittest.TestCase):
    # FIPS 180-2 appendix B and commonly published vectors
    VECTORS = [
        (b'', 'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'),
        (b'hello', '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'),
        (b'abc', 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'),
        (
            b'abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq',
            '248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1',
        ),
        (
            b'abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmnhijklmno'
            b'ijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu',
            'cf5b16a778af8380036ce59e7b0492370b249b11e8f07a51afac45037afee9d1',
        ),
        (
            b'The quick brown fox jumps over the lazy dog',
            'd7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592',
        ),
    ]

    def test_published_vectors(self) -> None:
        for data, expected in self.VECTORS:
            with self.subTest(data=data[:16]):
                self.assertEqual(sha256_hex(data), expected)

    def test_one_million_a(self) -> None:
        self.assertEqual(
            sha256_hex(b'a' * 1_000_000),
            'cdc76e5c9914fb9281a1c7e284d73e67f1809a48a497200e046d39ccc7112cd0'
        )

    def test_digest_is_32_raw_bytes(self) -> None:
        digest = sha256(b'abc')
        self.assertIsInstance(digest, bytes)
        self.assertEqual(len(digest), 32)
        self.assertEqual(digest.hex(), sha256_hex(b'abc'))


class TestSha256Padding(unittest.TestCase):
    def test_lengths_around_block_boundaries(self) -> None:
        # 55/56 bytes decide whether the length fits in the first block
        for length in (1, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 129):
            data = bytes(i % 251 for i in range(length))
            with self.subTest(length=length):
                self.assertEqual(sha256_hex(data), hashlib.sha256(data).hexdigest())

    def test_all_byte_values(self) -> None:
        data = bytes(range(256)) * 3
        self.assertEqual(sha256_hex(data), hashlib.sha256(data).hexdigest())

    def test_accepts_bytearray(self) -> None:
        self.assertEqual(sha256_hex(bytearray(b'abc')), hashlib.sha256(b'abc').hexdigest())


if __name__ == '__main__':
    unittest.main(verbosity=2)
