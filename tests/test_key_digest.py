# ==============================================
# Tests for KeyDigest
# ==============================================

import hashlib
import random
import re
import string
from concurrent.futures import ThreadPoolExecutor

import pytest

from media_config.hashing import key_digest, config_filename, DIGEST_LENGTH

HEX_64 = re.compile(r"^[0-9a-f]{64}$")


class TestKeyDigest:

    @pytest.mark.parametrize("key", [
        "",
        "file:///a.mp4",
        "content://media/external/video/media/42?x=1&y=2",
        "http://example.com/видео/ファイル.mkv",
        "emoji 🎬 title",
        "a" * 100_000,
    ])
    def test_shape(self, key):
        """Always 64 lowercase hex characters."""
        digest = key_digest(key)
        assert len(digest) == DIGEST_LENGTH
        assert HEX_64.match(digest)

    def test_known_vectors(self):
        assert key_digest("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        assert key_digest("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_uses_utf8_bytes(self):
        key = "file:///Музыка/clip.mp4"
        assert key_digest(key) == hashlib.sha256(key.encode("utf-8")).hexdigest()

    def test_deterministic(self):
        key = "file:///storage/emulated/0/Movies/holiday.mp4"
        assert key_digest(key) == key_digest(key)

    def test_distinct_keys_distinct_digests(self):
        rng = random.Random(1234)
        alphabet = string.ascii_letters + string.digits + "/:?&=.%"
        keys = {
            "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 80)))
            for _ in range(5000)
        }
        digests = {key_digest(k) for k in keys}
        assert len(digests) == len(keys)

    def test_concurrent_calls_agree(self):
        keys = [f"file:///video_{i}.mp4" for i in range(200)]
        expected = [hashlib.sha256(k.encode("utf-8")).hexdigest() for k in keys]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(key_digest, keys))
        assert results == expected


class TestConfigFilename:

    def test_suffix(self):
        key = "file:///a.mp4"
        assert config_filename(key) == key_digest(key) + "_config.txt"

    def test_no_path_characters(self):
        name = config_filename("content://a/b/../c?d=e")
        assert "/" not in name
        assert "\\" not in name
