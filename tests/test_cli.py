# ==============================================
# Tests for the CLI
# ==============================================

import json

import pytest

from media_config.cli import main
from media_config.hashing import key_digest

KEY = "file:///a.mp4"


@pytest.fixture
def run(clean_config, tmp_path, capsys):
    def _run(*args):
        code = main(["--base-dir", str(tmp_path), *args])
        out, err = capsys.readouterr()
        return code, out, err
    return _run


class TestCli:

    def test_digest(self, run):
        code, out, _ = run("digest", KEY)
        assert code == 0
        assert out.splitlines() == [key_digest(KEY), key_digest(KEY) + "_config.txt"]

    def test_get_missing(self, run):
        code, out, err = run("get", KEY)
        assert code == 1
        assert out == ""
        assert "no config" in err

    def test_put_then_get(self, run, tmp_path):
        code, out, _ = run(
            "put", KEY,
            "--resize-mode", "1",
            "--aspect-ratio", "1.78",
            "--title", "16:9",
            "--scale", "1.25",
        )
        assert code == 0
        path = tmp_path / "configs" / (key_digest(KEY) + "_config.txt")
        assert out.strip() == str(path)
        assert path.read_text(encoding="utf-8") == "1,1.78,16:9,1.25"

        code, out, _ = run("get", KEY)
        assert code == 0
        assert json.loads(out) == {
            "resize_mode": 1,
            "aspect_ratio": 1.78,
            "aspect_ratio_title": "16:9",
            "scale": 1.25,
        }

    def test_update_scale(self, run):
        run("put", KEY, "--resize-mode", "0", "--aspect-ratio", "1.33", "--title", "4:3")

        code, _, _ = run("update-scale", KEY, "2.0")
        assert code == 0

        _, out, _ = run("get", KEY)
        assert json.loads(out)["scale"] == 2.0
        assert json.loads(out)["aspect_ratio_title"] == "4:3"

    def test_update_scale_missing(self, run):
        code, _, err = run("update-scale", KEY, "2.0")
        assert code == 1
        assert "no config" in err

    def test_put_failure(self, clean_config, tmp_path, capsys):
        blocker = tmp_path / "file"
        blocker.write_text("x")

        code = main(["--base-dir", str(blocker), "put", KEY, "--resize-mode", "1", "--aspect-ratio", "1.0"])

        assert code == 1
        assert "failed to save config" in capsys.readouterr().err
