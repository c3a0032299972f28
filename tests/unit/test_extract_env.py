"""Unit tests for the env file dump script"""

import json

from extract_env import extract_env, main


def test_extract_env_parses_file(tmp_path):
    env_file = tmp_path / ".env.local"
    env_file.write_text(
        "# comment\n"
        "\n"
        "PORT=3000\n"
        'META_API_TOKEN="quoted token"\n'
        "GOOGLE_CLIENT_ID='single'\n"
    )

    assert extract_env(env_file) == {
        "PORT": "3000",
        "META_API_TOKEN": "quoted token",
        "GOOGLE_CLIENT_ID": "single",
    }


def test_main_prints_json(tmp_path, capsys):
    env_file = tmp_path / "custom.env"
    env_file.write_text("RAZORPAY_WEBHOOK_SECRET=abc\n")

    assert main(["extract_env.py", str(env_file)]) == 0

    assert json.loads(capsys.readouterr().out) == {"RAZORPAY_WEBHOOK_SECRET": "abc"}


def test_main_missing_file(tmp_path, capsys):
    assert main(["extract_env.py", str(tmp_path / "nope.env")]) == 1

    assert "File not found" in capsys.readouterr().err
