# file: tests/test_cli.py

import pytest

from nse.cli import main, parse_key


def test_parse_key():
    assert parse_key("12345") == 12345
    assert parse_key("0xff") == 255


def test_encrypt_then_decrypt_message(tmp_path, capsys):
    enc = tmp_path / "enc.json"
    main(["encrypt", "--key", "12345", "--message", "hello cli",
          "--out_file", str(enc), "--kdf_iterations", "10"])
    assert "Encrypted to" in capsys.readouterr().out

    main(["decrypt", "--key", "12345", "--enc_file", str(enc)])
    assert "Decrypted message: hello cli" in capsys.readouterr().out


def test_file_in_file_out(tmp_path):
    src = tmp_path / "plain.bin"
    src.write_bytes(bytes(range(256)))
    enc = tmp_path / "enc.json"
    dst = tmp_path / "out.bin"
    main(["encrypt", "--key", "0x1234", "--salt", "00" * 16, "--in_path", str(src),
          "--out_file", str(enc), "--kdf_iterations", "10", "--max_bytes_to_rotate", "3"])
    main(["decrypt", "--key", "0x1234", "--enc_file", str(enc), "--out_path", str(dst)])
    assert dst.read_bytes() == src.read_bytes()


def test_salt_command(capsys):
    main(["salt", "--salt_len", "8"])
    assert len(bytes.fromhex(capsys.readouterr().out.strip())) == 8


def test_error_exits_nonzero(tmp_path, capsys):
    enc = tmp_path / "enc.json"
    main(["encrypt", "--key", "7", "--message", "x", "--out_file", str(enc), "--kdf_iterations", "10"])
    with pytest.raises(SystemExit) as exc_info:
        main(["decrypt", "--key", "0", "--enc_file", str(enc)])
    assert exc_info.value.code == 1
    assert "ERROR:" in capsys.readouterr().out


def test_empty_message_fails(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main(["encrypt", "--key", "7", "--message", "", "--out_file", str(tmp_path / "e.json")])
    assert "Data length must be positive" in capsys.readouterr().out
