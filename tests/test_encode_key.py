"""Command line entry point."""

from encode_key import USAGE, main

from vectors import P256_EC, P256_PK, P256_PKH, P256_SK


def test_main_prints_keys(tmp_path, capsys):
    path = tmp_path / "p256.pem"
    path.write_text(P256_EC)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Curve:  Secp256r1: 1.2.840.10045.3.1.7",
        "Tezos Secret Key:  " + P256_SK,
        "Tezos Public Key:  " + P256_PK,
        "Tezos Public Key Hash:  " + P256_PKH,
    ]


def test_main_usage(tmp_path, capsys):
    assert main([]) == 1
    assert main([str(tmp_path / "missing.pem")]) == 1
    assert USAGE in capsys.readouterr().err


def test_main_reports_errors(tmp_path, capsys):
    path = tmp_path / "cert.pem"
    path.write_text(P256_EC.replace("EC PRIVATE KEY", "CERTIFICATE"))
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "unknown block type" in captured.err
