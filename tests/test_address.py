"""End to end conversion of PEM keys to Tezos keys."""

import pytest

from address import EncodedKeySet, get_tezos_keys, prefix_triple_for
from crypto import Base58, blake2b_160
from curve import Curve
from errors import (KeyEncoderError, StructureError, TrailingContent, UnrecognizedBlockType,
                    UnsupportedCurve)
from keys import KeyMaterial
from armor import decode_pem

from vectors import (COMPRESSED, ED25519_PK, ED25519_PKCS8, ED25519_PKH, ED25519_SK, P256_EC,
                     P256_PK, P256_PKCS8, P256_PKH, P256_PUBLIC, P256_SK, SECP256K1_EC,
                     SECP256K1_PK, SECP256K1_PKCS8, SECP256K1_PKH, SECP256K1_PUBLIC,
                     SECP256K1_SK)


@pytest.mark.parametrize(
    "name, pem, sk, pk, pkh",
    [
        ("ed25519", ED25519_PKCS8, ED25519_SK, ED25519_PK, ED25519_PKH),
        ("p256 EC", P256_EC, P256_SK, P256_PK, P256_PKH),
        ("p256 PKCS8", P256_PKCS8, P256_SK, P256_PK, P256_PKH),
        ("p256 Public", P256_PUBLIC, "", P256_PK, P256_PKH),
        ("secp256k1 EC", SECP256K1_EC, SECP256K1_SK, SECP256K1_PK, SECP256K1_PKH),
        ("secp256k1 PKCS8", SECP256K1_PKCS8, SECP256K1_SK, SECP256K1_PK, SECP256K1_PKH),
        ("secp256k1 Public", SECP256K1_PUBLIC, "", SECP256K1_PK, SECP256K1_PKH),
    ],
)
def test_get_tezos_keys(name, pem, sk, pk, pkh):
    tz = get_tezos_keys(pem.encode())
    assert tz.secret_key == sk, name
    assert tz.public_key == pk, name
    assert tz.public_key_hash == pkh, name


def test_get_tezos_keys_with_utf8_comment():
    tz = get_tezos_keys(("# clé ed25519\n" + ED25519_PKCS8).encode("utf-8"))
    assert tz.secret_key == ED25519_SK
    assert tz.public_key_hash == ED25519_PKH


def test_curve_labels():
    assert get_tezos_keys(ED25519_PKCS8).curve == "ed25519: 1.3.101.112"
    assert get_tezos_keys(P256_PUBLIC).curve == "Secp256r1: 1.2.840.10045.3.1.7"
    assert get_tezos_keys(SECP256K1_EC).curve == "Secp256k1: 1.3.132.0.10"


def test_prefixes():
    tz = get_tezos_keys(ED25519_PKCS8)
    assert tz.secret_key.startswith("edsk") and len(tz.secret_key) == 98
    assert tz.public_key.startswith("edpk")
    assert tz.public_key_hash.startswith("tz1")
    assert get_tezos_keys(SECP256K1_PUBLIC).public_key.startswith("sppk")
    assert get_tezos_keys(P256_EC).secret_key.startswith("p2sk")


def test_deterministic():
    assert get_tezos_keys(P256_PKCS8) == get_tezos_keys(P256_PKCS8)
    assert get_tezos_keys(ED25519_PKCS8) == get_tezos_keys(ED25519_PKCS8)


@pytest.mark.parametrize("source, curve", [(ED25519_PKCS8, Curve.ED25519),
                                        (P256_EC, Curve.P256),
                                        (SECP256K1_PKCS8, Curve.SECP256K1)])
def test_public_key_hash_recomputed(source, curve):
    tz = get_tezos_keys(source)
    key = KeyMaterial.from_blocks(decode_pem(source))
    expected = Base58.encode_check(prefix_triple_for(curve).pkh, blake2b_160(key.public_key))
    assert tz.public_key_hash == expected


def test_prefix_triple_for():
    triple = prefix_triple_for(Curve.ED25519)
    assert triple.pkh == bytes.fromhex("06a19f")
    assert triple.pk == bytes.fromhex("0d0f25d9")
    assert prefix_triple_for(Curve.SECP256K1) == (bytes.fromhex("06a1a1"),
                                                   bytes.fromhex("03fee256"),
                                                   bytes.fromhex("11a2e0c9"))
    assert prefix_triple_for(Curve.P256) == (bytes.fromhex("06a1a4"),
                                              bytes.fromhex("03b28b7f"),
                                              bytes.fromhex("1051eebd"))
    with pytest.raises(UnsupportedCurve):
        prefix_triple_for(None)


def test_unresolved_curve_is_not_encoded():
    key = KeyMaterial(None, COMPRESSED, label="Unknown: 1.3.132.0.34")
    with pytest.raises(UnsupportedCurve) as excinfo:
        EncodedKeySet.from_key_material(key)
    assert excinfo.value.label == "Unknown: 1.3.132.0.34"


def test_truncated_block():
    lines = P256_PKCS8.splitlines()
    truncated = "\n".join(lines[:2] + lines[-1:])
    with pytest.raises(StructureError):
        get_tezos_keys(truncated)


def test_unrecognized_block_type():
    pem = P256_PUBLIC.replace("PUBLIC KEY", "CERTIFICATE")
    with pytest.raises(UnrecognizedBlockType):
        get_tezos_keys(pem)


def test_trailing_key():
    with pytest.raises(TrailingContent):
        get_tezos_keys(P256_PUBLIC + "\n" + SECP256K1_PUBLIC)


def test_errors_share_a_base_class():
    with pytest.raises(KeyEncoderError):
        get_tezos_keys("not a key")
