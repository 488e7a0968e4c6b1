#!/usr/bin/env python3
# -*- coding: utf-8 -*-

class Constants:
    '''Tezos key encoding constants.'''

    # Object identifiers (RFC 3279, RFC 5480, RFC 8410)
    OID_ED25519 = (1, 3, 101, 112)
    OID_P256 = (1, 2, 840, 10045, 3, 1, 7)
    OID_EC_PUBLIC_KEY = (1, 2, 840, 10045, 2, 1) # id-ecPublicKey, curve given in parameters
    OID_SECP256K1 = (1, 3, 132, 0, 10)

    # PEM markers
    PEM_PKCS8 = "PRIVATE KEY"
    PEM_EC = "EC PRIVATE KEY"
    PEM_EC_PARAMETERS = "EC PARAMETERS"
    PEM_PUBKEY = "PUBLIC KEY"

    EC_PRIVATE_KEY_VERSION = 1

    # Sizes (bytes)
    UNCOMPRESSED_POINT_SIZE = 65
    ED25519_SEED_SIZE = 32
    ED25519_PUBKEY_SIZE = 32
    PUBKEY_HASH_SIZE = 20

    # Ed25519 seed inside a PKCS#8 OCTET STRING: 0x04 0x20 <seed>
    ED25519_SEED_HEADER = bytes([0x04, 0x20])

    # Tezos base58 prefixes, see src/lib_crypto/base58.ml in the tezos repository

    # Public key hashes
    TZ_ED25519_PUBKEY_HASH = bytes.fromhex("06a19f")    # tz1
    TZ_SECP256K1_PUBKEY_HASH = bytes.fromhex("06a1a1")  # tz2
    TZ_P256_PUBKEY_HASH = bytes.fromhex("06a1a4")       # tz3

    # Public keys
    TZ_ED25519_PUBKEY = bytes.fromhex("0d0f25d9")   # edpk
    TZ_SECP256K1_PUBKEY = bytes.fromhex("03fee256") # sppk
    TZ_P256_PUBKEY = bytes.fromhex("03b28b7f")      # p2pk

    # Secret keys
    TZ_ED25519_SECRET = bytes.fromhex("2bf64e07")    # edsk (98 chars, seed + public key)
    TZ_SECP256K1_SECRET = bytes.fromhex("11a2e0c9")  # spsk
    TZ_P256_SECRET = bytes.fromhex("1051eebd")       # p2sk

    # Checksum length of base58check strings
    CHECKSUM_SIZE = 4
