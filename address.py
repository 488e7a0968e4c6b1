#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from collections import namedtuple

from crypto import Base58, blake2b_160
from constants import Constants
from curve import Curve, unknown_label
from errors import UnsupportedCurve
from keys import KeyMaterial
from armor import decode_pem

PrefixTriple = namedtuple('PrefixTriple', ['pkh', 'pk', 'sk'])

_PREFIXES = {
    Curve.ED25519: PrefixTriple(Constants.TZ_ED25519_PUBKEY_HASH,
                                Constants.TZ_ED25519_PUBKEY,
                                Constants.TZ_ED25519_SECRET),
    Curve.SECP256K1: PrefixTriple(Constants.TZ_SECP256K1_PUBKEY_HASH,
                                  Constants.TZ_SECP256K1_PUBKEY,
                                  Constants.TZ_SECP256K1_SECRET),
    Curve.P256: PrefixTriple(Constants.TZ_P256_PUBKEY_HASH,
                             Constants.TZ_P256_PUBKEY,
                             Constants.TZ_P256_SECRET),
}

def prefix_triple_for(curve):
    ''' Tezos base58 prefixes (pkh, pk, sk) used by the reference client. '''
    if curve not in _PREFIXES:
        raise UnsupportedCurve(curve.label if isinstance(curve, Curve) else unknown_label(None))
    return _PREFIXES[curve]

class EncodedKeySet(namedtuple('EncodedKeySet', ['secret_key', 'public_key', 'public_key_hash', 'curve'])):
    ''' Keys formatted for the Tezos reference binaries.
    .secret_key: empty string for public key only sources
    .curve: curve label '''

    __slots__ = ()

    @classmethod
    def from_key_material(self, key):
        if key.curve is None:
            raise UnsupportedCurve( key.label )
        pkh_prefix, pk_prefix, sk_prefix = prefix_triple_for( key.curve )
        secret_key = Base58.encode_check(sk_prefix, key.secret) if key.has_secret() else ""
        return self(secret_key,
                    Base58.encode_check(pk_prefix, key.public_key),
                    Base58.encode_check(pkh_prefix, blake2b_160(key.public_key)),
                    key.label)

def get_tezos_keys(pem_bytes):
    ''' Tezos sk, pk and pkh extracted from the PEM bytes of a single key. '''
    return EncodedKeySet.from_key_material( KeyMaterial.from_blocks( decode_pem(pem_bytes) ) )
