#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import hashlib

import base58
import ecdsa
from ecdsa.curves import Ed25519, NIST256p, SECP256k1

from constants import Constants
from curve import Curve
from errors import MalformedPoint, MalformedPublicKey, MalformedSeed, UnsupportedCurve

# Hash functions

def sha256(x):
    '''Simple wrapper of hashlib sha256.'''
    return hashlib.sha256(x).digest()

def dsha256(x):
    '''SHA-256 of SHA-256, used for base58check checksums.'''
    return sha256(sha256(x))

def blake2b_160(x):
    '''Unkeyed BLAKE2b with a 20-byte digest, the Tezos public key hash.'''
    return hashlib.blake2b(x, digest_size=Constants.PUBKEY_HASH_SIZE).digest()

# Base58

class Base58:

    @staticmethod
    def encode(v):
        ''' Bitcoin alphabet, leading zero bytes become leading 1s. '''
        return base58.b58encode(v).decode('ascii')

    @staticmethod
    def checksum(v):
        return dsha256(v)[:Constants.CHECKSUM_SIZE]

    @staticmethod
    def encode_check(prefix, payload):
        ''' Base58 of prefix + payload + first 4 bytes of the double SHA-256. '''
        message = bytes(prefix) + bytes(payload)
        return Base58.encode(message + Base58.checksum(message))

# Keys

_ECDSA_CURVES = {
    Curve.P256: NIST256p,
    Curve.SECP256K1: SECP256k1,
}

class PublicKey:
    ''' Elliptic curve public key.
    .prefix: 0x04 (uncompressed), 0x02 or 0x03 (compressed, parity of y)
    .x, .y: coordinates, y is None once compressed'''

    def __init__(self, prefix, x, y=None):
        self.x = x
        self.y = y
        self.prefix = prefix

    @classmethod
    def from_ser(self, serkey):
        ''' From an uncompressed serialized point (0x04 || x || y).
        The marker byte is read but not checked and no on-curve validation is done. '''
        if len(serkey) < Constants.UNCOMPRESSED_POINT_SIZE:
            raise MalformedPoint("uncompressed point must be {:d} bytes, got {:d}"
                                 .format(Constants.UNCOMPRESSED_POINT_SIZE, len(serkey)))
        prefix = serkey[0]
        x = int.from_bytes( serkey[1:33], 'big' )
        y = int.from_bytes( serkey[33:65], 'big' )
        return self( prefix, x, y )

    @classmethod
    def from_secret(self, secret, curve):
        ''' Derives the public point of a private scalar on a short Weierstrass curve. '''
        if curve not in _ECDSA_CURVES:
            raise UnsupportedCurve(curve.label)
        try:
            sk = ecdsa.SigningKey.from_string(secret, curve=_ECDSA_CURVES[curve])
        except (ecdsa.MalformedPointError, ValueError) as e:
            raise MalformedPublicKey("cannot derive public key: {}".format(e)) from e
        return self.from_ser( sk.get_verifying_key().to_string('uncompressed') )

    def compress(self):
        if self.y is not None:
            self.prefix = 0x02 + (self.y & 1)
            self.y = None
        return self

    def is_compressed(self):
        return self.y is None

    def to_ser(self):
        if self.y is None:
            return bytes([self.prefix]) + self.x.to_bytes(32, 'big')
        return bytes([self.prefix]) + self.x.to_bytes(32, 'big') + self.y.to_bytes(32, 'big')

def compress_pubkey(point):
    ''' 33-byte compressed form of a 65-byte uncompressed point. '''
    return PublicKey.from_ser( point ).compress().to_ser()

def ed25519_keypair(seed):
    ''' Ed25519 key pair from a 32-byte seed.
    Returns (secret, pubkey) where secret is seed || pubkey (64 bytes). '''
    if len(seed) != Constants.ED25519_SEED_SIZE:
        raise MalformedSeed("ed25519 seed must be {:d} bytes, got {:d}"
                            .format(Constants.ED25519_SEED_SIZE, len(seed)))
    sk = ecdsa.SigningKey.from_string(bytes(seed), curve=Ed25519)
    pubkey = sk.get_verifying_key().to_string()
    return bytes(seed) + pubkey, pubkey
