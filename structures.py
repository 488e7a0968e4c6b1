#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from ecdsa import der

from constants import Constants
from errors import StructureError, UnsupportedVersion

# DER helpers

def _take(remove, string, *args):
    ''' Calls an ecdsa.der remove_* function once the element at the head of
    string is known to fit in it. Returns what remove returns. '''
    if not string:
        raise der.UnexpectedDER("unexpected end of data")
    length, llen = der.read_length(string[1:])
    if 1 + llen + length > len(string):
        raise der.UnexpectedDER("element with tag 0x{:02x} is truncated".format(string[0]))
    return remove(string, *args)

def _has_tag(string, tag):
    return len(string) > 0 and string[0] == tag

def _remove_algorithm(string):
    ''' AlgorithmIdentifier ::= SEQUENCE { algorithm OID, parameters ANY OPTIONAL }
    Returns the OID, the raw DER of the parameters (b'' when absent) and the rest. '''
    body, rest = _take(der.remove_sequence, string)
    oid, params = _take(der.remove_object, body)
    return oid, params, rest

def _remove_explicit(string, tag):
    ''' Body of a context-specific [tag] EXPLICIT element. '''
    t, body, rest = _take(der.remove_constructed, string)
    if t != tag:
        raise der.UnexpectedDER("wanted [{:d}] explicit tag, got [{:d}]".format(tag, t))
    return body, rest

def _decode(cls, data):
    try:
        return cls._from_der(data)
    except (der.UnexpectedDER, IndexError) as e:
        raise StructureError("{}: {}".format(cls.__name__, e)) from e

class ECPrivateKey:
    ''' RFC 5915 EC private key.

    ECPrivateKey ::= SEQUENCE {
        version        INTEGER { ecPrivkeyVer1(1) },
        privateKey     OCTET STRING,
        parameters [0] ECParameters {{ NamedCurve }} OPTIONAL,
        publicKey  [1] BIT STRING OPTIONAL }
    '''

    def __init__(self, version, private_key, curve_oid=None, public_key=None):
        self.version = version
        self.private_key = private_key
        self.curve_oid = curve_oid
        self.public_key = public_key

    @classmethod
    def from_der(self, data):
        return _decode(self, data)

    @classmethod
    def _from_der(self, data):
        body, rest = _take(der.remove_sequence, data)
        if rest:
            raise der.UnexpectedDER("trailing data after EC private key")
        version, body = _take(der.remove_integer, body)
        if version != Constants.EC_PRIVATE_KEY_VERSION:
            raise UnsupportedVersion("unknown EC private key version {:d}".format(version))
        private_key, body = _take(der.remove_octet_string, body)

        curve_oid = None
        if _has_tag(body, 0xa0):
            params, body = _remove_explicit(body, 0)
            curve_oid, _ = _take(der.remove_object, params)

        public_key = None
        if _has_tag(body, 0xa1):
            bits, body = _remove_explicit(body, 1)
            public_key, _ = _take(der.remove_bitstring, bits, 0)

        if body:
            raise der.UnexpectedDER("unexpected data in EC private key")
        return self(version, private_key, curve_oid, public_key)

    def __repr__(self):
        return '<ECPrivateKey version={} curve={}>'.format(self.version, self.curve_oid)

class PrivateKeyInfo:
    ''' RFC 5208 (PKCS#8) unencrypted private key.

    PrivateKeyInfo ::= SEQUENCE {
        version             INTEGER,
        privateKeyAlgorithm AlgorithmIdentifier,
        privateKey          OCTET STRING,
        attributes      [0] IMPLICIT Attributes OPTIONAL,
        publicKey       [1] IMPLICIT BIT STRING OPTIONAL }  -- RFC 5958
    '''

    def __init__(self, version, algorithm_oid, algorithm_params, private_key):
        self.version = version
        self.algorithm_oid = algorithm_oid
        self.algorithm_params = algorithm_params
        self.private_key = private_key

    @classmethod
    def from_der(self, data):
        return _decode(self, data)

    @classmethod
    def _from_der(self, data):
        body, rest = _take(der.remove_sequence, data)
        if rest:
            raise der.UnexpectedDER("trailing data after PKCS#8 private key")
        version, body = _take(der.remove_integer, body)
        algorithm_oid, algorithm_params, body = _remove_algorithm(body)
        private_key, body = _take(der.remove_octet_string, body)
        # attributes and the v2 public key are not used
        return self(version, algorithm_oid, algorithm_params, private_key)

    def __repr__(self):
        return '<PrivateKeyInfo algorithm={}>'.format(self.algorithm_oid)

class SubjectPublicKeyInfo:
    ''' RFC 5280 public key.

    SubjectPublicKeyInfo ::= SEQUENCE {
        algorithm         AlgorithmIdentifier,
        subjectPublicKey  BIT STRING }
    '''

    def __init__(self, algorithm_oid, algorithm_params, public_key):
        self.algorithm_oid = algorithm_oid
        self.algorithm_params = algorithm_params
        self.public_key = public_key

    @classmethod
    def from_der(self, data):
        return _decode(self, data)

    @classmethod
    def _from_der(self, data):
        body, rest = _take(der.remove_sequence, data)
        if rest:
            raise der.UnexpectedDER("trailing data after ASN.1 of public-key")
        algorithm_oid, algorithm_params, body = _remove_algorithm(body)
        public_key, body = _take(der.remove_bitstring, body, 0)
        if body:
            raise der.UnexpectedDER("unexpected data in public key")
        return self(algorithm_oid, algorithm_params, public_key)

    def __repr__(self):
        return '<SubjectPublicKeyInfo algorithm={}>'.format(self.algorithm_oid)

def parse_named_curve(params):
    ''' Object identifier held in DER algorithm parameters.
    Raises StructureError when the parameters are not a single OID. '''
    try:
        oid, rest = _take(der.remove_object, params)
    except (der.UnexpectedDER, IndexError) as e:
        raise StructureError("named curve: {}".format(e)) from e
    if rest:
        raise StructureError("named curve: trailing data after object identifier")
    return oid
