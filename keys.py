#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging

from constants import Constants
from crypto import PublicKey, compress_pubkey, ed25519_keypair
from curve import Curve, curve_label, identify_curve, is_ec_public_key, unknown_label
from errors import (MalformedPublicKey, MalformedSeed, StructureError, TrailingContent,
                    UnrecognizedBlockType, UnsupportedAlgorithm, UnsupportedCurve)
from structures import ECPrivateKey, PrivateKeyInfo, SubjectPublicKeyInfo, parse_named_curve

log = logging.getLogger(__name__)

class KeyMaterial:
    ''' Key material needed to derive the Tezos sk, pk and pkh.
    .curve: Curve, None when the curve could not be resolved
    .secret: secret bytes, None for public key only sources
    .public_key: 33-byte compressed point (ECDSA curves) or 32-byte point (ed25519)
    .label: curve label shown to the user '''

    def __init__(self, curve, public_key, secret=None, label=None):
        self.curve = curve
        self.public_key = public_key
        self.secret = secret
        if label is None:
            label = curve.label if curve is not None else unknown_label(None)
        self.label = label

    def has_secret(self):
        return self.secret is not None

    @classmethod
    def from_ec_private_key(self, data, curve=None):
        ''' Parses an RFC 5915 EC private key. The curve must be supplied when
        the key is embedded in PKCS#8, whose algorithm parameters carry it
        instead of the key itself. '''
        ec = ECPrivateKey.from_der( data )
        return self.from_ec_record( ec, curve )

    @classmethod
    def from_ec_record(self, ec, curve=None):
        if curve is None and ec.curve_oid is not None:
            try:
                curve = identify_curve( ec.curve_oid )
            except UnsupportedCurve as e:
                raise UnsupportedAlgorithm("unsupported algorithm in ec: {}".format(e.label)) from e
        if curve is None or not curve.is_ecdsa():
            raise UnsupportedAlgorithm("unsupported algorithm in ec: {}"
                                       .format(curve.label if curve else "no curve"))

        if ec.public_key is None:
            log.debug("no public key in EC private key, deriving it")
            public_key = PublicKey.from_secret( ec.private_key, curve ).compress().to_ser()
        else:
            point = ec.public_key
            if len(point) != Constants.UNCOMPRESSED_POINT_SIZE or point[0] != 0x04:
                raise MalformedPublicKey("EC public key must be a {:d}-byte uncompressed point"
                                         .format(Constants.UNCOMPRESSED_POINT_SIZE))
            public_key = compress_pubkey( point )
        return self( curve, public_key, secret=ec.private_key )

    @classmethod
    def from_pkcs8(self, data):
        ''' Parses an RFC 5208 PKCS#8 private key holding an EC or ed25519 key. '''
        info = PrivateKeyInfo.from_der( data )

        if is_ec_public_key( info.algorithm_oid ):
            # Generic EC key, the specific curve is in the parameters
            curve = None
            try:
                oid = parse_named_curve( info.algorithm_params )
            except StructureError as e:
                log.debug("no named curve in PKCS#8 parameters: %s", e)
            else:
                try:
                    curve = identify_curve( oid )
                except UnsupportedCurve as e:
                    raise UnsupportedAlgorithm("unsupported algorithm in pkcs8: {}".format(e.label)) from e
            ec = ECPrivateKey.from_der( info.private_key )
            return self.from_ec_record( ec, curve )

        elif tuple(info.algorithm_oid) == Curve.ED25519.oid:
            # RFC 8410: the private key is an OCTET STRING 0x04 0x20 <seed>
            octets = info.private_key
            header_size = len(Constants.ED25519_SEED_HEADER)
            if ( len(octets) != header_size + Constants.ED25519_SEED_SIZE
                 or octets[:header_size] != Constants.ED25519_SEED_HEADER ):
                raise MalformedSeed("incorrectly formatted ed25519 seed")
            secret, public_key = ed25519_keypair( octets[header_size:] )
            return self( Curve.ED25519, public_key, secret=secret )

        raise UnsupportedAlgorithm("unsupported algorithm in pkcs8: {}"
                                   .format(curve_label(info.algorithm_oid)))

    @classmethod
    def from_public_key_info(self, data):
        ''' Parses an RFC 5280 SubjectPublicKeyInfo. There is no secret. '''
        spki = SubjectPublicKeyInfo.from_der( data )

        if tuple(spki.algorithm_oid) == Curve.ED25519.oid:
            if len(spki.public_key) != Constants.ED25519_PUBKEY_SIZE:
                raise MalformedPublicKey("ed25519 public key must be {:d} bytes"
                                         .format(Constants.ED25519_PUBKEY_SIZE))
            return self( Curve.ED25519, bytes(spki.public_key) )

        # An unparsable curve does not abort: the key keeps an "Unknown" label
        curve, oid = None, None
        try:
            oid = parse_named_curve( spki.algorithm_params )
            curve = identify_curve( oid )
        except (StructureError, UnsupportedCurve) as e:
            log.warning("public key curve not recognised, continuing: %s", e)
        if curve is not None and not curve.is_ecdsa():
            raise UnsupportedAlgorithm("unsupported algorithm in public key: {}".format(curve.label))
        return self( curve, compress_pubkey(spki.public_key), label=curve_label(oid) )

    @classmethod
    def from_blocks(self, blocks):
        ''' Key material from typed binary blocks (see armor.PemBlock).
        Exactly one key must be present; EC PARAMETERS blocks are skipped. '''
        blocks = list(blocks)
        for i, block in enumerate(blocks):
            if block.type == Constants.PEM_EC:
                key = self.from_ec_private_key( block.bytes )
            elif block.type == Constants.PEM_PKCS8:
                key = self.from_pkcs8( block.bytes )
            elif block.type == Constants.PEM_PUBKEY:
                key = self.from_public_key_info( block.bytes )
            elif block.type == Constants.PEM_EC_PARAMETERS:
                # Parameters of the standard curves are known, nothing to read
                continue
            else:
                raise UnrecognizedBlockType("unknown block type found in PEM file: {}"
                                            .format(block.type))
            if i + 1 != len(blocks):
                raise TrailingContent("key parsed but content remained in PEM file")
            return key
        raise StructureError("no key found in PEM file")

    def __repr__(self):
        return '<KeyMaterial {} {}>'.format(self.label, self.public_key.hex())
