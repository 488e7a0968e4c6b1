#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from enum import Enum

from constants import Constants
from errors import UnsupportedCurve

def oid_to_str(oid):
    ''' Dotted notation of an object identifier, e.g. 1.3.101.112. '''
    return ".".join(str(n) for n in oid) if oid else ""

class Curve(Enum):
    ''' Curves supported by the Tezos protocol.
    .oid: object identifier of the curve
    .pretty_name: name shown to the user'''

    P256 = (Constants.OID_P256, "Secp256r1")
    SECP256K1 = (Constants.OID_SECP256K1, "Secp256k1")
    ED25519 = (Constants.OID_ED25519, "ed25519")

    def __init__(self, oid, pretty_name):
        self.oid = oid
        self.pretty_name = pretty_name

    @property
    def label(self):
        return "{}: {}".format(self.pretty_name, oid_to_str(self.oid))

    def is_ecdsa(self):
        return self in (Curve.P256, Curve.SECP256K1)

def unknown_label(oid):
    return "Unknown: {}".format(oid_to_str(oid))

def identify_curve(oid):
    ''' Returns the curve named by the object identifier.
    The id-ecPublicKey marker is not a curve: its curve is carried in the
    algorithm parameters and must be identified from there. '''
    for curve in Curve:
        if curve.oid == tuple(oid or ()):
            return curve
    raise UnsupportedCurve(unknown_label(oid))

def curve_label(oid):
    ''' Display label of an object identifier, never fails. '''
    try:
        return identify_curve(oid).label
    except UnsupportedCurve as e:
        return e.label

def is_ec_public_key(oid):
    return tuple(oid or ()) == Constants.OID_EC_PUBLIC_KEY
