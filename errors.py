#!/usr/bin/env python3
# -*- coding: utf-8 -*-

class KeyEncoderError(Exception):
    '''Base class of the errors raised while converting a key.'''

# Structure

class StructureError(KeyEncoderError):
    '''Exception used for truncated or malformed DER and PEM structures.'''

class UnsupportedVersion(StructureError):
    '''Exception used for EC private keys with a version other than 1.'''

# Key type

class UnsupportedAlgorithm(KeyEncoderError):
    '''Exception used for well-formed keys of an unsupported algorithm.'''

class UnsupportedCurve(KeyEncoderError):
    '''Exception used for unknown curve object identifiers.'''

    def __init__(self, label):
        super().__init__("unsupported curve ({})".format(label))
        self.label = label

# Payload layout

class MalformedPublicKey(KeyEncoderError):
    '''Exception used for public keys with an unexpected byte layout.'''

class MalformedSeed(KeyEncoderError):
    '''Exception used for badly framed Ed25519 seeds.'''

class MalformedPoint(KeyEncoderError):
    '''Exception used for EC points too short to be compressed.'''

# Framing

class UnrecognizedBlockType(KeyEncoderError):
    '''Exception used for PEM blocks of an unknown type.'''

class TrailingContent(KeyEncoderError):
    '''Exception used when content remains after the key.'''
