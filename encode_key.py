#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import os
import sys

from address import get_tezos_keys
from errors import KeyEncoderError

log = logging.getLogger(__name__)

USAGE = "Usage: tezos-key-encoder <key>.pem"

def main(argv=None):
    ''' Prints the Tezos keys of a PEM file. Returns the exit status. '''
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    if len(argv) < 1 or not os.path.isfile(argv[0]):
        print(USAGE, file=sys.stderr)
        return 1

    filename = argv[0]
    log.info("Parsing: %s", filename)
    try:
        with open(filename, 'rb') as f:
            pem_bytes = f.read()
    except OSError as e:
        print("Could not read file: {} {}".format(filename, e), file=sys.stderr)
        return 1

    try:
        tz = get_tezos_keys( pem_bytes )
    except KeyEncoderError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    print("Curve: ", tz.curve)
    print("Tezos Secret Key: ", tz.secret_key)
    print("Tezos Public Key: ", tz.public_key)
    print("Tezos Public Key Hash: ", tz.public_key_hash)
    return 0

def run():
    sys.exit(main())

if __name__ == '__main__':
    run()
