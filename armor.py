#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import base64
import re
from collections import namedtuple

from errors import StructureError, TrailingContent

PemBlock = namedtuple('PemBlock', ['type', 'bytes', 'headers'])

_BEGIN = re.compile(r'-----BEGIN ([^\r\n-]*)-----')
_END = '-----END {}-----'

def _split_headers(body):
    ''' RFC 1421 headers ("Name: value" lines ended by a blank line). '''
    headers = {}
    lines = body.strip().splitlines()
    if not lines or ':' not in lines[0]:
        return headers, body
    for i, line in enumerate(lines):
        if not line.strip():
            return headers, "\n".join(lines[i+1:])
        name, _, value = line.partition(':')
        headers[name.strip()] = value.strip()
    raise StructureError("PEM headers are not followed by data")

def decode_pem(pem):
    ''' Splits PEM text into a list of PemBlock.
    Text before a block is ignored, text after the last block is an error. '''
    if isinstance(pem, (bytes, bytearray)):
        # Any byte maps to a character, only the armored base64 is checked
        pem = pem.decode('latin-1')

    blocks = []
    rest = pem
    while True:
        begin = _BEGIN.search(rest)
        if begin is None:
            break
        label = begin.group(1)
        end_line = _END.format(label)
        end = rest.find(end_line, begin.end())
        if end < 0:
            raise StructureError("no END line for PEM block {}".format(label))

        headers, data = _split_headers(rest[begin.end():end])
        if 'Proc-Type' in headers:
            raise StructureError("encrypted PEM blocks are not supported")
        try:
            der = base64.b64decode("".join(data.split()), validate=True)
        except ValueError as e:
            raise StructureError("invalid base64 in PEM block {}: {}".format(label, e)) from e

        blocks.append(PemBlock(label, der, headers))
        rest = rest[end + len(end_line):]

    if not blocks:
        raise StructureError("no PEM block found")
    if rest.strip():
        raise TrailingContent("content remained after the last PEM block")
    return blocks
