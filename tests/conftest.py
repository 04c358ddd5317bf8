from __future__ import annotations

import base64
import binascii
import zlib

import pytest


def make_z64(raw: bytes, checksum: str = "") -> str:
    data = base64.b64encode(zlib.compress(raw)).decode("ascii")
    if not checksum:
        checksum = ":" + format(binascii.crc_hqx(data.encode("ascii"), 0), "04X")
    return ":Z64:" + data + checksum


@pytest.fixture
def z64_payload():
    return make_z64
