#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""ECDSA demonstration on the y^2 = x^3 + 2x + 2 (mod 17) curve.

python -m eclab.demo
"""

from eclab.ecc.curves import ec17_19 as dsa


def main() -> None:
    print("\n*** ECDSA Demonstration")
    print(dsa)

    print("\n1. Key generation")
    keypair = dsa.generate_keypair()
    print(f"    prv_key: {keypair.prv_key}")
    print(f"    pub_key: {keypair.pub_key}")

    msg = b"Hello, ECDSA!"
    print(f"\n0. Message to be signed: {msg.decode()}")

    print("\n2. Sign message")
    sig = dsa.sign(msg, keypair.prv_key)
    print(f"    r: {sig.r}")
    print(f"    s: {sig.s}")

    print("\n3. Verify signature")
    print(f"    valid: {dsa.verify(msg, sig, keypair.pub_key)}")

    wrong_msg = b"Wrong message!"
    print(f"\n** Verify signature against: {wrong_msg.decode()}")
    print(f"    valid: {dsa.verify(wrong_msg, sig, keypair.pub_key)}")

    print("\n*** Elliptic curve operations")
    print(f"    P:  {dsa.G}")
    print(f"    2P: {dsa.ec.double(dsa.G)}")
    print(f"    3P: {dsa.ec.scalar_mult(dsa.G, 3)}")
    print(f"    5P: {dsa.ec.scalar_mult(dsa.G, 5)}")


if __name__ == "__main__":
    main()
