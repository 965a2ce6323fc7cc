#!/usr/bin/env python3

# Copyright (C) 2024 The eclab developers
#
# This file is part of eclab. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclab including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA).

Implementation along the lines of SEC 1 v.2:

http://www.secg.org/sec1-v2.pdf

for arbitrary (usually low-cardinality, didactical) curves.
It differs from the standard in a few respects:

* the whole message digest is read as an integer and reduced mod n
* nonces are random, sampled from an injectable source:
  no RFC6979 deterministic nonce
* no 'lower-s' canonical form is enforced

It is not constant-time and it does not protect against side-channels.
"""

import contextlib
import secrets
from dataclasses import dataclass, field
from hashlib import sha256
from typing import Optional, Tuple

from eclab.alias import HashF, Integer, RandBelow, String
from eclab.ecc.curve import EllipticCurve
from eclab.ecc.number_theory import mod_inv
from eclab.ecc.point import Identity, Point
from eclab.exceptions import (
    EClabRuntimeError,
    EClabValueError,
    InvalidPoint,
    InvalidScalar,
    SignatureGenerationFailure,
)
from eclab.hashes import int_from_digest
from eclab.utils import int_from_integer, int_repr

# each attempt fails with probability about 1/n
MAX_SIGN_ATTEMPTS = 100


@dataclass(frozen=True)
class Sig:
    """ECDSA signature.

    r and s are scalars in [1, n-1]:
    this is not checked at construction,
    as verification must return False for malformed signatures.
    """

    r: int
    s: int


@dataclass(frozen=True)
class KeyPair:
    # never shown in repr
    prv_key: int = field(repr=False)
    pub_key: Point


@dataclass(frozen=True)
class ECDSA:
    """ECDSA context: curve, generator G, and its order n.

    G must be on the curve and n must be its order,
    i.e. the smallest positive integer such that n*G = INF;
    these are caller preconditions, not checked at construction
    (for low-cardinality curves see curve_explorer.point_order).
    If n is not prime, some nonces and signatures are not invertible:
    signing retries with a fresh nonce, verification fails.

    hf is the hashlib-style digest constructor for the messages.

    randbelow is the default source of randomness,
    used for private keys and nonces unless overridden per call.
    The context is immutable and can be shared across threads,
    provided that its randbelow is thread-safe
    (as the default secrets.randbelow is).
    """

    ec: EllipticCurve
    G: Point
    n: int
    hf: HashF = sha256
    randbelow: RandBelow = secrets.randbelow

    def __post_init__(self) -> None:
        if self.n < 2:
            raise InvalidScalar(f"invalid group order: {self.n}")

    def __str__(self) -> str:
        result = f"ECDSA over {self.ec}"
        result += f"\n G   = {self.G}"
        result += f"\n n   = {int_repr(self.n)}"
        return result

    def _scalar(self, q: Integer, name: str) -> int:
        q = int_from_integer(q)
        if not 0 < q < self.n:
            raise InvalidScalar(f"{name} not in 1..n-1: {int_repr(q)}")
        return q

    def _random_scalar(self, randbelow: Optional[RandBelow] = None) -> int:
        if randbelow is None:
            randbelow = self.randbelow
        # q in the range [1, n-1]
        q = 1 + randbelow(self.n - 1)
        return self._scalar(q, "random scalar")

    def generate_private_key(self, randbelow: Optional[RandBelow] = None) -> int:
        "Return a private key sampled uniformly from [1, n-1]."
        return self._random_scalar(randbelow)

    def generate_public_key(self, prv_key: Integer) -> Point:
        "Return the public key Q = q*G of the private key q."
        q = self._scalar(prv_key, "private key")
        return self.ec.scalar_mult(self.G, q)

    def generate_keypair(self, randbelow: Optional[RandBelow] = None) -> KeyPair:
        "Return a private/public key-pair."
        q = self.generate_private_key(randbelow)
        return KeyPair(q, self.generate_public_key(q))

    def hash_to_scalar(self, msg: String) -> int:
        "Return the message digest reduced mod n."
        return int_from_digest(msg, self.n, self.hf)

    def _sign_(self, c: int, q: int, nonce: int) -> Sig:
        # Private function for testing purposes: it allows to explore all
        # possible values of the nonce (for low-cardinality curves).
        # It assumes that c is in [0, n-1], while q and nonce are in [1, n-1]
        # Steps numbering follows SEC 1 v.2 section 4.1.3
        K = self.ec.scalar_mult(self.G, nonce)  # 1
        if isinstance(K, Identity):
            raise EClabRuntimeError("failed to sign: K = INF")

        # mod n makes the x_K field element a scalar
        r = K.x % self.n  # 2, 3
        if r == 0:  # r≠0 required as it multiplies the private key
            raise EClabRuntimeError("failed to sign: r = 0")

        try:
            nonce_inv = mod_inv(nonce, self.n)
        except EClabValueError as e:
            raise EClabRuntimeError("failed to sign: invalid nonce") from e
        s = nonce_inv * (c + r * q) % self.n  # 6
        if s == 0:  # s≠0 required as verify will need the inverse of s
            raise EClabRuntimeError("failed to sign: s = 0")

        return Sig(r, s)

    def sign(
        self, msg: String, prv_key: Integer, randbelow: Optional[RandBelow] = None
    ) -> Sig:
        """Sign the message with the private key.

        A fresh random nonce is drawn for each attempt,
        retrying when it leads to r = 0 or s = 0.
        """
        q = self._scalar(prv_key, "private key")
        c = self.hash_to_scalar(msg)  # 4, 5

        for _ in range(MAX_SIGN_ATTEMPTS):
            nonce = self._random_scalar(randbelow)
            with contextlib.suppress(EClabRuntimeError):
                return self._sign_(c, q, nonce)

        err_msg = f"failed to sign: no valid nonce in {MAX_SIGN_ATTEMPTS} attempts"
        raise SignatureGenerationFailure(err_msg)

    def _assert_valid_sig(self, sig: Sig) -> None:
        # r and s are scalars, fail if not in [1, n-1]
        if not 0 < sig.r < self.n:
            raise InvalidScalar(f"scalar r not in 1..n-1: {int_repr(sig.r)}")
        if not 0 < sig.s < self.n:
            raise InvalidScalar(f"scalar s not in 1..n-1: {int_repr(sig.s)}")

    def assert_as_valid(self, msg: String, sig: Sig, pub_key: Point) -> None:
        # It raises Errors, while verify should always return True or False
        # Steps numbering follows SEC 1 v.2 section 4.1.4
        self._assert_valid_sig(sig)  # 1
        self.ec.require_on_curve(pub_key)
        if isinstance(pub_key, Identity):
            raise InvalidPoint("invalid (INF) public key")

        c = self.hash_to_scalar(msg)  # 2, 3

        w = mod_inv(sig.s, self.n)
        u = c * w % self.n
        v = sig.r * w % self.n  # 4
        # Let K = u*G + v*Q.
        K = self.ec.add(
            self.ec.scalar_mult(self.G, u), self.ec.scalar_mult(pub_key, v)
        )  # 5

        # Fail if infinite(K).
        if isinstance(K, Identity):  # 5
            raise EClabRuntimeError("invalid (INF) key")

        # Fail if r ≠ x_K %n.
        if sig.r != K.x % self.n:  # 6, 7, 8
            raise EClabRuntimeError("signature verification failed")

    def verify(self, msg: String, sig: Sig, pub_key: Point) -> bool:
        """ECDSA signature verification (SEC 1 v.2 section 4.1.4)."""
        # all kind of Exceptions are caught because
        # verify must always return a bool
        try:
            self.assert_as_valid(msg, sig, pub_key)
        except Exception:  # pylint: disable=broad-except
            return False

        return True

    def crack_prv_key(
        self, msg1: String, sig1: Sig, msg2: String, sig2: Sig
    ) -> Tuple[int, int]:
        """Return the (private key, nonce) of two signatures sharing the nonce.

        Reusing a nonce across two signatures of different messages
        discloses the private key.
        The signatures must have been produced with the very same nonce:
        the opposite nonce n-k would lead to the same r too.
        """
        self._assert_valid_sig(sig1)
        self._assert_valid_sig(sig2)
        if sig1.r != sig2.r:
            raise EClabValueError("not the same r in signatures")
        if sig1.s == sig2.s:
            raise EClabValueError("identical signatures")

        c_1 = self.hash_to_scalar(msg1)
        c_2 = self.hash_to_scalar(msg2)
        if c_1 == c_2:
            raise EClabValueError("identical message digests")

        nonce = (c_1 - c_2) * mod_inv(sig1.s - sig2.s, self.n) % self.n
        q = (sig2.s * nonce - c_2) * mod_inv(sig1.r, self.n) % self.n
        return q, nonce
