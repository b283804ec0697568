import hashlib
import hmac
import os
import random
from typing import List

from pbkdf2stream import (
    DEFAULT_ITERATIONS,
    MAX_ITERATIONS,
    PRF,
    DerivedKeyTooLongException,
    InvalidEncodingException,
    InvalidInputException,
    OutOfRangeException,
    UnknownPRFException,
    derive,
    derive_key,
    f,
    resolve_prf
)
from pbkdf2stream.pbkdf2 import check_iterations, prepare
from pbkdf2stream.recommended import HMAC_SHA1, HMAC_SHA2_256, HMAC_SHA2_512, prf_hmac


__all__ = [  # pylint: disable=unused-variable
    "test_block_function",
    "test_defaults",
    "test_derive_key_metadata",
    "test_derived_key_too_long",
    "test_empty_prf_output",
    "test_hashlib_equivalence",
    "test_invalid_input",
    "test_iteration_bounds",
    "test_prefix_stability",
    "test_resolve_prf",
    "test_rfc6070_vectors",
    "test_sha256_vectors"
]


def hmac_sha256(key: bytes, message: bytes) -> bytes:
    """
    A PRF in plain callable form, unknown to the algorithm registry.
    """

    return hmac.new(key, message, hashlib.sha256).digest()


def test_rfc6070_vectors() -> None:
    """
    Test the PBKDF2-HMAC-SHA-1 vectors of RFC 6070.
    """

    assert derive("password", "salt", 20, iterations=1, prf=HMAC_SHA1) == bytes.fromhex(
        "0c60c80f961f0e71f3a9b524af6012062fe037a6"
    )
    assert derive("password", "salt", 20, iterations=2, prf=HMAC_SHA1) == bytes.fromhex(
        "ea6c014dc72d6f8ccd1ed92ace1d41f0d8de8957"
    )
    assert derive("password", "salt", 20, iterations=4096, prf=HMAC_SHA1) == bytes.fromhex(
        "4b007901b765489abead49d926f721d065a429c1"
    )
    assert derive(
        "passwordPASSWORDpassword",
        "saltSALTsaltSALTsaltSALTsaltSALTsalt",
        25,
        iterations=4096,
        prf=HMAC_SHA1
    ) == bytes.fromhex("3d2eec4fe41c849b80c8d83662c0e44a8b291a964cf2f07038")
    assert derive(b"pass\x00word", b"sa\x00lt", 16, iterations=4096, prf=HMAC_SHA1) == bytes.fromhex(
        "56fa6aa75548099dcc37d7f03425e0c3"
    )


def test_sha256_vectors() -> None:
    """
    Test published PBKDF2-HMAC-SHA-256 vectors, using the default PRF.
    """

    assert derive("password", "salt", 32, iterations=1) == bytes.fromhex(
        "120fb6cffcf8b32c43e7225256c4f837a86548c92ccc35480805987cb70be17b"
    )
    assert derive("password", "salt", 32, iterations=2) == bytes.fromhex(
        "ae4d0c95af6b46d32d0adff928f06dd02a303f8ef3c251dfd6e2d85a95474c43"
    )
    assert derive("password", "salt", 32, iterations=4096) == bytes.fromhex(
        "c5e478d59288c841aa530db6845c4c8d962893a001ce4e11a4963873aa98134a"
    )
    assert derive(
        "passwordPASSWORDpassword",
        "saltSALTsaltSALTsaltSALTsaltSALTsalt",
        40,
        iterations=4096
    ) == bytes.fromhex("348c89dbcbd32b2f32d814b8116e84cf2b17347ebc1800181c4e2a1fb8dd53e1c635518c7dac47e9")
    assert derive(b"pass\x00word", b"sa\x00lt", 16, iterations=4096) == bytes.fromhex(
        "89b69d0516f829893c696226650a8687"
    )

    # Multi-block output
    assert derive("passwd", "salt", 64, iterations=1) == bytes.fromhex(
        "55ac046e56e3089fec1691c22544b605f94185216dde0465e68b9d57c20dacbc"
        "49ca9cccf179b645991664b39d77ef317c71b845b1e30bd509112041d3a19783"
    )

    # The same PRF, by friendly name, by OID and in plain callable form
    expected = derive("password", "salt", 32, iterations=1)
    assert derive("password", "salt", 32, iterations=1, prf="HMAC_SHA2_256") == expected
    assert derive("password", "salt", 32, iterations=1, prf="1.2.840.113549.2.9") == expected
    assert derive("password", "salt", 32, iterations=1, prf=hmac_sha256) == expected


def test_defaults() -> None:
    """
    Test that the defaults are 1000 iterations of HMAC-SHA-256.
    """

    assert DEFAULT_ITERATIONS == 1000
    assert derive("password", "salt", 32) == hashlib.pbkdf2_hmac("sha256", b"password", b"salt", 1000, 32)


def test_block_function() -> None:
    """
    Test the block function: the number of PRF invocations, the degenerate case of a single iteration and the
    encoding of the block index.
    """

    messages: List[bytes] = []

    def counting_prf(key: bytes, message: bytes) -> bytes:
        messages.append(message)
        return hmac_sha256(key, message)

    passphrase = os.urandom(16)
    salt = os.urandom(16)

    # A single iteration is the first PRF output, without any XOR folding
    assert f(passphrase, salt, 1, counting_prf, 1) == hmac_sha256(passphrase, salt + b"\x00\x00\x00\x01")
    assert messages == [ salt + b"\x00\x00\x00\x01" ]

    for iterations in [ 2, 3, 17, 100 ]:
        messages.clear()
        block = f(passphrase, salt, iterations, counting_prf, 0x01020304)

        assert len(messages) == iterations
        assert messages[0] == salt + b"\x01\x02\x03\x04"
        assert len(block) == 32

        # Recompute the XOR of all chained outputs by hand
        u = hmac_sha256(passphrase, salt + b"\x01\x02\x03\x04")
        expected = bytearray(u)
        for _ in range(iterations - 1):
            u = hmac_sha256(passphrase, u)
            expected = bytearray(x ^ y for x, y in zip(expected, u))
        assert block == bytes(expected)

    # Leading zero bytes of the XOR result are kept
    assert len(f(passphrase, salt, 2, lambda key, message: b"\x00" * 31 + message[-1:], 1)) == 32

    for index in [ 0, -1, 2 ** 32 ]:
        try:
            f(passphrase, salt, 1, counting_prf, index)
            assert False
        except DerivedKeyTooLongException as e:
            assert "too long" in str(e)

    try:
        f(passphrase, salt, 1, counting_prf, 1.0)  # type: ignore[arg-type]
        assert False
    except InvalidInputException as e:
        assert "block index" in str(e)

    assert len(f(passphrase, salt, 1, counting_prf, 2 ** 32 - 1)) == 32


def test_prefix_stability() -> None:
    """
    Test that shorter keys are prefixes of longer keys derived from the same parameters.
    """

    for _ in range(50):
        passphrase = os.urandom(random.randrange(1, 64))
        salt = os.urandom(random.randrange(0, 64))
        iterations = random.randrange(1, 8)
        prf = random.choice([ HMAC_SHA1, HMAC_SHA2_256, HMAC_SHA2_512, hmac_sha256 ])

        length_1 = random.randrange(1, 200)
        length_2 = random.randrange(length_1 + 1, 300)

        key_1 = derive(passphrase, salt, length_1, iterations=iterations, prf=prf)
        key_2 = derive(passphrase, salt, length_2, iterations=iterations, prf=prf)

        assert len(key_1) == length_1
        assert len(key_2) == length_2
        assert key_2[:length_1] == key_1


def test_hashlib_equivalence() -> None:
    """
    Test the results against the PBKDF2 implementation of the standard library, using random parameters.
    """

    hash_names = {
        "HMAC_SHA1": "sha1",
        "HMAC_SHA2_224": "sha224",
        "HMAC_SHA2_256": "sha256",
        "HMAC_SHA2_384": "sha384",
        "HMAC_SHA2_512": "sha512"
    }

    for _ in range(50):
        prf, hash_name = random.choice(list(hash_names.items()))
        passphrase = os.urandom(random.randrange(1, 200))
        salt = os.urandom(random.randrange(0, 64))
        iterations = random.randrange(1, 50)
        length = random.randrange(1, 300)

        assert derive(passphrase, salt, length, iterations=iterations, prf=prf) == hashlib.pbkdf2_hmac(
            hash_name,
            passphrase,
            salt,
            iterations,
            length
        )


def test_iteration_bounds() -> None:
    """
    Test that the iteration count must lie within [1, 2^32-1].
    """

    assert MAX_ITERATIONS == 2 ** 32 - 1
    assert check_iterations(1) == 1
    assert check_iterations(2 ** 32 - 1) == 2 ** 32 - 1
    assert prepare("password", "salt", 2 ** 32 - 1, HMAC_SHA1).iterations == 2 ** 32 - 1

    for iterations in [ 0, -1, 2 ** 32, 2 ** 64 ]:
        try:
            derive("password", "salt", 20, iterations=iterations)
            assert False
        except OutOfRangeException as e:
            assert "iteration count" in str(e)

    # Out of range is a special case of invalid input
    try:
        derive("password", "salt", 20, iterations=0)
        assert False
    except InvalidInputException:
        pass

    for iterations in [ 1.0, "1000", None, True ]:
        try:
            derive("password", "salt", 20, iterations=iterations)  # type: ignore[arg-type]
            assert False
        except InvalidInputException as e:
            assert not isinstance(e, OutOfRangeException)
            assert "iteration count" in str(e)


def test_invalid_input() -> None:
    """
    Test the rejection of invalid lengths, passphrases, salts and PRFs.
    """

    for length in [ 0, -1, -32 ]:
        try:
            derive("password", "salt", length)
            assert False
        except InvalidInputException as e:
            assert "at least 1" in str(e)

    for length in [ 32.0, "32", None, True ]:
        try:
            derive("password", "salt", length)  # type: ignore[arg-type]
            assert False
        except InvalidInputException as e:
            assert "integer" in str(e)

    try:
        derive("pass\ud800word", "salt", 32)
        assert False
    except InvalidEncodingException:
        pass

    try:
        derive("password", 1234, 32)  # type: ignore[arg-type]
        assert False
    except InvalidEncodingException:
        pass

    for prf in [ "HMAC_MD5", "1.2.3.4", "", 42, None ]:
        try:
            derive("password", "salt", 32, prf=prf)  # type: ignore[arg-type]
            assert False
        except UnknownPRFException as e:
            assert "pseudorandom function" in str(e)


def test_resolve_prf() -> None:
    """
    Test the resolution of PRF classes, identifiers and callables.
    """

    resolved = resolve_prf(HMAC_SHA2_256)
    assert resolved.identifier == "1.2.840.113549.2.9"
    assert resolved.calculate(b"key", b"message") == hmac_sha256(b"key", b"message")

    assert resolve_prf("HMAC_SHA1").identifier == "1.3.6.1.5.5.8.1.2"
    assert resolve_prf("1.3.6.1.5.5.8.1.2").identifier == "1.3.6.1.5.5.8.1.2"
    assert resolve_prf("HMAC_SHA3_512").identifier == "2.16.840.1.101.3.4.2.16"

    # The calculate method of a registered algorithm is recognized, too
    assert resolve_prf(HMAC_SHA1.calculate).identifier == "1.3.6.1.5.5.8.1.2"

    resolved = resolve_prf(hmac_sha256)
    assert resolved.identifier is None
    assert resolved.calculate is hmac_sha256

    for abstract_prf in [ PRF, prf_hmac.PRF ]:
        try:
            resolve_prf(abstract_prf)
            assert False
        except UnknownPRFException as e:
            assert "abstract" in str(e)

    class CustomPRF(PRF):  # pylint: disable=missing-class-docstring
        @staticmethod
        def calculate(key: bytes, message: bytes) -> bytes:
            return hmac_sha256(key, message)

        @staticmethod
        def get_output_size() -> int:
            return 32

    resolved = resolve_prf(CustomPRF)
    assert resolved.identifier is None
    assert derive("password", "salt", 32, iterations=1, prf=CustomPRF) == derive(
        "password",
        "salt",
        32,
        iterations=1
    )


def test_derive_key_metadata() -> None:
    """
    Test that the key is returned together with the parameters it was derived with.
    """

    derived_key = derive_key("password", "salt", 20, iterations=1, prf="HMAC_SHA1")

    assert derived_key.key == bytes.fromhex("0c60c80f961f0e71f3a9b524af6012062fe037a6")
    assert derived_key.parameters.salt == b"salt"
    assert derived_key.parameters.length == 20
    assert derived_key.parameters.iterations == 1
    assert derived_key.parameters.prf == "1.3.6.1.5.5.8.1.2"

    derived_key = derive_key(b"password", b"salt", 10, iterations=3, prf=hmac_sha256)
    assert derived_key.key == derive(b"password", b"salt", 10, iterations=3)
    assert derived_key.parameters.prf is None

    # The default PRF is identified as well
    assert derive_key("password", "salt", 16, iterations=1).parameters.prf == "1.2.840.113549.2.9"

    try:
        derive_key("password", "salt", 0)
        assert False
    except InvalidInputException:
        pass


def test_derived_key_too_long() -> None:
    """
    Test that lengths requiring block indexes beyond 2^32-1 are rejected without producing all blocks.
    """

    # HMAC-SHA-1 produces 20 bytes per block
    try:
        derive("password", "salt", (2 ** 32 - 1) * 20 + 1, iterations=1, prf=HMAC_SHA1)
        assert False
    except DerivedKeyTooLongException as e:
        assert "too long" in str(e)

    calls: List[bytes] = []

    def one_byte_prf(key: bytes, message: bytes) -> bytes:
        calls.append(message)
        return hmac_sha256(key, message)[:1]

    try:
        derive("password", "salt", 2 ** 32, iterations=1, prf=one_byte_prf)
        assert False
    except DerivedKeyTooLongException:
        pass

    # Only the first block was produced before the length was found to be too long
    assert len(calls) == 1


def test_empty_prf_output() -> None:
    """
    Test that a PRF without output is rejected instead of producing blocks forever.
    """

    try:
        derive("password", "salt", 16, iterations=1, prf=lambda key, message: b"")
        assert False
    except InvalidInputException as e:
        assert "empty output" in str(e)
