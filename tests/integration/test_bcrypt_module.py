"""Integration tests for the public typed_password.bcrypt functions.

These go through the container singleton, so they exercise the default
settings (cost 10, clamp policy) and the OS random source.
"""

import asyncio

import pytest

from typed_password.bcrypt import (
    BcryptParams,
    PassCheck,
    PassHash,
    Salt,
    check_pass,
    check_pass_async,
    extract_params,
    hash_pass,
    hash_pass_async,
    hash_pass_with_params,
    hash_pass_with_params_async,
    hash_pass_with_salt,
    mk_pass,
    new_salt,
    unsafe_show_password,
    unsafe_show_password_text,
)
from typed_password.core.enums import ErrorCode
from typed_password.core.result import Failure, Success

REFERENCE_HASH = "$2b$10$WUHhXETkX0fnYkrqZU3ta.N8Utt4U77kW4RVbchzgvBvBBEEdCD/u"


@pytest.mark.integration
class TestHashAndCheck:
    def test_reference_scenario(self):
        pass_hash = hash_pass_with_salt(
            10, Salt(b"abcdefghijklmnop"), mk_pass("foobar")
        )

        assert pass_hash.value == REFERENCE_HASH
        assert check_pass(mk_pass("foobar"), pass_hash) is PassCheck.SUCCESS

    def test_hash_pass_uses_default_cost(self):
        pass_hash = hash_pass(mk_pass("foobar"))

        assert pass_hash.value.startswith("$2b$10$")
        assert check_pass(mk_pass("foobar"), pass_hash) is PassCheck.SUCCESS
        assert check_pass(mk_pass("incorrect-password"), pass_hash) is PassCheck.FAIL

    def test_hash_pass_with_params(self):
        pass_hash = hash_pass_with_params(4, mk_pass("foobar"))

        assert pass_hash.value.startswith("$2b$04$")
        assert check_pass(mk_pass("foobar"), pass_hash)

    def test_garbage_hash_fails(self):
        assert check_pass(mk_pass("foobar"), PassHash("garbage")) is PassCheck.FAIL

    def test_salt_length_is_enforced(self):
        with pytest.raises(ValueError):
            hash_pass_with_salt(10, Salt(b"too short"), mk_pass("foobar"))


@pytest.mark.integration
class TestNewSalt:
    def test_is_sixteen_random_bytes(self):
        salts = {new_salt().value for _ in range(10)}

        assert len(salts) == 10
        assert all(len(salt) == 16 for salt in salts)

    def test_accepts_injected_source(self, counting_random_source):
        salt = new_salt(random_source=counting_random_source)

        assert salt.value == bytes(range(16))

    def test_generated_salt_can_be_used_for_hashing(self):
        salt = new_salt()

        first = hash_pass_with_salt(4, salt, mk_pass("foobar"))
        second = hash_pass_with_salt(4, salt, mk_pass("foobar"))

        assert first == second


@pytest.mark.integration
class TestExtractParams:
    def test_reference_hash(self):
        result = extract_params(PassHash(REFERENCE_HASH))

        match result:
            case Success(value=params):
                assert isinstance(params, BcryptParams)
                assert params.cost == 10
                assert params.salt == Salt(b"abcdefghijklmnop")
            case Failure(error=error):
                pytest.fail(f"unexpected failure: {error}")

    def test_garbage_is_failure(self):
        result = extract_params(PassHash("garbage"))

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.PASSWORD_HASH_MALFORMED


@pytest.mark.integration
class TestAsyncVariants:
    @pytest.mark.asyncio
    async def test_hash_and_check(self):
        pass_hash = await hash_pass_with_params_async(4, mk_pass("foobar"))

        assert await check_pass_async(mk_pass("foobar"), pass_hash) is PassCheck.SUCCESS
        assert await check_pass_async(mk_pass("wrong"), pass_hash) is PassCheck.FAIL

    @pytest.mark.asyncio
    async def test_hash_pass_async_uses_default_cost(self):
        pass_hash = await hash_pass_async(mk_pass("foobar"))

        assert pass_hash.value.startswith("$2b$10$")

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self):
        passwords = [f"user-{i}" for i in range(4)]

        hashes = await asyncio.gather(
            *(hash_pass_with_params_async(4, mk_pass(p)) for p in passwords)
        )
        checks = await asyncio.gather(
            *(check_pass_async(mk_pass(p), h) for p, h in zip(passwords, hashes))
        )

        assert checks == [PassCheck.SUCCESS] * 4
        assert len(set(hashes)) == 4


@pytest.mark.integration
class TestUnsafeAccessors:
    def test_reexported_accessors(self):
        password = mk_pass("foobar")

        assert unsafe_show_password(password) == b"foobar"
        assert unsafe_show_password_text(password) == "foobar"
