import pytest

from hmnguard.security import (
    EncryptionPolicy,
    EncryptionScope,
    MisuseDetector,
    MisuseSignal,
    MisuseType,
)


@pytest.mark.parametrize("scope", list(EncryptionScope))
def test_encrypt_decrypt_round_trip(scope):
    data = b"\x00\x01journal text\xff"
    cipher = EncryptionPolicy.encrypt(data, scope)
    assert EncryptionPolicy.decrypt(cipher, scope) == data


def test_encrypt_accepts_bytearray_and_returns_bytes():
    data = bytearray(b"state")
    result = EncryptionPolicy.encrypt(data, EncryptionScope.LOCAL_STATE)
    assert isinstance(result, bytes)
    assert result == b"state"


def test_encrypt_empty_payload():
    assert EncryptionPolicy.encrypt(b"", EncryptionScope.P2P_MESSAGE) == b""


def test_every_scope_passes_payload_through():
    results = {
        scope: EncryptionPolicy.encrypt(b"entry", scope) for scope in EncryptionScope
    }
    assert len(results) == 4
    assert set(results.values()) == {b"entry"}


def test_analyze_authority_simulation():
    signal = MisuseDetector.analyze("Listen, you must obey")
    assert signal == MisuseSignal(
        MisuseType.AUTHORITY_SIMULATION, "Directive Language detected"
    )


def test_analyze_dependency():
    signal = MisuseDetector.analyze("remember: only for HMN understands you")
    assert signal.type is MisuseType.DEPENDENCY
    assert signal.reason == "Emotional dependency pattern detected"


def test_analyze_manipulation():
    signal = MisuseDetector.analyze("help me convince others to agree")
    assert signal.type is MisuseType.MANIPULATION
    assert signal.reason == "Manipulation intent detected"


def test_analyze_clean_content():
    signal = MisuseDetector.analyze("a calm reflection on the day")
    assert signal == MisuseSignal(MisuseType.NONE, "")


def test_analyze_authority_takes_precedence():
    signal = MisuseDetector.analyze("you must convince others")
    assert signal.type is MisuseType.AUTHORITY_SIMULATION


def test_analyze_dependency_before_manipulation():
    signal = MisuseDetector.analyze(
        "convince others; only for HMN understands you"
    )
    assert signal.type is MisuseType.DEPENDENCY


def test_analyze_is_case_sensitive():
    signal = MisuseDetector.analyze("You Must do it")
    assert signal.type is MisuseType.NONE