import pytest
from pydantic import ValidationError

from feistellab.cipher.builder import build_network
from feistellab.cipher.components import Component
from feistellab.cipher.engine import FeistelNetwork, encrypt
from feistellab.cipher.registry import ComponentRegistry
from feistellab.cipher.spec import FeistelSpec
from feistellab.cipher.validator import validate_spec


def test_builtin_components():
    reg = ComponentRegistry()
    assert reg.list_ids("ROUND_FUNCTION") == [
        "prf.blake2b", "prf.blake2s", "prf.sha256", "prf.sha3_256", "prf.sha512",
    ]
    assert reg.list_ids("key_schedule") == ["ks.popcount_rotate"]
    assert [c.component_id for c in reg.list_by_kind("KEY_SCHEDULE")] == ["ks.popcount_rotate"]
    assert reg.exists("prf.sha256")
    assert not reg.exists("prf.md5")


def test_unknown_component():
    with pytest.raises(KeyError):
        ComponentRegistry().get("prf.nope")


def test_register_custom_component():
    reg = ComponentRegistry()
    reg.register(Component(
        component_id="prf.zero",
        kind="ROUND_FUNCTION",
        description="all-zero output",
        forward=lambda data, subkey: bytes(len(data)),
    ))
    spec = FeistelSpec(name="zero-prf", rounds=3, components={"round_function": "prf.zero"})
    net = build_network(spec, reg)
    assert net.encrypt(b"abcdef", b"k", 3) == b"abcdef"


def test_spec_defaults():
    spec = FeistelSpec(name="defaults", rounds=0)
    assert spec.components == {
        "round_function": "prf.sha256",
        "key_schedule": "ks.popcount_rotate",
    }
    assert spec.seed == 1337


@pytest.mark.parametrize("rounds", [-1, 2**32])
def test_spec_rejects_bad_rounds(rounds):
    with pytest.raises(ValidationError):
        FeistelSpec(name="bad", rounds=rounds)


def test_validate_spec_errors():
    spec = FeistelSpec(
        name="broken",
        rounds=4,
        components={
            "round_function": "ks.popcount_rotate",
            "key_schedule": "ks.missing",
            "sbox": "sbox.aes",
        },
    )
    ok, errs = validate_spec(spec)
    assert not ok
    assert any("expected ROUND_FUNCTION" in e for e in errs)
    assert any("Unknown key_schedule component" in e for e in errs)
    assert any("Unsupported component role: sbox" in e for e in errs)


def test_build_network_rejects_invalid_spec():
    spec = FeistelSpec(name="broken", rounds=4, components={"round_function": "prf.nope"})
    with pytest.raises(ValueError, match="prf.nope"):
        build_network(spec)


def test_default_build_matches_module_functions():
    spec = FeistelSpec(name="default", rounds=6)
    net = build_network(spec)
    assert isinstance(net, FeistelNetwork)
    assert net.encrypt(b"same network", b"key", 6) == encrypt(b"same network", b"key", 6)
