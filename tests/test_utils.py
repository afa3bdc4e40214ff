import pytest

from abilens.core.config import TTL_ENV_VAR, RegistryConfig
from abilens.core.constants import ONE_DAY_MS
from abilens.decoding.utils import fix_address_length, normalize_call_value, normalize_log_value, to_decimal_string


def test_fix_address_length_strips_topic_padding() -> None:
    topic = "0x000000000000000000000000D8DA6BF26964AF9D7EED9E03E53415D37AA96045"
    assert fix_address_length(topic) == "0xd8da6bf26964af9d7eed9e03e53415d37aa96045"


def test_fix_address_length_keeps_short_values() -> None:
    assert fix_address_length("0xABC") == "0xabc"


@pytest.mark.parametrize("value", [1234, "1234", "0x4d2"])
def test_to_decimal_string(value) -> None:
    assert to_decimal_string(value) == "1234"


def test_call_path_normalizes_any_int_width() -> None:
    assert normalize_call_value("uint128", 5) == "5"
    assert normalize_call_value("int8", -1) == "-1"
    assert normalize_call_value("uint256[][]", [[1], [2, 3]]) == [["1"], ["2", "3"]]
    assert normalize_call_value("bool", True) is True


def test_call_path_does_not_fix_address_length() -> None:
    padded = "0x000000000000000000000000ABCDEF0000000000000000000000000000000001"
    assert normalize_call_value("address", padded) == padded.lower()


def test_log_path_numeric_types_are_narrow() -> None:
    assert normalize_log_value("uint256", "0xff") == "255"
    assert normalize_log_value("uint8", 7) == "7"
    assert normalize_log_value("int", "-3") == "-3"
    assert normalize_log_value("uint128", 7) == 7
    assert normalize_log_value("address[]", ["0xAB"]) == ["0xAB"]


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.delenv(TTL_ENV_VAR, raising=False)
    assert RegistryConfig.from_env().default_ttl_ms == ONE_DAY_MS

    monkeypatch.setenv(TTL_ENV_VAR, "5000")
    assert RegistryConfig.from_env().default_ttl_ms == 5000

    monkeypatch.setenv(TTL_ENV_VAR, "soon")
    with pytest.raises(ValueError):
        RegistryConfig.from_env()

    monkeypatch.setenv(TTL_ENV_VAR, "-1")
    with pytest.raises(ValueError):
        RegistryConfig.from_env()
