import json

from click.testing import CliRunner
from eth_abi import encode

from abilens.cli import cli

TO = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
TRANSFER_T0 = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"


def test_selectors(erc20_abi_path) -> None:
    result = CliRunner().invoke(cli, ["selectors", "--abi", str(erc20_abi_path)])

    assert result.exit_code == 0, result.output
    assert "0xa9059cbb" in result.output
    assert "balanceOf(address)" in result.output

    lines = result.output.splitlines()
    transfer_event = [line for line in lines if line.startswith(TRANSFER_T0)]
    assert len(transfer_event) == 1
    assert transfer_event[0].split() == [TRANSFER_T0, "event", "Transfer(address,address,uint256)"]
    # constructor and fallback have no selector
    assert len(lines) == 5


def test_decode_method(erc20_abi_path) -> None:
    data = "0xa9059cbb" + encode(["address", "uint256"], [TO, 12345]).hex()
    result = CliRunner().invoke(cli, ["decode-method", "--abi", str(erc20_abi_path), "--data", data])

    assert result.exit_code == 0, result.output
    assert '"transfer"' in result.output
    assert '"12345"' in result.output
    assert TO.lower() in result.output


def test_decode_method_no_match(erc20_abi_path) -> None:
    result = CliRunner().invoke(cli, ["decode-method", "--abi", str(erc20_abi_path), "--data", "0xdeadbeef"])

    assert result.exit_code == 1
    assert "no matching method" in result.output


def test_decode_logs(tmp_path, erc20_abi_path) -> None:
    logs = [
        {
            "address": "0xtoken",
            "topics": [TRANSFER_T0, "0x" + "0" * 24 + TO[2:], "0x" + "0" * 24 + TO[2:]],
            "data": "0x" + encode(["uint256"], [99]).hex(),
        }
    ]
    logs_path = tmp_path / "logs.json"
    logs_path.write_text(json.dumps(logs))

    result = CliRunner().invoke(cli, ["decode-logs", "--abi", str(erc20_abi_path), "--logs", str(logs_path)])

    assert result.exit_code == 0, result.output
    assert '"Transfer"' in result.output
    assert '"99"' in result.output


def test_rejects_non_list_abi(tmp_path) -> None:
    abi_path = tmp_path / "abi.json"
    abi_path.write_text(json.dumps({"name": "not-an-abi"}))

    result = CliRunner().invoke(cli, ["decode-method", "--abi", str(abi_path), "--data", "0xdeadbeef"])

    assert result.exit_code == 1
    assert "Expected ABI array" in result.output


def test_decode_logs_rejects_non_object_entries(tmp_path, erc20_abi_path) -> None:
    logs_path = tmp_path / "logs.json"
    logs_path.write_text(json.dumps([TRANSFER_T0]))

    result = CliRunner().invoke(cli, ["decode-logs", "--abi", str(erc20_abi_path), "--logs", str(logs_path)])

    assert result.exit_code == 1
    assert "log #0 is a str" in result.output
    assert not isinstance(result.exception, AttributeError)
