import logging
from pathlib import Path

from eth_abi import encode

from abilens import AbiRegistry, RegistryConfig, load_abi

EXAMPLES_ROOT = Path(__file__).parent
assert EXAMPLES_ROOT.name == "examples"

ABI = EXAMPLES_ROOT / "abi" / "erc20_abi.json"
assert ABI.is_file()

USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
HOLDER = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
RECIPIENT = "0xAb5801a7D398351b8bE11C439e05C5B3259aeC9B"
TRANSFER_T0 = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"


def main():
    logging.basicConfig(level=logging.DEBUG)

    registry = AbiRegistry(RegistryConfig.from_env())
    registry.add_abi(USDC, load_abi(ABI))

    # transfer(RECIPIENT, 250 USDC)
    calldata = "0xa9059cbb" + encode(["address", "uint256"], [RECIPIENT, 250_000_000]).hex()
    print(registry.decode_method(USDC, calldata))

    log = {
        "address": USDC.lower(),
        "topics": [
            TRANSFER_T0,
            "0x" + "0" * 24 + HOLDER[2:],
            "0x" + "0" * 24 + RECIPIENT[2:],
        ],
        "data": "0x" + encode(["uint256"], [250_000_000]).hex(),
    }
    for decoded in registry.decode_logs(USDC, [log]) or []:
        print(decoded.to_dict())

    registry.remove_all_abis()


if __name__ == "__main__":
    main()
