import os

from moccasin.config import get_active_network

DEVELOPMENT_CHAINS = ["pyevm", "anvil"]

# mock coordinator pricing
BASE_FEE = 25 * 10**16  # 0.25 LINK per request
GAS_PRICE_LINK = 10**9  # LINK per gas

VRF_SUBSCRIPTION_FUND_AMOUNT = 10 * 10**18  # 10 LINK

SEPOLIA_VRF_COORDINATOR = "0x8103B0A8A00be2DDC778e6e7eaa21791Cd364625"
# 30 gwei key hash on sepolia, reused locally since the mock ignores it
SEPOLIA_KEY_HASH = bytes.fromhex(
    "474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c"
)

NETWORK_CONFIG = {
    "pyevm": {
        "entrance_fee": 10**16,  # 0.01 ETH
        "key_hash": SEPOLIA_KEY_HASH,
        "callback_gas_limit": 500_000,
        "interval": 30,
    },
    "anvil": {
        "entrance_fee": 10**16,
        "key_hash": SEPOLIA_KEY_HASH,
        "callback_gas_limit": 500_000,
        "interval": 30,
    },
    "sepolia": {
        "vrf_coordinator": SEPOLIA_VRF_COORDINATOR,
        "entrance_fee": 10**16,
        "key_hash": SEPOLIA_KEY_HASH,
        "callback_gas_limit": 500_000,
        "interval": 30,
    },
}


def get_active_network_name() -> str:
    return get_active_network().name


def is_development_chain(network_name: str | None = None) -> bool:
    if network_name is None:
        network_name = get_active_network_name()
    return network_name in DEVELOPMENT_CHAINS


def get_network_config(network_name: str | None = None) -> dict:
    """Return the lottery parameters for a network.

    Defaults to the network moccasin is currently running against.
    """
    if network_name is None:
        network_name = get_active_network_name()
    try:
        network_config = dict(NETWORK_CONFIG[network_name])
    except KeyError:
        raise ValueError(
            f"No lottery config for network '{network_name}', "
            f"expected one of {sorted(NETWORK_CONFIG)}"
        ) from None
    if not is_development_chain(network_name):
        # live networks draw through a subscription someone already owns
        subscription_id = int(os.environ.get("VRF_SUBSCRIPTION_ID") or 0)
        if subscription_id == 0:
            raise ValueError(
                f"VRF_SUBSCRIPTION_ID must be set to deploy the lottery on '{network_name}'"
            )
        network_config["subscription_id"] = subscription_id
    return network_config
