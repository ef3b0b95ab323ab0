from moccasin.boa_tools import VyperContract

from script.helper_config import BASE_FEE, GAS_PRICE_LINK
from src.mocks import vrf_coordinator_v2_mock


def deploy_vrf_coordinator_mock(base_fee=BASE_FEE, gas_price_link=GAS_PRICE_LINK) -> VyperContract:
    print("Deploying VRF coordinator mock...")
    mock = vrf_coordinator_v2_mock.deploy(base_fee, gas_price_link)
    print(f"Mock VRF Coordinator at: {mock.address}")
    return mock


def moccasin_main() -> VyperContract:
    return deploy_vrf_coordinator_mock()
