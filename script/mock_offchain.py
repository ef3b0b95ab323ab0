from moccasin.boa_tools import VyperContract

from script.deploy import get_or_deploy_lottery
from script.helper_config import is_development_chain
from src.mocks import vrf_coordinator_v2_mock


def perform_draw(lottery_contract) -> int | None:
    """Act as the upkeep network and the randomness coordinator.

    Only meaningful against the mock coordinator, so it refuses to run on
    live networks. Returns the fulfilled request id, or None when no draw
    is due yet.
    """
    if not is_development_chain():
        raise RuntimeError("Mock off-chain draws only run on development chains")

    upkeep_needed, _ = lottery_contract.checkUpkeep(b"")
    if not upkeep_needed:
        print("No upkeep needed")
        return None

    lottery_contract.performUpkeep(b"")
    request_id = lottery_contract.get_request_id()
    print(f"Performed upkeep with request id {request_id}")

    vrf_coordinator = vrf_coordinator_v2_mock.at(lottery_contract.get_vrf_coordinator())
    vrf_coordinator.fulfillRandomWords(request_id, lottery_contract.address)
    print(f"The winner is: {lottery_contract.get_recent_winner()}")
    return request_id


def moccasin_main() -> VyperContract:
    lottery_contract = get_or_deploy_lottery()
    perform_draw(lottery_contract)
    return lottery_contract
