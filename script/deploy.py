import os

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from script.deploy_mocks import deploy_vrf_coordinator_mock
from script.helper_config import (
    VRF_SUBSCRIPTION_FUND_AMOUNT,
    get_active_network_name,
    get_network_config,
    is_development_chain,
)
from script.helpful_scripts import get_account
from src import lottery


def create_subscription(vrf_coordinator) -> int:
    subscription_id = vrf_coordinator.createSubscription()
    print(f"Created VRF subscription {subscription_id}")
    return subscription_id


def fund_subscription(vrf_coordinator, subscription_id, amount=VRF_SUBSCRIPTION_FUND_AMOUNT):
    vrf_coordinator.fundSubscription(subscription_id, amount)
    print(f"Funded subscription {subscription_id} with {amount / 10**18} LINK")


def add_consumer(vrf_coordinator, subscription_id, consumer_address):
    vrf_coordinator.addConsumer(subscription_id, consumer_address)
    print(f"Added consumer {consumer_address} to subscription {subscription_id}")


def deploy_lottery(vrf_coordinator=None, network_name=None) -> VyperContract:
    """Deploy the lottery with the parameters of the given network.

    On development chains the mock coordinator is deployed (unless one is
    passed in), and a funded subscription is created for the lottery. Live
    networks use the coordinator and subscription from the network config;
    the subscription owner registers the lottery as consumer out of band.
    """
    if network_name is None:
        network_name = get_active_network_name()
    network_config = get_network_config(network_name)
    deployer = get_account()
    print(f"Deploying lottery to {network_name} from {deployer}...")

    development = is_development_chain(network_name)
    if development:
        if vrf_coordinator is None:
            vrf_coordinator = deploy_vrf_coordinator_mock()
        vrf_coordinator_address = vrf_coordinator.address
        subscription_id = create_subscription(vrf_coordinator)
        fund_subscription(vrf_coordinator, subscription_id)
    else:
        vrf_coordinator_address = network_config["vrf_coordinator"]
        subscription_id = network_config["subscription_id"]

    lottery_contract = lottery.deploy(
        vrf_coordinator_address,
        network_config["entrance_fee"],
        network_config["key_hash"],
        subscription_id,
        network_config["callback_gas_limit"],
        network_config["interval"],
    )
    print(f"Lottery deployed at: {lottery_contract.address}")

    if development:
        add_consumer(vrf_coordinator, subscription_id, lottery_contract.address)
    else:
        active_network = get_active_network()
        if active_network.has_explorer():
            print("Verifying contract source...")
            result = active_network.moccasin_verify(lottery_contract)
            result.wait_for_verification()
    print("__________________________________________________")
    return lottery_contract


def get_deployed_lottery() -> VyperContract | None:
    """Lottery the scripts should talk to, if one is already deployed.

    LOTTERY_ADDRESS wins; otherwise live networks fall back to the latest
    lottery in moccasin's deployments database. Development chains start
    from scratch every run, so they have nothing to look up.
    """
    lottery_address = os.environ.get("LOTTERY_ADDRESS")
    if lottery_address:
        print(f"Using lottery at {lottery_address}")
        return lottery.at(lottery_address)
    if is_development_chain():
        return None
    lottery_contract = get_active_network().get_latest_contract_unchecked("lottery")
    if lottery_contract is not None:
        print(f"Using latest deployed lottery at {lottery_contract.address}")
    return lottery_contract


def get_or_deploy_lottery() -> VyperContract:
    lottery_contract = get_deployed_lottery()
    if lottery_contract is not None:
        return lottery_contract
    if not is_development_chain():
        # a fresh live lottery has no consumer registration and no upkeep
        raise ValueError(
            f"No lottery deployed on '{get_active_network_name()}', run `mox run deploy` first"
        )
    return deploy_lottery()


def moccasin_main() -> VyperContract:
    return deploy_lottery()
