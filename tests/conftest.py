import boa
import pytest

from script.deploy import deploy_lottery
from script.deploy_mocks import deploy_vrf_coordinator_mock
from script.helper_config import get_active_network_name, get_network_config, is_development_chain

STARTING_BALANCE = 10**20  # 100 ETH


@pytest.fixture(scope="session")
def network_name():
    """Name of the network moccasin is running the tests against"""
    name = get_active_network_name()
    print(f"Running tests on {name}")
    return name


@pytest.fixture(scope="session")
def network_config(network_name):
    return get_network_config(network_name)


@pytest.fixture
def development_only(network_name):
    if not is_development_chain(network_name):
        pytest.skip("Unit tests only run on development chains")


@pytest.fixture
def account(development_only):
    """Default sender, funded so it can enter the lottery"""
    boa.env.set_balance(boa.env.eoa, STARTING_BALANCE)
    return boa.env.eoa


@pytest.fixture
def keeper(development_only):
    """Stand-in for the upkeep network; never enters the lottery"""
    keeper_address = boa.env.generate_address()
    boa.env.set_balance(keeper_address, STARTING_BALANCE)
    return keeper_address


@pytest.fixture
def players(development_only):
    addresses = [boa.env.generate_address() for _ in range(3)]
    for address in addresses:
        boa.env.set_balance(address, STARTING_BALANCE)
    return addresses


@pytest.fixture
def vrf_coordinator(development_only):
    return deploy_vrf_coordinator_mock()


@pytest.fixture
def lottery_contract(vrf_coordinator, account):
    return deploy_lottery(vrf_coordinator=vrf_coordinator)


@pytest.fixture
def entrance_fee(lottery_contract):
    return lottery_contract.get_entrance_fee()


@pytest.fixture
def interval(lottery_contract):
    return lottery_contract.get_interval()
