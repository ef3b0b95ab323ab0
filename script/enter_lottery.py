from moccasin.boa_tools import VyperContract

from script.deploy import get_or_deploy_lottery


def enter_lottery(lottery_contract, value=None):
    if value is None:
        value = lottery_contract.get_entrance_fee()
    lottery_contract.enter_lottery(value=value)
    print(f"Entered the lottery with {value} wei!")
    print(f"Players in this round: {lottery_contract.get_number_of_players()}")


def moccasin_main() -> VyperContract:
    lottery_contract = get_or_deploy_lottery()
    enter_lottery(lottery_contract)
    return lottery_contract
