import json
import os
import time

import boa
from eth_account import Account

from script.helper_config import is_development_chain


def get_account() -> str:
    """Address that scripts send transactions from.

    Local networks use boa's default sender. Live networks prefer an
    encrypted keystore (KEYSTORE_PATH + WAL_PASS), then PRIVATE_KEY, and
    otherwise keep the default account moccasin configured.
    """
    if is_development_chain():
        return boa.env.eoa

    keystore_path = os.environ.get("KEYSTORE_PATH")
    password = os.environ.get("WAL_PASS")
    private_key = os.environ.get("PRIVATE_KEY")
    if keystore_path and password:
        with open(keystore_path, encoding="utf-8") as f:
            account = Account.from_key(Account.decrypt(json.load(f), password))
    elif private_key:
        account = Account.from_key(private_key)
    else:
        return boa.env.eoa

    boa.env.add_account(account, force_eoa=True)
    return account.address


def wait_for_winner(lottery_contract, starting_timestamp, timeout=300, poll_interval=5):
    """Block until the lottery draws a winner.

    Args:
        lottery_contract: deployed lottery contract.
        starting_timestamp (int): value of get_latest_timestamp() before
            entering; a draw moves it forward.
        timeout (int, optional): seconds to wait before giving up.
        poll_interval (int, optional): seconds between two node queries.

    Returns:
        The address of the recent winner.
    """
    start_time = time.time()
    while time.time() - start_time < timeout:
        if lottery_contract.get_latest_timestamp() > starting_timestamp:
            print("Winner picked!")
            return lottery_contract.get_recent_winner()
        time.sleep(poll_interval)
    raise TimeoutError(f"No winner picked within {timeout} seconds")
