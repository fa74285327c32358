import logging
from typing import Any

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from leasechain.chains import ChainDescriptor

logger = logging.getLogger(__name__)


class ChainClient:
    """Web3 client bound to one chain and one signing account.

    Covers both halves of a deployment: submitting the signed creation
    transaction and reading back its receipt.
    """

    def __init__(self, w3: Web3, account: LocalAccount, chain: ChainDescriptor):
        self.w3 = w3
        self.account = account
        self.chain = chain

    @property
    def address(self) -> str:
        return self.account.address

    def deploy_contract(self, abi: list[dict[str, Any]], bytecode: str, args: list[Any]) -> str:
        """Sign and broadcast a contract-creation transaction, returning its 0x-prefixed hash."""
        factory = self.w3.eth.contract(abi=abi, bytecode=bytecode)
        tx = factory.constructor(*args).build_transaction(
            {
                "from": self.account.address,
                "nonce": self.w3.eth.get_transaction_count(self.account.address, "pending"),
                "chainId": self.chain.chain_id,
            }
        )
        signed = self.account.sign_transaction(tx)
        raw_tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
        tx_hash = Web3.to_hex(raw_tx_hash)
        logger.info("Submitted deployment transaction %s on %s", tx_hash, self.chain.name)
        return tx_hash

    def wait_for_receipt(self, tx_hash: str, timeout: float = 180) -> dict[str, Any]:
        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
        return dict(receipt)


def build_client(chain: ChainDescriptor, private_key: str) -> ChainClient:
    """Create a signing client for ``chain`` from a hex-encoded private key."""
    account: LocalAccount = Account.from_key(private_key)
    w3 = Web3(Web3.HTTPProvider(chain.rpc_url, request_kwargs={"timeout": 30}))
    if chain.poa:
        w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    return ChainClient(w3, account, chain)
