from leasechain.chains import ChainDescriptor

TEST_PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
TEST_ADDRESS = "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"

LEASE_ABI = [
    {
        "type": "constructor",
        "inputs": [{"name": "monthlyRent", "type": "uint256"}],
        "stateMutability": "nonpayable",
    }
]

TEST_CHAINS = (
    ChainDescriptor(
        name="Testnet",
        chain_id=1001,
        rpc_url="http://testnet.local:8545",
        explorer_url="https://explorer.testnet.local",
    ),
    ChainDescriptor(name="Devnet", chain_id=1002, rpc_url="http://devnet.local:8545"),
)
