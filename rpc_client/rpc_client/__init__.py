"""rpc_client — thin JSON-RPC 2.0 consumer."""

from rpc_client.client import RpcClient, RpcError

__all__ = ["RpcClient", "RpcError"]
