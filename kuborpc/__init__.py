"""Async client for the Kubo RPC API: CIDs, raw blocks, IPNS names and keys."""

__version__ = "0.1.0"
__all__ = ["cid", "ipfs", "ipns", "keys"]