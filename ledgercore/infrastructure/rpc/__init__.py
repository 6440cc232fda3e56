"""Peer core RPC errors."""
