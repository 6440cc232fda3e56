"""
Infrastructure layer package.

Errors raised by adapters talking to the data store and to peer cores.
"""
