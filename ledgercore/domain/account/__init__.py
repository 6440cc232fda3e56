"""Account action errors (UTXO reservation)."""
