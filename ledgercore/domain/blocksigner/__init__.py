"""Block signer errors."""
