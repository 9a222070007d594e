"""TripWallet: personal trip and savings ledger."""
