"""Application layer: ledger service and DTOs."""
