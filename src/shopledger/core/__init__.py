"""Core domain: entities, interfaces, exceptions and ledger services."""
