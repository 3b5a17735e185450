from .ledger import LedgerService

__all__ = ["LedgerService"]
