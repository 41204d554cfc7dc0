"""Account (sensitive action) use cases."""

from .delete_account import DeleteAccountUseCase
from .export_data import ExportDataUseCase

__all__ = ["DeleteAccountUseCase", "ExportDataUseCase"]
