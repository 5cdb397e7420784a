from dataclasses import dataclass

from fastapi import Request

from fintrack.common.config import Settings
from fintrack.core.store import TransactionStore
from fintrack.parsing.facade import IngestionFacade
from fintrack.parsing.sources.receipt import ReceiptScanner


@dataclass
class AppState:
    """
    Per-application collaborators, created once in create_app and
    attached to app.state. Nothing here is a module-level global.
    """
    settings: Settings
    store: TransactionStore
    facade: IngestionFacade
    scanner: ReceiptScanner

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppState":
        return cls(
            settings=settings,
            store=TransactionStore(seed_sample_data=settings.seed_sample_data),
            facade=IngestionFacade(),
            scanner=ReceiptScanner(max_bytes=settings.max_receipt_bytes),
        )


# Helper functions for endpoints (used with Depends)
def get_app_state(request: Request) -> AppState:
    return request.app.state.finance


def get_store(request: Request) -> TransactionStore:
    return get_app_state(request).store


def get_facade(request: Request) -> IngestionFacade:
    return get_app_state(request).facade


def get_scanner(request: Request) -> ReceiptScanner:
    return get_app_state(request).scanner
