"""Dashboard state: everything the page needs between requests.

The state owns the raw catalogue fetched at load time and derives the
display rows from it on demand, so changing the period, the sort column or
the favorites never touches the raw data.
"""

from __future__ import annotations

from stock_monitor.analytics.aggregator import process_skus
from stock_monitor.analytics.sorter import SortConfig, next_sort_config, sort_skus
from stock_monitor.common.config import Settings, settings as default_settings
from stock_monitor.common.logging import get_logger
from stock_monitor.common.models import RawSku, Sku
from stock_monitor.insight.generator import InsightGenerator
from stock_monitor.stock_service.client import StockService

from .favorites import FavoritesStore

logger = get_logger("dashboard")

LOAD_ERROR_MESSAGE = "Falha ao carregar os dados de estoque."
ANALYSIS_ERROR_MESSAGE = "Ocorreu um erro ao gerar a análise."


class DashboardState:
    """In-process state of the single shared dashboard.

    Attributes:
        loading: True while the catalogue is being fetched.
        error: Page-level error shown instead of the table.
        notice: Fetch-fallback message shown above the sample data.
        period: Lookback window in days.
        sort_config: Active table ordering.
        expanded: Ids of SKUs whose variation rows are open (not persisted).
        selected_sku: SKU shown in the analysis modal.
        modal_open: Whether the analysis modal is visible.
        analysis: Last generated analysis text.
        analysis_loading: True while an analysis request is in flight.
    """

    def __init__(
        self,
        service: StockService | None = None,
        generator: InsightGenerator | None = None,
        favorites: FavoritesStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.service = service or StockService(self.settings)
        self.generator = generator or InsightGenerator(settings=self.settings)
        self.favorites = favorites or FavoritesStore(settings=self.settings)

        self.raw_skus: list[RawSku] = []
        self.loading = True
        self.error: str | None = None
        self.notice: str | None = None
        self.period = self.settings.dashboard.default_period
        self.sort_config = SortConfig()
        self.expanded: set[str] = set()
        self.selected_sku: Sku | None = None
        self.modal_open = False
        self.analysis = ""
        self.analysis_loading = False

    # --- Loading ---

    def load(self) -> None:
        """Fetch the catalogue from the stock service."""
        self.loading = True
        self.error = None
        try:
            self.raw_skus = self.service.get_all_skus()
            self.notice = self.service.last_error
        except Exception as e:
            logger.error("Dashboard load failed: %s", e)
            self.error = LOAD_ERROR_MESSAGE
        finally:
            self.loading = False

    # --- Derived data ---

    def processed_data(self) -> list[Sku]:
        """Aggregated SKUs for the current period, favorites first."""
        skus = process_skus(self.raw_skus, self.period)
        return sort_skus(skus, self.sort_config, self.favorites.ids)

    def get_sku(self, sku_id: str) -> Sku | None:
        """Aggregated SKU by id, or None if unknown."""
        return next((s for s in self.processed_data() if s.id == sku_id), None)

    # --- User actions ---

    def set_period(self, period: int) -> None:
        if period not in self.settings.dashboard.periods:
            raise ValueError(
                f"Unsupported period {period}; choose one of {self.settings.dashboard.periods}"
            )
        self.period = period

    def handle_sort(self, key: str) -> None:
        self.sort_config = next_sort_config(self.sort_config, key)

    def is_favorite(self, sku_id: str) -> bool:
        return sku_id in self.favorites

    def toggle_favorite(self, sku_id: str) -> bool:
        return self.favorites.toggle(sku_id)

    def toggle_expand(self, sku_id: str) -> bool:
        """Open or close a SKU's variation rows. Returns True if now open."""
        if sku_id in self.expanded:
            self.expanded.discard(sku_id)
            return False
        self.expanded.add(sku_id)
        return True

    def analyze_sku(self, sku: Sku) -> str:
        """Open the modal for ``sku`` and generate its analysis.

        Overlapping calls are not coordinated: whichever finishes last
        leaves its text in ``analysis``.
        """
        self.selected_sku = sku
        self.modal_open = True
        self.analysis_loading = True
        self.analysis = ""
        try:
            insight = self.generator.generate(sku.name, sku.variations)
        except Exception as e:
            logger.error("Analysis failed for %s: %s", sku.id, e)
            insight = ANALYSIS_ERROR_MESSAGE
        finally:
            self.analysis_loading = False
        self.analysis = insight
        return insight

    def close_modal(self) -> None:
        self.modal_open = False

    def dismiss_notice(self) -> None:
        self.notice = None
