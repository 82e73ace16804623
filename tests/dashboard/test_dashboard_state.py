"""Tests for the dashboard state."""

from unittest.mock import MagicMock

import pytest

from stock_monitor.analytics.sorter import SortConfig, SortDirection
from stock_monitor.dashboard.state import (
    ANALYSIS_ERROR_MESSAGE,
    LOAD_ERROR_MESSAGE,
    DashboardState,
)
from stock_monitor.stock_service.sample_data import SAMPLE_CATALOGUE, build_sample_skus


def _ids(state: DashboardState) -> list[str]:
    return [s.id for s in state.processed_data()]


class TestLoad:
    def test_initial_flags(self, dashboard_state):
        assert dashboard_state.loading is True
        assert dashboard_state.error is None
        assert dashboard_state.period == 7
        assert dashboard_state.sort_config == SortConfig()
        assert dashboard_state.modal_open is False

    def test_load_success(self, dashboard_state, mock_service):
        dashboard_state.load()
        assert dashboard_state.loading is False
        assert dashboard_state.error is None
        assert dashboard_state.notice is None
        assert len(dashboard_state.raw_skus) == 3
        mock_service.get_all_skus.assert_called_once()

    def test_load_keeps_fallback_notice(self, dashboard_state, mock_service):
        mock_service.last_error = "Erro ao conectar com o servidor: timeout. Exibindo dados de exemplo."
        dashboard_state.load()
        assert dashboard_state.notice == mock_service.last_error
        assert dashboard_state.error is None

    def test_unexpected_failure_sets_page_error(self, dashboard_state, mock_service):
        mock_service.get_all_skus.side_effect = RuntimeError("boom")
        dashboard_state.load()
        assert dashboard_state.error == LOAD_ERROR_MESSAGE
        assert dashboard_state.loading is False

    def test_dismiss_notice(self, dashboard_state, mock_service):
        mock_service.last_error = "aviso"
        dashboard_state.load()
        dashboard_state.dismiss_notice()
        assert dashboard_state.notice is None


class TestProcessedData:
    def test_default_order_by_name(self, dashboard_state):
        dashboard_state.load()
        assert _ids(dashboard_state) == ["CL-DN-05", "TS-BL-01", "SH-SN-12"]

    def test_weekly_figures(self, dashboard_state):
        dashboard_state.load()
        shirt = dashboard_state.get_sku("TS-BL-01")
        assert shirt.total_stock == 165
        assert shirt.total_variation == -5

    def test_period_change_recomputes(self, dashboard_state):
        dashboard_state.load()
        dashboard_state.set_period(1)
        assert dashboard_state.get_sku("TS-BL-01").total_variation == 5
        assert dashboard_state.get_sku("CL-DN-05").total_stock == 0

    def test_period_change_keeps_raw_data(self, dashboard_state):
        dashboard_state.load()
        before = [s.model_dump() for s in dashboard_state.raw_skus]
        dashboard_state.set_period(1)
        dashboard_state.processed_data()
        assert [s.model_dump() for s in dashboard_state.raw_skus] == before

    @pytest.mark.parametrize("period", [0, 3, 30])
    def test_unsupported_period_rejected(self, dashboard_state, period):
        with pytest.raises(ValueError):
            dashboard_state.set_period(period)
        assert dashboard_state.period == 7

    def test_handle_sort_toggles(self, dashboard_state):
        dashboard_state.load()
        dashboard_state.handle_sort("name")
        assert dashboard_state.sort_config.direction == SortDirection.DESC
        assert _ids(dashboard_state) == ["SH-SN-12", "TS-BL-01", "CL-DN-05"]

        dashboard_state.handle_sort("total_stock")
        assert dashboard_state.sort_config == SortConfig("total_stock", SortDirection.ASC)
        assert _ids(dashboard_state) == ["SH-SN-12", "CL-DN-05", "TS-BL-01"]

    def test_handle_sort_unknown_key(self, dashboard_state):
        with pytest.raises(ValueError):
            dashboard_state.handle_sort("variations")

    def test_favorite_pinned_first(self, dashboard_state):
        dashboard_state.load()
        dashboard_state.toggle_favorite("SH-SN-12")
        assert _ids(dashboard_state)[0] == "SH-SN-12"
        assert dashboard_state.is_favorite("SH-SN-12")

        dashboard_state.toggle_favorite("SH-SN-12")
        assert _ids(dashboard_state) == ["CL-DN-05", "TS-BL-01", "SH-SN-12"]

    def test_get_unknown_sku(self, dashboard_state):
        dashboard_state.load()
        assert dashboard_state.get_sku("nope") is None

    def test_sample_fallback_renders(self, test_settings, favorites, mock_generator):
        service = MagicMock()
        service.get_all_skus.side_effect = build_sample_skus
        service.last_error = "Erro ao conectar com o servidor: x. Exibindo dados de exemplo."
        state = DashboardState(
            service=service, generator=mock_generator, favorites=favorites, settings=test_settings
        )
        state.load()
        skus = state.processed_data()
        assert len(skus) == len(SAMPLE_CATALOGUE)
        assert all(s.total_stock > 0 for s in skus)
        assert state.notice is not None


class TestExpand:
    def test_toggle_expand(self, dashboard_state):
        assert dashboard_state.toggle_expand("TS-BL-01") is True
        assert "TS-BL-01" in dashboard_state.expanded
        assert dashboard_state.toggle_expand("TS-BL-01") is False
        assert dashboard_state.expanded == set()


class TestAnalysis:
    def test_analyze_sku(self, dashboard_state, mock_generator):
        dashboard_state.load()
        sku = dashboard_state.get_sku("TS-BL-01")

        result = dashboard_state.analyze_sku(sku)

        assert result == "## Resumo Geral\nEstoque em queda."
        assert dashboard_state.analysis == result
        assert dashboard_state.modal_open is True
        assert dashboard_state.selected_sku.id == "TS-BL-01"
        assert dashboard_state.analysis_loading is False
        mock_generator.generate.assert_called_once_with(sku.name, sku.variations)

    def test_analyze_failure_shows_inline_message(self, dashboard_state, mock_generator):
        dashboard_state.load()
        mock_generator.generate.side_effect = RuntimeError("offline")
        dashboard_state.analyze_sku(dashboard_state.get_sku("CL-DN-05"))
        assert dashboard_state.analysis == ANALYSIS_ERROR_MESSAGE
        assert dashboard_state.modal_open is True
        assert dashboard_state.analysis_loading is False

    def test_loading_flag_set_during_request(self, dashboard_state, mock_generator):
        dashboard_state.load()
        seen = {}

        def generate(name, variations):
            seen["loading"] = dashboard_state.analysis_loading
            seen["analysis"] = dashboard_state.analysis
            return "texto"

        dashboard_state.analysis = "anterior"
        mock_generator.generate.side_effect = generate
        dashboard_state.analyze_sku(dashboard_state.get_sku("TS-BL-01"))
        assert seen == {"loading": True, "analysis": ""}

    def test_last_request_wins(self, dashboard_state, mock_generator):
        dashboard_state.load()
        mock_generator.generate.side_effect = ["primeira", "segunda"]
        dashboard_state.analyze_sku(dashboard_state.get_sku("TS-BL-01"))
        dashboard_state.analyze_sku(dashboard_state.get_sku("CL-DN-05"))
        assert dashboard_state.analysis == "segunda"
        assert dashboard_state.selected_sku.id == "CL-DN-05"

    def test_close_modal(self, dashboard_state):
        dashboard_state.load()
        dashboard_state.analyze_sku(dashboard_state.get_sku("TS-BL-01"))
        dashboard_state.close_modal()
        assert dashboard_state.modal_open is False
