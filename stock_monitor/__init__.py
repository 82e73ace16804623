"""
Stock Monitor: inventory dashboard with AI insights

Modules:
- stock_service: Fetch SKU stock history from the remote API (sample data fallback)
- analytics: Per-period aggregation and favorite-first sorting
- insight: LLM-generated stock analysis in Brazilian Portuguese
- dashboard: Dashboard state, favorites store, HTML rendering and web app
- common: Shared utilities
"""

__version__ = "0.1.0"
