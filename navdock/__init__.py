"""Streamlit primary-navigation package."""

from __future__ import annotations

from .bootstrap import ensure_project_root, ensure_streamlit_entrypoint

__all__ = ["ensure_project_root", "ensure_streamlit_entrypoint"]
