"""Tests for Qt application bootstrap helpers."""

from __future__ import annotations

from PyQt6.QtWidgets import QApplication

from chesslite.ui.bootstrap import _configure_application
from chesslite.ui.theme import APP_STYLE, BoardTheme


def test_configure_application_sets_name_and_style(qapp: QApplication) -> None:
    _configure_application(qapp)
    assert qapp.applicationName() == "chesslite"
    assert qapp.styleSheet() == APP_STYLE


def test_unknown_theme_falls_back_to_classic() -> None:
    assert BoardTheme.named("Neon") == BoardTheme.default()
    assert BoardTheme.named("Blue") == BoardTheme.blue()
