"""Tests for PromotionDialog."""

from __future__ import annotations

from chesspad.core.enums import PROMOTION_TYPES, Color, PieceType
from chesspad.ui.dialogs.promotion_dialog import PromotionDialog


def test_offers_four_kinds(qapp: object) -> None:
    dlg = PromotionDialog(Color.WHITE)
    for pt in PROMOTION_TYPES:
        assert dlg.button(pt).text()
    assert dlg.selected is None


def test_click_selects(qapp: object) -> None:
    dlg = PromotionDialog(Color.BLACK)
    dlg.button(PieceType.KNIGHT).click()
    assert dlg.selected == PieceType.KNIGHT


def test_rejecting_leaves_no_choice(qapp: object) -> None:
    dlg = PromotionDialog(Color.WHITE)
    dlg.reject()
    assert dlg.selected is None


def test_buttons_follow_piece_style(qapp: object) -> None:
    solid = PromotionDialog(Color.WHITE)
    outline = PromotionDialog(Color.WHITE, style="Outline")
    assert solid.button(PieceType.QUEEN).text() == "♛"
    assert outline.button(PieceType.QUEEN).text() == "♕"
