"""Tests for BoardScene rendering helpers."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from chesspad.core.control import compute_control
from chesspad.core.enums import HighlightMode
from chesspad.core.types import parse_square
from chesspad.game.controller import GameController
from chesspad.ui.board.board_scene import BoardScene
from chesspad.ui.styles.theme import BoardTheme


def _selected_snapshot(fen: str, square: str):
    ctrl = GameController()
    ctrl.new_game(fen)
    ctrl.on_square_clicked(parse_square(square))
    return ctrl.snapshot()


def test_pos_to_square_respects_orientation(qapp: object) -> None:
    scene = BoardScene()
    scene.set_flipped(False)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == parse_square("a8")

    scene.set_flipped(True)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == parse_square("h1")


def test_pos_outside_board_is_none(qapp: object) -> None:
    scene = BoardScene()
    assert scene._pos_to_square(QPointF(-5, 10)) is None
    assert scene._pos_to_square(QPointF(8 * BoardScene.TILE + 1, 10)) is None


def test_set_show_coordinates_toggles_all_labels_visibility(qapp: object) -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_hidden_coordinates_survive_redraw(qapp: object) -> None:
    scene = BoardScene()
    scene.set_show_coordinates(False)
    scene.set_theme(BoardTheme.green())
    assert all(not item.isVisible() for item in scene._coord_items)


def test_snapshot_creates_piece_items(qapp: object) -> None:
    scene = BoardScene()
    scene.set_snapshot(GameController().snapshot())
    assert len(scene._piece_items) == 32
    assert parse_square("e1") in scene._piece_items


def test_highlight_mode_filters_overlays(qapp: object) -> None:
    scene = BoardScene()
    scene.set_snapshot(_selected_snapshot("4k3/8/8/3p4/4P3/8/8/4K3", "e4"))
    assert len(scene._move_items) == 1
    assert len(scene._attack_items) == 1
    assert len(scene._highlight_items) == 1

    scene.set_highlight_mode(HighlightMode.MOVES)
    assert len(scene._move_items) == 1
    assert scene._attack_items == []

    scene.set_highlight_mode(HighlightMode.ATTACKS)
    assert scene._move_items == []
    assert len(scene._attack_items) == 1


def test_last_move_is_highlighted(qapp: object) -> None:
    ctrl = GameController()
    for name in ("e2", "e4"):
        ctrl.on_square_clicked(parse_square(name))
    scene = BoardScene()
    scene.set_snapshot(ctrl.snapshot())
    assert len(scene._last_move_highlights) == 2
    assert scene._move_items == []


def test_control_map_labels(qapp: object) -> None:
    from chesspad.core.board import Board

    scene = BoardScene()
    control = compute_control(Board.initial())
    scene.set_control_map(control)
    nonzero = sum(
        1 for rank in control.friendly + control.enemy for count in rank if count
    )
    assert len(scene._control_items) == nonzero

    scene.set_control_map(None)
    assert scene._control_items == []


def test_flip_keeps_pieces(qapp: object) -> None:
    scene = BoardScene()
    scene.set_snapshot(GameController().snapshot())
    scene.set_flipped(True)
    assert scene.is_flipped()
    assert len(scene._piece_items) == 32


def test_piece_style_switches_glyphs(qapp: object) -> None:
    scene = BoardScene()
    scene.set_snapshot(GameController().snapshot())
    white_king = parse_square("e1")
    assert scene._piece_items[white_king].text() == "♚"

    scene.set_piece_style("Outline")
    assert scene._piece_items[white_king].text() == "♔"
    assert scene._piece_items[parse_square("e8")].text() == "♚"
