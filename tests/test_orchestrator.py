import logging

from tictactoe.board import Mark
from tictactoe.history import GameAction
from tictactoe.orchestrator import GameController
from tictactoe.state import GameState


def test_controller_starts_with_new_game():
    controller = GameController()
    assert controller.state == GameState.new_game()
    assert controller.status == "Next player: x"


def test_click_and_ignored_click():
    controller = GameController()
    assert controller.handle_click(4)
    assert not controller.handle_click(4)
    assert controller.state.current.squares[4] is Mark.X
    assert len(controller.state.history) == 2


def test_win_stops_further_moves():
    controller = GameController()
    for i in (0, 1, 4, 2, 8):
        controller.handle_click(i)
    assert controller.status == "Winner: x"
    before = controller.state
    assert not controller.handle_click(3)
    assert controller.state is before


def test_rewind_then_move_truncates():
    controller = GameController()
    for i in (0, 1, 2):
        controller.handle_click(i)
    assert len(controller.state.history) == 4
    controller.jump_to(1)
    assert len(controller.state.history) == 4
    controller.handle_click(6)
    assert len(controller.state.history) == 3
    assert controller.state.step_number == 2


def test_can_jump_to():
    controller = GameController()
    controller.handle_click(0)
    assert controller.can_jump_to(0)
    assert controller.can_jump_to(1)
    assert not controller.can_jump_to(2)
    assert not controller.can_jump_to(-1)


def test_reset():
    controller = GameController()
    controller.handle_click(0)
    controller.reset()
    assert controller.state == GameState.new_game()


def test_view_clicks_reach_controller():
    controller = GameController()
    controller.view().click(2)
    assert controller.state.current.squares[2] is Mark.X
    controller.view().jump(0)
    assert controller.state.step_number == 0


def test_render_contains_board():
    html = GameController().render()
    assert 'class="game"' in html
    assert html.count('class="square"') == 9


def test_dispatch_logs(caplog):
    controller = GameController()
    with caplog.at_level(logging.DEBUG, logger="tictactoe.orchestrator"):
        controller.dispatch(GameAction.click(0))
        controller.dispatch(GameAction.click(0))
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Applied click_cell") for m in messages)
    assert any(m.startswith("Ignored click_cell") for m in messages)


def test_dict_round_trip():
    controller = GameController()
    controller.handle_click(0)
    restored = GameController.from_dict(controller.to_dict())
    assert restored.state == controller.state
