from flask import Blueprint, render_template, redirect, url_for, jsonify
from morpion.forms import PlayerNamesForm
from morpion.game.core import display
from morpion.game.core.game_state import MatchPhase
from morpion.game.core.session_store import load_game, history_ascending, toggle_history_order
from morpion.game.core.win_detector import Win, Draw
from morpion.utils.logging import log_game_event

tic_tac_toe_bp = Blueprint('tic_tac_toe', __name__,
                          template_folder='templates')


def _render_welcome(form, status_code=200):
    return render_template('tic_tac_toe/welcome.html', form=form), status_code


def _render_board(game):
    ascending = history_ascending()
    return render_template(
        'tic_tac_toe/game.html',
        game=game,
        result=game.result,
        status=display.status_text(game),
        score=display.score_line(game),
        moves=display.move_entries(game, ascending=ascending),
        current_move_label=display.current_move_label,
        ascending=ascending,
    )


def _result_payload(result):
    if isinstance(result, Win):
        return {'status': 'win', 'winner': result.mark, 'line': list(result.winning_line)}
    if isinstance(result, Draw):
        return {'status': 'draw', 'winner': None, 'line': list(result.winning_line)}
    return {'status': 'ongoing', 'winner': None, 'line': list(result.winning_line)}


@tic_tac_toe_bp.route('/')
def index():
    """Name-entry screen before a match, board and move list during one"""
    game = load_game()
    if game.phase == MatchPhase.NOT_STARTED:
        log_game_event('Visit', 'Opened the welcome screen')
        return _render_welcome(PlayerNamesForm())
    return _render_board(game)


@tic_tac_toe_bp.route('/start', methods=['POST'])
def start():
    """Start a match; blank names re-render the form with an error"""
    form = PlayerNamesForm()
    game = load_game()

    if not form.validate_on_submit() or not game.start_match(form.player1.data, form.player2.data):
        return _render_welcome(form, 400)

    log_game_event('Start', f"{game.players[0]} vs {game.players[1]}")
    return redirect(url_for('tic_tac_toe.index'))


@tic_tac_toe_bp.route('/play/<int:cell>', methods=['POST'])
def play(cell):
    """Play the next mark on a cell; stale or illegal clicks are ignored"""
    game = load_game()
    if game.phase == MatchPhase.IN_PROGRESS and game.apply_move(cell):
        result = game.result
        if isinstance(result, Win):
            log_game_event('Win', f"{result.mark} won on line {list(result.line)}")
        elif isinstance(result, Draw):
            log_game_event('Draw', 'Round ended in a draw')
    return redirect(url_for('tic_tac_toe.index'))


@tic_tac_toe_bp.route('/jump/<int:move>', methods=['POST'])
def jump(move):
    """Show an earlier board from the history"""
    game = load_game()
    if game.phase == MatchPhase.IN_PROGRESS:
        game.jump_to(move)
    return redirect(url_for('tic_tac_toe.index'))


@tic_tac_toe_bp.route('/restart', methods=['POST'])
def restart():
    """New round with the same players and scores"""
    game = load_game()
    if game.phase == MatchPhase.IN_PROGRESS:
        game.restart_round()
        log_game_event('Restart', 'New round started')
    return redirect(url_for('tic_tac_toe.index'))


@tic_tac_toe_bp.route('/quit', methods=['POST'])
def quit_game():
    """Leave the match and reset scores"""
    game = load_game()
    if game.phase == MatchPhase.IN_PROGRESS:
        game.quit_match()
        log_game_event('Quit', 'Match ended by the players')
    return redirect(url_for('tic_tac_toe.index'))


@tic_tac_toe_bp.route('/toggle-order', methods=['POST'])
def toggle_order():
    """Flip the move list between ascending and descending order"""
    toggle_history_order()
    return redirect(url_for('tic_tac_toe.index'))


@tic_tac_toe_bp.route('/api/state')
def api_state():
    """JSON snapshot of the session's game for scripted clients"""
    game = load_game()
    return jsonify({
        'phase': game.phase.value,
        'players': list(game.players),
        'scores': list(game.scores),
        'board': list(game.current_board),
        'move_index': game.move_index,
        'history': [list(board) for board in game.history],
        'x_is_next': game.x_is_next,
        'result': _result_payload(game.result),
        'status': display.status_text(game),
        'history_ascending': history_ascending(),
    })
