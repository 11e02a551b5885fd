import click
from flask.cli import with_appcontext
from morpion.game.core import display
from morpion.game.core.game_state import GameState
from morpion.game.core.win_detector import WINNING_LINES
import logging

logger = logging.getLogger(__name__)


def render_board(board):
    rows = []
    for start in range(0, 9, 3):
        rows.append(" | ".join(cell or " " for cell in board[start:start + 3]))
    return "\n---------\n".join(rows)


@click.group(name='morpion')
def morpion_cli():
    """Tic-tac-toe engine commands."""
    pass


@morpion_cli.command('replay')
@click.argument('moves', nargs=-1, type=click.IntRange(0, 8))
@click.option('--names', nargs=2, default=('Joueur 1', 'Joueur 2'), show_default=True,
              help='Names of the X and O players')
@with_appcontext
def replay_command(moves, names):
    """Play a sequence of cell indices (0-8) and print the final position."""
    game = GameState()
    if not game.start_match(*names):
        raise click.BadParameter('Player names cannot be blank.', param_hint='--names')

    for cell in moves:
        if not game.apply_move(cell):
            click.echo(f"Skipped move at cell {cell}.")
    logger.debug("Replayed %s moves, history has %s boards", len(moves), len(game.history))

    click.echo(render_board(game.current_board))
    click.echo(display.status_text(game))
    click.echo(display.score_line(game))


@morpion_cli.command('lines')
def lines_command():
    """List the winning lines in the order they are checked."""
    for line in WINNING_LINES:
        click.echo(" ".join(str(cell) for cell in line))
