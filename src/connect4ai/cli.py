"""
Command-line interface for the Connect 4 AI.

Commands:
- play: Play against the AI in the terminal
- arena: Pit two players against each other
- analyze: Show run histograms and the AI's choice for a position
- benchmark: Time the search at a given depth
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import time
import typer
from rich.table import Table

from .utils import console

app = typer.Typer(
    name="c4ai",
    help="Connect 4 with a run-lookahead AI",
    no_args_is_help=True,
)

TICK_SECONDS = 0.25


def _load_config(config_path: Optional[Path]):
    from .utils import Config

    if config_path and config_path.exists():
        return Config.load(str(config_path))
    return Config()


def _parse_columns(spec: str) -> list[list[int]]:
    """Parse "1,1,0;2;;1" into bottom-to-top column lists."""
    columns = []
    for chunk in spec.split(";"):
        chunk = chunk.strip()
        try:
            columns.append([int(v) for v in chunk.split(",")] if chunk else [])
        except ValueError:
            raise typer.BadParameter(f"Column {chunk!r} must be comma-separated integers") from None
    return columns


def _make_player(spec: str, seed: int):
    from .play import AIPlayer, RandomPlayer

    if spec == "random":
        return RandomPlayer(seed=seed)
    try:
        return AIPlayer(depth=int(spec))
    except ValueError:
        raise typer.BadParameter(f"Player must be a search depth >= 1 or 'random', got {spec!r}") from None


def _ask_column(board) -> int:
    """Prompt until the human enters a column index in range."""
    from .game import COLS

    while True:
        try:
            col = int(typer.prompt(f"Your move (0-{COLS - 1})"))
        except ValueError:
            console.print(f"[red]Enter a number 0-{COLS - 1}[/]")
            continue
        if 0 <= col < COLS:
            return col
        console.print("[red]Invalid move, try again[/]")


def random_opening(randomizer, num_moves: int):
    """
    Play up to num_moves random discs from an empty board.

    A drop that would complete a four is not played, so the position
    handed back is always still in progress.

    Returns:
        (board, team to move)
    """
    from .game import Board, Team, other_team
    from .search import MoveEvaluation

    board = Board()
    team = Team.BLUE
    for _ in range(num_moves):
        col = randomizer.choose_move(board, team)
        if col < 0:
            break
        move = MoveEvaluation(team, board, col)
        if move.has_winning_run:
            break
        board = move.board
        team = other_team(team)
    return board, team


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show search diagnostics"),
) -> None:
    from .utils import setup_logging

    setup_logging(verbose)


@app.command()
def play(
    difficulty: Optional[str] = typer.Option(
        None, "--difficulty", "-d", help="easy, medium, hard or impossible"
    ),
    human_first: Optional[bool] = typer.Option(
        None, "--first/--second", help="Human plays first"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
) -> None:
    """Play against the AI in the terminal."""
    from .game import Team, render
    from .play import AIPlayer, GameSession, GameStatus, HumanPlayer
    from .utils import print_board

    config = _load_config(config_path)
    if difficulty is not None:
        config.search.difficulty = difficulty
        config.search.depth = None
    if human_first is None:
        human_first = config.session.human_first

    try:
        depth = config.search.resolve_depth()
        move_delay_ticks = config.resolve_move_delay()
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None

    human_team = Team.BLUE if human_first else Team.RED
    ai_team = Team.RED if human_first else Team.BLUE
    players = {
        human_team: HumanPlayer("You", prompt=_ask_column),
        ai_team: AIPlayer(depth, name=f"AI ({config.search.difficulty})"),
    }
    session = GameSession(players, move_delay_ticks=move_delay_ticks)

    console.print("\n[bold]Connect 4[/]")
    console.print(f"You are {'X' if human_team == Team.BLUE else 'O'}, AI searches {depth} plies")
    console.print("Enter column number (0-6) to play\n")

    while True:
        while not session.is_over:
            print_board(render(session.board, session.last_move))

            player = session.current_player
            if player.is_human:
                col = player.choose_move(session.board, session.active_team)
                while not session.play(col):
                    console.print("[red]Column is full, try again[/]")
                    col = player.choose_move(session.board, session.active_team)
                console.print(f"You played column {col}\n")
            else:
                col = None
                with console.status("[cyan]AI thinking...[/]"):
                    while col is None and not session.is_over:
                        col = session.tick()
                        if col is None:
                            time.sleep(TICK_SECONDS)
                if col is not None:
                    console.print(f"AI played column {col}\n")

        print_board(render(session.board, session.last_move))
        if session.status is GameStatus.DRAW:
            console.print("[yellow]Draw![/]")
        elif session.winner == human_team:
            console.print("[green]You win![/]")
        else:
            console.print("[red]AI wins![/]")

        if not typer.confirm("Play again?", default=False):
            break
        session.reset()


@app.command()
def arena(
    player_a: str = typer.Option("3", "--a", help="Candidate: search depth or 'random'"),
    player_b: str = typer.Option("random", "--b", help="Opponent: search depth or 'random'"),
    games: Optional[int] = typer.Option(None, "--games", "-n", help="Number of games"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for random players"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Directory for game logs"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
) -> None:
    """Pit two players against each other, alternating who moves first."""
    from .eval import Arena
    from .game import Team
    from .utils import (
        GameMetrics,
        Logger,
        create_progress,
        player_seeds,
        print_arena_summary,
        print_config,
    )

    config = _load_config(config_path)
    if games is not None:
        config.arena.num_games = games
    if seed is not None:
        config.arena.seed = seed
    if log_dir is not None:
        config.log_dir = str(log_dir)
    config.ensure_dirs()
    print_config(config)

    seed_a, seed_b = player_seeds(config.arena.seed)
    candidate = _make_player(player_a, seed_a)
    opponent = _make_player(player_b, seed_b)
    logger = Logger(log_dir=config.log_dir, verbose=False)

    console.print(f"[cyan]{candidate.name} vs {opponent.name}, {config.arena.num_games} games[/]")
    wins, losses, draws = 0, 0, 0
    started = time.perf_counter()

    with create_progress() as progress:
        task = progress.add_task("Arena [W:0 L:0 D:0]", total=config.arena.num_games)

        def on_game(n, session):
            nonlocal started
            blue = session.players[Team.BLUE]
            red = session.players[Team.RED]
            winner = session.players[session.winner].name if session.winner else None
            logger.log_game(GameMetrics(
                game=n,
                blue=blue.name,
                red=red.name,
                winner=winner,
                num_moves=len(session.moves),
                moves=[col for _, col in session.moves],
                duration=time.perf_counter() - started,
            ))
            started = time.perf_counter()

        def on_result(n, result):
            nonlocal wins, losses, draws
            if result == "W":
                wins += 1
            elif result == "L":
                losses += 1
            else:
                draws += 1
            progress.update(
                task,
                advance=1,
                description=f"Arena [W:{wins} L:{losses} D:{draws}]",
            )

        result = Arena(config.arena.num_games).evaluate(
            candidate,
            opponent,
            progress_callback=on_result,
            game_callback=on_game,
        )

    print_arena_summary(result, candidate.name, opponent.name)
    console.print(f"[green]Games logged to {logger.log_file}[/]")


@app.command()
def analyze(
    columns: str = typer.Option(
        ..., "--columns", help="Bottom-to-top columns, e.g. '1,2;;1,1' (0 empty, 1 X, 2 O)"
    ),
    team: int = typer.Option(1, "--team", "-t", help="Team to move (1 or 2)"),
    depth: int = typer.Option(2, "--depth", "-d", help="Search depth"),
) -> None:
    """Show each candidate drop's run histogram and the AI's choice."""
    from .game import Board, render
    from .search import AI, MoveEvaluation
    from .utils import print_board

    try:
        board = Board.from_columns(_parse_columns(columns))
        ai = AI(team, depth)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None

    print_board(render(board), title=f"Team {team} to move")

    table = Table(title="Candidate moves", show_header=True)
    table.add_column("Column", style="cyan")
    table.add_column("Runs [1,2,3,4]", style="white")
    table.add_column("Static", style="white")
    table.add_column("Win prob", style="green")

    for col in board.available_columns():
        move = MoveEvaluation(team, board, col)
        if move.has_winning_run:
            prob = 1.0
        else:
            prob = ai.find_win_probability(move.board, 1, depth)
        table.add_row(
            str(col),
            str(move.runs),
            f"{move.get_win_probability(team):.3f}",
            f"{prob:.3f}",
        )

    console.print(table)
    best = ai.pick_best_move(board)
    if best < 0:
        console.print("[yellow]Board is full: draw[/]")
    else:
        console.print(f"[bold green]AI plays column {best}[/]")


@app.command()
def benchmark(
    depth: int = typer.Option(3, "--depth", "-d", help="Search depth"),
    positions: int = typer.Option(10, "--positions", "-n", help="Positions to search"),
    opening_moves: int = typer.Option(8, "--opening", help="Random moves per position"),
    seed: int = typer.Option(42, "--seed", help="Seed for random positions"),
) -> None:
    """Benchmark search speed on random positions."""
    from .play import RandomPlayer
    from .search import AI

    randomizer = RandomPlayer(seed=seed)
    console.print(f"[cyan]Searching {positions} positions at depth {depth}...[/]")

    elapsed = 0.0
    searched = 0
    for i in range(positions):
        board, team = random_opening(randomizer, opening_moves)

        ai = AI(team, depth)
        start = time.perf_counter()
        col = ai.pick_best_move(board)
        took = time.perf_counter() - start
        elapsed += took
        searched += 1
        console.print(f"Position {i+1}: column {col} in {took:.3f}s")

    console.print(f"\n[green]Total time: {elapsed:.2f}s[/]")
    if elapsed > 0:
        console.print(f"[green]Searches/sec: {searched/elapsed:.2f}[/]")


if __name__ == "__main__":
    app()
