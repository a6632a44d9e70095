#!/usr/bin/env python3
"""
Example usage of the tic-tac-toe implementation.

This script demonstrates how to use the GameController class to play a game,
including different board sizes and game scenarios.
"""

import logging

from tictactoe import GameController, MoveStatus


def play_moves(game, moves):
    for row, col in moves:
        player = game.get_active_player()
        print(f"{player.name} ({player.token.name}) plays ({row}, {col})")

        outcome = game.play_round(row, col)
        if outcome.status == MoveStatus.REJECTED:
            print(f"Invalid move: {outcome.reason.value}")
            continue

        print(game)
        print()

        if game.is_game_over():
            break


def example_basic_game():
    """Demonstrate a basic 3x3 game."""
    print("=== Basic Tic-Tac-Toe Game ===")

    game = GameController()
    print("Created a standard 3x3 board")
    print(game)
    print()

    # Player 1 takes the top row
    play_moves(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])

    print(f"Game result: {game.get_game_state().value}")
    if game.get_winner():
        print(f"Winner: {game.get_winner().name}")
    print("\n" + "="*50 + "\n")


def example_custom_board():
    """Demonstrate a larger board."""
    print("=== Custom Board Size (4x4) ===")

    game = GameController("Ada", "Grace", dimension=4)
    print("Created a 4x4 board, four in a row to win")

    # Ada takes the anti-diagonal, with a rejected move along the way
    play_moves(game, [(0, 3), (0, 0), (1, 2), (1, 2), (0, 1), (2, 1), (0, 2), (3, 0)])

    print("\n" + "="*50 + "\n")


def example_draw():
    """Demonstrate a drawn game."""
    print("=== Draw ===")

    game = GameController()
    play_moves(game, [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)])

    print(f"Draw: {game.is_draw()}")
    print("\n" + "="*50 + "\n")


def example_interactive_game():
    """Demonstrate an interactive game."""
    print("=== Interactive Tic-Tac-Toe ===")
    print("Enter 'row col' (0-based) to play, 'r' to reset")
    print("Enter 'q' to quit")

    game = GameController()
    print(game)

    while not game.is_game_over():
        try:
            user_input = input("Enter move: ").strip()
            if user_input.lower() == 'q':
                print("Game quit by user")
                return
            if user_input.lower() == 'r':
                game.reset()
                print(game)
                continue

            row, col = (int(value) for value in user_input.split())
            outcome = game.play_round(row, col)

            if outcome.status == MoveStatus.REJECTED:
                print(f"Invalid move: {outcome.reason.value}")
            else:
                print(game)

        except ValueError:
            print("Please enter two integers.")
        except (KeyboardInterrupt, EOFError):
            print("Interrupted. Exiting...")
            return

    print(f"\nGame Over! {game.status_text()}")


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.INFO)

    print("Tic-Tac-Toe Implementation Examples")
    print("=" * 50)
    print()

    try:
        example_basic_game()
        example_custom_board()
        example_draw()

        # Uncomment the line below for interactive play
        # example_interactive_game()

    except KeyboardInterrupt:
        print("\nExamples interrupted by user.")


if __name__ == "__main__":
    main()
