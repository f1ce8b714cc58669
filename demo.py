#!/usr/bin/env python3
"""Watch a random player play Minesweeper through the Gymnasium env."""
import time
import os

from minesweeper import BoardConfig, MinesweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 9, mines: int = 10,
         seed=None):
    """Run demo games with visualization."""
    config = BoardConfig(width=size, height=size, num_mines=mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")

    print(f"Board: {size}x{size} with {mines} mines ({100*mines/(size*size):.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0
    env.reset(seed=seed)
    env.action_space.seed(seed)

    for game in range(games):
        if game > 0:
            env.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            action = env.action_space.sample(mask=env.get_action_mask())
            x, y = env.action_to_position(action)

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({x}, {y})\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size, mines=args.mines,
         seed=args.seed)
