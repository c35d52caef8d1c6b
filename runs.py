import argparse
import logging

from numpy.random import default_rng

from merge2048 import BoardConfig, Game, GameOverPolicy, Side

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Play a random game of 2048 in the console.')
    parser.add_argument('--size', type=int, default=4)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--max-piece', type=int, default=2048)
    parser.add_argument(
        '--policy', choices=[policy.value for policy in GameOverPolicy], default=GameOverPolicy.MAX_PIECE_ENDS_GAME.value
    )
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    game = Game(size=args.size, config=BoardConfig(max_piece=args.max_piece, game_over_policy=args.policy), seed=args.seed)
    rng = default_rng(args.seed)
    sides = list(Side)

    print("New game:")
    print(game.board)
    print("Start ...")

    moves = 0
    while not game.is_finished:
        side = sides[rng.integers(len(sides))]
        if game.move(side):
            moves += 1
            print('Next Action: "{}"\n'.format(side.name))
            print(game.board)

    print('\nTotal Moves: {}'.format(moves))
