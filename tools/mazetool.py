#!/usr/bin/env python3
import argparse, csv, logging, os
import structlog

from coinmaze.config import DIFFICULTY_ORDER, GameOptions, get_preset
from coinmaze.engine.state import GameState
from coinmaze.logs import setup_logging
from coinmaze.mapgen.goal import bfs_distances
from coinmaze.render.layers import compose_view, to_text
from coinmaze.rng import PMRandom

log = structlog.get_logger("mazetool")


def build_state(args):
    rng = PMRandom(args.seed) if args.seed is not None else PMRandom.from_entropy()
    options = GameOptions(traps_enabled=args.traps, adversaries_enabled=args.adversaries)
    return GameState.new(get_preset(args.difficulty), options, rng)


def write_tsv(mat, path, include_header=False):
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)


def cmd_emit(args):
    st = build_state(args)
    write_tsv(st.grid.as_matrix(), args.out, include_header=args.header)
    log.info("wrote maze", path=args.out, finish=st.finish)


def cmd_show(args):
    st = build_state(args)
    print(to_text(compose_view(st)))
    dist = bfs_distances(st.grid, st.start)
    print(f"finish={st.finish} path_length={dist[st.finish]} coins={len(st.coins)} "
          f"traps={len(st.traps)} adversaries={len(st.adversaries)}")


def main():
    p = argparse.ArgumentParser(description="coinmaze level tool")
    p.add_argument('--difficulty', choices=DIFFICULTY_ORDER, default='easy')
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--traps', action='store_true')
    p.add_argument('--adversaries', action='store_true')
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit', help='write the wall/path grid as TSV (1=wall, 0=path)')
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('show', help='print the level as ASCII')
    p2.set_defaults(func=cmd_show)
    args = p.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    args.func(args)


if __name__ == '__main__':
    main()
